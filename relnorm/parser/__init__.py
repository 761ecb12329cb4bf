"""
Text adapter for attribute lists and dependency expressions.
"""
from .fd_parser import FDParser, DependencySyntaxError, parse_attributes, parse_dependencies, parse_dependency

__all__ = ['FDParser', 'DependencySyntaxError', 'parse_attributes', 'parse_dependencies', 'parse_dependency']
