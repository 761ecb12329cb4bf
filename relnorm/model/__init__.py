"""
Value types: attributes, functional dependencies and relation schemas.
"""
