"""
Functional dependency reasoning and schema normalization.
"""
from .engine.logging_utils import configure_package_logger

configure_package_logger()

from .engine.config import config
from .model.attribute import Attribute, attribute_set
from .model.dependency import FunctionalDependency, attributes_of
from .model.schema import RelationSchema
from .engine.closure import closure, combine_right, power_set, reduced_power_set
from .engine.equivalence import equivalent, implies
from .engine.basis import minimal_basis, split_right, remove_trivial
from .engine.keys import super_keys, keys, prime_attributes
from .engine.normal_forms import check_bcnf, check_3nf
from .engine.projection import projection
from .engine.decomposition import (
    decompose_to_bcnf,
    decompose_to_3nf,
    check_lossy_decomposition,
    is_dependency_preserving,
    check_lossless_join,
)
from .parser.fd_parser import FDParser, DependencySyntaxError, parse_attributes, parse_dependencies

__all__ = [
    'config',
    'Attribute', 'attribute_set',
    'FunctionalDependency', 'attributes_of',
    'RelationSchema',
    'closure', 'combine_right', 'power_set', 'reduced_power_set',
    'equivalent', 'implies',
    'minimal_basis', 'split_right', 'remove_trivial',
    'super_keys', 'keys', 'prime_attributes',
    'check_bcnf', 'check_3nf',
    'projection',
    'decompose_to_bcnf', 'decompose_to_3nf',
    'check_lossy_decomposition', 'is_dependency_preserving', 'check_lossless_join',
    'FDParser', 'DependencySyntaxError', 'parse_attributes', 'parse_dependencies',
]
