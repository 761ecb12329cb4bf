from dataclasses import dataclass
from typing import Iterable, Union

from .attribute import Attribute, AttributeLike, as_attribute_set, format_attributes
from .dependency import FunctionalDependency, attributes_of, sorted_dependencies

@dataclass(frozen=True, slots=True)
class RelationSchema:
    """
    Relation schema: a set of attributes and the dependencies that hold on them.

    Equality is structural over both sets. Every analysis is a pure query and
    decomposition returns new schemas. With `schema.strict` enabled in the
    configuration, dependencies mentioning attributes outside the schema are
    rejected at construction.
    """
    attributes: frozenset[Attribute]
    dependencies: frozenset[FunctionalDependency]

    def __post_init__(self):
        object.__setattr__(self, "attributes", as_attribute_set(self.attributes))
        object.__setattr__(self, "dependencies", frozenset(self.dependencies))

        from ..engine.config import config
        if config.is_strict_schema():
            stray = attributes_of(self.dependencies) - self.attributes
            if stray:
                raise ValueError(
                    f"RelationSchema: dependencies mention attributes outside the schema: "
                    f"{format_attributes(stray)}"
                )

    @classmethod
    def from_strings(
        cls,
        names: Union[str, Iterable[str]],
        exprs: Union[str, Iterable[str]],
    ) -> 'RelationSchema':
        """
        Build a schema from the textual formats, e.g.
        RelationSchema.from_strings("A, B, C", "A, B --> C; C --> B").
        """
        from ..parser.fd_parser import parse_attributes, parse_dependencies
        return cls(parse_attributes(names), parse_dependencies(exprs))

    def closure(self, attrs: Iterable[AttributeLike]) -> frozenset[Attribute]:
        from ..engine.closure import closure
        return closure(attrs, self.dependencies)

    def super_keys(self) -> frozenset[frozenset[Attribute]]:
        from ..engine.keys import super_keys
        return super_keys(self.attributes, self.dependencies)

    def keys(self) -> frozenset[frozenset[Attribute]]:
        from ..engine.keys import keys
        return keys(self.attributes, self.dependencies)

    def check_bcnf(self) -> frozenset[FunctionalDependency]:
        """Dependencies violating BCNF; empty if the schema is in BCNF."""
        from ..engine.normal_forms import check_bcnf
        return check_bcnf(self.attributes, self.dependencies)

    def check_3nf(self) -> frozenset[FunctionalDependency]:
        """Dependencies violating 3NF; empty if the schema is in 3NF."""
        from ..engine.normal_forms import check_3nf
        return check_3nf(self.attributes, self.dependencies)

    def is_bcnf(self) -> bool:
        return not self.check_bcnf()

    def is_3nf(self) -> bool:
        return not self.check_3nf()

    def minimal_basis(self) -> frozenset[FunctionalDependency]:
        from ..engine.basis import minimal_basis
        return minimal_basis(self.dependencies)

    def projection(self, attrs: Iterable[AttributeLike]) -> frozenset[FunctionalDependency]:
        from ..engine.projection import projection
        return projection(attrs, self.dependencies)

    def decompose_to_bcnf(self) -> frozenset['RelationSchema']:
        from ..engine.decomposition import decompose_to_bcnf
        return decompose_to_bcnf(self)

    def decompose_to_3nf(self) -> frozenset['RelationSchema']:
        from ..engine.decomposition import decompose_to_3nf
        return decompose_to_3nf(self)

    def check_lossy_decomposition(
        self, subsets: Iterable[Iterable[AttributeLike]]
    ) -> frozenset[FunctionalDependency]:
        from ..engine.decomposition import check_lossy_decomposition
        return check_lossy_decomposition(self.attributes, self.dependencies, subsets)

    def __repr__(self) -> str:
        lines = ["Attributes:", format_attributes(self.attributes), "Functional Dependencies:"]
        lines.extend(repr(fd) for fd in sorted_dependencies(self.dependencies))
        return "\n".join(lines)
