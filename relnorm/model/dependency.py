from dataclasses import dataclass
from typing import Iterable

from .attribute import Attribute, as_attribute_set, format_attributes, sorted_names

@dataclass(frozen=True, slots=True)
class FunctionalDependency:
    """
    A functional dependency determinant --> dependent.

    Both sides are frozensets of Attribute, so two dependencies are equal iff
    their sides match as sets. Any iterable of names or Attributes is accepted
    by the constructor and coerced:

        FunctionalDependency(["A", "B"], "C")   # A, B --> C

    Empty sides are allowed; well-formedness is checked by the parser.
    """
    determinant: frozenset[Attribute]
    dependent: frozenset[Attribute]

    def __post_init__(self):
        object.__setattr__(self, "determinant", as_attribute_set(self.determinant))
        object.__setattr__(self, "dependent", as_attribute_set(self.dependent))

    def is_trivial(self) -> bool:
        return self.dependent <= self.determinant

    def attributes(self) -> frozenset[Attribute]:
        return self.determinant | self.dependent

    def sort_key(self) -> tuple[tuple[str, ...], tuple[str, ...]]:
        return (sorted_names(self.determinant), sorted_names(self.dependent))

    def __repr__(self) -> str:
        return f"{format_attributes(self.determinant)} --> {format_attributes(self.dependent)}"


def attributes_of(fds: Iterable[FunctionalDependency]) -> frozenset[Attribute]:
    """Union of every attribute mentioned on either side of the given dependencies."""
    result: set[Attribute] = set()
    for fd in fds:
        result |= fd.determinant
        result |= fd.dependent
    return frozenset(result)


def sorted_dependencies(fds: Iterable[FunctionalDependency]) -> list[FunctionalDependency]:
    return sorted(fds, key=FunctionalDependency.sort_key)
