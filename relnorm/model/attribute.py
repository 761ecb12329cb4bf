from dataclasses import dataclass
from typing import Iterable, Union

@dataclass(frozen=True, slots=True, order=True)
class Attribute:
    """
    A named column of a relation schema.
    Two attributes are the same value iff their names match (case sensitive).
    """
    name: str

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


AttributeLike = Union[Attribute, str]


def as_attribute(value: AttributeLike) -> Attribute:
    if isinstance(value, Attribute):
        return value
    if isinstance(value, str):
        return Attribute(value)
    raise TypeError(f"Cannot build an Attribute from {type(value).__name__}: {value!r}")


def as_attribute_set(values: Union[AttributeLike, Iterable[AttributeLike]]) -> frozenset[Attribute]:
    """
    Coerce a single attribute (or name) or an iterable of them to a frozenset.
    A bare string is one attribute name, never a sequence of characters.
    """
    if isinstance(values, (Attribute, str)):
        return frozenset((as_attribute(values),))
    return frozenset(as_attribute(v) for v in values)


def attribute_set(*names: AttributeLike) -> frozenset[Attribute]:
    """attribute_set("A", "B") -> frozenset({A, B})"""
    return frozenset(as_attribute(n) for n in names)


def sorted_names(attrs: Iterable[Attribute]) -> tuple[str, ...]:
    return tuple(sorted(a.name for a in attrs))


def format_attributes(attrs: Iterable[Attribute]) -> str:
    return ", ".join(sorted_names(attrs))
