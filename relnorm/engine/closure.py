"""
Attribute-set closure and the subset enumeration helpers shared by the
exponential algorithms.
"""
import logging
from itertools import combinations
from typing import Iterable, Iterator

from ..model.attribute import Attribute, AttributeLike, as_attribute_set
from ..model.dependency import FunctionalDependency, sorted_dependencies

logger = logging.getLogger(__name__)


def closure(attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]) -> frozenset[Attribute]:
    """
    Compute the closure of attrs under fds: the smallest superset of attrs
    such that every dependency whose determinant it contains has its
    dependent contained too.

    Full passes over fds repeat until a pass adds nothing. Each productive pass
    strictly grows the result, so there are at most |universe| of them.
    """
    result = set(as_attribute_set(attrs))
    fds = list(fds)

    passes = 0
    found = True
    while found:
        found = False
        passes += 1
        for fd in fds:
            if fd.determinant <= result and not fd.dependent <= result:
                result |= fd.dependent
                found = True

    logger.debug(f"[CLOSURE] {len(result)} attributes after {passes} passes")
    return frozenset(result)


def power_set(attrs: Iterable[AttributeLike]) -> Iterator[frozenset[Attribute]]:
    """
    Yield every subset of attrs, the empty set first, then by increasing size.
    Within one size subsets come in sorted-name order.
    """
    ordered = sorted(as_attribute_set(attrs))
    for size in range(len(ordered) + 1):
        for combo in combinations(ordered, size):
            yield frozenset(combo)


def reduced_power_set(attrs: Iterable[AttributeLike]) -> Iterator[frozenset[Attribute]]:
    """Like power_set, without the empty set."""
    for subset in power_set(attrs):
        if subset:
            yield subset


def combine_right(fds: Iterable[FunctionalDependency]) -> frozenset[FunctionalDependency]:
    """
    Merge dependencies sharing a determinant into one whose dependent is the
    union of theirs: {A --> B, A --> C} becomes {A --> B, C}.
    """
    merged: dict[frozenset[Attribute], set[Attribute]] = {}
    for fd in sorted_dependencies(fds):
        merged.setdefault(fd.determinant, set()).update(fd.dependent)
    return frozenset(FunctionalDependency(left, right) for left, right in merged.items())
