import logging
from typing import Iterable

from ..model.attribute import Attribute, AttributeLike, as_attribute_set
from ..model.dependency import FunctionalDependency, attributes_of
from .closure import closure, reduced_power_set
from .logging_utils import warn_if_large

logger = logging.getLogger(__name__)


def _universe(attrs: Iterable[AttributeLike], fds: frozenset[FunctionalDependency]) -> frozenset[Attribute]:
    universe = as_attribute_set(attrs)
    if not universe:
        # No attributes given: infer them from the dependencies
        universe = attributes_of(fds)
    return universe


def super_keys(
    attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]
) -> frozenset[frozenset[Attribute]]:
    """
    Every non-empty subset of attrs whose closure under fds is attrs itself.
    When attrs is empty the universe is the set of attributes the
    dependencies mention.
    """
    fds = frozenset(fds)
    universe = _universe(attrs, fds)
    warn_if_large(logger, "KEYS", len(universe))

    found = frozenset(
        subset for subset in reduced_power_set(universe)
        if closure(subset, fds) == universe
    )
    logger.debug(f"[KEYS] {len(found)} superkeys over {len(universe)} attributes")
    return found


def keys(
    attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]
) -> frozenset[frozenset[Attribute]]:
    """Candidate keys: superkeys none of whose proper subsets is a superkey."""
    superkeys = super_keys(attrs, fds)
    return frozenset(
        key for key in superkeys
        if not any(other < key for other in superkeys)
    )


def prime_attributes(
    attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]
) -> frozenset[Attribute]:
    """Attributes that belong to at least one candidate key."""
    primes: set[Attribute] = set()
    for key in keys(attrs, fds):
        primes |= key
    return frozenset(primes)


def smallest_key(candidates: Iterable[frozenset[Attribute]]) -> frozenset[Attribute]:
    """Deterministic pick: fewest attributes, then sorted names."""
    return min(candidates, key=lambda k: (len(k), sorted(a.name for a in k)))
