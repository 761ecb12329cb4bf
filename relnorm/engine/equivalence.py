import logging
from typing import Iterable

from ..model.dependency import FunctionalDependency, attributes_of
from .closure import closure, reduced_power_set
from .logging_utils import warn_if_large

logger = logging.getLogger(__name__)


def equivalent(a: Iterable[FunctionalDependency], b: Iterable[FunctionalDependency]) -> bool:
    """
    Check whether two sets of dependencies imply each other.

    Compares closures under a and b for every non-empty subset of the
    attributes mentioned in either set (2^n - 1 subsets for n attributes).
    """
    a = frozenset(a)
    b = frozenset(b)
    if a == b:
        return True

    names = attributes_of(a) | attributes_of(b)
    warn_if_large(logger, "EQUIV", len(names))

    for subset in reduced_power_set(names):
        if closure(subset, a) != closure(subset, b):
            logger.debug(f"[EQUIV] closures of {sorted(subset)} differ")
            return False
    return True


def implies(fds: Iterable[FunctionalDependency], fd: FunctionalDependency) -> bool:
    """True iff fd follows from fds."""
    return fd.dependent <= closure(fd.determinant, fds)
