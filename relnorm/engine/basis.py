"""
Minimal basis (minimal cover) reduction.

Every step works on its own frozenset and returns a new one; the caller's
collection is never touched. The result is one of possibly many minimal
bases, so compare results with equivalent(), not ==.
"""
import logging
from typing import Iterable

from ..model.dependency import FunctionalDependency, sorted_dependencies
from .equivalence import equivalent

logger = logging.getLogger(__name__)


def split_right(fds: Iterable[FunctionalDependency]) -> frozenset[FunctionalDependency]:
    """Replace each dependency with k dependents by k single-dependent ones."""
    result = set()
    for fd in fds:
        if len(fd.dependent) > 1:
            for attr in fd.dependent:
                result.add(FunctionalDependency(fd.determinant, attr))
        else:
            result.add(fd)
    return frozenset(result)


def remove_trivial(fds: Iterable[FunctionalDependency]) -> frozenset[FunctionalDependency]:
    """
    Drop dependencies whose dependent lies inside the determinant and strip
    determinant attributes from the dependent of the partially trivial ones.
    """
    result = set()
    for fd in fds:
        if fd.is_trivial():
            continue
        overlap = fd.dependent & fd.determinant
        if overlap:
            result.add(FunctionalDependency(fd.determinant, fd.dependent - overlap))
        else:
            result.add(fd)
    return frozenset(result)


def remove_unnecessary_determinants(
    fds: Iterable[FunctionalDependency],
) -> tuple[frozenset[FunctionalDependency], int]:
    """
    Drop determinant attributes one at a time while the set stays equivalent.
    Returns the reduced set and the number of attributes removed.
    """
    current = frozenset(fds)
    count = 0
    while True:
        replacement = _find_shrinkable_determinant(current)
        if replacement is None:
            break
        old, new = replacement
        logger.debug(f"[BASIS] shrinking {old!r} to {new!r}")
        current = (current - {old}) | {new}
        count += 1
    return current, count


def _find_shrinkable_determinant(current: frozenset[FunctionalDependency]):
    for fd in sorted_dependencies(current):
        if len(fd.determinant) < 2:
            continue
        for attr in sorted(fd.determinant):
            shrunk = FunctionalDependency(fd.determinant - {attr}, fd.dependent)
            alternative = (current - {fd}) | {shrunk}
            if equivalent(alternative, current):
                return fd, shrunk
    return None


def remove_unnecessary_dependencies(
    fds: Iterable[FunctionalDependency],
) -> tuple[frozenset[FunctionalDependency], int]:
    """
    Drop whole dependencies one at a time while the remainder stays equivalent.
    Returns the reduced set and the number of dependencies removed.
    """
    current = frozenset(fds)
    count = 0
    while True:
        redundant = None
        for fd in sorted_dependencies(current):
            if equivalent(current - {fd}, current):
                redundant = fd
                break
        if redundant is None:
            break
        logger.debug(f"[BASIS] dropping redundant {redundant!r}")
        current = current - {redundant}
        count += 1
    return current, count


def minimal_basis(fds: Iterable[FunctionalDependency]) -> frozenset[FunctionalDependency]:
    """
    Compute a minimal basis of fds: an equivalent set with single-attribute
    dependents, no trivial dependencies, no removable determinant attribute
    and no redundant dependency.
    """
    result = split_right(fds)
    result = remove_trivial(result)

    rounds = 0
    count = 1
    while count > 0:
        result, shrunk = remove_unnecessary_determinants(result)
        result, dropped = remove_unnecessary_dependencies(result)
        count = shrunk + dropped
        rounds += 1

    logger.debug(f"[BASIS] {len(result)} dependencies after {rounds} rounds")
    return result
