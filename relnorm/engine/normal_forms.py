import logging
from typing import Iterable

from ..model.attribute import AttributeLike
from ..model.dependency import FunctionalDependency
from .keys import keys

logger = logging.getLogger(__name__)


def check_bcnf(
    attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]
) -> frozenset[FunctionalDependency]:
    """
    Return the dependencies violating Boyce-Codd normal form: the non-trivial
    ones whose determinant contains no candidate key. Empty means BCNF holds.
    """
    fds = frozenset(fds)
    candidate_keys = keys(attrs, fds)

    violating = set()
    for fd in fds:
        if fd.is_trivial():
            continue
        if not any(key <= fd.determinant for key in candidate_keys):
            violating.add(fd)

    logger.debug(f"[BCNF] {len(violating)} of {len(fds)} dependencies violate BCNF")
    return frozenset(violating)


def check_3nf(
    attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]
) -> frozenset[FunctionalDependency]:
    """
    Return the dependencies violating third normal form. A dependency L --> R
    is fine when L contains a candidate key or every attribute of R - L is
    prime. Empty means 3NF holds.
    """
    fds = frozenset(fds)
    candidate_keys = keys(attrs, fds)
    primes = frozenset().union(*candidate_keys)

    violating = set()
    for fd in fds:
        if (fd.dependent - fd.determinant) <= primes:
            continue
        if not any(key <= fd.determinant for key in candidate_keys):
            violating.add(fd)

    logger.debug(f"[3NF] {len(violating)} of {len(fds)} dependencies violate 3NF")
    return frozenset(violating)
