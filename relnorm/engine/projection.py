import logging
from typing import Iterable

from ..model.attribute import AttributeLike, as_attribute_set
from ..model.dependency import FunctionalDependency, attributes_of
from .basis import minimal_basis
from .closure import closure, reduced_power_set
from .logging_utils import warn_if_large

logger = logging.getLogger(__name__)


def projection(
    attrs: Iterable[AttributeLike], fds: Iterable[FunctionalDependency]
) -> frozenset[FunctionalDependency]:
    """
    Project fds onto the attribute subset attrs.

    If attrs already covers every attribute fds mention, fds is returned as
    is. Otherwise S --> closure(S) ∩ attrs is generated for every non-empty
    S ⊆ attrs and the lot is reduced to a minimal basis.
    """
    attrs = as_attribute_set(attrs)
    fds = frozenset(fds)
    if attributes_of(fds) <= attrs:
        return fds

    warn_if_large(logger, "PROJECT", len(attrs))
    implied = frozenset(
        FunctionalDependency(subset, closure(subset, fds) & attrs)
        for subset in reduced_power_set(attrs)
    )
    logger.debug(f"[PROJECT] {len(implied)} implied dependencies on {len(attrs)} attributes")
    return minimal_basis(implied)
