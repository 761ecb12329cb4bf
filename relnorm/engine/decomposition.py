"""
Schema decomposition into BCNF and 3NF, plus checks on arbitrary
decompositions: which dependencies they lose, and whether their natural
join gives back the original relation.
"""
import logging
from typing import Iterable

import pandas as pd

from ..model.attribute import Attribute, AttributeLike, as_attribute_set, sorted_names
from ..model.dependency import FunctionalDependency, sorted_dependencies
from ..model.schema import RelationSchema
from .basis import minimal_basis
from .closure import closure
from .keys import keys, smallest_key
from .normal_forms import check_bcnf
from .projection import projection

logger = logging.getLogger(__name__)

# Distinguished tableau symbol; sorts before every "b..." symbol
DISTINGUISHED = "a"


def decompose_to_bcnf(schema: RelationSchema) -> frozenset[RelationSchema]:
    """
    Recursively split schema until every part is in BCNF.

    The violating dependency with the smallest sort key is used for each
    split: its determinant L gives the parts closure(L) and
    (attributes - closure(L)) ∪ L, each carrying the projected dependencies.
    The result always joins back losslessly but may lose dependencies; see
    check_lossy_decomposition.
    """
    violating = check_bcnf(schema.attributes, schema.dependencies)
    if not violating:
        return frozenset((schema,))

    pick = min(violating, key=FunctionalDependency.sort_key)
    left = pick.determinant
    attrs1 = closure(left, schema.dependencies) & schema.attributes
    attrs2 = (schema.attributes - attrs1) | left

    if attrs1 == schema.attributes or attrs2 == schema.attributes:
        # Only reachable when dependencies mention attributes outside the schema
        logger.warning(f"[BCNF] cannot split on {pick!r}; keeping schema as is")
        return frozenset((schema,))

    logger.debug(
        f"[BCNF] splitting on {pick!r} into ({', '.join(sorted_names(attrs1))}) "
        f"and ({', '.join(sorted_names(attrs2))})"
    )
    r1 = RelationSchema(attrs1, projection(attrs1, schema.dependencies))
    r2 = RelationSchema(attrs2, projection(attrs2, schema.dependencies))

    return decompose_to_bcnf(r1) | decompose_to_bcnf(r2)


def decompose_to_3nf(schema: RelationSchema) -> frozenset[RelationSchema]:
    """
    3NF synthesis: one schema per dependency of a minimal basis, minus the
    ones contained in another, plus a candidate-key schema if no part holds a
    key of the original. Lossless and dependency preserving.
    """
    mb = minimal_basis(schema.dependencies)

    parts: dict[frozenset[Attribute], RelationSchema] = {}
    for fd in sorted_dependencies(mb):
        attrs_now = fd.determinant | fd.dependent
        if attrs_now not in parts:
            parts[attrs_now] = RelationSchema(attrs_now, projection(attrs_now, mb))

    result = {
        part for attrs_now, part in parts.items()
        if not any(attrs_now < other for other in parts)
    }
    logger.debug(f"[3NF] {len(parts)} synthesized schemas, {len(result)} after removing contained ones")

    candidate_keys = keys(schema.attributes, mb)
    has_key = any(key <= part.attributes for part in result for key in candidate_keys)
    if candidate_keys and not has_key:
        key = smallest_key(candidate_keys)
        logger.debug(f"[3NF] adding key schema ({', '.join(sorted_names(key))})")
        result.add(RelationSchema(key, projection(key, mb)))

    return frozenset(result)


def check_lossy_decomposition(
    attrs: Iterable[AttributeLike],
    fds: Iterable[FunctionalDependency],
    subsets: Iterable[Iterable[AttributeLike]],
) -> frozenset[FunctionalDependency]:
    """
    Return the dependencies of fds that the decomposition into subsets loses.

    fds is projected onto each subset and the projections are pooled; a
    dependency L --> R is lost when closure(L) under the pool misses part of R.
    An empty result means the decomposition preserves every dependency.
    """
    fds = frozenset(fds)
    subsets = [as_attribute_set(s) for s in subsets]

    combined: set[FunctionalDependency] = set()
    for subset in subsets:
        combined |= projection(subset, fds)

    lost = frozenset(
        fd for fd in fds
        if not fd.dependent <= closure(fd.determinant, combined)
    )
    logger.debug(
        f"[LOSSY] {len(lost)} of {len(fds)} dependencies lost over "
        f"{len(subsets)} parts of {len(as_attribute_set(attrs))} attributes"
    )
    return lost


def is_dependency_preserving(
    attrs: Iterable[AttributeLike],
    fds: Iterable[FunctionalDependency],
    subsets: Iterable[Iterable[AttributeLike]],
) -> bool:
    return not check_lossy_decomposition(attrs, fds, subsets)


def _initial_tableau(columns: tuple[str, ...], subsets: list[frozenset[Attribute]]) -> pd.DataFrame:
    rows = []
    for i, subset in enumerate(subsets):
        names = {a.name for a in subset}
        rows.append({
            col: DISTINGUISHED if col in names else f"b{i}_{col}"
            for col in columns
        })
    return pd.DataFrame(rows, columns=list(columns), dtype=object)


def _has_distinguished_row(tableau: pd.DataFrame) -> bool:
    return bool((tableau == DISTINGUISHED).all(axis=1).any())


def check_lossless_join(
    attrs: Iterable[AttributeLike],
    fds: Iterable[FunctionalDependency],
    subsets: Iterable[Iterable[AttributeLike]],
) -> bool:
    """
    Decide with the chase whether joining the projections onto subsets gives
    back exactly the relation over attrs.

    The tableau has one row per subset: the distinguished symbol in the
    columns the subset covers, a row-specific symbol elsewhere. Rows agreeing
    on a determinant are made to agree on the dependent until nothing
    changes. The join is lossless iff some row ends up fully distinguished.
    """
    attrs = as_attribute_set(attrs)
    subsets = sorted(
        (as_attribute_set(s) for s in subsets), key=lambda s: sorted_names(s)
    )
    if not subsets:
        return False

    usable = [
        fd for fd in sorted_dependencies(fds)
        if fd.determinant <= attrs and (fd.dependent - fd.determinant) & attrs
    ]
    tableau = _initial_tableau(sorted_names(attrs), subsets)

    iterations = 0
    changed = True
    while changed and not _has_distinguished_row(tableau):
        changed = False
        iterations += 1
        for fd in usable:
            left = list(sorted_names(fd.determinant))
            right = list(sorted_names((fd.dependent - fd.determinant) & attrs))
            if left:
                groups = list(tableau.groupby(left, sort=False).groups.values())
            else:
                groups = [tableau.index]
            for index in groups:
                if len(index) < 2:
                    continue
                for col in right:
                    values = tableau.loc[index, col]
                    if values.nunique() < 2:
                        continue
                    tableau.loc[index, col] = min(values)
                    changed = True

    lossless = _has_distinguished_row(tableau)
    logger.debug(f"[CHASE] lossless={lossless} after {iterations} iterations")
    return lossless
