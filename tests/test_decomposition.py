"""Tests for BCNF / 3NF decomposition and decomposition checks."""

import pytest

from relnorm import (
    RelationSchema,
    attribute_set,
    check_lossless_join,
    check_lossy_decomposition,
    decompose_to_3nf,
    decompose_to_bcnf,
    is_dependency_preserving,
)
from relnorm.parser.fd_parser import parse_attributes, parse_dependencies, parse_dependency as fd

SCHEMAS = [
    ("A, B, C", "A, B --> C; C --> B"),
    ("name, location, favAppl, application, provider",
     "name-->location; name-->favAppl; application-->provider"),
    ("C, T, H, R, S, G", "C-->T; H,R-->C; H,T-->R; C,S-->G; H,S-->R"),
    ("A, B, C, D", "A --> B; B --> C; C --> D"),
    ("A, B, C, D, E", "A-->B,C; C,D-->E; E-->A; B-->D"),
    ("A, B, C", ""),
]


def _attribute_sets(parts):
    return {part.attributes for part in parts}


def test_bcnf_decomposition_of_app_schema(app_schema):
    parts = app_schema.decompose_to_bcnf()
    assert _attribute_sets(parts) == {
        attribute_set("application", "provider"),
        attribute_set("name", "location", "favAppl"),
        attribute_set("name", "application"),
    }
    assert all(part.is_bcnf() for part in parts)


def test_bcnf_decomposition_of_abc_loses_a_dependency(abc_schema):
    parts = decompose_to_bcnf(abc_schema)
    assert _attribute_sets(parts) == {attribute_set("B", "C"), attribute_set("A", "C")}
    subsets = _attribute_sets(parts)
    assert check_lossy_decomposition(abc_schema.attributes, abc_schema.dependencies, subsets) == frozenset(
        {fd("A, B --> C")}
    )
    assert check_lossless_join(abc_schema.attributes, abc_schema.dependencies, subsets)


def test_bcnf_schema_is_its_own_decomposition():
    schema = RelationSchema.from_strings("A, B, C", "A --> B, C")
    assert decompose_to_bcnf(schema) == frozenset({schema})


@pytest.mark.parametrize("names,exprs", SCHEMAS)
def test_bcnf_parts_are_bcnf_and_lossless(names, exprs):
    schema = RelationSchema.from_strings(names, exprs)
    parts = decompose_to_bcnf(schema)
    assert all(part.check_bcnf() == frozenset() for part in parts)
    assert frozenset().union(*_attribute_sets(parts)) == schema.attributes
    assert check_lossless_join(schema.attributes, schema.dependencies, _attribute_sets(parts))


def test_bcnf_decomposition_does_not_change_original(app_schema):
    before = RelationSchema(app_schema.attributes, app_schema.dependencies)
    app_schema.decompose_to_bcnf()
    assert app_schema == before


def test_3nf_synthesis_of_course_schema(course_schema):
    parts = course_schema.decompose_to_3nf()
    assert any(attribute_set("H", "S") <= part.attributes for part in parts)
    assert frozenset().union(*_attribute_sets(parts)) == course_schema.attributes
    attribute_sets = _attribute_sets(parts)
    for a in attribute_sets:
        assert not any(a < b for b in attribute_sets)


@pytest.mark.parametrize("names,exprs", SCHEMAS)
def test_3nf_parts_preserve_dependencies_and_join_losslessly(names, exprs):
    schema = RelationSchema.from_strings(names, exprs)
    parts = decompose_to_3nf(schema)
    subsets = _attribute_sets(parts)
    assert check_lossy_decomposition(schema.attributes, schema.dependencies, subsets) == frozenset()
    assert is_dependency_preserving(schema.attributes, schema.dependencies, subsets)
    assert check_lossless_join(schema.attributes, schema.dependencies, subsets)
    assert all(part.is_3nf() for part in parts)


def test_3nf_adds_key_schema_when_needed():
    # D appears in no dependency, so only an added key schema can hold it
    schema = RelationSchema.from_strings("A, B, D", "A --> B")
    parts = decompose_to_3nf(schema)
    assert _attribute_sets(parts) == {attribute_set("A", "B"), attribute_set("A", "D")}


def test_3nf_without_dependencies_keeps_whole_schema():
    schema = RelationSchema.from_strings("A, B", "")
    assert decompose_to_3nf(schema) == frozenset({schema})


def test_lossy_decomposition_reports_lost_dependencies():
    attrs = parse_attributes("A, B, C, D, E")
    fds = parse_dependencies("A-->B,C; C,D-->E; E-->A; B-->D")
    subsets = [parse_attributes("A, B, C"), parse_attributes("A, D, E")]
    lost = check_lossy_decomposition(attrs, fds, subsets)
    assert lost == frozenset({fd("C, D --> E"), fd("B --> D")})
    assert not is_dependency_preserving(attrs, fds, subsets)
    # the join itself is still lossless: A is a key of A, B, C
    assert check_lossless_join(attrs, fds, subsets)


def test_schema_method_matches_function(abc_schema):
    subsets = [attribute_set("B", "C"), attribute_set("A", "C")]
    assert abc_schema.check_lossy_decomposition(subsets) == check_lossy_decomposition(
        abc_schema.attributes, abc_schema.dependencies, subsets
    )


def test_lossy_join_detected():
    attrs = parse_attributes("A, B, C")
    fds = parse_dependencies("A --> B")
    assert not check_lossless_join(attrs, fds, [attribute_set("A", "B"), attribute_set("B", "C")])
    assert check_lossless_join(attrs, fds, [attribute_set("A", "B"), attribute_set("A", "C")])
    assert not check_lossless_join(attrs, fds, [])
