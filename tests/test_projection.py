"""Tests for projecting dependencies onto attribute subsets."""

from relnorm import attribute_set, attributes_of, closure, equivalent, projection
from relnorm.parser.fd_parser import parse_dependencies, parse_dependency as fd


def test_projection_keeps_transitive_dependency():
    fds = parse_dependencies("A --> B; B --> C")
    result = projection(attribute_set("A", "C"), fds)
    assert equivalent(result, {fd("A --> C")})
    assert attributes_of(result) <= attribute_set("A", "C")


def test_projection_onto_covering_set_returns_dependencies_unchanged(course_fds):
    attrs = attributes_of(course_fds)
    assert projection(attrs, course_fds) == course_fds
    assert projection(attrs | attribute_set("Z"), course_fds) == course_fds


def test_projection_drops_unrelated_attributes():
    fds = parse_dependencies("A --> B; C --> D")
    result = projection(attribute_set("A", "B"), fds)
    assert result == frozenset({fd("A --> B")})


def test_projection_agrees_with_closure_on_subset(course_fds):
    attrs = attribute_set("C", "H", "R", "S")
    result = projection(attrs, course_fds)
    assert attributes_of(result) <= attrs
    for names in [("C",), ("H", "R"), ("H", "S"), ("C", "S"), ("R", "S")]:
        subset = attribute_set(*names)
        assert closure(subset, result) == closure(subset, course_fds) & attrs


def test_projection_onto_attributes_without_dependencies():
    fds = parse_dependencies("A --> B")
    assert projection(attribute_set("B", "C"), fds) == frozenset()
