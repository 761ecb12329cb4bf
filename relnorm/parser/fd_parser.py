import logging
import re
from typing import Iterable, Union

from lark import Lark, Transformer
from lark.exceptions import LarkError

from ..model.attribute import Attribute
from ..model.dependency import FunctionalDependency

logger = logging.getLogger(__name__)

fd_grammar = r"""
// -----------------------------
// Dependency list: "A, B --> C; C --> B", optional trailing ";"
// -----------------------------
dependencies: dependency (";" dependency)* ";"?

// A dependency needs a non-empty attribute list on both sides
dependency: attributes "-->" attributes

// Attribute list: names separated by commas
attributes: NAME ("," NAME)*

// A name is any run of characters without the reserved delimiters
NAME: /((?!-->)[^,;\s])+/
"""

_WHITESPACE = re.compile(r"\s+")


class DependencySyntaxError(ValueError):
    """Raised when attribute or dependency text cannot be parsed."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


class FDTransformer(Transformer):
    """
    Transforms a Lark parse tree into Attribute and FunctionalDependency values.
    """

    def attributes(self, items):
        logger.debug("Entering attributes with items: %s", items)
        return frozenset(Attribute(str(tok)) for tok in items)

    def dependency(self, items):
        logger.debug("Entering dependency with items: %s", items)
        left, right = items
        return FunctionalDependency(left, right)

    def dependencies(self, items):
        logger.debug("Entering dependencies with %d items", len(items))
        return frozenset(items)


class FDParser:
    """
    Parser for the textual formats:

        attributes:    "name, location, favAppl"
        dependencies:  "A, B --> C; C --> B, D"

    Whitespace is removed before parsing, so "A, B" and "A,B" are the same.
    An empty string stands for the empty set.
    """

    def __init__(self):
        self.parser = Lark(
            fd_grammar,
            parser="lalr",
            start=["dependencies", "dependency", "attributes"],
        )
        self.transformer = FDTransformer()

    def _parse(self, text: str, start: str):
        compact = _WHITESPACE.sub("", text)
        logger.debug("Starting %s parse for text: %s", start, compact)
        try:
            tree = self.parser.parse(compact, start=start)
        except LarkError as e:
            logger.error(f"[PARSE] invalid {start} expression {text!r}: {e}")
            reason = (str(e).strip().splitlines() or [type(e).__name__])[0]
            raise DependencySyntaxError(text, reason) from e
        return self.transformer.transform(tree)

    def parse_attributes(self, names: Union[str, Iterable[str]]) -> frozenset[Attribute]:
        """
        Parse a comma separated list of names, or take an iterable where each
        element is one name.
        """
        if isinstance(names, str):
            if not names.strip():
                return frozenset()
            return self._parse(names, "attributes")

        result = set()
        for name in names:
            parsed = self._parse(name, "attributes")
            if len(parsed) != 1:
                raise DependencySyntaxError(name, "expected a single attribute name")
            result |= parsed
        return frozenset(result)

    def parse_dependency(self, expr: str) -> FunctionalDependency:
        """Parse one dependency such as "A, B --> C"."""
        return self._parse(expr, "dependency")

    def parse_dependencies(self, exprs: Union[str, Iterable[str]]) -> frozenset[FunctionalDependency]:
        """
        Parse a semicolon separated list of dependencies, or take an iterable
        where each element is one dependency.
        """
        if isinstance(exprs, str):
            if not exprs.strip():
                return frozenset()
            return self._parse(exprs, "dependencies")
        return frozenset(self.parse_dependency(expr) for expr in exprs)


_default_parser = None


def get_parser() -> FDParser:
    global _default_parser
    if _default_parser is None:
        _default_parser = FDParser()
    return _default_parser


def parse_attributes(names: Union[str, Iterable[str]]) -> frozenset[Attribute]:
    return get_parser().parse_attributes(names)


def parse_dependencies(exprs: Union[str, Iterable[str]]) -> frozenset[FunctionalDependency]:
    return get_parser().parse_dependencies(exprs)


def parse_dependency(expr: str) -> FunctionalDependency:
    return get_parser().parse_dependency(expr)
