"""Lark grammar and evaluator for the compound duration text format."""

from __future__ import annotations

import math

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput, UnexpectedToken
from lark.visitors import Interpreter

from pyspan._errors import ERR_MSG_INVALID_SPAN_STRING, SpanParseError
from pyspan.units import Unit, to_seconds

SPAN_GRAMMAR = r"""
start: SIGN? (term+ | SPECIAL)
term: DECIMAL UNIT

SIGN: "-"
SPECIAL: "INFs" | "NANs"
UNIT: "ns" | "us" | "ms" | "s" | "m" | "h" | "d"

// "_" is allowed only between two digits.
DECIMAL: /(?:\d(?:_?\d)*(?:\.(?:\d(?:_?\d)*)?)?|\.\d(?:_?\d)*)(?:[eE][+-]?\d(?:_?\d)*)?/
"""

_TERMINAL_DESCRIPTIONS: dict[str, str] = {
    "SIGN": "'-'",
    "SPECIAL": "'INFs' or 'NANs'",
    "UNIT": "unit suffix (ns, us, ms, s, m, h, d)",
    "DECIMAL": "decimal number",
    "$END": "end of input",
}

_SPECIAL_VALUES: dict[str, float] = {
    "INFs": math.inf,
    "NANs": math.nan,
}

_span_parser = Lark(SPAN_GRAMMAR, parser="lalr")


def add_term(acc: float, unit: Unit, literal: str) -> float:
    """Add one ``literal`` + ``unit`` term to a running total of seconds.

    The formatter checks its candidate strings with this same function.
    """
    return acc + to_seconds(unit, float(literal.replace("_", "")))


class _SpanEvaluator(Interpreter):
    """Evaluates a parsed duration tree to a float of seconds."""

    def start(self, tree: Tree) -> float:
        children = list(tree.children)
        negative = isinstance(children[0], Token) and children[0].type == "SIGN"
        if negative:
            children = children[1:]

        head = children[0]
        if isinstance(head, Token):
            total = _SPECIAL_VALUES[str(head)]
        else:
            total = 0.0
            for child in children:
                unit, literal = self.visit(child)
                total = add_term(total, unit, literal)
        return -total if negative else total

    def term(self, tree: Tree) -> tuple[Unit, str]:
        literal, suffix = tree.children
        return Unit.of_suffix(str(suffix)), str(literal)


_evaluator = _SpanEvaluator()


def _describe_expected(names: set[str] | frozenset[str]) -> str:
    described = sorted({_TERMINAL_DESCRIPTIONS.get(name, name) for name in names})
    return " or ".join(described) if described else "nothing"


def _parse_error(text: str, err: UnexpectedInput) -> SpanParseError:
    expected = getattr(err, "expected", None) or getattr(err, "allowed", None) or set()
    pos = err.pos_in_stream
    at_end = (
        isinstance(err, UnexpectedToken) and err.token.type == "$END"
    ) or pos is None or pos >= len(text)
    if at_end:
        offending = "end of input"
        pos = len(text)
    else:
        offending = repr(text[pos:pos + 8])
    return SpanParseError(
        ERR_MSG_INVALID_SPAN_STRING,
        f"cannot parse duration {text!r}: unexpected {offending} at position {pos}, "
        f"expected {_describe_expected(expected)}",
        wrapped=err,
    )


def parse_seconds(text: str) -> float:
    """Parse duration text such as ``"1d2h3.5s"`` to a float of seconds.

    Raises:
        SpanParseError: If the text is not a valid duration string.
    """
    if not text:
        raise SpanParseError(
            ERR_MSG_INVALID_SPAN_STRING,
            "cannot parse duration '': empty string, expected decimal number",
        )
    try:
        tree = _span_parser.parse(text)
    except UnexpectedInput as err:
        raise _parse_error(text, err) from err
    return _evaluator.visit(tree)
