"""Shortest exact text rendering of a span of seconds.

A span is rendered as a list of ``(unit, literal)`` terms. Every candidate
list is evaluated with the parser's own accumulation rule
(:func:`pyspan._parser.add_term`), so a string is only emitted once it is
known to parse back to the identical double.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from fractions import Fraction

from pyspan._constants import (
    EXACT_INTEGER_LIMIT,
    MAX_FIXED_DECIMALS,
    MAX_FORMAT_TERMS,
    MAX_SIGNIFICANT_DIGITS,
)
from pyspan._parser import add_term
from pyspan.units import Unit, of_seconds, primary_unit, to_seconds

logger = logging.getLogger(__name__)

_COMPOUND_UNITS = (Unit.DAY, Unit.HOUR, Unit.MINUTE)
_WHOLE_SECONDS = {Unit.DAY: 86400, Unit.HOUR: 3600, Unit.MINUTE: 60}


@dataclass(frozen=True)
class Term:
    """One ``literal`` + ``unit`` component of a formatted span."""

    unit: Unit
    literal: str

    def render(self) -> str:
        return f"{self.literal}{self.unit.suffix}"


def float_literal(value: float) -> str:
    """Shortest decimal that reads back as ``value``, without a trailing ``.0``."""
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _rounded_literal(value: float, digits: int) -> str:
    return float_literal(float(f"{value:.{digits}g}"))


def _exact_literal(target: float, acc: float, unit: Unit, magnitude: float) -> str | None:
    """Fewest significant digits of ``magnitude`` that bring ``acc`` to ``target``."""
    for digits in range(1, MAX_SIGNIFICANT_DIGITS + 1):
        literal = _rounded_literal(magnitude, digits)
        if add_term(acc, unit, literal) == target:
            return literal
    return None


def _corrected_terms(target: float, unit: Unit) -> list[Term] | None:
    """Terms led by ``unit``, corrected in smaller units until exact."""
    magnitude = of_seconds(unit, target)
    literal = _exact_literal(target, 0.0, unit, magnitude)
    if literal is not None:
        return [Term(unit, literal)]
    for neighbour in (math.nextafter(magnitude, math.inf), math.nextafter(magnitude, 0.0)):
        if to_seconds(unit, neighbour) == target:
            return [Term(unit, float_literal(neighbour))]

    # Lead with the largest magnitude that does not overshoot, so every
    # correction is a positive term.
    base = magnitude
    while to_seconds(unit, base) > target:
        base = math.nextafter(base, 0.0)
    terms = [Term(unit, float_literal(base))]
    acc = to_seconds(unit, base)

    while acc != target and len(terms) < MAX_FORMAT_TERMS:
        residual = target - acc
        unit = min(primary_unit(residual), unit)
        correction = of_seconds(unit, residual)
        literal = _exact_literal(target, acc, unit, correction)
        if literal is None:
            literal = float_literal(correction)
        next_acc = add_term(acc, unit, literal)
        if not acc < next_acc <= target:
            return None
        terms.append(Term(unit, literal))
        acc = next_acc
    return terms if acc == target else None


def _compound_terms(target: float) -> list[Term] | None:
    """Whole days, hours and minutes followed by a seconds term.

    Each count is the exact floor of what remains. Once doubles get coarser
    than a second a whole-unit sum can round onto the target early, so the
    terms stop there, and the last count may be one past its floor
    (``10h60m``, ``24h``). Returns ``None`` when the day count itself is no
    longer an exact double.
    """
    terms: list[Term] = []
    acc = 0.0
    for unit in _COMPOUND_UNITS:
        count = (Fraction(target) - Fraction(acc)) // _WHOLE_SECONDS[unit]
        if not count:
            continue
        if count >= EXACT_INTEGER_LIMIT:
            return None
        for literal in (str(count), str(count + 1)):
            if add_term(acc, unit, literal) == target:
                return [*terms, Term(unit, literal)]
        terms.append(Term(unit, str(count)))
        acc = add_term(acc, unit, str(count))

    residual = target - acc
    for places in range(MAX_FIXED_DECIMALS + 1):
        literal = f"{residual:.{places}f}"
        if add_term(acc, Unit.SECOND, literal) == target:
            return [*terms, Term(Unit.SECOND, literal)]
    return [*terms, Term(Unit.SECOND, float_literal(residual))]


def span_terms(magnitude: float) -> list[Term]:
    """Terms for a positive, finite span of seconds."""
    unit = primary_unit(magnitude)
    if unit <= Unit.SECOND:
        terms = _corrected_terms(magnitude, unit)
    else:
        terms = _compound_terms(magnitude)
        if terms is None:
            terms = _corrected_terms(magnitude, Unit.DAY)

    if terms is None or (magnitude < EXACT_INTEGER_LIMIT and _repeats_unit(terms)):
        # Seconds are an identity conversion, so this always round-trips.
        logger.debug(f"No compact terms for {magnitude!r}, using seconds")
        terms = [Term(Unit.SECOND, float_literal(magnitude))]
    return terms


def _repeats_unit(terms: list[Term]) -> bool:
    return len({term.unit for term in terms}) < len(terms)


def format_seconds(seconds: float) -> str:
    """Render ``seconds`` as the shortest duration string that parses back exactly."""
    negative = math.copysign(1.0, seconds) < 0
    if math.isnan(seconds):
        return "-NANs" if negative else "NANs"
    if seconds == 0:
        return "0s"
    if math.isinf(seconds):
        return "-INFs" if negative else "INFs"
    body = "".join(term.render() for term in span_terms(abs(seconds)))
    return f"-{body}" if negative else body
