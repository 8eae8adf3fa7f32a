"""Precision and formatting limits for duration encoding."""

MAX_SIGNIFICANT_DIGITS = 17
"""Significant decimal digits that identify any double uniquely."""

V1_SIGNIFICANT_DIGITS = 6
"""Significant digits written by the V1 text format (``%g``)."""

V1_RELATIVE_PRECISION = 5e-6
"""Worst-case relative error of a V1 text round-trip."""

V2_RELATIVE_PRECISION = 2.0**-50
"""Worst-case relative error of a V2 text round-trip (a few ULPs)."""

MAX_FIXED_DECIMALS = 17
"""Decimal places tried for the seconds term of a compound string."""

MAX_FORMAT_TERMS = 8
"""Correction terms tried before falling back to a single seconds term."""

EXACT_INTEGER_LIMIT = 2.0**53
"""Bound past which integers, whole seconds or a day count, stop being exact doubles."""
