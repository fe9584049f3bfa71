# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Asciigraph Contributors
#
# This file is part of Asciigraph.
#
# Asciigraph is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Asciigraph is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from fractions import Fraction
from typing import Protocol

# below this magnitude labels keep their fractional part
FRACTION_LIMIT = 1000
FRACTION_DIGITS = 8

# from this magnitude on labels switch to scientific notation
SCIENTIFIC_LIMIT = 10**9
SCIENTIFIC_DIGITS = 4


class NumberFormatter(Protocol):
    """Turns an axis value into its label."""

    def __call__(self, value: Fraction) -> str: ...


def format_number(value: Fraction) -> str:
    """
    Human-friendly label for an exact value.

    - |value| < 1000: up to 8 fractional digits, trailing zeros trimmed ("0.5", "-12.25")
    - otherwise the integer part: "1234", "-999999999"
    - from 1e9 on: 4 significant digits with an exponent ("1.234e12")
    """
    value = Fraction(value)

    if abs(value) < FRACTION_LIMIT:
        return _format_fixed(value)

    n = int(value)  # truncates toward zero

    if abs(n) < SCIENTIFIC_LIMIT:
        return str(n)

    return _format_scientific(n)


def _format_fixed(value: Fraction) -> str:
    scale = 10**FRACTION_DIGITS
    scaled = int(abs(value) * scale + Fraction(1, 2))

    if scaled == 0:
        return "0"

    whole, frac = divmod(scaled, scale)
    text = f"{whole}.{frac:0{FRACTION_DIGITS}d}".rstrip("0").rstrip(".")
    return f"-{text}" if value < 0 else text


def _format_scientific(n: int) -> str:
    digits = str(abs(n))
    exponent = len(digits) - 1
    mantissa = digits[0] + "." + digits[1:SCIENTIFIC_DIGITS]
    sign = "-" if n < 0 else ""
    return f"{sign}{mantissa}e{exponent}"
