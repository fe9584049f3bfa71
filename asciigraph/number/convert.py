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

import logging
import math
import sys
from decimal import Decimal
from fractions import Fraction

log = logging.getLogger(__name__)

Number = int | float | Decimal | Fraction | str


def to_fraction(value: Number) -> Fraction:
    """
    Convert a number (or its decimal string form) into an exact Fraction.

    - floats convert exactly; NaN becomes 0 and +/-inf become +/- the largest finite float
    - strings are parsed losslessly ("3.2" is exactly 16/5, "1e-3" and "-7/2" work too);
      a string that is not a number becomes 0
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a number")

    if isinstance(value, Fraction):
        return value

    if isinstance(value, int):
        return Fraction(value)

    if isinstance(value, float):
        if math.isnan(value):
            return Fraction(0)
        if math.isinf(value):
            return Fraction(sys.float_info.max) * (1 if value > 0 else -1)
        return Fraction(value)

    if isinstance(value, Decimal):
        if not value.is_finite():
            return to_fraction(float(value))
        return Fraction(value)

    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except (ValueError, ZeroDivisionError):
            log.warning("Cannot parse %r as a number; using 0", value)
            return Fraction(0)

    raise TypeError(f"Cannot convert {type(value).__name__} to a number")
