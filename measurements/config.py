"""Global configuration and type definitions for the measurement library.

This module keeps the numeric type aliases and the tunable constants used
by the conversion engine and the measurement value types. Everything here
is a plain module constant: the library reads no files and no environment
variables.

Type Definitions:
    Number: Scalar numeric types accepted by the float measurement.
    BASE_TYPE: Numeric types accepted by the float conversion functions,
               including NumPy arrays for vectorised conversion.

Tunables:
    EPSILON_EXPONENT: Relative tolerance used by float measurement
        comparison. Two base-unit values ``a`` and ``b`` compare equal when
        ``|a - b| < 10 ** (round(log10(max(|a|, |b|))) - EPSILON_EXPONENT)``.
        The exponent is a design choice rather than a physical constant.
    DECIMAL_PRECISION: Precision of the decimal context used by the
        decimal conversion functions (28 digits, as a 128-bit decimal). Division by
        zero is not trapped and gives a signed Infinity.
    DEFAULT_CULTURE: Culture used for parsing and formatting when none is
        given.

Example:
    >>> from measurements.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 3.5
    >>> vector: BASE_TYPE = np.array([1.0, 2.0, 3.0])
"""

from decimal import Context, InvalidOperation, Overflow

from numpy import ndarray

Number = int | float
BASE_TYPE = int | float | ndarray

EPSILON_EXPONENT = 12

DECIMAL_PRECISION = 28
DECIMAL_CONTEXT = Context(prec=DECIMAL_PRECISION, traps=[InvalidOperation, Overflow])

DEFAULT_CULTURE = "invariant"
