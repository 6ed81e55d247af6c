"""Width dispatch for the deterministic primality test.

Each supported unsigned width carries its Montgomery word size and witness
set. 64-bit values small enough for the 32-bit witness set are re-checked on
the 32-bit path, which keeps the products of the Montgomery engine narrow.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

import numpy as np

from primality_test.core.miller_rabin import WITNESSES_32, WITNESSES_64, miller_rabin

# Below this bound the 32-bit witness set is sufficient for 64-bit inputs.
CASCADE_BOUND = 1795265022


@dataclass(frozen=True)
class UIntWidth:
    """An unsigned integer width and the witness set that decides it."""
    name: str
    bits: int
    witnesses: Tuple[int, ...]

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return 0 <= value <= self.max_value


U8 = UIntWidth("u8", 8, WITNESSES_32)
U16 = UIntWidth("u16", 16, WITNESSES_32)
U32 = UIntWidth("u32", 32, WITNESSES_32)
U64 = UIntWidth("u64", 64, WITNESSES_64)
USIZE = U64 if sys.maxsize > 2**32 else U32

WIDTHS: Dict[str, UIntWidth] = {
    "u8": U8,
    "u16": U16,
    "u32": U32,
    "u64": U64,
    "usize": USIZE,
}

_DTYPE_WIDTHS: Dict[np.dtype, UIntWidth] = {
    np.dtype(np.uint8): U8,
    np.dtype(np.uint16): U16,
    np.dtype(np.uint32): U32,
    np.dtype(np.uint64): U64,
}

WidthLike = Union[str, UIntWidth, None]


def get_width(width: WidthLike) -> UIntWidth:
    """Resolve a width name (or UIntWidth) to a UIntWidth; None means u64."""
    if width is None:
        return U64
    if isinstance(width, UIntWidth):
        return width
    try:
        return WIDTHS[width]
    except KeyError:
        raise ValueError(
            f"Unknown width: {width!r}. Available: {list(WIDTHS.keys())}"
        ) from None


def width_for_dtype(dtype: np.dtype) -> UIntWidth:
    """Return the width matching an unsigned NumPy dtype."""
    dtype = np.dtype(dtype)
    if dtype not in _DTYPE_WIDTHS:
        raise ValueError(f"Unsupported dtype {dtype}; expected an unsigned integer type")
    return _DTYPE_WIDTHS[dtype]


def check_width(p: int, width: UIntWidth) -> bool:
    """Decide primality of ``p`` at the given width.

    ``p`` must already be representable in ``width``.
    """
    if p == 1 or p & 1 == 0:
        return p == 2

    if width.bits == 64 and p < CASCADE_BOUND:
        return check_width(p, U32)

    return miller_rabin(p, width.bits, width.witnesses)


def is_prime(value: Union[int, np.integer], width: WidthLike = None) -> bool:
    """Determine whether an unsigned integer is prime.

    Args:
        value: Integer to test. NumPy unsigned scalars select their own width
            unless ``width`` is given.
        width: Width name (``"u8"``, ``"u16"``, ``"u32"``, ``"u64"``,
            ``"usize"``) or UIntWidth. Defaults to u64 for Python ints.

    Returns:
        True if value is prime.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value is not representable in the width.
    """
    if width is None and isinstance(value, np.unsignedinteger):
        resolved = width_for_dtype(value.dtype)
    else:
        resolved = get_width(width)

    p = operator.index(value)
    if not resolved.contains(p):
        raise ValueError(f"{p} is not representable as {resolved.name}")

    return check_width(p, resolved)


def is_prime_u8(value: int) -> bool:
    return is_prime(value, U8)


def is_prime_u16(value: int) -> bool:
    return is_prime(value, U16)


def is_prime_u32(value: int) -> bool:
    return is_prime(value, U32)


def is_prime_u64(value: int) -> bool:
    return is_prime(value, U64)


def is_prime_usize(value: int) -> bool:
    return is_prime(value, USIZE)


def is_prime_array(numbers: np.ndarray, width: Optional[WidthLike] = None) -> np.ndarray:
    """Check primality for an array of numbers.

    The width is taken from the array's dtype when it is unsigned; other
    integer dtypes default to u64 and every element must be non-negative.
    Object arrays are accepted when every element is an integer.

    Args:
        numbers: Array of integers to check.
        width: Optional width override.

    Returns:
        Boolean array where True indicates prime.

    Raises:
        ValueError: If the array holds non-integers or values outside the width.
    """
    numbers = np.asarray(numbers)

    if numbers.size == 0:
        return np.zeros(numbers.shape, dtype=bool)

    if numbers.dtype.kind not in ("u", "i", "O"):
        raise ValueError(f"Expected an integer array, got dtype {numbers.dtype}")

    if width is None and numbers.dtype.kind == "u":
        resolved = width_for_dtype(numbers.dtype)
    else:
        resolved = get_width(width)

    result = np.empty(numbers.shape, dtype=bool)
    for index, value in np.ndenumerate(numbers):
        try:
            p = operator.index(value)
        except TypeError:
            raise ValueError(f"{value!r} is not an integer") from None
        if not resolved.contains(p):
            raise ValueError(f"{p} is not representable as {resolved.name}")
        result[index] = check_width(p, resolved)
    return result
