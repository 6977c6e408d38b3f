from __future__ import annotations

import ctypes
import math
from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class IntegerTypeSpec:
    """Bounds and saturating arithmetic for one native integer width."""

    name: str
    bits: int
    signed: bool

    @property
    def numpy_dtype(self) -> Any:
        return np.dtype(f"{'int' if self.signed else 'uint'}{self.bits}").type

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.numpy_dtype).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.numpy_dtype).max)

    def clamp(self, value: int) -> int:
        return max(self.min_value, min(self.max_value, int(value)))

    def saturate(self, value: int) -> tuple[int, bool, bool]:
        value = int(value)
        overflow = value > self.max_value
        underflow = value < self.min_value
        return self.clamp(value), overflow, underflow

    def saturating_add(self, left: int, right: int) -> int:
        return self.clamp(int(left) + int(right))

    def saturating_sub(self, left: int, right: int) -> int:
        return self.clamp(int(left) - int(right))

    def saturating_mul(self, left: int, right: int) -> int:
        return self.clamp(int(left) * int(right))

    @staticmethod
    def trunc_div(value: int, divisor: int) -> int:
        # Rounds toward zero like native integer division; `//` floors.
        quotient = abs(int(value)) // abs(int(divisor))
        if (value < 0) != (divisor < 0):
            return -quotient
        return quotient

    def from_int(self, value: int) -> Any:
        return self.numpy_dtype(self.clamp(value))


@dataclass(frozen=True)
class FloatTypeSpec:
    name: str
    bits: int
    exponent_bits: int
    mantissa_bits: int
    numpy_dtype: Any

    def classify(self, value: Any) -> str | None:
        scalar = self.numpy_dtype(value)
        if np.isnan(scalar):
            return "nan"
        if np.isinf(scalar):
            return "infinite"
        if np.isfinite(scalar):
            return "finite"
        return None

    def parse(self, text: str) -> Any:
        return self.numpy_dtype(text)

    def format_positional(self, value: Any) -> str:
        return np.format_float_positional(self.numpy_dtype(value), trim="-")

    def infinity(self, negative: bool = False) -> Any:
        return self.numpy_dtype(-math.inf if negative else math.inf)

    def nan(self) -> Any:
        return self.numpy_dtype(math.nan)


def _int_specs() -> dict[str, IntegerTypeSpec]:
    specs: dict[str, IntegerTypeSpec] = {}

    fixed_width: tuple[tuple[str, int, bool], ...] = (
        ("uint8_t", 8, False),
        ("int8_t", 8, True),
        ("uint16_t", 16, False),
        ("int16_t", 16, True),
        ("uint32_t", 32, False),
        ("int32_t", 32, True),
        ("uint64_t", 64, False),
        ("int64_t", 64, True),
    )
    for name, bits, signed in fixed_width:
        specs[name] = IntegerTypeSpec(name=name, bits=bits, signed=signed)

    short_bits = ctypes.sizeof(ctypes.c_short) * 8
    int_bits_size = ctypes.sizeof(ctypes.c_int) * 8
    long_bits = ctypes.sizeof(ctypes.c_long) * 8
    long_long_bits = ctypes.sizeof(ctypes.c_longlong) * 8

    c_native: tuple[tuple[str, int, bool], ...] = (
        ("short", short_bits, True),
        ("unsigned short", short_bits, False),
        ("int", int_bits_size, True),
        ("unsigned int", int_bits_size, False),
        ("long", long_bits, True),
        ("unsigned long", long_bits, False),
        ("long long", long_long_bits, True),
        ("unsigned long long", long_long_bits, False),
    )
    for name, bits, signed in c_native:
        specs[name] = IntegerTypeSpec(name=name, bits=bits, signed=signed)

    return specs


INT_TYPE_SPECS = _int_specs()


FLOAT_TYPE_SPECS: dict[str, FloatTypeSpec] = {
    "half": FloatTypeSpec(
        name="half",
        bits=16,
        exponent_bits=5,
        mantissa_bits=10,
        numpy_dtype=np.float16,
    ),
    "single": FloatTypeSpec(
        name="single",
        bits=32,
        exponent_bits=8,
        mantissa_bits=23,
        numpy_dtype=np.float32,
    ),
    "double": FloatTypeSpec(
        name="double",
        bits=64,
        exponent_bits=11,
        mantissa_bits=52,
        numpy_dtype=np.float64,
    ),
}


def is_ascii_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"
