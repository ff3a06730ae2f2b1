"""Typed decoding of stored field strings.

Fields are always stored as text; conversion happens lazily when a caller
asks for a specific type. Each supported type has a decoder strategy and the
registry maps requested types to decoders, so new scalar types can be added
with :func:`register_decoder`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Protocol, Union

import math
import re
import struct

from .errors import ConfigError, DecodeError, InvalidValueError, OutOfRangeError

_INTEGER_RE = re.compile(r"-?[0-9]+", re.ASCII)
_UNSIGNED_RE = re.compile(r"[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"-?(?:(?P<mantissa>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


class ValueDecoder(Protocol):
    """Strategy converting field text into one scalar type."""

    name: str

    def decode(self, text: str) -> Any:
        """Return the decoded value or raise a ConfigError subclass."""


@dataclass(frozen=True)
class BoolDecoder:
    """First-character boolean: 0/f/n are false, 1/t/y are true."""

    name: str = "bool"

    def decode(self, text: str) -> bool:
        if text:
            first = text[0].lower()
            if first in "0fn":
                return False
            if first in "1ty":
                return True
        raise InvalidValueError(text, self.name)


@dataclass(frozen=True)
class IntegerDecoder:
    """Whole-string decimal integer, optionally bounded to a fixed width."""

    name: str = "int"
    bits: int | None = None
    signed: bool = True

    @property
    def minimum(self) -> int | None:
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int | None:
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def decode(self, text: str) -> int:
        pattern = _INTEGER_RE if self.signed else _UNSIGNED_RE
        if not pattern.fullmatch(text):
            raise InvalidValueError(text, self.name)
        if self.bits is not None and len(text.lstrip("-0")) > len(str(1 << self.bits)):
            # Too many digits for the width; also avoids int()'s digit limit.
            raise OutOfRangeError(text, self.name)
        value = int(text)
        if self.bits is not None and not self.minimum <= value <= self.maximum:
            raise OutOfRangeError(text, self.name)
        return value


@dataclass(frozen=True)
class FloatDecoder:
    """Whole-string decimal float in double or single precision."""

    name: str = "float"
    single: bool = False

    def decode(self, text: str) -> float:
        match = _FLOAT_RE.fullmatch(text)
        if match is None:
            raise InvalidValueError(text, self.name)
        value = float(text)
        if self.single and math.isfinite(value):
            # Round through the 32-bit representation.
            try:
                value = struct.unpack("f", struct.pack("f", value))[0]
            except OverflowError:
                raise OutOfRangeError(text, self.name) from None
        mantissa = match.group("mantissa")
        if mantissa is None:
            return value
        if math.isinf(value):
            raise OutOfRangeError(text, self.name)
        if value == 0.0 and mantissa.strip("0.") != "":
            # Non-zero literal underflowed to zero.
            raise OutOfRangeError(text, self.name)
        return value


BOOL = BoolDecoder()
INT = IntegerDecoder()
INT8 = IntegerDecoder("int8", 8)
INT16 = IntegerDecoder("int16", 16)
INT32 = IntegerDecoder("int32", 32)
INT64 = IntegerDecoder("int64", 64)
UINT8 = IntegerDecoder("uint8", 8, signed=False)
UINT16 = IntegerDecoder("uint16", 16, signed=False)
UINT32 = IntegerDecoder("uint32", 32, signed=False)
UINT64 = IntegerDecoder("uint64", 64, signed=False)
FLOAT = FloatDecoder()
FLOAT32 = FloatDecoder("float32", single=True)

DecodeTarget = Union[type, ValueDecoder, Hashable]

_REGISTRY: dict[Hashable, ValueDecoder] = {
    bool: BOOL,
    int: INT,
    float: FLOAT,
}

NAMED_DECODERS: dict[str, ValueDecoder] = {
    decoder.name: decoder
    for decoder in (BOOL, INT, INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64, FLOAT, FLOAT32)
}


def register_decoder(target: Hashable, decoder: ValueDecoder) -> None:
    """Register ``decoder`` for requests of ``target``."""

    _REGISTRY[target] = decoder


def resolve_decoder(target: DecodeTarget) -> ValueDecoder:
    """Return the decoder for ``target``.

    ``target`` is either a registered key (``bool``, ``int``, ``float`` or a
    custom type) or a decoder object such as :data:`INT32`.
    """

    try:
        decoder = _REGISTRY.get(target)
    except TypeError:
        decoder = None
    if decoder is not None:
        return decoder
    if callable(getattr(target, "decode", None)) and isinstance(getattr(target, "name", None), str):
        return target  # type: ignore[return-value]
    raise TypeError(f"No decoder registered for {target!r}")


def decode(text: str, target: DecodeTarget) -> Any:
    """Decode ``text`` as ``target``.

    Raises :class:`InvalidValueError`, :class:`OutOfRangeError`, or
    :class:`DecodeError` for any other conversion failure.
    """

    decoder = resolve_decoder(target)
    try:
        return decoder.decode(text)
    except ConfigError:
        raise
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise DecodeError(str(text), decoder.name) from exc


def decode_optional(text: str | None, target: DecodeTarget) -> Any | None:
    """Decode ``text`` unless it is ``None``."""

    if text is None:
        return None
    return decode(text, target)
