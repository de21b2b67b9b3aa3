"""
Binary codecs for the setting catalog.

Every codec turns a Python value into a fixed-width little-endian byte
string and back. Text codecs have no fixed width and use the whole input.
"""

import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, Optional

from .escaping import bytes_to_text, text_to_bytes
from .types import DecodeError, SettingKind
from .validation import DECIMAL_MAX_SCALE

# Decimal flags word: scale in bits 16..23, sign in bit 31.
DECIMAL_SCALE_SHIFT = 16
DECIMAL_SCALE_MASK = 0x00FF0000
DECIMAL_SIGN_MASK = 0x80000000
WORD_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Codec:
    """Binary representation of one setting kind."""
    kind: SettingKind
    width: Optional[int]
    pack: Callable[[Any], bytes]
    unpack: Callable[[bytes], Any]
    normalize: Callable[[Any], Any] = lambda value: value

    def encode(self, value: Any) -> bytes:
        return self.pack(value)

    def decode(self, data: bytes) -> Any:
        if self.width is not None and len(data) != self.width:
            raise DecodeError(self.kind, self.width, len(data))
        return self.unpack(bytes(data))


def _struct_codec(kind: SettingKind, fmt: str, rounds: bool = False) -> Codec:
    packer = struct.Struct(fmt)

    def unpack(data: bytes) -> Any:
        return packer.unpack(data)[0]

    if not rounds:
        return Codec(kind=kind, width=packer.size, pack=packer.pack, unpack=unpack)
    # Values are held at the precision of the wire format
    return Codec(
        kind=kind,
        width=packer.size,
        pack=packer.pack,
        unpack=unpack,
        normalize=lambda value: unpack(packer.pack(value)),
    )


def _pack_bool(value: bool) -> bytes:
    return b"\xff" if value else b"\x00"


def _unpack_bool(data: bytes) -> bool:
    return data[0] != 0


def pack_decimal(value: Decimal) -> bytes:
    """Split a Decimal into the lo, mid, hi and flags words, little-endian."""
    sign, digits, exponent = value.as_tuple()
    mantissa = int("".join(map(str, digits)) or "0")
    if exponent > 0:
        mantissa *= 10 ** exponent
        exponent = 0
    scale = -exponent
    flags = (scale << DECIMAL_SCALE_SHIFT) | (DECIMAL_SIGN_MASK if sign else 0)
    words = (
        mantissa & WORD_MASK,
        (mantissa >> 32) & WORD_MASK,
        (mantissa >> 64) & WORD_MASK,
        flags,
    )
    return struct.pack("<4I", *words)


def unpack_decimal(data: bytes) -> Decimal:
    """Reassemble a Decimal from the output of pack_decimal."""
    lo, mid, hi, flags = struct.unpack("<4I", data)
    scale = (flags & DECIMAL_SCALE_MASK) >> DECIMAL_SCALE_SHIFT
    if flags & ~(DECIMAL_SCALE_MASK | DECIMAL_SIGN_MASK) or scale > DECIMAL_MAX_SCALE:
        raise DecodeError(
            SettingKind.DECIMAL, 16, len(data), reason=f"invalid flags word 0x{flags:08x}"
        )
    mantissa = lo | (mid << 32) | (hi << 64)
    digits = tuple(int(digit) for digit in str(mantissa))
    return Decimal((1 if flags & DECIMAL_SIGN_MASK else 0, digits, -scale))


CODECS: Dict[SettingKind, Codec] = {
    SettingKind.CHAR: Codec(SettingKind.CHAR, None, text_to_bytes, bytes_to_text),
    SettingKind.STRING: Codec(SettingKind.STRING, None, text_to_bytes, bytes_to_text),
    SettingKind.BYTE: _struct_codec(SettingKind.BYTE, "<B"),
    SettingKind.SHORT: _struct_codec(SettingKind.SHORT, "<h"),
    SettingKind.USHORT: _struct_codec(SettingKind.USHORT, "<H"),
    SettingKind.INT: _struct_codec(SettingKind.INT, "<i"),
    SettingKind.UINT: _struct_codec(SettingKind.UINT, "<I"),
    SettingKind.LONG: _struct_codec(SettingKind.LONG, "<q"),
    SettingKind.ULONG: _struct_codec(SettingKind.ULONG, "<Q"),
    SettingKind.FLOAT: _struct_codec(SettingKind.FLOAT, "<f", rounds=True),
    SettingKind.DOUBLE: _struct_codec(SettingKind.DOUBLE, "<d"),
    SettingKind.DECIMAL: Codec(SettingKind.DECIMAL, 16, pack_decimal, unpack_decimal),
    SettingKind.BOOL: Codec(SettingKind.BOOL, 1, _pack_bool, _unpack_bool),
}


def get_codec(kind: SettingKind) -> Codec:
    """Return the codec registered for a setting kind."""
    return CODECS[kind]
