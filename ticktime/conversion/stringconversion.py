"""String conversion helpers.

Number <-> string conversion with an explicit base, joining and splitting
of string sequences, byte-size and bitrate rendering, and base64.

Every function that parses text raises ConversionError on malformed input;
none of them silently defaults.
"""

from __future__ import annotations

import base64
import binascii
import logging
import math
from enum import Enum
from typing import Iterable

from ticktime.errors import ConversionError

logger = logging.getLogger(__name__)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class EmptyPartsTreat(Enum):
    """Role of empty parts when splitting strings."""

    KEEP = "keep"  # empty parts are kept
    OMIT = "omit"  # empty parts are omitted
    MERGE = "merge"  # empty parts are omitted but join their neighbours with the delimiter


def truncate_string(text: str, termination_char: str = "\0") -> str:
    """Return text up to (excluding) the first termination_char."""
    index = text.find(termination_char)
    if index < 0:
        return text
    return text[:index]


def join_strings(
    strings: Iterable[str],
    delimiter: str = "",
    omit_empty: bool = False,
    left_closure: str = "",
    right_closure: str = "",
) -> str:
    """Join strings, wrapping each one in the given closures.

    The delimiter is only inserted once the result is non-empty, so
    leading empty strings (without closures) leave no delimiter behind.

    Examples:
        >>> join_strings(["a", "", "b"], ", ", omit_empty=True, left_closure="<", right_closure=">")
        '<a>, <b>'
        >>> join_strings(["", "a"], ",")
        'a'
    """
    result = ""
    for s in strings:
        if omit_empty and not s:
            continue
        if result:
            result += delimiter
        result += f"{left_closure}{s}{right_closure}"
    return result


def split_string(
    text: str,
    delimiter: str,
    empty_parts: EmptyPartsTreat = EmptyPartsTreat.KEEP,
    max_parts: int = -1,
) -> list[str]:
    """Split text at delimiter.

    Unlike str.split, an empty string yields no parts and a trailing
    delimiter does not produce a trailing empty part.

    Args:
        text: The string to split.
        delimiter: The (non-empty) delimiter.
        empty_parts: How to treat empty parts.
        max_parts: Maximum number of parts; values <= 0 mean unlimited.
            The last part receives the unsplit remainder.

    Returns:
        The parts.

    Raises:
        ValueError: If delimiter is empty.

    Examples:
        >>> split_string("a,,b", ",")
        ['a', '', 'b']
        >>> split_string("a,,b", ",", EmptyPartsTreat.OMIT)
        ['a', 'b']
        >>> split_string("a,,b", ",", EmptyPartsTreat.MERGE)
        ['a,b']
        >>> split_string("a,b,c", ",", max_parts=2)
        ['a', 'b,c']
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")

    limit = max_parts - 1
    parts: list[str] = []
    merge = False
    i = 0
    end = len(text)
    while i < end:
        delim_pos = text.find(delimiter, i)
        if not merge and limit >= 0 and len(parts) == limit:
            if delim_pos == i and empty_parts is EmptyPartsTreat.MERGE and parts:
                merge = True
                i = delim_pos + len(delimiter)
                continue
            delim_pos = -1
        if delim_pos < 0:
            delim_pos = end

        if empty_parts is EmptyPartsTreat.KEEP or i != delim_pos:
            if merge:
                parts[-1] += delimiter + text[i:delim_pos]
                merge = False
            else:
                parts.append(text[i:delim_pos])
        elif empty_parts is EmptyPartsTreat.MERGE and parts:
            merge = True
        i = delim_pos + len(delimiter)
    return parts


def number_to_string(number: int | float, base: int = 10) -> str:
    """Render number in the given base (2-36, lowercase digits).

    Floats are only supported in base 10.

    Examples:
        >>> number_to_string(255, 16)
        'ff'
        >>> number_to_string(-5, 2)
        '-101'
    """
    if base < 2 or base > 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if isinstance(number, float):
        if base != 10:
            raise ValueError("floats can only be rendered in base 10")
        return repr(number)
    if base == 10:
        return str(number)

    magnitude = abs(number)
    digits = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
        if not magnitude:
            break
    if number < 0:
        digits.append("-")
    return "".join(reversed(digits))


def string_to_number(text: str, base: int = 10, number_type: type = int) -> int | float:
    """Parse text as a number in the given base.

    Args:
        text: The text to parse. Surrounding whitespace is ignored.
        base: The base for integers (2-36).
        number_type: int or float.

    Returns:
        The parsed number.

    Raises:
        ConversionError: If text is not a valid number.

    Examples:
        >>> string_to_number("ff", 16)
        255
        >>> string_to_number("1.5", number_type=float)
        1.5
    """
    stripped = text.strip()
    # int() and float() accept digit-group underscores; a number string does not
    if not stripped or "_" in stripped:
        raise ConversionError("The specified string is no valid number.")
    try:
        if number_type is float:
            if base != 10:
                raise ValueError("floats can only be parsed in base 10")
            return float(stripped)
        return int(stripped, base)
    except ValueError as e:
        logger.debug("cannot convert %r to a number: %s", text, e)
        raise ConversionError("The specified string is no valid number.") from e


def interpret_integer_as_string(integer: int, size: int = 4, start_offset: int = 0) -> str:
    """Interpret the big-endian bytes of an integer as a string.

    Example: ID3v2 frame IDs stored as 32-bit integers.

    Examples:
        >>> interpret_integer_as_string(0x54495432)
        'TIT2'
        >>> interpret_integer_as_string(0x00545432, start_offset=1)
        'TT2'
    """
    return integer.to_bytes(size, "big")[start_offset:].decode("latin-1")


def data_size_to_string(size_in_byte: int, include_byte: bool = False) -> str:
    """Render a byte count with a binary unit.

    Examples:
        >>> data_size_to_string(512)
        '512 bytes'
        >>> data_size_to_string(1536)
        '1.50 KiB'
        >>> data_size_to_string(1536, include_byte=True)
        '1.50 KiB (1536 byte)'
    """
    if size_in_byte < 1024:
        result = f"{size_in_byte} bytes"
    elif size_in_byte < 1024**2:
        result = f"{size_in_byte / 1024:.2f} KiB"
    elif size_in_byte < 1024**3:
        result = f"{size_in_byte / 1024**2:.2f} MiB"
    elif size_in_byte < 1024**4:
        result = f"{size_in_byte / 1024**3:.2f} GiB"
    else:
        result = f"{size_in_byte / 1024**4:.2f} TiB"
    if include_byte and size_in_byte > 1024:
        result += f" ({size_in_byte} byte)"
    return result


def bitrate_to_string(bitrate_in_kbits_per_second: float, use_byte_instead_of_bits: bool = False) -> str:
    """Render a bitrate given in kbit/s.

    Examples:
        >>> bitrate_to_string(128)
        '128 kbit/s'
        >>> bitrate_to_string(8, use_byte_instead_of_bits=True)
        '1 KiB/s'
    """
    kbits = bitrate_in_kbits_per_second
    if math.isnan(kbits):
        return "indeterminable"
    if use_byte_instead_of_bits:
        bytes_per_second = kbits * 125
        if bytes_per_second < 1_000:
            return f"{bytes_per_second:.3g} byte/s"
        if bytes_per_second < 1_000_000:
            return f"{bytes_per_second / 1_000:.3g} KiB/s"
        if bytes_per_second < 1_000_000_000:
            return f"{bytes_per_second / 1_000_000:.3g} MiB/s"
        return f"{bytes_per_second / 1_000_000_000:.3g} GiB/s"
    if kbits < 1.0:
        return f"{kbits * 1_000:.3g} bit/s"
    if kbits < 1_000.0:
        return f"{kbits:.3g} kbit/s"
    if kbits < 1_000_000.0:
        return f"{kbits / 1_000:.3g} Mbit/s"
    return f"{kbits / 1_000_000:.3g} Gbit/s"


def encode_base64(data: bytes) -> str:
    """Encode bytes as standard, padded base64."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(encoded: str) -> bytes:
    """Decode standard, padded base64.

    Raises:
        ConversionError: If the length is not a multiple of 4 or the text
            contains characters outside the base64 alphabet.
    """
    if len(encoded) % 4:
        raise ConversionError("invalid size of base64 data")
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConversionError("invalid base64 character") from e


__all__ = [
    "EmptyPartsTreat",
    "truncate_string",
    "join_strings",
    "split_string",
    "number_to_string",
    "string_to_number",
    "interpret_integer_as_string",
    "data_size_to_string",
    "bitrate_to_string",
    "encode_base64",
    "decode_base64",
]
