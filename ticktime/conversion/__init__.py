"""String and number conversion helpers.

Functions:
    number_to_string / string_to_number: Base-aware numeric conversion.
    join_strings / split_string: Sequence joining and splitting.
    encode_base64 / decode_base64: Base64 codec.
    data_size_to_string / bitrate_to_string: Human-readable sizes and rates.
"""

from __future__ import annotations

from ticktime.conversion.stringconversion import (
    EmptyPartsTreat,
    bitrate_to_string,
    data_size_to_string,
    decode_base64,
    encode_base64,
    interpret_integer_as_string,
    join_strings,
    number_to_string,
    split_string,
    string_to_number,
    truncate_string,
)

__all__: list[str] = [
    "EmptyPartsTreat",
    "bitrate_to_string",
    "data_size_to_string",
    "decode_base64",
    "encode_base64",
    "interpret_integer_as_string",
    "join_strings",
    "number_to_string",
    "split_string",
    "string_to_number",
    "truncate_string",
]
