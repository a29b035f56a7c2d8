"""NMEA field tokenizing and parsing utilities.

NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Two families of parsers live here:

    Required parsers (``parse_required_*``) raise ``InvalidFieldError`` naming
    the field when the value is empty or malformed. A sentence with a broken
    required field never produces a record.

    Optional parsers (``parse_optional_*``) return None for empty fields, and
    also for malformed ones. Optional values are informative only, so a bad
    value is treated the same as a missing one.
"""

import math
import re

from navsentence.nmea.errors import (
    InsufficientFieldsError,
    InvalidFieldError,
    InvalidFormatError,
)

__all__ = [
    "convert_to_decimal_degrees",
    "extract_fields",
    "extract_identifier",
    "parse_coordinate",
    "parse_optional_float",
    "parse_optional_text",
    "parse_required_float",
    "parse_required_uint8",
    "validate_field_count",
]

_UINT8_MAX = 255

# Plain ASCII literals; int() and float() alone accept padding and "_"
_UINT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def extract_identifier(sentence: str) -> str:
    """Return the sentence text before the first comma (e.g. "$GNGGA").

    Raises:
        InvalidFormatError: If the sentence has no comma at all.
    """
    identifier, separator, _ = sentence.partition(",")
    if not separator:
        raise InvalidFormatError()
    return identifier


def extract_fields(payload: str) -> list[str]:
    """Split a sentence payload into its comma-separated fields.

    The leading '$' is dropped. Empty fields, including trailing ones, are
    kept as empty strings since their position still carries meaning.

    Example:
        >>> extract_fields("$GNRMC,180201.80,A,,")
        ['GNRMC', '180201.80', 'A', '', '']
    """
    content = payload[1:] if payload.startswith("$") else payload
    return content.split(",")


def validate_field_count(fields: list[str], minimum: int) -> None:
    """Ensure a sentence has at least ``minimum`` fields.

    Checking up front means the decoders can index fields directly without
    guarding every access.

    Raises:
        InsufficientFieldsError: If ``len(fields) < minimum``.
    """
    if len(fields) < minimum:
        raise InsufficientFieldsError(expected=minimum, actual=len(fields))


def parse_required_float(value: str, name: str) -> float:
    """Parse a mandatory floating point field.

    Args:
        value: String value from an NMEA field
        name: Semantic field name used in the error

    Raises:
        InvalidFieldError: If the field is empty or not a number.
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        raise InvalidFieldError(name)
    return float(value)


def parse_required_uint8(value: str, name: str) -> int:
    """Parse a mandatory small unsigned integer field (0-255).

    Used for fix quality and satellite count.

    Raises:
        InvalidFieldError: If the field is empty, not an integer, or outside
            0-255.
    """
    if not _UINT_PATTERN.fullmatch(value):
        raise InvalidFieldError(name)

    parsed = int(value)
    if not 0 <= parsed <= _UINT8_MAX:
        raise InvalidFieldError(name)
    return parsed


def parse_optional_float(value: str) -> float | None:
    """Parse a string field to float, returning None if empty or invalid.

    NMEA fields may be empty (indicated by consecutive commas like ",,").
    This function treats empty strings as "no data" rather than an error.

    Example:
        >>> parse_optional_float("0.074")
        0.074
        >>> parse_optional_float("")  # empty field
        None
        >>> parse_optional_float("ABC")  # lenient: no error
        None
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        return None
    return float(value)


def parse_optional_text(value: str) -> str | None:
    """Return the field verbatim, or None if it is empty.

    Used for fields like UTC time, date or mode indicators where the raw
    string value is meaningful.
    """
    if not value:
        return None
    return value


def convert_to_decimal_degrees(raw_value: float, direction: str) -> float:
    """Convert an NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    NMEA packs degrees and minutes into one number: the integer part divided
    by 100 gives the degrees, the remainder is minutes.

        degrees = floor(raw_value / 100)
        minutes = raw_value - degrees * 100
        decimal_degrees = degrees + minutes / 60

    "S" and "W" negate the result. Any other direction string, including an
    empty or unexpected one, leaves it positive. The output is not range
    checked.

    Example:
        >>> convert_to_decimal_degrees(4807.038, "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees(1131.0, "W")
        -11.5166667
    """
    degrees = math.floor(raw_value / 100)
    minutes = raw_value - degrees * 100
    decimal_degrees = degrees + minutes / 60.0

    if direction in ("S", "W"):
        return -decimal_degrees

    return decimal_degrees


def parse_coordinate(
    fields: list[str],
    value_index: int,
    direction_index: int,
    name: str,
) -> float:
    """Parse a coordinate and its hemisphere field into decimal degrees.

    Args:
        fields: All fields of the sentence
        value_index: Index of the DDDMM.MMMM value
        direction_index: Index of the hemisphere letter
        name: Semantic field name used in the error (e.g. "latitude")

    Raises:
        InvalidFieldError: If the coordinate value is not a finite number.
    """
    raw_value = parse_required_float(fields[value_index], name)
    if not math.isfinite(raw_value):
        raise InvalidFieldError(name)
    return convert_to_decimal_degrees(raw_value, fields[direction_index])
