"""GGA sentence parser.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,155642.90,6025.8038680,N,01055.0975279,E,2,12,0.59,64.591,M,39.937,M,,*74
           |         |            | |             | | |  |    |      | |      |
           |         |            | |             | | |  |    |      | |      +-- DGPS info (ignored)
           |         |            | |             | | |  |    |      | +-- Geoid height (ignored)
           |         |            | |             | | |  |    +------+-- Altitude above MSL
           |         |            | |             | | |  +-- HDOP (horizontal dilution)
           |         |            | |             | | +-- Number of satellites
           |         |            | |             | +-- Fix quality (0-9)
           |         |            | +-------------+-- Longitude + E/W
           |         +------------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Only the identifier and fields 1-9 are decoded, so ten fields is the minimum.
Everything but the UTC time is required: an empty or malformed value raises
``InvalidFieldError`` instead of producing a partial record.
"""

from navsentence.nmea.checksum import split_sentence, validate_checksum
from navsentence.nmea.errors import UnsupportedIdentifierError
from navsentence.nmea.fields import (
    extract_fields,
    extract_identifier,
    parse_coordinate,
    parse_optional_text,
    parse_required_float,
    parse_required_uint8,
    validate_field_count,
)
from navsentence.nmea.types import FixQuality, GGAData, GGAIdentifier

__all__ = ["GGA_MINIMUM_FIELD_COUNT", "parse_gga"]

# Identifier plus the nine decoded data fields
GGA_MINIMUM_FIELD_COUNT = 10

_KNOWN_IDENTIFIERS = frozenset(identifier.value for identifier in GGAIdentifier)


def _validate_identifier(sentence: str) -> None:
    """Check that the sentence starts with a known GGA identifier.

    Example:
        "$GNGGA,..." -> ok
        "$GBGGA,..." -> UnsupportedIdentifierError("$GBGGA")
        "$GNRMC,..." -> UnsupportedIdentifierError("$GNRMC")
    """
    identifier = extract_identifier(sentence)
    if identifier not in _KNOWN_IDENTIFIERS:
        raise UnsupportedIdentifierError(identifier)


def _build_gga_data(fields: list[str]) -> GGAData:
    """Construct a GGAData object from parsed fields.

    Maps NMEA field indices to GGAData attributes:
        fields[1]  -> utc_time (HHMMSS.ss format, optional)
        fields[2]  -> latitude (DDMM.MMMM format)
        fields[3]  -> latitude direction (N/S)
        fields[4]  -> longitude (DDDMM.MMMM format)
        fields[5]  -> longitude direction (E/W)
        fields[6]  -> fix_quality (0-9)
        fields[7]  -> num_satellites
        fields[8]  -> HDOP (horizontal dilution of precision)
        fields[9]  -> altitude above MSL (meters)

    Fields are decoded in that order; the first invalid one aborts.
    """
    latitude = parse_coordinate(fields, 2, 3, "latitude")
    longitude = parse_coordinate(fields, 4, 5, "longitude")
    fix_quality_code = parse_required_uint8(fields[6], "fixQuality")
    num_satellites = parse_required_uint8(fields[7], "satellitesUsed")
    hdop = parse_required_float(fields[8], "hdop")
    altitude = parse_required_float(fields[9], "altitude")

    return GGAData(
        utc_time=parse_optional_text(fields[1]),
        latitude_degrees=latitude,
        longitude_degrees=longitude,
        # Unmapped codes (e.g. 15) are not an error
        fix_quality=FixQuality.from_code(fix_quality_code),
        num_satellites=num_satellites,
        horizontal_dilution_of_precision=hdop,
        altitude_meters=altitude,
    )


def parse_gga(sentence: str) -> GGAData:
    """Parse a GGA sentence into structured data.

    This is the main entry point for GGA parsing. It performs:
    1. Identifier validation (must be a known GGA identifier)
    2. Payload/checksum split (trailing \\r\\n is tolerated)
    3. Checksum validation
    4. Field extraction and count validation
    5. Field parsing and coordinate conversion

    Args:
        sentence: Raw NMEA GGA sentence string

    Returns:
        A fully populated GGAData.

    Raises:
        InvalidFormatError: No comma, or not exactly one '*'.
        UnsupportedIdentifierError: Not a known GGA identifier.
        ChecksumMismatchError: Declared checksum does not match.
        InsufficientFieldsError: Fewer than 10 fields.
        InvalidFieldError: A required field is empty or malformed.

    Example:
        >>> result = parse_gga("$GNGGA,155642.90,6025.8038680,N,01055.0975279,E,2,12,0.59,64.591,M,39.937,M,,*74")
        >>> result.num_satellites
        12
        >>> result.fix_quality
        <FixQuality.DGPS: 2>
    """
    _validate_identifier(sentence)

    payload, declared_checksum = split_sentence(sentence)
    validate_checksum(payload, declared_checksum)

    fields = extract_fields(payload)
    validate_field_count(fields, GGA_MINIMUM_FIELD_COUNT)

    return _build_gga_data(fields)
