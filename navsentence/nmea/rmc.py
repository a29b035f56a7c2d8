"""RMC sentence parser.

RMC (Recommended Minimum Navigation Information) carries position, velocity
and date in one sentence.

RMC Sentence Format:
    $GPRMC,235947,A,5550.000,N,03736.000,E,0.13,309.62,130720,5.5,W,A*08
           |      | |        | |         | |    |      |      |   | |
           |      | |        | |         | |    |      |      |   | +-- Mode indicator (optional)
           |      | |        | |         | |    |      |      +---+-- Magnetic variation + E/W
           |      | |        | |         | |    |      +-- Date (DDMMYY)
           |      | |        | |         | |    +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A = active, V = void)
           +-- UTC time (HHMMSS.ss)

Only latitude and longitude are required. Every other field is optional and
malformed optional numbers decode to None rather than failing the sentence.
"""

from navsentence.nmea.checksum import split_sentence, validate_checksum
from navsentence.nmea.errors import UnsupportedIdentifierError
from navsentence.nmea.fields import (
    extract_fields,
    extract_identifier,
    parse_coordinate,
    parse_optional_float,
    parse_optional_text,
    validate_field_count,
)
from navsentence.nmea.types import RMCData, RMCIdentifier

__all__ = ["RMC_MINIMUM_FIELD_COUNT", "parse_rmc"]

# Identifier plus eleven data fields; the mode indicator at index 12 is optional
RMC_MINIMUM_FIELD_COUNT = 12

_MODE_INDEX = 12

_KNOWN_IDENTIFIERS = frozenset(identifier.value for identifier in RMCIdentifier)


def _validate_identifier(sentence: str) -> None:
    identifier = extract_identifier(sentence)
    if identifier not in _KNOWN_IDENTIFIERS:
        raise UnsupportedIdentifierError(identifier)


def _extract_mode(fields: list[str]) -> str | None:
    """Extract the FAA mode indicator, added in NMEA 2.3.

    Older receivers stop at the magnetic variation direction.
    """
    if len(fields) <= _MODE_INDEX:
        return None
    return parse_optional_text(fields[_MODE_INDEX])


def _build_rmc_data(fields: list[str]) -> RMCData:
    """Construct an RMCData object from parsed fields.

    Maps NMEA field indices to RMCData attributes:
        fields[1]  -> utc_time
        fields[2]  -> status (A/V, kept verbatim)
        fields[3]  -> latitude (DDMM.MMMM), fields[4] -> N/S
        fields[5]  -> longitude (DDDMM.MMMM), fields[6] -> E/W
        fields[7]  -> speed_knots
        fields[8]  -> course_degrees
        fields[9]  -> date (DDMMYY)
        fields[10] -> magnetic_variation_degrees
        fields[11] -> magnetic_variation_direction
        fields[12] -> mode (if present)
    """
    latitude = parse_coordinate(fields, 3, 4, "latitude")
    longitude = parse_coordinate(fields, 5, 6, "longitude")

    return RMCData(
        utc_time=parse_optional_text(fields[1]),
        status=parse_optional_text(fields[2]),
        latitude_degrees=latitude,
        longitude_degrees=longitude,
        speed_knots=parse_optional_float(fields[7]),
        course_degrees=parse_optional_float(fields[8]),
        date=parse_optional_text(fields[9]),
        magnetic_variation_degrees=parse_optional_float(fields[10]),
        magnetic_variation_direction=parse_optional_text(fields[11]),
        mode=_extract_mode(fields),
    )


def parse_rmc(sentence: str) -> RMCData:
    """Parse an RMC sentence into structured data.

    Same pipeline as ``parse_gga``: identifier, checksum, field count (12),
    then field decoding.

    Args:
        sentence: Raw NMEA RMC sentence string

    Returns:
        A fully populated RMCData.

    Raises:
        NMEAParseError: One of its subclasses, describing the first problem
            found.

    Example:
        >>> result = parse_rmc("$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.074,,140225,,,A,V*1B")
        >>> result.speed_knots, result.course_degrees, result.mode
        (0.074, None, 'A')
    """
    _validate_identifier(sentence)

    payload, declared_checksum = split_sentence(sentence)
    validate_checksum(payload, declared_checksum)

    fields = extract_fields(payload)
    validate_field_count(fields, RMC_MINIMUM_FIELD_COUNT)

    return _build_rmc_data(fields)
