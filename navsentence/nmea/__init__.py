"""NMEA 0183 parser for GGA and RMC sentences."""

from navsentence.nmea.checksum import (
    compute_checksum,
    format_checksum,
    split_sentence,
    validate_checksum,
)
from navsentence.nmea.errors import (
    ChecksumMismatchError,
    InsufficientFieldsError,
    InvalidFieldError,
    InvalidFormatError,
    NMEAParseError,
    UnsupportedIdentifierError,
)
from navsentence.nmea.gga import parse_gga
from navsentence.nmea.rmc import parse_rmc
from navsentence.nmea.types import (
    FixQuality,
    GGAData,
    GGAIdentifier,
    RMCData,
    RMCIdentifier,
)

__all__ = [
    "ChecksumMismatchError",
    "FixQuality",
    "GGAData",
    "GGAIdentifier",
    "InsufficientFieldsError",
    "InvalidFieldError",
    "InvalidFormatError",
    "NMEAParseError",
    "RMCData",
    "RMCIdentifier",
    "UnsupportedIdentifierError",
    "compute_checksum",
    "format_checksum",
    "parse_gga",
    "parse_rmc",
    "split_sentence",
    "validate_checksum",
]
