"""Navsentence package for decoding and routing NMEA 0183 sentences."""

from navsentence.dispatch import (
    EventChannel,
    IdentifierConfig,
    SentenceRouter,
    split_batch,
)
from navsentence.nmea import (
    ChecksumMismatchError,
    FixQuality,
    GGAData,
    GGAIdentifier,
    InsufficientFieldsError,
    InvalidFieldError,
    InvalidFormatError,
    NMEAParseError,
    RMCData,
    RMCIdentifier,
    UnsupportedIdentifierError,
    compute_checksum,
    parse_gga,
    parse_rmc,
    validate_checksum,
)

__all__ = [
    "ChecksumMismatchError",
    "EventChannel",
    "FixQuality",
    "GGAData",
    "GGAIdentifier",
    "IdentifierConfig",
    "InsufficientFieldsError",
    "InvalidFieldError",
    "InvalidFormatError",
    "NMEAParseError",
    "RMCData",
    "RMCIdentifier",
    "SentenceRouter",
    "UnsupportedIdentifierError",
    "compute_checksum",
    "parse_gga",
    "parse_rmc",
    "split_batch",
    "validate_checksum",
]
