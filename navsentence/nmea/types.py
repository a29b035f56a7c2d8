"""NMEA data types for parsed sentences.

This module defines the identifier enums, the GGA fix quality enum and the
dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Frozen dataclasses: a record is published to any number of
       subscribers, possibly on different threads, so it must not change
       after it is built.

    2. Required vs optional fields: values the decoders insist on (position,
       HDOP, altitude...) are plain types. Fields that receivers commonly
       leave empty use ``X | None`` so "no data received" stays distinct from
       "measured zero".

    3. Identifiers include the leading '$': they are compared against the
       exact text preceding the first comma of the raw sentence.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = [
    "FixQuality",
    "GGAData",
    "GGAIdentifier",
    "RMCData",
    "RMCIdentifier",
]


class GGAIdentifier(str, Enum):
    """Identifiers of GGA sentences, one per talker."""

    GNGGA = "$GNGGA"  # combined multi-GNSS solution
    GPGGA = "$GPGGA"  # GPS
    GLGGA = "$GLGGA"  # GLONASS
    GAGGA = "$GAGGA"  # Galileo


class RMCIdentifier(str, Enum):
    """Identifiers of RMC sentences, one per talker."""

    GNRMC = "$GNRMC"
    GPRMC = "$GPRMC"
    GLRMC = "$GLRMC"
    GARMC = "$GARMC"


_FIX_QUALITY_DESCRIPTIONS = {
    0: ("Invalid", "Invalid, no position available."),
    1: ("GPS", "Autonomous GPS fix, no correction data used."),
    2: (
        "DGPS",
        "DGPS fix, using a local DGPS base station or correction service"
        " such as WAAS or EGNOS.",
    ),
    3: ("PPS", "PPS"),
    4: ("RTK Fix", "RTK fix, high accuracy Real Time Kinematic."),
    5: ("RTK Float", "RTK Float, better than DGPS, but not quite RTK Fix."),
    6: ("Estimated", "Estimated fix (dead reckoning)."),
    7: ("Manual Input", "Manual input mode."),
    8: ("Simulation", "Simulation mode."),
    9: (
        "WAAS",
        "WAAS fix (not NMEA standard, but NovAtel receivers report this"
        " instead of a 2).",
    ),
}

_FIX_QUALITY_STRENGTH = {4: 1.0, 5: 0.75, 2: 0.5, 1: 0.25}


class FixQuality(IntEnum):
    """GGA fix quality indicator (field 6)."""

    INVALID = 0
    AUTONOMOUS = 1
    DGPS = 2
    PPS = 3
    RTK = 4
    RTK_FLOAT = 5
    ESTIMATED = 6
    MANUAL_INPUT = 7
    SIMULATION = 8
    WAAS = 9

    @classmethod
    def from_code(cls, code: int) -> "FixQuality":
        """Map a numeric code to a member; unknown codes become ``INVALID``."""
        try:
            return cls(code)
        except ValueError:
            return cls.INVALID

    @property
    def short_description(self) -> str:
        return _FIX_QUALITY_DESCRIPTIONS[self.value][0]

    @property
    def description(self) -> str:
        return _FIX_QUALITY_DESCRIPTIONS[self.value][1]

    @property
    def strength(self) -> float:
        """Fix reliability from 0.0 (no usable fix) to 1.0 (RTK fixed).

        RTK = 1.0, RTK float = 0.75, DGPS = 0.5, autonomous = 0.25; every
        other quality (invalid, estimated, manual, simulation...) is 0.0.
        """
        return _FIX_QUALITY_STRENGTH.get(self.value, 0.0)


@dataclass(frozen=True)
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        utc_time: UTC timestamp in HHMMSS.ss format (e.g., "155642.90").
            None if field was empty.

        latitude_degrees: Latitude in decimal degrees, positive=North.
            Converted from NMEA's DDMM.MMMM format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Converted from NMEA's DDDMM.MMMM format.

        fix_quality: GPS fix quality indicator. Codes the receiver reports
            that have no ``FixQuality`` member are stored as ``INVALID``.

        num_satellites: Number of satellites used in the fix solution (0-255).

        horizontal_dilution_of_precision: HDOP value indicating position
            accuracy. Lower is better (< 1 = ideal, 1-2 = excellent,
            2-5 = good, > 10 = poor).

        altitude_meters: Altitude above mean sea level (MSL) in meters.

    Example:
        >>> gga = parse_gga("$GNGGA,155642.90,6025.8038680,N,01055.0975279,E,2,12,0.59,64.591,M,39.937,M,,*74")
        >>> gga.fix_quality
        <FixQuality.DGPS: 2>
        >>> gga.latitude_degrees
        60.4300644...
    """

    utc_time: str | None
    latitude_degrees: float
    longitude_degrees: float
    fix_quality: FixQuality
    num_satellites: int
    horizontal_dilution_of_precision: float
    altitude_meters: float

    @property
    def valid(self) -> bool:
        """True unless the receiver reports no fix."""
        return self.fix_quality is not FixQuality.INVALID


@dataclass(frozen=True)
class RMCData:
    """Parsed RMC (Recommended Minimum Navigation Information) sentence.

    Attributes:
        utc_time: UTC time of the fix in hhmmss.ss format, None if empty.

        status: Fix status as sent by the receiver: 'A' = active (valid),
            'V' = void. Stored verbatim, not validated. None if empty.

        latitude_degrees: Latitude in decimal degrees, positive=North.

        longitude_degrees: Longitude in decimal degrees, positive=East.

        speed_knots: Speed over ground in knots, None if empty or unparseable.

        course_degrees: Course over ground (true) in degrees, None if empty.
            Receivers usually leave it empty when stationary.

        date: Date of the fix in DDMMYY format, None if empty.

        magnetic_variation_degrees: Magnetic variation in degrees, None if
            empty.

        magnetic_variation_direction: 'E' or 'W', None if empty.

        mode: FAA mode indicator (NMEA 2.3+), e.g. 'A' autonomous,
            'D' differential. None if missing (older receivers).
    """

    utc_time: str | None
    status: str | None
    latitude_degrees: float
    longitude_degrees: float
    speed_knots: float | None
    course_degrees: float | None
    date: str | None
    magnetic_variation_degrees: float | None
    magnetic_variation_direction: str | None
    mode: str | None

    @property
    def valid(self) -> bool:
        """True only if the receiver marked the fix as active ('A')."""
        return self.status == "A"
