"""Sentences and record factories for server tests."""

from navsentence.nmea import FixQuality, GGAData, RMCData

GGA_SENTENCE = "$GNGGA,155642.90,6025.8038680,N,01055.0975279,E,2,12,0.59,64.591,M,39.937,M,,*74"
GPGGA_SENTENCE = "$GPGGA,123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,*65"
RMC_SENTENCE = "$GNRMC,180201.80,A,6325.8068737,N,01025.0920747,E,0.074,,140225,,,A,V*1B"
BAD_CHECKSUM_SENTENCE = "$GNGGA,155642.90,6025.8038680,N,01055.0975279,E,3,12,0.59,64.591,M,39.937,M,,*74"


def make_gga(fix_quality: FixQuality = FixQuality.AUTONOMOUS) -> GGAData:
    return GGAData(
        utc_time="120000.00",
        latitude_degrees=45.0,
        longitude_degrees=9.0,
        fix_quality=fix_quality,
        num_satellites=8,
        horizontal_dilution_of_precision=1.0,
        altitude_meters=100.0,
    )


def make_rmc(status: str = "A") -> RMCData:
    return RMCData(
        utc_time="120000.00",
        status=status,
        latitude_degrees=45.0,
        longitude_degrees=9.0,
        speed_knots=4.5,
        course_degrees=None,
        date="140225",
        magnetic_variation_degrees=None,
        magnetic_variation_direction=None,
        mode="A",
    )
