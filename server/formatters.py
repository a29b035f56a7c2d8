"""JSON formatting utilities for routed NMEA data."""

import json

from navsentence.nmea.types import GGAData, RMCData

__all__ = ["format_gga_message", "format_raw_message", "format_rmc_message"]


def format_raw_message(kind: str, sentence: str) -> str:
    """Serialize a raw sentence; line terminators are stripped."""
    return json.dumps({
        "type": "raw",
        "kind": kind,
        "sentence": sentence.strip(),
    })


def format_gga_message(data: GGAData) -> str:
    """Serialize GGA data into a JSON string for WebSocket transmission."""
    return json.dumps({
        "type": "gga",
        "utc_time": data.utc_time,
        "lat": data.latitude_degrees,
        "lon": data.longitude_degrees,
        "alt": data.altitude_meters,
        "fix_quality": int(data.fix_quality),
        "fix_label": data.fix_quality.short_description,
        "num_satellites": data.num_satellites,
        "hdop": data.horizontal_dilution_of_precision,
        "valid": data.valid,
    })


def format_rmc_message(data: RMCData) -> str:
    """Serialize RMC data into a JSON string for WebSocket transmission."""
    return json.dumps({
        "type": "rmc",
        "utc_time": data.utc_time,
        "date": data.date,
        "status": data.status,
        "lat": data.latitude_degrees,
        "lon": data.longitude_degrees,
        "speed_knots": data.speed_knots,
        "course_degrees": data.course_degrees,
        "magnetic_variation": data.magnetic_variation_degrees,
        "magnetic_variation_direction": data.magnetic_variation_direction,
        "mode": data.mode,
        "valid": data.valid,
    })
