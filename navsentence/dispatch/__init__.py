"""Concurrent routing of raw NMEA text to decoders and subscribers."""

from navsentence.dispatch.channel import EventChannel
from navsentence.dispatch.config import IdentifierConfig
from navsentence.dispatch.router import SentenceRouter, split_batch

__all__ = ["EventChannel", "IdentifierConfig", "SentenceRouter", "split_batch"]
