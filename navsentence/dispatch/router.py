"""SentenceRouter: routes raw NMEA text to decoders and publishes the results.

Routing strategy:
    A batch of concatenated sentences is split on '$'. Every candidate is
    handled independently on a thread pool: its identifier (the text before
    the first comma) is looked up in the currently enabled GGA set, then in
    the enabled RMC set. The first match picks the decoder. On success the raw
    sentence and then the decoded record are published on that kind's two
    channels.

Failure policy:
    Nothing raised while decoding one sentence reaches the caller or affects
    the other sentences of the batch. Unknown sentences and decode failures
    are logged and dropped: at DEBUG level normally, at INFO/WARNING level
    when ``verbose`` is set.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any

from navsentence.dispatch.channel import EventChannel
from navsentence.dispatch.config import IdentifierConfig
from navsentence.nmea.errors import NMEAParseError
from navsentence.nmea.gga import parse_gga
from navsentence.nmea.rmc import parse_rmc
from navsentence.nmea.types import GGAData, GGAIdentifier, RMCData, RMCIdentifier

__all__ = ["SentenceRouter", "split_batch"]

logger = logging.getLogger(__name__)

_SENTENCE_START = "$"


def split_batch(batch: str) -> list[str]:
    """Split a multi-sentence buffer into individual candidate sentences.

    Empty segments (e.g. before a leading '$') are discarded and the '$'
    start marker is put back on every remaining segment.

    Example:
        >>> split_batch("$GNGGA,...*74\\r\\n$GNRMC,...*1B")
        ['$GNGGA,...*74\\r\\n', '$GNRMC,...*1B']
    """
    return [
        _SENTENCE_START + segment
        for segment in batch.split(_SENTENCE_START)
        if segment
    ]


def _leading_identifier(sentence: str) -> str:
    return sentence.partition(",")[0]


def _is_enabled(
    sentence: str,
    enum_type: type[Enum],
    enabled: frozenset[Any],
) -> bool:
    try:
        identifier = enum_type(_leading_identifier(sentence))
    except ValueError:
        return False
    return identifier in enabled


@dataclass(frozen=True)
class _Route:
    """Everything the router needs to handle one sentence kind."""

    kind: str
    parse: Callable[[str], Any]
    raw_channel: EventChannel[str]
    data_channel: EventChannel[Any]


class SentenceRouter:
    """Decode raw NMEA text and broadcast the results.

    One router is created per process (or per test); it owns its identifier
    configuration and its output channels, so nothing is shared implicitly.

    Output channels:
        raw_gga_channel / gga_channel: raw text and ``GGAData`` of every
            successfully decoded GGA sentence.
        raw_rmc_channel / rmc_channel: same for RMC / ``RMCData``.

    Publishing happens on the worker thread that decoded the sentence. For a
    single sentence the raw text is always published before its record; no
    ordering is guaranteed between sentences of one batch.

    Example:
        >>> router = SentenceRouter()
        >>> unsubscribe = router.gga_channel.subscribe(
        ...     lambda gga: print(gga.fix_quality.name)
        ... )
        >>> router.dispatch(
        ...     "$GNGGA,155642.90,6025.8038680,N,01055.0975279,E,2,12,0.59,64.591,M,39.937,M,,*74"
        ... )
        DGPS

    Args:
        config: Enabled identifier sets. A fresh ``IdentifierConfig`` with
            every identifier enabled is created when omitted.
        max_workers: Upper bound of worker threads per batch; defaults to
            the ``ThreadPoolExecutor`` default.
        verbose: Log dropped sentences at INFO/WARNING instead of DEBUG.
    """

    def __init__(
        self,
        config: IdentifierConfig | None = None,
        max_workers: int | None = None,
        verbose: bool = False,
    ) -> None:
        self.config = config if config is not None else IdentifierConfig()
        self.verbose = verbose
        self._max_workers = max_workers

        self.raw_gga_channel: EventChannel[str] = EventChannel("raw_gga")
        self.gga_channel: EventChannel[GGAData] = EventChannel("gga")
        self.raw_rmc_channel: EventChannel[str] = EventChannel("raw_rmc")
        self.rmc_channel: EventChannel[RMCData] = EventChannel("rmc")

        self._gga_route = _Route(
            "GGA", parse_gga, self.raw_gga_channel, self.gga_channel
        )
        self._rmc_route = _Route(
            "RMC", parse_rmc, self.raw_rmc_channel, self.rmc_channel
        )

    # --- routing ----------------------------------------------------------

    def is_supported_gga_sentence(self, sentence: str) -> bool:
        """True if the sentence starts with a currently enabled GGA identifier."""
        return _is_enabled(sentence, GGAIdentifier, self.config.gga_identifiers)

    def is_supported_rmc_sentence(self, sentence: str) -> bool:
        """True if the sentence starts with a currently enabled RMC identifier."""
        return _is_enabled(sentence, RMCIdentifier, self.config.rmc_identifiers)

    def _resolve_verbose(self, verbose: bool | None) -> bool:
        return self.verbose if verbose is None else verbose

    def _process(self, route: _Route, sentence: str, verbose: bool) -> Any:
        try:
            parsed = route.parse(sentence)
        except NMEAParseError as e:
            logger.log(
                logging.WARNING if verbose else logging.DEBUG,
                "Error parsing %s sentence %r: %s",
                route.kind,
                sentence,
                e,
            )
            return None

        route.raw_channel.publish(sentence)
        route.data_channel.publish(parsed)
        return parsed

    def process_gga_sentence(
        self, sentence: str, verbose: bool | None = None
    ) -> GGAData | None:
        """Decode one GGA sentence and publish it on success.

        Returns:
            The decoded record, or None if decoding failed (the failure is
            logged, never raised).
        """
        return self._process(
            self._gga_route, sentence, self._resolve_verbose(verbose)
        )

    def process_rmc_sentence(
        self, sentence: str, verbose: bool | None = None
    ) -> RMCData | None:
        """Decode one RMC sentence and publish it on success."""
        return self._process(
            self._rmc_route, sentence, self._resolve_verbose(verbose)
        )

    def _route_sentence(self, sentence: str, verbose: bool) -> None:
        # GGA is consulted first; the two kinds never share an identifier
        if self.is_supported_gga_sentence(sentence):
            self._process(self._gga_route, sentence, verbose)
        elif self.is_supported_rmc_sentence(sentence):
            self._process(self._rmc_route, sentence, verbose)
        else:
            logger.log(
                logging.INFO if verbose else logging.DEBUG,
                "Unsupported sentence type: %r",
                sentence,
            )

    def _route_sentence_safely(self, sentence: str, verbose: bool) -> None:
        # Futures are never inspected, so anything raised here would be lost
        try:
            self._route_sentence(sentence, verbose)
        except Exception:
            logger.exception("Unexpected error routing sentence %r", sentence)

    # --- public entry points ---------------------------------------------

    def dispatch(self, batch: str, verbose: bool | None = None) -> None:
        """Route every sentence of a batch concurrently.

        Returns once all sentences have been handled. Never raises for bad
        input: malformed and unknown sentences are dropped.

        Args:
            batch: One sentence, or several concatenated sentences.
            verbose: Overrides the router's ``verbose`` for this call.
        """
        sentences = split_batch(batch)
        if not sentences:
            return

        resolved = self._resolve_verbose(verbose)
        # Leaving the block only joins the workers; results are not collected
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            for sentence in sentences:
                executor.submit(self._route_sentence_safely, sentence, resolved)

    def dispatch_bytes(
        self,
        data: bytes | None,
        encoding: str = "ascii",
        verbose: bool | None = None,
    ) -> None:
        """Decode a byte buffer and dispatch it.

        A buffer that cannot be decoded with ``encoding`` is dropped as a
        whole; no partially decoded text is ever routed.
        """
        if data is None:
            return

        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            level = logging.WARNING if self._resolve_verbose(verbose) else logging.DEBUG
            logger.log(
                level,
                "Dropping %d bytes not decodable as %s: %s",
                len(data),
                encoding,
                e,
            )
            return

        self.dispatch(text, verbose)
