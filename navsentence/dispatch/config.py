"""Runtime configuration of which sentence identifiers are accepted.

Each sentence kind has its own enabled set. The router reads both sets for
every sentence, from many worker threads at once, while configuration callers
may replace them at any time. Sets are stored as frozensets and replaced
wholesale under one lock, so a reader always sees a complete set: either the
one before an update or the one after it.
"""

import threading
from collections.abc import Iterable
from enum import Enum
from typing import TypeVar

from navsentence.nmea.types import GGAIdentifier, RMCIdentifier

__all__ = ["IdentifierConfig"]

E = TypeVar("E", bound=Enum)


def _coerce(identifiers: Iterable[E | str], enum_type: type[E]) -> frozenset[E]:
    """Convert members or their string literals into a frozenset of members.

    Raises:
        ValueError: If a string is not a literal of ``enum_type``.
    """
    return frozenset(enum_type(identifier) for identifier in identifiers)


class IdentifierConfig:
    """Thread-safe enabled-identifier sets for GGA and RMC sentences.

    Both sets default to every known identifier of their kind.

    Example:
        >>> config = IdentifierConfig()
        >>> config.gga_identifiers = [GGAIdentifier.GNGGA, "$GPGGA"]
        >>> sorted(i.value for i in config.gga_identifiers)
        ['$GNGGA', '$GPGGA']
    """

    def __init__(
        self,
        gga_identifiers: Iterable[GGAIdentifier | str] | None = None,
        rmc_identifiers: Iterable[RMCIdentifier | str] | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._gga_identifiers = _coerce(
            GGAIdentifier if gga_identifiers is None else gga_identifiers,
            GGAIdentifier,
        )
        self._rmc_identifiers = _coerce(
            RMCIdentifier if rmc_identifiers is None else rmc_identifiers,
            RMCIdentifier,
        )

    @property
    def gga_identifiers(self) -> frozenset[GGAIdentifier]:
        with self._lock:
            return self._gga_identifiers

    @gga_identifiers.setter
    def gga_identifiers(self, identifiers: Iterable[GGAIdentifier | str]) -> None:
        # Coerce before taking the lock so a bad literal leaves the set as is
        enabled = _coerce(identifiers, GGAIdentifier)
        with self._lock:
            self._gga_identifiers = enabled

    @property
    def rmc_identifiers(self) -> frozenset[RMCIdentifier]:
        with self._lock:
            return self._rmc_identifiers

    @rmc_identifiers.setter
    def rmc_identifiers(self, identifiers: Iterable[RMCIdentifier | str]) -> None:
        enabled = _coerce(identifiers, RMCIdentifier)
        with self._lock:
            self._rmc_identifiers = enabled

    def reset(self) -> None:
        """Re-enable every known identifier for both kinds."""
        with self._lock:
            self._gga_identifiers = frozenset(GGAIdentifier)
            self._rmc_identifiers = frozenset(RMCIdentifier)
