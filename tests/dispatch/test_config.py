"""Tests for IdentifierConfig."""

import threading

import pytest

from navsentence.dispatch import IdentifierConfig
from navsentence.nmea import GGAIdentifier, RMCIdentifier


class TestIdentifierConfig:
    """Tests for enabled identifier sets."""

    def test_defaults_enable_everything(self):
        config = IdentifierConfig()
        assert config.gga_identifiers == frozenset(GGAIdentifier)
        assert config.rmc_identifiers == frozenset(RMCIdentifier)

    def test_constructor_accepts_literals(self):
        config = IdentifierConfig(gga_identifiers=["$GPGGA"], rmc_identifiers=[])
        assert config.gga_identifiers == {GGAIdentifier.GPGGA}
        assert config.rmc_identifiers == frozenset()

    def test_replace_with_members_and_literals(self):
        config = IdentifierConfig()
        config.gga_identifiers = [GGAIdentifier.GNGGA, "$GLGGA"]
        assert config.gga_identifiers == {GGAIdentifier.GNGGA, GGAIdentifier.GLGGA}

    def test_unknown_literal_leaves_set_unchanged(self):
        config = IdentifierConfig()
        config.rmc_identifiers = ["$GNRMC"]
        with pytest.raises(ValueError):
            config.rmc_identifiers = ["$GNRMC", "$GBRMC"]
        assert config.rmc_identifiers == {RMCIdentifier.GNRMC}

    def test_wrong_kind_literal_is_rejected(self):
        config = IdentifierConfig()
        with pytest.raises(ValueError):
            config.gga_identifiers = ["$GNRMC"]

    def test_reset(self):
        config = IdentifierConfig(gga_identifiers=[], rmc_identifiers=[])
        config.reset()
        assert config.gga_identifiers == frozenset(GGAIdentifier)
        assert config.rmc_identifiers == frozenset(RMCIdentifier)

    def test_instances_are_independent(self):
        first = IdentifierConfig()
        second = IdentifierConfig()
        first.gga_identifiers = []
        assert second.gga_identifiers == frozenset(GGAIdentifier)

    def test_readers_always_see_a_complete_set(self):
        config = IdentifierConfig()
        small = frozenset({GGAIdentifier.GNGGA})
        full = frozenset(GGAIdentifier)
        stop = threading.Event()
        observed: set[frozenset[GGAIdentifier]] = set()

        def write() -> None:
            for _ in range(2000):
                config.gga_identifiers = small
                config.gga_identifiers = full
            stop.set()

        def read() -> None:
            while not stop.is_set():
                observed.add(config.gga_identifiers)

        readers = [threading.Thread(target=read) for _ in range(4)]
        for reader in readers:
            reader.start()
        write()
        for reader in readers:
            reader.join()

        assert observed <= {small, full}
