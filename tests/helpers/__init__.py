"""Test helpers for provenance verifier tests.

Helpers:
    FakeHeightClock: Controllable caller identity and logical height
    ProvenanceSources: The five in-memory sources, with seeding helpers

Usage:
    from tests.helpers import FakeHeightClock, ProvenanceSources
"""

from tests.helpers.fake_height_clock import FakeHeightClock
from tests.helpers.provenance_sources import ProvenanceSources

__all__ = ["FakeHeightClock", "ProvenanceSources"]
