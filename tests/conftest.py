"""Shared fixtures: drawing surfaces, sessions, sample geometry and log capture."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest
from loguru import logger

from geodraw.editor.session import DrawSession
from geodraw.editor.surface import InMemoryDrawingSurface
from geodraw.geometry.features import DrawFeature, Geometry

if TYPE_CHECKING:
    from collections.abc import Generator

# ~111 m x 111 m near the equator
SQUARE_RING = [[0.0, 0.0], [0.001, 0.0], [0.001, 0.001], [0.0, 0.001], [0.0, 0.0]]
BOWTIE_RING = [[0.0, 0.0], [0.001, 0.001], [0.001, 0.0], [0.0, 0.001], [0.0, 0.0]]


@contextmanager
def capture_logs() -> Generator[list[str], None, None]:
    """Collect ``LEVEL:message`` strings emitted through loguru."""
    messages: list[str] = []

    def _sink(msg):
        messages.append(f"{msg.record['level'].name}:{msg.record['message']}")

    sink_id = logger.add(_sink, level="DEBUG")
    try:
        yield messages
    finally:
        logger.remove(sink_id)


@pytest.fixture
def logs() -> Generator[list[str], None, None]:
    with capture_logs() as messages:
        yield messages


@pytest.fixture
def square_feature() -> DrawFeature:
    return DrawFeature(geometry=Geometry.polygon([SQUARE_RING]), id="square")


@pytest.fixture
def bowtie_feature() -> DrawFeature:
    return DrawFeature(geometry=Geometry.polygon([BOWTIE_RING]), id="bowtie")


@pytest.fixture
def point_feature() -> DrawFeature:
    return DrawFeature(geometry=Geometry.point(13.4, 52.5), id="point")


@pytest.fixture
def surface() -> InMemoryDrawingSurface:
    return InMemoryDrawingSurface()


@pytest.fixture
def session(surface: InMemoryDrawingSurface) -> DrawSession:
    return DrawSession(surface)


def polygon(ring: list[list[float]], feature_id: str | None = "p") -> DrawFeature:
    """Polygon feature with a single outer ring."""
    return DrawFeature(geometry=Geometry.polygon([ring]), id=feature_id)


def shifted_square(offset: float, feature_id: str = "square") -> DrawFeature:
    """The sample square moved east by ``offset`` degrees."""
    return polygon([[lng + offset, lat] for lng, lat in SQUARE_RING], feature_id)
