# Area: Test Fixtures
"""Shared fixtures: a controllable clock and engines built on it."""

import logging

import pytest

from tictac_cube import GameEngine, EngineConfig, CENTER_INDEX


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock(start=10_000.0)


@pytest.fixture
def engine(clock):
    return GameEngine(clock=clock)


@pytest.fixture
def make_engine(clock):
    """Build an engine on the shared clock with config overrides."""

    def _make(**overrides):
        return GameEngine(config=EngineConfig(**overrides), clock=clock)

    return _make


@pytest.fixture
def take_centre(clock):
    """Activate the centre for the player to move and run the commit."""

    def _take(engine):
        request = engine.activate_gated_cell()
        clock.advance(engine.config.commit_delay_ms)
        engine.poll()
        assert engine.occupant_at(CENTER_INDEX) is request.claiming_player
        return request

    return _take


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    pkg_logger = logging.getLogger("tictac_cube")
    handlers = list(pkg_logger.handlers)
    level, propagate = pkg_logger.level, pkg_logger.propagate
    yield
    for handler in pkg_logger.handlers:
        if handler not in handlers:
            handler.close()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
