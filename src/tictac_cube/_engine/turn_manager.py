# Area: Engine
"""
tictac_cube._engine.turn_manager — Whose turn it is
===================================================
"""

from __future__ import annotations

import logging

from .._board.enums import Player

logger = logging.getLogger("tictac_cube.turns")


class TurnManager:
    """Tracks the player to move."""

    def __init__(self, initial_player: Player = Player.ONE) -> None:
        self.initial_player = initial_player
        self._current = initial_player

    @property
    def current(self) -> Player:
        return self._current

    def switch(self) -> Player:
        return self.pass_turn(self._current)

    def pass_turn(self, after: Player) -> Player:
        """Hand the turn to the opponent of the player who just moved."""
        self._current = after.opponent()
        logger.debug("Turn -> %s", self._current.label)
        return self._current

    def reset(self) -> None:
        self._current = self.initial_player
