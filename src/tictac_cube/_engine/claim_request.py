# Area: Engine
"""
tictac_cube._engine.claim_request — Gated claim record
======================================================

A ClaimRequest lives from the moment the centre cell is activated
until its delayed commit runs or it is cancelled. The claiming player
is fixed at activation; turns may advance while the request waits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .._board.enums import Player


class ClaimPhase(Enum):
    """
    Phases of a gated claim.

    PENDING -> COMMITTED (commit delay elapsed)
    PENDING -> CANCELLED (reset, or game over under the "cancel" policy)
    """
    PENDING = "pending"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass
class ClaimRequest:
    """
    Attributes:
        target_index: The gated cell
        claiming_player: Player captured at activation
        started_at: Clock reading at activation
        generation: Scheduler generation at activation
        phase: Current ClaimPhase
        cancel_reason: Set when the request is cancelled
    """

    target_index: int
    claiming_player: Player
    started_at: float
    generation: int
    phase: ClaimPhase = ClaimPhase.PENDING
    cancel_reason: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.phase is ClaimPhase.PENDING

    def commit(self) -> None:
        self._leave_pending(ClaimPhase.COMMITTED)

    def cancel(self, reason: str) -> None:
        self._leave_pending(ClaimPhase.CANCELLED)
        self.cancel_reason = reason

    def _leave_pending(self, phase: ClaimPhase) -> None:
        if self.phase is not ClaimPhase.PENDING:
            raise ValueError(
                f"Claim request for cell {self.target_index} is already {self.phase.value}"
            )
        self.phase = phase
