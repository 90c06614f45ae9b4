# Area: Engine Tests
"""Tests for ClaimProtocol — ordinary claims and the gated centre cell."""

import pytest

from tictac_cube import CENTER_INDEX, ClaimPhase, GameEvent, Player, StatusKind
from tictac_cube.errors import GatedCellBusy, IllegalMove, MoveRejection


def _record(engine):
    """Record every event published by the engine, in order."""
    recorded = []
    for event in GameEvent:
        engine.events.subscribe(event, lambda payload, event=event: recorded.append((event, payload)))
    return recorded


def _play(engine, *cells):
    for index in cells:
        engine.claim_cell(index)


class TestOrdinaryClaim:
    """Tests for synchronous claims."""

    def test_claim_uses_player_to_move(self, engine):
        engine.claim_cell(0)
        engine.claim_cell(1)
        assert engine.occupant_at(0) is Player.ONE
        assert engine.occupant_at(1) is Player.TWO
        assert engine.current_player is Player.ONE

    def test_centre_cannot_be_claimed_directly(self, engine):
        with pytest.raises(IllegalMove) as exc_info:
            engine.claim_cell(CENTER_INDEX)
        assert exc_info.value.reason is MoveRejection.GATED_CELL
        assert engine.occupant_at(CENTER_INDEX) is None
        assert engine.current_player is Player.ONE

    def test_out_of_range_rejected(self, engine):
        with pytest.raises(IllegalMove) as exc_info:
            engine.claim_cell(27)
        assert exc_info.value.reason is MoveRejection.OUT_OF_RANGE

    def test_game_over_checked_before_gated_cell(self, engine):
        _play(engine, 0, 9, 1, 10, 2)
        with pytest.raises(IllegalMove) as exc_info:
            engine.claim_cell(CENTER_INDEX)
        assert exc_info.value.reason is MoveRejection.GAME_OVER


class TestGatedActivation:
    """Tests for activate()."""

    def test_activation_opens_pending_request(self, engine, clock):
        recorded = _record(engine)
        request = engine.activate_gated_cell()

        assert request.target_index == CENTER_INDEX
        assert request.claiming_player is Player.ONE
        assert request.phase is ClaimPhase.PENDING
        assert request.started_at == clock.now
        assert engine.pending_request is request
        assert engine.claims.commit_due_at == clock.now + 1000
        # Nothing is recorded until the commit
        assert engine.occupant_at(CENTER_INDEX) is None
        assert engine.current_player is Player.ONE
        assert recorded == [(GameEvent.GATED_PENDING, request)]

    def test_second_activation_is_busy(self, engine):
        engine.activate_gated_cell()
        with pytest.raises(GatedCellBusy) as exc_info:
            engine.activate_gated_cell()
        assert exc_info.value.pending_player is Player.ONE

    def test_busy_reported_before_turn_check(self, engine):
        engine.activate_gated_cell()
        with pytest.raises(GatedCellBusy):
            engine.activate_gated_cell(Player.TWO)

    def test_waiting_player_cannot_activate(self, engine):
        with pytest.raises(IllegalMove) as exc_info:
            engine.activate_gated_cell(Player.TWO)
        assert exc_info.value.reason is MoveRejection.NOT_YOUR_TURN
        assert engine.pending_request is None
        assert engine.scheduler.pending_count() == 0

    def test_waiting_player_may_activate_when_turn_not_required(self, make_engine):
        engine = make_engine(gated_requires_turn=False)
        request = engine.activate_gated_cell(Player.TWO)
        assert request.claiming_player is Player.TWO

    def test_occupied_centre_rejected(self, engine, take_centre):
        take_centre(engine)
        with pytest.raises(IllegalMove) as exc_info:
            engine.activate_gated_cell()
        assert exc_info.value.reason is MoveRejection.OCCUPIED

    def test_activation_after_game_over_rejected(self, engine):
        _play(engine, 0, 9, 1, 10, 2)
        with pytest.raises(IllegalMove) as exc_info:
            engine.activate_gated_cell()
        assert exc_info.value.reason is MoveRejection.GAME_OVER


class TestGatedCommit:
    """Tests for the delayed commit."""

    def test_commit_waits_for_delay(self, engine, clock):
        engine.activate_gated_cell()
        clock.advance(999)
        assert engine.poll() == 0
        assert engine.occupant_at(CENTER_INDEX) is None

        clock.advance(1)
        assert engine.poll() == 1
        assert engine.occupant_at(CENTER_INDEX) is Player.ONE
        assert engine.pending_request is None
        assert engine.claims.last_request.phase is ClaimPhase.COMMITTED

    def test_commit_passes_turn(self, engine, clock):
        recorded = _record(engine)
        request = engine.activate_gated_cell()
        clock.advance(1000)
        engine.poll()

        assert engine.current_player is Player.TWO
        assert recorded == [
            (GameEvent.GATED_PENDING, request),
            (GameEvent.TURN_CHANGED, Player.TWO),
            (GameEvent.GATED_COMMITTED, request),
        ]

    def test_configured_delay(self, make_engine, clock):
        engine = make_engine(commit_delay_ms=250)
        engine.activate_gated_cell()
        clock.advance(249)
        engine.poll()
        assert engine.occupant_at(CENTER_INDEX) is None
        clock.advance(1)
        engine.poll()
        assert engine.occupant_at(CENTER_INDEX) is Player.ONE

    def test_other_cells_claimable_while_pending(self, engine, clock):
        engine.activate_gated_cell()
        _play(engine, 0, 1)
        assert engine.occupant_at(0) is Player.ONE
        assert engine.occupant_at(1) is Player.TWO
        assert engine.pending_request is not None

    def test_commit_uses_captured_player(self, engine, clock):
        engine.activate_gated_cell()
        # Player one moves again, then player two; player one is to move
        _play(engine, 0, 1)
        assert engine.current_player is Player.ONE
        engine.claim_cell(2)
        assert engine.current_player is Player.TWO

        clock.advance(1000)
        engine.poll()
        assert engine.occupant_at(CENTER_INDEX) is Player.ONE
        assert engine.current_player is Player.TWO

    def test_commit_can_win(self, engine, clock):
        ended = []
        engine.on_game_ended(ended.append)
        # Player one: 0 and 26, player two: 1 and 3
        _play(engine, 0, 1, 26, 3)
        engine.activate_gated_cell()
        assert engine.status.kind is StatusKind.IN_PROGRESS

        clock.advance(1000)
        engine.poll()
        assert engine.status.kind is StatusKind.WON
        assert engine.status.winner is Player.ONE
        assert engine.status.pattern == (0, 13, 26)
        assert ended == [engine.status]


class TestPendingWhenGameEnds:
    """Tests for the pending_on_game_end policy."""

    def _win_while_pending(self, engine):
        # One: 0, 1 / Two: 9, activates the centre, 10 / One: 2 wins
        _play(engine, 0, 9, 1)
        request = engine.activate_gated_cell()
        assert request.claiming_player is Player.TWO
        _play(engine, 10, 2)
        assert engine.status.winner is Player.ONE
        return request

    def test_cancel_policy_cancels_pending_claim(self, engine, clock):
        cancelled = []
        engine.on_gated_cancelled(cancelled.append)
        request = self._win_while_pending(engine)

        assert request.phase is ClaimPhase.CANCELLED
        assert request.cancel_reason == "game_over"
        assert cancelled == [request]
        assert engine.pending_request is None

        clock.advance(1000)
        assert engine.poll() == 0
        assert engine.occupant_at(CENTER_INDEX) is None

    def test_commit_policy_records_after_end(self, make_engine, clock):
        engine = make_engine(pending_on_game_end="commit")
        request = self._win_while_pending(engine)
        status = engine.status
        assert request.is_pending

        recorded = _record(engine)
        clock.advance(1000)
        engine.poll()

        assert engine.occupant_at(CENTER_INDEX) is Player.TWO
        assert request.phase is ClaimPhase.COMMITTED
        assert engine.status == status
        assert recorded == [(GameEvent.GATED_COMMITTED, request)]


class TestObserversSeeSettledState:
    """Listeners run after the engine state is consistent."""

    def _centre_wins_for_one(self, engine):
        # One: 0 and 26, two: 1 and 3, one activates the centre
        _play(engine, 0, 1, 26, 3)
        return engine.activate_gated_cell()

    def test_committed_listener_sees_passed_turn(self, engine, clock):
        seen = []
        engine.on_gated_committed(lambda request: seen.append(engine.snapshot()))
        engine.activate_gated_cell()
        clock.advance(1000)
        engine.poll()

        assert len(seen) == 1
        assert seen[0].occupant_at(CENTER_INDEX) is Player.ONE
        assert seen[0].current_player is Player.TWO

    def test_committed_listener_sees_win(self, engine, clock):
        seen = []
        engine.on_gated_committed(lambda request: seen.append(engine.status))
        self._centre_wins_for_one(engine)
        clock.advance(1000)
        engine.poll()
        assert seen[0].winner is Player.ONE
        assert seen[0].pattern == (0, 13, 26)

    def test_failing_committed_listener_does_not_skip_evaluation(self, engine, clock):
        def broken(request):
            raise RuntimeError("listener failed")

        engine.on_gated_committed(broken)
        self._centre_wins_for_one(engine)
        clock.advance(1000)
        with pytest.raises(RuntimeError):
            engine.poll()
        assert engine.status.kind is StatusKind.WON
        assert engine.status.pattern == (0, 13, 26)

    def test_game_ended_listener_sees_cancelled_centre(self, engine):
        seen = []
        engine.on_game_ended(lambda status: seen.append(engine.snapshot()))
        recorded = _record(engine)
        _play(engine, 0, 9, 1)
        request = engine.activate_gated_cell()
        _play(engine, 10, 2)

        assert seen[0].pending_gated_player is None
        assert recorded[-2:] == [
            (GameEvent.GATED_CANCELLED, request),
            (GameEvent.GAME_ENDED, engine.status),
        ]

    def test_failing_game_ended_listener_still_cancels_centre(self, engine, clock):
        def broken(status):
            raise RuntimeError("listener failed")

        _play(engine, 0, 9, 1)
        request = engine.activate_gated_cell()
        engine.claim_cell(10)
        engine.on_game_ended(broken)
        with pytest.raises(RuntimeError):
            engine.claim_cell(2)

        assert request.phase is ClaimPhase.CANCELLED
        assert request.cancel_reason == "game_over"
        clock.advance(1000)
        assert engine.poll() == 0
        assert engine.occupant_at(CENTER_INDEX) is None


class TestResetWithPendingClaim:
    """Tests for reset() cancelling the gated claim."""

    def test_reset_cancels_pending(self, engine, clock):
        cancelled = []
        engine.on_gated_cancelled(cancelled.append)
        request = engine.activate_gated_cell()
        engine.reset_game()

        assert request.phase is ClaimPhase.CANCELLED
        assert request.cancel_reason == "reset"
        assert cancelled == [request]
        assert engine.pending_request is None

        clock.advance(5000)
        assert engine.poll() == 0
        assert engine.snapshot().board == (None,) * 27

    def test_stale_callback_is_a_no_op(self, engine, clock):
        engine.activate_gated_cell()
        stale_task = engine.claims._task
        engine.reset_game()

        # Fire the old callback by hand, as a leaked timer would
        stale_task.callback()
        assert engine.occupant_at(CENTER_INDEX) is None
        assert engine.current_player is Player.ONE

    def test_stale_callback_does_not_commit_new_request(self, engine, clock):
        engine.activate_gated_cell()
        stale_task = engine.claims._task
        engine.reset_game()
        fresh = engine.activate_gated_cell()

        stale_task.callback()
        assert fresh.is_pending
        assert engine.occupant_at(CENTER_INDEX) is None

        clock.advance(1000)
        engine.poll()
        assert fresh.phase is ClaimPhase.COMMITTED
        assert engine.occupant_at(CENTER_INDEX) is Player.ONE

    def test_reset_without_pending_emits_no_cancel(self, engine):
        cancelled = []
        engine.on_gated_cancelled(cancelled.append)
        engine.reset_game()
        assert cancelled == []
