"""
tictac_cube — 3x3x3 Tic-Tac-Toe Game Engine
============================================

Two players take turns claiming cells of a 3x3x3 cube; the first to own
all three cells of any of the 49 straight lines wins. The centre cell
(index 13) is gated: activating it starts a claim that commits after a
short delay.

Quick Start:
    from tictac_cube import GameEngine
    engine = GameEngine()
    engine.on_game_ended(print)
    engine.claim_cell(0)
    engine.activate_gated_cell()
    ...
    engine.poll()          # from the frame loop; commits due centre claims

Pointer input:
    bridge = engine.input_bridge(resolve_cell=renderer.pick)
    bridge.pointer_down((x, y), t); bridge.pointer_up((x, y), t)

Terminal game:
    python -m tictac_cube
"""

from .engine import GameEngine
from .snapshot import BoardSnapshot
from ._config import EngineConfig, load_config, build_config
from ._board import (
    Player,
    Occupant,
    Pattern,
    StatusKind,
    GameStatus,
    BoardState,
    WinPatternCatalog,
    PatternKind,
    CENTER_INDEX,
    CELL_COUNT,
    index_of,
    coords_of,
)
from ._engine import (
    TurnManager,
    ClaimProtocol,
    ClaimRequest,
    ClaimPhase,
    CommitScheduler,
    GameLifecycle,
    GameEvent,
)
from ._input import (
    PointerGestureClassifier,
    Click,
    GestureState,
    ClickToClaimBridge,
)
from ._shared import setup_logging
from .errors import (
    TicTacCubeError,
    IllegalMove,
    MoveRejection,
    GatedCellBusy,
    OutOfRange,
    ConfigError,
)
from .types import SnapshotDict, StatusDict

__all__ = [
    # Main classes
    "GameEngine",
    "BoardSnapshot",
    "EngineConfig",
    "load_config",
    "build_config",
    "setup_logging",
    # Board
    "Player",
    "Occupant",
    "Pattern",
    "StatusKind",
    "GameStatus",
    "BoardState",
    "WinPatternCatalog",
    "PatternKind",
    "CENTER_INDEX",
    "CELL_COUNT",
    "index_of",
    "coords_of",
    # Engine
    "TurnManager",
    "ClaimProtocol",
    "ClaimRequest",
    "ClaimPhase",
    "CommitScheduler",
    "GameLifecycle",
    "GameEvent",
    # Input
    "PointerGestureClassifier",
    "Click",
    "GestureState",
    "ClickToClaimBridge",
    # Errors
    "TicTacCubeError",
    "IllegalMove",
    "MoveRejection",
    "GatedCellBusy",
    "OutOfRange",
    "ConfigError",
    # Types
    "SnapshotDict",
    "StatusDict",
]
__version__ = "1.0.0"
