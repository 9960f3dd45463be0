from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import GameState

# Message templates. Placeholders are substituted by the presentation layer.
KNOCK_SUCCESSFUL_MSG = "$EVENT_PLAYER_NAME has only one tile left!"
CANNOT_KNOCK_MSG = "You cannot knock, you have more than one tile in your hand"
OUT_OF_TILES_MSG = "Out of tiles, can't draw"
ALREADY_DRAWN_MSG = "You have already drawn a tile this turn"
DREW_TILE_MSG = "$EVENT_PLAYER_NAME has drawn a tile"
MUST_RESOLVE_DOUBLE_MSG = "You must resolve this double if you can"
PLAY_SUCCESSFUL_MSG = "$EVENT_PLAYER_NAME has played $DOMINO on $PATH_ID_OWNER"
MUST_TRY_DRAWING_MSG = "You must try to draw a tile and see if that works before ending your turn"
SETTING_TRAIN_MSG = "Setting train on $EVENT_PLAYER_NAME"
NO_KNOCK_PENALTY_MSG = "$CURRENT_PLAYER has drawn two tiles for not knocking when they had one tile left"
CAN_PLACE_MSG = "you can place tile {tile} ({hand_index}) in your hand on path {path_index}"


class Action(str, Enum):
    END_TURN = "END_TURN"
    PLAY_DOMINO = "PLAY_DOMINO"
    DRAW_DOMINO = "DRAW_DOMINO"
    KNOCK = "KNOCK"


@dataclass(frozen=True)
class Event:
    """A single user intent. ``player_id`` must come from the trusted caller."""

    action: Action
    player_id: str
    path_index: int = 0
    hand_index: int = 0

    @staticmethod
    def play(player_id: str, hand_index: int, path_index: int) -> "Event":
        return Event(Action.PLAY_DOMINO, player_id, path_index=path_index, hand_index=hand_index)

    @staticmethod
    def draw(player_id: str) -> "Event":
        return Event(Action.DRAW_DOMINO, player_id)

    @staticmethod
    def knock(player_id: str) -> "Event":
        return Event(Action.KNOCK, player_id)

    @staticmethod
    def end_turn(player_id: str) -> "Event":
        return Event(Action.END_TURN, player_id)


@dataclass
class Response:
    player_id: str
    state: Optional["GameState"] = None
    success: bool = False
    global_message: str = ""
    user_message: str = ""
    end_of_turn: bool = False

    def add_global(self, message: str) -> None:
        self.global_message = f"{self.global_message}\n{message}" if self.global_message else message

    def add_user(self, message: str) -> None:
        self.user_message = f"{self.user_message}\n{message}" if self.user_message else message
