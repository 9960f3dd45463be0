"""Mexican Train dominoes rules engine package."""

from .rules import Ruleset
from .tiles import Domino, Element
from .hand import Hand
from .path import Path
from .state import GameState, Player, TurnPhase, new_game
from .move import Action, Event, Response
from .engine import can_place, draw, is_legal_play, knock, next_turn, place, playable_moves
from .events import handle_event, replay_event_log

__all__ = [
    "Ruleset",
    "Domino",
    "Element",
    "Hand",
    "Path",
    "GameState",
    "Player",
    "TurnPhase",
    "Action",
    "Event",
    "Response",
    "new_game",
    "can_place",
    "place",
    "draw",
    "knock",
    "next_turn",
    "is_legal_play",
    "playable_moves",
    "handle_event",
    "replay_event_log",
]
