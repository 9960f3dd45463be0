from __future__ import annotations

import copy
import logging
import random
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import UnknownPlayerError
from .hand import Hand
from .move import Event
from .path import Path
from .rules import Ruleset
from .tiles import Domino, iter_full_set

logger = logging.getLogger(__name__)


class TurnPhase(str, Enum):
    AWAITING_ACTION = "AWAITING_ACTION"
    DRAWN = "DRAWN"
    PLAYED = "PLAYED"
    DOUBLE_TO_RESOLVE = "DOUBLE_TO_RESOLVE"


@dataclass
class Player:
    id: str
    path_index: int
    hand: Hand = field(default_factory=Hand)
    knocked: bool = False

    def display(self) -> str:
        result = "YOUR HAND:"
        for i, domino in enumerate(self.hand):
            result += f" {i}:{domino.display()}"
        return result

    def emoji_hand(self) -> str:
        return "Your hand: " + ", ".join(f"{i}: {d.emoji()}" for i, d in enumerate(self.hand))


@dataclass
class GameState:
    ruleset: Ruleset
    players: List[Player]
    paths: List[Path]
    pool: List[Domino]
    center: Optional[Domino] = None
    dangling_path: Optional[int] = None
    active_player: int = 0
    phase: TurnPhase = TurnPhase.AWAITING_ACTION
    game_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    rng_seed: Optional[int] = None
    event_log: List[Event] = field(default_factory=list)

    def copy(self) -> "GameState":
        return copy.deepcopy(self)

    def get_active_player(self) -> Player:
        return self.players[self.active_player]

    def get_player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise UnknownPlayerError(player_id)

    def path_of(self, player: Player) -> Path:
        return self.paths[player.path_index]

    def mexican_path(self) -> Path:
        return self.paths[-1]

    def is_unresolved(self, path_index: int) -> bool:
        return self.dangling_path == path_index

    def tile_count(self) -> int:
        in_hands = sum(len(p.hand) for p in self.players)
        on_paths = sum(path.tile_count() for path in self.paths)
        return len(self.pool) + in_hands + on_paths + (1 if self.center is not None else 0)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe view of the board. Pool order and hand contents stay private."""
        return {
            "game_id": self.game_id,
            "center": None if self.center is None else [self.center.left, self.center.right],
            "paths": [
                {
                    "owner": path.owner,
                    "train": path.train,
                    "mexican": path.mexican,
                    "unresolved_double": self.is_unresolved(i),
                    "elements": [
                        {"left": e.left, "right": e.right, "flipped": e.flipped} for e in path.elements
                    ],
                }
                for i, path in enumerate(self.paths)
            ],
            "players": [
                {"id": p.id, "hand_size": len(p.hand), "knocked": p.knocked} for p in self.players
            ],
            "active_player": self.get_active_player().id,
            "phase": self.phase.value,
            "unresolved_double": self.dangling_path is not None,
            "pool_size": len(self.pool),
        }


def _pick_center(
    players: Sequence[Player], pool: List[Domino]
) -> Tuple[Optional[Domino], Optional[int], Optional[int]]:
    """Find the starting double: (domino, player index or None, hand index or None)."""
    best: Optional[Domino] = None
    starter: Optional[int] = None
    hand_index: Optional[int] = None
    for i, player in enumerate(players):
        for j, domino in enumerate(player.hand):
            if domino.is_double() and (best is None or domino.left > best.left):
                best, starter, hand_index = domino, i, j
    if best is not None:
        return best, starter, hand_index
    doubles = [d for d in pool if d.is_double()]
    if not doubles:
        return None, None, None
    return max(doubles, key=lambda d: d.left), None, None


def new_game(
    player_ids: Sequence[str], ruleset: Ruleset | None = None, rng_seed: Optional[int] = None
) -> GameState:
    if not player_ids:
        raise ValueError("a game needs at least one player")
    if len(set(player_ids)) != len(player_ids):
        raise ValueError("player ids must be unique")

    ruleset = ruleset or Ruleset()
    rng = random.Random(rng_seed)
    num_players = len(player_ids)

    pool = list(iter_full_set(ruleset.max_pip(num_players)))
    rng.shuffle(pool)

    players = [Player(id=pid, path_index=i) for i, pid in enumerate(player_ids)]
    paths = [Path(owner=pid) for pid in player_ids]
    paths.append(Path.mexican_path())

    hand_size = ruleset.hand_size(num_players)
    if hand_size * num_players > len(pool):
        raise ValueError(f"not enough tiles to deal {hand_size} to {num_players} players")
    for player in players:
        player.hand = Hand.from_iterable(pool[:hand_size])
        del pool[:hand_size]

    center, starter, hand_index = _pick_center(players, pool)
    if starter is not None:
        _, players[starter].hand = players[starter].hand.remove(hand_index)
    elif center is not None:
        pool.remove(center)

    state = GameState(
        ruleset=ruleset,
        players=players,
        paths=paths,
        pool=pool,
        center=center,
        active_player=starter or 0,
        rng_seed=rng_seed,
    )
    logger.info(
        "new game %s: %d players, center %s, %s starts",
        state.game_id,
        num_players,
        None if center is None else center.display(),
        state.get_active_player().id,
    )
    return state
