from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .errors import (
    DanglingDoubleError,
    DominoError,
    DontOwnPathError,
    InvalidPathIndexError,
    NotPlayableError,
    PoolExhaustedError,
)
from .move import NO_KNOCK_PENALTY_MSG
from .state import GameState, Player, TurnPhase
from .tiles import Domino, Element

logger = logging.getLogger(__name__)


def check_path_index(state: GameState, path_index: int) -> None:
    if path_index < 0 or path_index >= len(state.paths):
        raise InvalidPathIndexError(path_index, len(state.paths))


def can_place(state: GameState, player: Player, domino: Domino, path_index: int) -> Element:
    """Return the element ``domino`` would become on the path, or raise why it cannot go there."""
    check_path_index(state, path_index)
    target = state.paths[path_index]

    if not target.open_to(player.id):
        raise DontOwnPathError()
    if state.dangling_path is not None and state.dangling_path != path_index:
        raise DanglingDoubleError()
    if not target.accepts(domino, state.center):
        raise NotPlayableError()
    return target.element_for(domino, state.center)


def place(state: GameState, player: Player, domino: Domino, path_index: int) -> Element:
    element = can_place(state, player, domino, path_index)
    target = state.paths[path_index]
    target.append(element)

    if target.owner == player.id and target.train:
        target.train = False

    if domino.is_double():
        state.dangling_path = path_index
    elif state.dangling_path == path_index:
        state.dangling_path = None

    logger.debug("%s placed %s on path %d", player.id, domino.display(), path_index)
    return element


def is_legal_play(state: GameState, player: Player, domino: Domino, path_index: int) -> Tuple[bool, str]:
    try:
        can_place(state, player, domino, path_index)
    except DominoError as exc:
        return False, str(exc)
    return True, ""


def playable_moves(state: GameState, player: Player) -> List[Tuple[int, Domino, int]]:
    """Every (hand index, domino, path index) the player could legally play right now."""
    moves: List[Tuple[int, Domino, int]] = []
    for hand_index, domino in enumerate(player.hand):
        for path_index in range(len(state.paths)):
            legal, _ = is_legal_play(state, player, domino, path_index)
            if legal:
                moves.append((hand_index, domino, path_index))
    return moves


def draw(state: GameState, player: Player) -> Domino:
    if not state.pool:
        raise PoolExhaustedError()
    domino = state.pool.pop(0)
    player.hand = player.hand.add(domino)
    if len(player.hand) > 1:
        player.knocked = False
    logger.debug("%s drew a tile, %d left in pool", player.id, len(state.pool))
    return domino


def knock(state: GameState, player: Player) -> bool:
    if len(player.hand) == 1:
        player.knocked = True
    return player.knocked


def next_turn(state: GameState) -> Tuple[Player, Optional[str]]:
    """Hand the turn to the next player, applying the no-knock penalty to them.

    Returns the new active player and the penalty message when it applied.
    """
    state.active_player = (state.active_player + 1) % len(state.players)
    state.phase = TurnPhase.AWAITING_ACTION
    player = state.get_active_player()
    logger.info("turn passes to %s", player.id)

    if len(player.hand) != 1 or player.knocked:
        return player, None

    for _ in range(state.ruleset.no_knock_penalty):
        try:
            draw(state, player)
        except PoolExhaustedError:
            break
    player.knocked = False
    logger.info("%s drew a penalty for not knocking", player.id)
    return player, NO_KNOCK_PENALTY_MSG
