from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable

from .engine import check_path_index, draw, knock, next_turn, place, playable_moves
from .errors import NotYourTurnError, PoolExhaustedError, UnknownActionError
from .move import (
    ALREADY_DRAWN_MSG,
    CAN_PLACE_MSG,
    CANNOT_KNOCK_MSG,
    DREW_TILE_MSG,
    KNOCK_SUCCESSFUL_MSG,
    MUST_RESOLVE_DOUBLE_MSG,
    MUST_TRY_DRAWING_MSG,
    OUT_OF_TILES_MSG,
    PLAY_SUCCESSFUL_MSG,
    SETTING_TRAIN_MSG,
    Action,
    Event,
    Response,
)
from .state import GameState, Player, TurnPhase

logger = logging.getLogger(__name__)


def _end_turn(state: GameState, response: Response) -> None:
    _, penalty = next_turn(state)
    response.end_of_turn = True
    if penalty:
        response.add_global(penalty)


def _open_train(state: GameState, player: Player, response: Response) -> None:
    if not state.ruleset.open_train_on_pass:
        return
    path = state.path_of(player)
    if not path.train:
        path.train = True
        logger.info("train set on %s", player.id)
    response.add_global(SETTING_TRAIN_MSG)


def _handle_end_turn(state: GameState, player: Player, event: Event, response: Response) -> None:
    moves = playable_moves(state, player)
    if moves:
        for hand_index, domino, path_index in moves:
            response.add_user(
                CAN_PLACE_MSG.format(tile=domino.display(), hand_index=hand_index, path_index=path_index)
            )
        return

    if state.phase not in (TurnPhase.DRAWN, TurnPhase.PLAYED):
        response.user_message = MUST_TRY_DRAWING_MSG
        return

    if state.phase == TurnPhase.DRAWN:
        _open_train(state, player, response)
    response.success = True
    _end_turn(state, response)


def _handle_play(state: GameState, player: Player, event: Event, response: Response) -> None:
    check_path_index(state, event.path_index)
    domino, remaining = player.hand.remove(event.hand_index)
    place(state, player, domino, event.path_index)
    player.hand = remaining

    response.success = True
    response.add_global(PLAY_SUCCESSFUL_MSG)

    if domino.is_double():
        # A double keeps the turn open until it is resolved or the player passes.
        if state.phase != TurnPhase.DRAWN:
            state.phase = TurnPhase.DOUBLE_TO_RESOLVE
        response.add_user(MUST_RESOLVE_DOUBLE_MSG)
        return

    state.phase = TurnPhase.PLAYED
    _end_turn(state, response)


def _handle_draw(state: GameState, player: Player, event: Event, response: Response) -> None:
    if state.phase in (TurnPhase.DRAWN, TurnPhase.PLAYED):
        response.user_message = ALREADY_DRAWN_MSG
        return

    state.phase = TurnPhase.DRAWN
    response.success = True
    try:
        draw(state, player)
    except PoolExhaustedError:
        logger.info("pool exhausted, ending %s's turn", player.id)
        response.add_global(OUT_OF_TILES_MSG)
        _open_train(state, player, response)
        _end_turn(state, response)
        return
    response.add_global(DREW_TILE_MSG)


def _handle_knock(state: GameState, player: Player, event: Event, response: Response) -> None:
    if knock(state, player):
        response.success = True
        response.add_global(KNOCK_SUCCESSFUL_MSG)
    else:
        response.user_message = CANNOT_KNOCK_MSG


_HANDLERS: Dict[Action, Callable[[GameState, Player, Event, Response], None]] = {
    Action.END_TURN: _handle_end_turn,
    Action.PLAY_DOMINO: _handle_play,
    Action.DRAW_DOMINO: _handle_draw,
    Action.KNOCK: _handle_knock,
}


def handle_event(state: GameState, event: Event) -> Response:
    """Apply one user intent to the game and describe what happened.

    Validation and rule errors are raised and leave ``state`` untouched.
    ``Response.end_of_turn`` tells the caller the turn moved on.
    """
    response = Response(player_id=event.player_id, state=state)
    active = state.get_active_player()

    # Knocking is allowed out of turn and targets the sender.
    if event.action == Action.KNOCK and event.player_id != active.id:
        _handle_knock(state, state.get_player(event.player_id), event, response)
        state.event_log.append(event)
        return response

    if event.player_id != active.id:
        raise NotYourTurnError(event.player_id)

    handler = _HANDLERS.get(event.action)
    if handler is None:
        raise UnknownActionError(f"unknown action {event.action!r}")

    handler(state, active, event, response)
    state.event_log.append(event)
    return response


def replay_event_log(initial_state: GameState, events: Iterable[Event]) -> GameState:
    state = initial_state.copy()
    state.event_log = []
    for event in events:
        handle_event(state, event)
    return state
