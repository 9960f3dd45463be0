from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional, Sequence

from .errors import DominoError, RuleViolationError, ValidationError
from .events import handle_event
from .move import Event, Response
from .state import GameState, new_game

COMMANDS = "Commands: (p)lace | (k)nock | (d)raw | (e)ndturn | (q)uit"


def render_message(message: str, state: GameState, player_id: str, domino: str = "", path_owner: str = "") -> str:
    return (
        message.replace("$EVENT_PLAYER_NAME", player_id)
        .replace("$CURRENT_PLAYER", state.get_active_player().id)
        .replace("$DOMINO", domino)
        .replace("$PATH_ID_OWNER", path_owner)
    )


def describe_board(state: GameState) -> str:
    lines = []
    if state.dangling_path is not None:
        lines.append("Unresolved double")
    lines.append(f"{state.get_active_player().id} IS NOW UP")
    if state.center is not None:
        lines.append(f"CENTER PIECE: {state.center.display()}")
    for i, path in enumerate(state.paths):
        lines.append(f"{i}: {path.display(unresolved=state.is_unresolved(i))}")
    lines.append(state.get_active_player().display())
    return "\n".join(lines)


def _atoi(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return -1


def _read_event(command: str, player_id: str, read: Callable[[str], str]) -> Optional[Event]:
    if command == "p":
        hand_index = _atoi(read("hand index to place> "))
        path_index = _atoi(read("path index to play on> "))
        return Event.play(player_id, hand_index=hand_index, path_index=path_index)
    if command == "k":
        return Event.knock(player_id)
    if command == "d":
        return Event.draw(player_id)
    if command == "e":
        return Event.end_turn(player_id)
    return None


def _render_response(state: GameState, event: Event, response: Response, domino: str, owner: str) -> str:
    lines = []
    if response.global_message:
        lines.append(render_message(response.global_message, state, event.player_id, domino, owner))
    if response.user_message:
        lines.append("user: " + render_message(response.user_message, state, event.player_id, domino, owner))
    return "\n".join(lines)


def run_session(
    state: GameState,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameState:
    """Drive a hot-seat game from the console until the input runs out or ``q`` is entered."""
    write(describe_board(state))
    while True:
        player = state.get_active_player()
        try:
            command = read("> ").strip().lower()
        except EOFError:
            break
        if command == "q":
            break
        event = _read_event(command, player.id, read)
        if event is None:
            write(COMMANDS)
            continue

        domino, owner = "", ""
        if 0 <= event.hand_index < len(player.hand) and 0 <= event.path_index < len(state.paths):
            domino = player.hand[event.hand_index].display()
            owner = state.paths[event.path_index].owner or "the Mexican train"

        try:
            response = handle_event(state, event)
        except ValidationError as exc:
            write(f"invalid: {exc}")
            continue
        except RuleViolationError as exc:
            write(f"not allowed: {exc}")
            continue
        except DominoError as exc:
            write(f"error: {exc}")
            continue

        rendered = _render_response(state, event, response, domino, owner)
        if rendered:
            write(rendered)
        if response.end_of_turn or command == "p":
            write(describe_board(state))
    return state


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play a hot-seat game of Mexican Train dominoes.")
    parser.add_argument("players", nargs="+", help="Unique player names, in turn order.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible tile order.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine activity.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        state = new_game(args.players, rng_seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))
    run_session(state)


if __name__ == "__main__":
    main()
