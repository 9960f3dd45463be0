"""Exceptions raised by the rules engine.

Every error rejects a single event and leaves the game state as it was.
"""


class DominoError(ValueError):
    """Base class for all engine errors."""


class ValidationError(DominoError):
    pass


class NotYourTurnError(ValidationError):
    def __init__(self, player_id: str) -> None:
        super().__init__(f"it is not {player_id}'s turn")
        self.player_id = player_id


class InvalidHandIndexError(ValidationError):
    def __init__(self, index: int, hand_size: int) -> None:
        super().__init__(f"invalid hand index {index} (hand has {hand_size} tiles)")
        self.index = index


class InvalidPathIndexError(ValidationError):
    def __init__(self, index: int, path_count: int) -> None:
        super().__init__(f"invalid path index {index} ({path_count} paths)")
        self.index = index


class UnknownActionError(ValidationError):
    pass


class RuleViolationError(DominoError):
    pass


class NotPlayableError(RuleViolationError):
    def __init__(self) -> None:
        super().__init__("domino is not playable on that path")


class DontOwnPathError(RuleViolationError):
    def __init__(self) -> None:
        super().__init__("path is not playable on by this player")


class DanglingDoubleError(RuleViolationError):
    def __init__(self) -> None:
        super().__init__("there is a dangling double that must be resolved")


class PoolExhaustedError(DominoError):
    def __init__(self) -> None:
        super().__init__("no tiles left")


class UnknownPlayerError(DominoError):
    def __init__(self, player_id: str) -> None:
        super().__init__(f"unknown player {player_id!r}")
        self.player_id = player_id
