from dataclasses import dataclass, field
from typing import Dict, Tuple

from .tiles import full_set_size

# (max player count, highest pip) in ascending order.
DEFAULT_MAX_PIPS: Tuple[Tuple[int, int], ...] = ((2, 6), (4, 9), (8, 12), (12, 15))
DEFAULT_HAND_SIZES: Dict[int, int] = {2: 6, 3: 10, 4: 10, 5: 9, 6: 9, 7: 7, 8: 7}


@dataclass(frozen=True)
class Ruleset:
    max_pips: Tuple[Tuple[int, int], ...] = DEFAULT_MAX_PIPS
    fallback_max_pip: int = 18
    hand_sizes: Dict[int, int] = field(default_factory=lambda: dict(DEFAULT_HAND_SIZES))
    fallback_hand_size: int = 6
    no_knock_penalty: int = 2
    open_train_on_pass: bool = True

    def max_pip(self, num_players: int) -> int:
        for limit, pip in self.max_pips:
            if num_players <= limit:
                return pip
        return self.fallback_max_pip

    def hand_size(self, num_players: int) -> int:
        return self.hand_sizes.get(num_players, self.fallback_hand_size)

    def deck_size(self, num_players: int) -> int:
        return full_set_size(self.max_pip(num_players))
