import numbers
from dataclasses import dataclass

import numpy as np

# Board configuration
BOARD_SIZE = 8
CORNERS = [(0, 0), (0, 7), (7, 0), (7, 7)]

# Directions for flipping (8 directions)
DIRECTIONS = [(0, 1), (1, 0), (0, -1), (-1, 0),
              (1, 1), (1, -1), (-1, 1), (-1, -1)]

# 60 placements plus the passes that can sit between them, with room to spare.
# Keeps the recursive search well inside the interpreter's recursion limit.
MAX_SEARCH_DEPTH = 128


@dataclass(frozen=True)
class SearchConfig:
    """
    Immutable search settings: how deep to look and which heuristic
    features the leaf evaluation includes.
    """
    max_depth: int = 4
    use_coin_parity: bool = True
    use_actual_mobility: bool = False
    use_potential_mobility: bool = False
    use_corner_score: bool = False
    use_stability_score: bool = True

    def __post_init__(self):
        depth = self.max_depth
        if isinstance(depth, (bool, np.bool_)) or not isinstance(depth, numbers.Integral):
            raise ValueError(f"max_depth must be an integer, got {depth!r}")
        if not 0 <= depth <= MAX_SEARCH_DEPTH:
            raise ValueError(f"max_depth must be in [0, {MAX_SEARCH_DEPTH}], got {depth}")
        object.__setattr__(self, "max_depth", int(depth))
        for name in ("use_coin_parity", "use_actual_mobility", "use_potential_mobility",
                     "use_corner_score", "use_stability_score"):
            value = getattr(self, name)
            if not isinstance(value, (bool, np.bool_)):
                raise ValueError(f"{name} must be a bool")
            object.__setattr__(self, name, bool(value))


# Difficulty levels offered to human players
PRESETS = {
    "easy": SearchConfig(max_depth=4, use_coin_parity=True, use_stability_score=True),
    "normal": SearchConfig(max_depth=6, use_coin_parity=True, use_corner_score=True,
                           use_stability_score=True),
    "hard": SearchConfig(max_depth=8, use_coin_parity=True, use_actual_mobility=True,
                         use_potential_mobility=True, use_corner_score=True,
                         use_stability_score=True),
}


def get_preset(name: str) -> SearchConfig:
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown preset {name!r}, expected one of {sorted(PRESETS)}") from None
