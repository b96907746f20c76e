"""
Configuration for the Othello alpha-beta engine.
"""

from dataclasses import dataclass, replace


# Board Configuration
BOARD_CONFIG = {
    'side_length': 8,                   # Standard 8x8 Othello board
}

# Evaluation Configuration
EVALUATION_CONFIG = {
    'coin_parity_weight': 0.1,          # Token count term
    'mobility_weight': 0.9,             # Legal move count term
}


@dataclass(frozen=True)
class SearchConfig:
    """Toggles for the alpha-beta engine."""
    max_depth: int = 7                  # Cutoff triggers once depth exceeds this
    use_pruning: bool = True            # Alpha-beta cutoffs
    use_cutoff: bool = True             # Heuristic evaluation at max_depth; off = search to the end
    use_ordering_tie_break: bool = True  # Break ordering ties by heuristic of the child
    pass_consumes_depth: bool = True    # A forced pass counts as a ply

    def __post_init__(self):
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")

    def with_depth(self, max_depth):
        return replace(self, max_depth=max_depth)


# Search Profiles
SEARCH_PROFILES = {
    'reference': SearchConfig(),
    'quick': SearchConfig(max_depth=3),
    'plain': SearchConfig(use_ordering_tie_break=False),
    'unpruned': SearchConfig(max_depth=3, use_pruning=False),
}


def get_search_config(name):
    try:
        return SEARCH_PROFILES[name]
    except KeyError:
        known = ", ".join(sorted(SEARCH_PROFILES))
        raise ValueError(f"Unknown search profile {name!r} (known: {known})") from None
