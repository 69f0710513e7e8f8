"""
Registry for player variants.

Maps variant keys (e.g., 'random', 'greedy') to player classes. To add a
variant, create <name>_player.py with its class, import it here, and add an
entry to PLAYER_VARIANTS.
"""

from typing import Dict, List, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_VARIANTS: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

DEFAULT_VARIANT = "random"

# Canonical list of available variant keys (for CLI choices)
AVAILABLE_VARIANTS = list(PLAYER_VARIANTS.keys())


def get_player_class(variant: str = DEFAULT_VARIANT) -> Type[Player]:
    """
    Get the player class for a variant key.

    Args:
        variant: Variant key ('random', 'greedy')

    Returns:
        Player class

    Raises:
        ValueError: If the variant key is unknown
    """
    variant = (variant or DEFAULT_VARIANT).lower()
    if variant not in PLAYER_VARIANTS:
        raise ValueError(f"Unknown player variant '{variant}'. Available: {AVAILABLE_VARIANTS}")
    return PLAYER_VARIANTS[variant]


def list_variants() -> List[str]:
    return list(AVAILABLE_VARIANTS)
