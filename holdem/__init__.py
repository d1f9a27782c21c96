"""Texas Hold'em engine: cards, players, betting rounds, pots and hand evaluation."""

__version__ = "0.1.0"
__all__ = ["deck", "player", "evaluator", "game"]