"""A two-player chess game: move rules, checkmate detection and a pygame window."""

__version__ = "0.1.0"
__all__ = ["pieces", "board", "game", "app"]