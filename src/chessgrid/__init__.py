"""chessgrid - chessboard model with per-piece destination generation."""

__version__ = "0.1.0"
