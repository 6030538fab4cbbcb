"""Chess rules engine: move legality, check, checkmate and stalemate."""

__version__ = "0.1.0"
