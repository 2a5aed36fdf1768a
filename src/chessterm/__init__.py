"""chessterm: terminal chess against a random-move opponent."""

__version__ = "0.1.0"
