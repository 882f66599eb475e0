"""Two-player console Tic-Tac-Toe with a layered, port-based design."""

__version__ = "0.1.0"
