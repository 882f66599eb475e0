"""External adapters for the Tic-Tac-Toe game.

This package contains everything that touches the outside world and
provides implementations of the core port interfaces.

Adapter Organization:

- store/: Adapters owning the live board (in-memory)
- cli/: Console controller and presentation
"""
