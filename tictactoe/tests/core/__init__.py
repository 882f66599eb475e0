"""Unit tests for core domain logic.

These tests exercise the game rules without console I/O.
The repository port is replaced with an in-memory fake from tests/fakes/.
"""
