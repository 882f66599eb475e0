"""Test suite for the Tic-Tac-Toe game.

Organized into three categories:

1. core/: Unit tests for the board model and game service
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for the in-memory repository and console adapters
   - Console input is patched, output captured with capsys

3. fakes/: Port implementations for testing
   - In-memory GameRepositoryPort and GameServicePort doubles
"""
