"""Fake implementations of core ports for testing.

These in-memory implementations allow core logic and adapters to be
tested in isolation:

- FakeGameRepositoryPort: In-memory board storage with call tracking
- FakeGameServicePort: Scripted service responses with call tracking
"""

from .repository import FakeGameRepositoryPort
from .service import FakeGameServicePort

__all__ = [
    "FakeGameRepositoryPort",
    "FakeGameServicePort",
]
