"""Game repository adapters.

Implementations:
- In-memory (single process, no persistence across runs)
"""
