"""Command-line interface adapters.

Provides the console game:
- controller: pass-through seam over the game service
- presentation: turn loop, prompts and board rendering
"""
