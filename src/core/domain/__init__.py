"""Domain models and value sets.

Why:
- Pure, strict data structures (Pydantic v2) and closed enums live here.
- The domain knows nothing about HTTP, CLI or child processes.
"""
