"""Concrete adapters for the core interfaces (httpx, subprocess)."""
