"""Core: configuration, domain, validation and build resolution.

Knows nothing about typer or httpx; talks to the outside world through the
Protocols in `core.interfaces`.
"""
