"""
Hilo - Number Guessing Engine

A small, deterministic engine for the high/low number guessing game.
A secret number is fixed at the start of a session and the player guesses
until correct, receiving "too low" / "too high" feedback after each try.

The package provides:
- Session state and guess evaluation (engine_core)
- Session controllers and an in-memory session registry (session)
- A REST API for the mobile client (api)
- A terminal front-end (cli)
"""

__version__ = "0.1.0"
