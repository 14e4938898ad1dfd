"""
Hilo CLI - Command-line interface for the game.

Usage:
    hilo play [--number N] [--random-seed S]   Play in the terminal
    hilo serve [--host H] [--port P]           Run the REST API
"""

import argparse
import logging
import sys

from .config import Settings
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


def main(argv=None):
    """Main CLI entry point."""
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(
        description="Hilo - guess the secret number between 1 and 99",
        prog="hilo",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--number", help="Secret number to use (default: random)")
    play_parser.add_argument("--random-seed", type=int, help="Seed for the random number picker")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API server")
    serve_parser.add_argument("--host", default=settings.host, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args(argv)

    configure_logging(settings.log_level)

    if args.command == "play":
        sys.exit(cmd_play(args))
    elif args.command == "serve":
        sys.exit(cmd_serve(args))
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, read=input, write=print) -> int:
    """Play interactively until the player quits."""
    from .engine_core.rng import RandomSource
    from .session import GameSession

    session = GameSession(rng=RandomSource(seed=args.random_seed))
    return run_game(session, number=args.number, read=read, write=write)


def run_game(session, number=None, read=input, write=print) -> int:
    """
    Drive a GameSession from a line-based terminal.

    Returns the process exit code.
    """
    from .feedback import outcome_message, error_message, history_lines
    from .engine_core.state import Outcome

    result = session.start(number)
    if not result.success:
        write(error_message(result.error, session.rules))
        return 1

    rules = session.rules
    write(f"Guess my number! It is between {rules.min_number} and {rules.max_number}.")
    write("Type q to quit.")

    while True:
        try:
            raw = read(f"Guesses so far: {session.guess_count}. Your guess: ")
        except EOFError:
            write("")
            return 0

        if raw.strip().lower() in QUIT_WORDS:
            if session.target is not None and not session.is_won:
                write(f"The number was {session.target}.")
            return 0

        result = session.submit_guess(raw)
        if not result.success:
            write(error_message(result.error, rules))
            continue

        write(outcome_message(result.outcome, result.guess_count))
        if result.outcome != Outcome.CORRECT:
            continue

        for line in history_lines(session.history()):
            write(f"  {line}")

        try:
            again = read("Play again? [y/N] ")
        except EOFError:
            return 0
        if again.strip().lower() not in ("y", "yes"):
            return 0

        session.reset()
        session.start()
        write("New game! I picked another number.")


def cmd_serve(args) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    logger.info("Serving Hilo API on %s:%s", args.host, args.port)
    uvicorn.run("hilo.api.app:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    main()
