# apps/cli/play.py
"""
Interactive Absurdle.

The game never commits to a secret word. Each guess is answered with the
pattern that keeps the most dictionary words alive, so the player wins only
once a single word is left and they name it.

Usage:
    python -m apps.cli.play --dict dictionary.txt --length 5
    python -m apps.cli.play            # prompts for both
"""

from __future__ import annotations

import argparse
from typing import Callable, Iterable, Optional, Set

from absurdle.datasets import load_dictionary
from absurdle.engine import AbsurdleSession, AbsurdleError, validate_guess
from absurdle.harness.render import render_pattern, render_summary


def play(
        session: AbsurdleSession,
        guesses: Iterable[str],
        *,
        allowed: Optional[Set[str]] = None,
        out: Callable[[str], None] = print,
) -> AbsurdleSession:
    """
    Feed guesses into the session until it is won or the input runs out.

    Invalid guesses are reported and skipped (the caller re-prompts).
    """
    for raw in guesses:
        guess = raw.strip().lower()
        if not validate_guess(guess, session.N, allowed):
            out(f"! not a valid {session.N}-letter guess: {raw.strip()!r}")
            continue
        try:
            patt = session.record(guess)
        except AbsurdleError as e:
            out(f"! {e}")
            continue
        out(": " + render_pattern(patt))
        out("")
        if session.is_finished:
            break
    return session


def _prompt_guesses():
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main(argv=None):
    ap = argparse.ArgumentParser(description="absurdle: adversarial word guessing")
    ap.add_argument("--dict", dest="dict_path", help="dictionary file (whitespace-separated words)")
    ap.add_argument("--length", type=int, help="word length to play with")
    ap.add_argument("--strict", action="store_true",
                    help="only accept guesses that are in the dictionary")
    args = ap.parse_args(argv)

    print("Welcome to the game of Absurdle.")
    dict_path = args.dict_path or input("What dictionary would you like to use? ").strip()
    if args.length is not None:
        length = args.length
    else:
        try:
            length = int(input("What length word would you like to guess? ").strip())
        except ValueError:
            ap.error("word length must be an integer")

    try:
        words = load_dictionary(dict_path)
    except FileNotFoundError:
        ap.error(f"dictionary file not found: {dict_path}")

    try:
        session = AbsurdleSession.from_words(words, length)
    except AbsurdleError as e:
        ap.error(str(e))
    if not session.candidates:
        ap.error(f"no words of length {length} in {dict_path}")

    allowed = set(session.candidates) if args.strict else None
    play(session, _prompt_guesses(), allowed=allowed)

    if session.is_finished:
        print(render_summary(session.patterns))


if __name__ == "__main__":
    main()
