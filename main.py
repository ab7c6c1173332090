from __future__ import annotations
import sys
import json
import logging
import argparse
from functools import partial
from typing import List
from letterbox.config import settings
from letterbox.dictionary import DictionaryProvider, fetch_word_list, read_word_list
from letterbox.errors import DictionaryLoadError
from letterbox.io_utils import parse_groups, validate_groups
from letterbox.session import Session
from letterbox.types import ChainOutcome, OutcomeStatus

def read_groups(args: argparse.Namespace) -> List[str]:
    if args.groups:
        return [g.upper() for g in args.groups]

    print("Enter the four letter groups (e.g. ABC DEF GHI JKL):")
    return parse_groups(input())

def make_provider(args: argparse.Namespace) -> DictionaryProvider:
    if args.file:
        return DictionaryProvider(partial(read_word_list, args.file))
    if args.url:
        return DictionaryProvider(partial(fetch_word_list, args.url, settings.request_timeout))
    return DictionaryProvider.from_settings(settings)

def print_outcome(outcome: ChainOutcome) -> None:
    if outcome.status is OutcomeStatus.NO_SOLUTION:
        print("\nNo suitable words found for these letters. Try different combinations.")
        return
    if outcome.status is OutcomeStatus.NO_ALTERNATIVE:
        print(f"\nNo alternative found after discarding {outcome.discarded}; keeping the previous words.")

    print("\nGenerated words:")
    for i, w in enumerate(outcome.words, start=1):
        print(f"{i}. {w}")

    if outcome.uncovered:
        print(f"\nWarning: Some letters were not used: {', '.join(outcome.uncovered)}")

def interactive_loop(session: Session, groups: List[str]) -> None:
    while True:
        choice = input("\nDiscard word # (r = reset, Enter = quit): ").strip().lower()
        if not choice:
            return
        if choice == "r":
            session.reset()
            print("Discarded words cleared.")
            print_outcome(session.submit(groups))
            continue
        try:
            index = int(choice) - 1
            outcome = session.discard_and_regenerate(index)
        except ValueError:
            print("Please enter a word number.")
            continue
        except IndexError as e:
            print(f"Input error: {e}")
            continue
        print_outcome(outcome)

def main():
    parser = argparse.ArgumentParser(description="Letter Boxed word chain solver (CLI)")
    parser.add_argument("groups", nargs="*", help="Four groups of three letters, e.g. ABC DEF GHI JKL.")
    parser.add_argument("--file", type=str, help="Path to a local word list (one word per line).")
    parser.add_argument("--url", type=str, help="URL of the word list to download.")
    parser.add_argument("--max-length", type=int, default=settings.max_word_length, help="Longest word to consider.")
    parser.add_argument("--json", action="store_true", help="Print JSON output.")
    parser.add_argument("--interactive", action="store_true", help="Discard words and regenerate the chain.")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    groups = read_groups(args)
    ok, msg = validate_groups(groups)
    if not ok:
        print(f"Input error: {msg}")
        print("Tip: enter four groups of three letters, like 'ABC DEF GHI JKL'.")
        return

    session = Session(make_provider(args), max_word_length=args.max_length)
    try:
        outcome = session.submit(groups)
    except DictionaryLoadError as e:
        print(f"Error loading dictionary: {e}")
        sys.exit(1)

    if args.json:
        payload = outcome.to_dict()
        payload["groups"] = groups
        payload["candidates"] = len(session.puzzle.pool)
        print(json.dumps(payload, indent=2))
        return

    if args.debug:
        print(f"Candidate words: {len(session.puzzle.pool)}")

    print_outcome(outcome)

    if args.interactive and outcome.ok:
        interactive_loop(session, groups)

if __name__ == "__main__":
    main()
