"""
Command-line interface: score one or more passwords.
"""
from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys

from .config import DEFAULT_CONFIG, EntropyConfig
from .blacklist import BlacklistIndex
from .engine import EvaluationMeta, evaluate_with_meta

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pwentropy",
        description="Estimate password entropy and strength",
    )
    p.add_argument(
        "passwords",
        nargs="*",
        metavar="PASSWORD",
        help="Password(s) to score; prompts with hidden input when omitted",
    )
    p.add_argument(
        "-b", "--blacklist-file",
        action="append",
        default=[],
        metavar="FILE",
        help="Extra word list (one password per line) added to the blacklist",
    )
    p.add_argument("--json", action="store_true", help="Output JSON only")
    p.add_argument("-v", "--verbose", action="store_true", help="Log pipeline steps to stderr")
    return p


def load_config(blacklist_files: list[str]) -> EntropyConfig:
    """
    Build the run configuration: defaults plus any extra word lists.
    OSError from unreadable files propagates.
    """
    cfg = DEFAULT_CONFIG
    for path in blacklist_files:
        extra = BlacklistIndex.from_file(path)
        cfg = cfg.extend(blacklist=extra)
    return cfg


def format_report(meta: EvaluationMeta) -> str:
    return (
        f"Estimated entropy: {meta.entropy:.1f} bits\n"
        f"Strength: {meta.label} ({meta.bucket}/5)"
    )


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for `python -m pwentropy.cli`, the `pwentropy` script
    and `run_pwentropy.py`.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.blacklist_file)
    except OSError as exc:
        print(f"Failed to load blacklist: {exc}", file=sys.stderr)
        return 2

    passwords = args.passwords
    if not passwords:
        try:
            passwords = [getpass.getpass("Password to score: ")]
        except (KeyboardInterrupt, EOFError):
            print("\nExiting.", file=sys.stderr)
            return 1

    for password in passwords:
        meta = evaluate_with_meta(password, cfg)
        if args.json:
            print(json.dumps(meta.to_dict(), indent=2))
        else:
            print(format_report(meta))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
