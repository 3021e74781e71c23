"""CLI entry point for Log Tidy.

Parses arguments, orchestrates the read -> deduplicate -> clean -> diff
pipeline, and prints or exports the result.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .cleanup import OpenAICleaner, PassthroughCleaner, ServiceError
from .core import clean_log
from .normalize import MIN_VOLATILE_DIGITS, build_rules
from .report import build_report, print_text_report, report_to_json
from .sources import read_text, validate_submission

DEFAULT_MAX_CHARS = 200_000


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    parser = argparse.ArgumentParser(
        prog="log-tidy",
        description="Deduplicate an error log, clean it with an LLM, and show what was removed.",
    )

    parser.add_argument("--file", default="", help='Log file to read ("-" or omitted reads stdin)')
    parser.add_argument("--no-cleanup", action="store_true", help="Only deduplicate; skip the LLM call")
    parser.add_argument("--json", action="store_true", help="Output report as JSON")
    parser.add_argument("--show-diff", action="store_true", help="Print the line diff between deduplicated and cleaned log")
    parser.add_argument("--output", default="", help="Write the cleaned log to this file")
    parser.add_argument(
        "--min-digits",
        type=int,
        default=int(os.getenv("LOGTIDY_MIN_DIGITS", str(MIN_VOLATILE_DIGITS))),
        help="Shortest digit run treated as volatile",
    )
    parser.add_argument(
        "--max-chars",
        type=int,
        default=int(os.getenv("LOGTIDY_MAX_CHARS", str(DEFAULT_MAX_CHARS))),
        help="Reject inputs longer than this (0 disables the limit)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    llm = parser.add_argument_group("Cleanup service")
    llm.add_argument(
        "--api-key",
        default=os.getenv("LOGTIDY_API_KEY") or os.getenv("OPENAI_API_KEY", ""),
        help="API key for the chat completions endpoint",
    )
    llm.add_argument("--api-base", default=os.getenv("LOGTIDY_API_BASE", "https://api.openai.com/v1"), help="API base URL")
    llm.add_argument("--model", default=os.getenv("LOGTIDY_MODEL", "gpt-4o-mini"), help="Model name")
    llm.add_argument("--timeout", type=float, default=float(os.getenv("LOGTIDY_TIMEOUT", "60")), help="Request timeout in seconds")

    args = parser.parse_args(argv)

    if args.min_digits < 1:
        parser.error("--min-digits must be at least 1")

    return args


def main(argv=None) -> None:
    """Entry point: read the log, deduplicate, clean, report."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s][%(levelname)s][%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        text, src_desc = read_text(args)
        validate_submission(text, args.max_chars)
    except (RuntimeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.no_cleanup:
        cleaner = PassthroughCleaner()
    else:
        try:
            cleaner = OpenAICleaner(
                api_key=args.api_key,
                model=args.model,
                base_url=args.api_base,
                timeout=args.timeout,
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)

    try:
        result = clean_log(text, cleaner, rules=build_rules(args.min_digits))
    except ServiceError as e:
        print(f"Error processing log: {e}", file=sys.stderr)
        sys.exit(1)

    report = build_report(result, src_desc)
    if args.json:
        print(report_to_json(report))
    else:
        print_text_report(report, show_diff=args.show_diff, result=result)

    if args.output:
        Path(args.output).write_text(result.cleaned, encoding="utf-8")
        print(f"Cleaned log written to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
