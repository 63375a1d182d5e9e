#!/usr/bin/env python3
"""
ulexite: automatically create descriptions of directories and the files within.

Usage:
    ulexite list [-d DIR]              # summarize every entry of DIR
    ulexite query [-p PERSONA] [MSG]   # ask the endpoint directly (MSG or stdin)
"""

import argparse
import os
import sys

from ulexite import log
from ulexite.client import DEF_ENDPOINT, DEF_MODEL, make_client
from ulexite.errors import UlexiteError
from ulexite.listing import list_entries
from ulexite.patterns import DEF_IGNORE_FILE, build_patterns, filter_entries
from ulexite.personas import DEFAULT_PERSONA, PERSONAS
from ulexite.query import read_message, run_query
from ulexite.summarize import render_report, summarize_directory

# ─── process configuration ──────────────────────────────────────────────────
ENV_ENDPOINT = "ULEXITE_AI_ENDPOINT"
ENV_API_KEY = "ULEXITE_API_KEY"
ENV_MODEL = "ULEXITE_MODEL"
# ────────────────────────────────────────────────────────────────────────────


def cmd_list(args, client) -> int:
    patterns = build_patterns(args.ignore_file)
    entries = list_entries(args.directory)
    kept = filter_entries(entries, patterns)
    log.log_info(f"{len(kept)} of {len(entries)} entries in '{args.directory}' to summarize")

    summaries = summarize_directory(
        client,
        args.directory,
        kept,
        model=args.model,
        max_workers=args.max_workers,
        progress=not args.no_progress,
    )
    sys.stdout.write(render_report(summaries))
    log.log_success(f"summarized {len(summaries)} entries")
    return 0


def cmd_query(args, client) -> int:
    if args.list_personas:
        for name in PERSONAS:
            print(name)
        return 0

    message = read_message(args.message, sys.stdin)
    print(run_query(client, message, persona=args.persona, personas=PERSONAS, model=args.model))
    return 0


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ulexite",
        description="automatically create descriptions of directories and the files within",
    )
    ap.add_argument(
        "--ai-endpoint",
        "--ai_endpoint",
        default=os.environ.get(ENV_ENDPOINT, DEF_ENDPOINT),
        help=f"openai-compatible endpoint used for summarization (env {ENV_ENDPOINT})",
    )
    ap.add_argument(
        "--api-key",
        default=os.environ.get(ENV_API_KEY),
        help=f"credential for the endpoint, if it needs one (env {ENV_API_KEY})",
    )
    ap.add_argument(
        "--model",
        default=os.environ.get(ENV_MODEL, DEF_MODEL),
        help=f"model name sent with each request (env {ENV_MODEL})",
    )
    ap.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    sub = ap.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", aliases=["ls"], help="list the given directory")
    ls.add_argument("-d", "--directory", default=".", help="the directory to list")
    ls.add_argument(
        "--ignore-file",
        default=DEF_IGNORE_FILE,
        help="file of extra glob patterns to exclude (default: %(default)s)",
    )
    ls.add_argument("--max-workers", type=positive_int, metavar="N", help="cap concurrent summaries (default: one per entry)")
    ls.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ls.set_defaults(func=cmd_list)

    q = sub.add_parser("query", aliases=["q"], help="query the specified openai-compatible endpoint")
    q.add_argument("message", nargs="?", help="message to send; '-' or nothing reads stdin")
    q.add_argument("-p", "--persona", default=DEFAULT_PERSONA, help="system persona (default: %(default)s)")
    q.add_argument("--list-personas", action="store_true", help="print known persona names and exit")
    q.set_defaults(func=cmd_query)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log.set_quiet(args.quiet)
    client = make_client(args.ai_endpoint, args.api_key)
    try:
        return args.func(args, client)
    except UlexiteError as e:
        log.log_error(str(e))
        return 1
    except KeyboardInterrupt:
        log.log_warning("Keyboard interrupt detected, stopping.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
