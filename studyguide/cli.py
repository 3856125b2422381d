#!/usr/bin/env python3
"""
Command line for the study-guide notes.

Usage:
    studyguide validate
    studyguide validate --strict          # treat warnings as errors
    studyguide validate --section dsa
    studyguide snippets --language python --out build/snippets
    studyguide links --workers 10
    studyguide index --out build/index.yaml
    studyguide algorithms --topic heaps
"""

import argparse
import sys
from pathlib import Path

from . import dsa
from .config import load_settings
from .corpus import load_corpus
from .errors import StudyGuideError
from .index import build_index, dump_index, save_index
from .links import broken, check_links, collect_urls, make_session
from .snippets import check_python, extract_snippets, write_snippets
from .validate import exit_code, validate_corpus

MAX_LISTED = 20


def banner(title: str):
    print("=" * 80)
    print(title)
    print("=" * 80)


def print_list(marker: str, items: list[str], limit: int = MAX_LISTED):
    for item in items[:limit]:
        print(f"   {marker} {item}")
    if len(items) > limit:
        print(f"   ... and {len(items) - limit} more")


# ── Commands ─────────────────────────────────────────────────────────────────

def cmd_validate(args, settings) -> int:
    corpus = load_corpus(settings.notes_dir, settings.ignore)
    errors, warnings = validate_corpus(corpus, settings, section=args.section)
    banner(f"STUDY GUIDE VALIDATION ({len(corpus)} documents)")

    for section, docs in sorted(corpus.by_section().items()):
        snippets = sum(len(d.code_blocks) for d in docs)
        print(f"  {section or '(root)':15} {len(docs):3} documents {snippets:4} snippets")

    print(f"\n🔴 Errors: {len(errors)}")
    print_list("[X]", errors)
    print(f"\n🟡 Warnings: {len(warnings)}")
    print_list("⚠", warnings)

    code = exit_code(errors, warnings, strict=args.strict)
    if code == 0:
        print("\n✓ All checks passed!" if not warnings else "\n✓ No errors, but some warnings to address")
    else:
        print("\n❌ Validation failed")
    return code


def cmd_snippets(args, settings) -> int:
    corpus = load_corpus(settings.notes_dir, settings.ignore)
    snippets = list(extract_snippets(corpus, args.language))
    print(f"Found {len(snippets)} code snippets in {len(corpus)} documents")

    failures = []
    for snippet in snippets:
        problem = check_python(snippet)
        if problem:
            failures.append(f"{snippet.doc.rel_path}:{snippet.block.line} {problem}")

    if args.out:
        written = write_snippets(snippets, Path(args.out))
        print(f"  ✓ Wrote {len(written)} files to {args.out}")

    if failures:
        print(f"\n[X] {len(failures)} Python snippets do not parse:")
        print_list("-", failures)
        return 1
    print("  ✓ All Python snippets parse")
    return 0


def cmd_links(args, settings) -> int:
    corpus = load_corpus(settings.notes_dir, settings.ignore)
    urls = collect_urls(corpus)
    workers = args.workers or settings.link_workers
    timeout = args.timeout or settings.link_timeout
    print(f"Found {len(urls)} unique URLs. Validating in parallel...")

    results = check_links(urls, workers=workers, timeout=timeout,
                          session=make_session(settings.user_agent))
    bad = broken(results)

    print("\n--- LINK VALIDATION REPORT ---")
    print(f"Total Unique Links: {len(urls)}")
    print(f"Broken/Suspect Links: {len(bad)}")
    if bad:
        for url, status in bad:
            print(f"  [X] Status {status} | {url}")
        return 1
    print("  ✓ All links are healthy!")
    return 0


def cmd_index(args, settings) -> int:
    corpus = load_corpus(settings.notes_dir, settings.ignore)
    index = build_index(corpus)
    if args.out:
        save_index(index, Path(args.out))
        totals = index["totals"]
        print(f"Index written: {args.out} "
              f"({totals['documents']} documents, {totals['snippets']} snippets)")
    else:
        sys.stdout.write(dump_index(index))
    return 0


def cmd_algorithms(args, settings) -> int:
    algorithms = dsa.algorithms_by_topic(args.topic)
    if not algorithms:
        print(f"No algorithms for topic: {args.topic}")
        return 1
    print(f"{'Name':<34} {'Topic':<20} {'Time':<20} {'Space':<15}")
    print("─" * 90)
    for algo in algorithms:
        print(f"{algo.name:<34} {algo.topic:<20} {algo.time:<20} {algo.space:<15}")
    print(f"\n{len(algorithms)} algorithms")
    return 0


# ── Entry point ──────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studyguide", description="Study-guide notes tooling")
    parser.add_argument("--notes", help="Notes root (default: notes/ or $STUDYGUIDE_NOTES_DIR)")
    parser.add_argument("--config", help="Path to a studyguide.yaml settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="Check structure, listings and local links")
    p.add_argument("--strict", action="store_true", help="Treat warnings as errors")
    p.add_argument("--section", help="Only validate one section (cloud, dsa, system-design)")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("snippets", help="Extract code listings and syntax-check Python")
    p.add_argument("--language", help="Only this language (e.g. python)")
    p.add_argument("--out", help="Write snippets under this directory")
    p.set_defaults(func=cmd_snippets)

    p = sub.add_parser("links", help="Check external URLs")
    p.add_argument("--workers", type=int, help="Parallel requests")
    p.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    p.set_defaults(func=cmd_links)

    p = sub.add_parser("index", help="Write a YAML index of the notes")
    p.add_argument("--out", help="Output file (default: stdout)")
    p.set_defaults(func=cmd_index)

    p = sub.add_parser("algorithms", help="List the reference algorithm catalog")
    p.add_argument("--topic", help="Filter by topic (e.g. heaps, graphs)")
    p.set_defaults(func=cmd_algorithms)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config, args.notes)
        return args.func(args, settings)
    except StudyGuideError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
