"""Command line entry point: ``python -m topicount FILE``."""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler

from ._analyzer import TopicAnalyzer
from ._detect import detect_topic
from ._dictionary import DictionaryStore
from ._errors import TopicountError
from ._extract import parse
from ._loader import load_bundle
from ._report import format_detailed, format_statistics, save_statistics
from ._stemmer import STEMMERS

logger = logging.getLogger("topicount")


def _setup_logging(verbose: bool, logfile: str | None) -> RotatingFileHandler | None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    if not root_logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        root_logger.addHandler(ch)
    if logfile:
        fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(formatter)
        fh.setLevel(logging.DEBUG)
        root_logger.addHandler(fh)
        return fh
    return None


def _build_store(args: argparse.Namespace) -> DictionaryStore:
    if args.bundle:
        store = DictionaryStore()
        store.replace(load_bundle(args.bundle))
    elif args.dictionaries:
        store = DictionaryStore()
        store.load_directory(args.dictionaries)
    else:
        store = DictionaryStore.default()
    for path in args.dictionary:
        store.load_dictionary_file(path)
    return store


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topicount",
        description="Detect the topic of a document by counting dictionary keywords",
    )
    parser.add_argument("file", help="Document to analyze (.txt or .docx)")
    parser.add_argument("--dictionaries", metavar="DIR", help="Directory of <topic>.txt dictionaries")
    parser.add_argument("--bundle", metavar="DIR", help="Compiled dictionary bundle directory")
    parser.add_argument("--dictionary", metavar="FILE", action="append", default=[],
                        help="Extra <topic>.txt dictionary (repeatable)")
    parser.add_argument("--topic", action="append", default=None,
                        help="Restrict analysis to this topic (repeatable)")
    parser.add_argument("--fuzzy", action="store_true", help="Also match inflected word forms")
    parser.add_argument("--stemmer", choices=STEMMERS, default="suffix")
    parser.add_argument("--language", default="russian", help="Snowball stemmer language")
    parser.add_argument("--details", action="store_true", help="Print per-entry counts")
    parser.add_argument("--stats-out", metavar="PATH", help="Write 'topic : count' lines to PATH")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")
    parser.add_argument("--logfile", default=None, help="Optional rotating logfile path")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    fh = _setup_logging(args.verbose, args.logfile)
    try:
        return _run(args)
    finally:
        # The root logger outlives this call; drop the file handler with it.
        if fh is not None:
            logging.getLogger().removeHandler(fh)
            fh.close()


def _run(args: argparse.Namespace) -> int:
    try:
        store = _build_store(args)
        analyzer = TopicAnalyzer(
            store, fuzzy=args.fuzzy, stemmer=args.stemmer, language=args.language,
        )
        text = parse(args.file)
        result = analyzer.analyze(text, args.topic)
    except TopicountError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("=== Results ===")
    print(format_statistics(result.counts_by_topic), end="")
    print(f"Detected topic: {detect_topic(result.counts_by_topic)}")
    if args.details:
        print()
        print(format_detailed(result), end="")

    if args.stats_out:
        try:
            save_statistics(result.counts_by_topic, args.stats_out)
        except OSError as e:
            print(f"error: cannot write {args.stats_out}: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
