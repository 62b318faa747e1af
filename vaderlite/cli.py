"""
vaderlite command-line tool.

Usage:
    vaderlite score "VADER is smart, handsome, and funny." ["another text" ...]
    vaderlite score --file reviews.txt [--json]
    cat reviews.txt | vaderlite score --file -
    vaderlite demo
    vaderlite serve [--host HOST] [--port PORT]

Global options:
    --lexicon PATH         Word lexicon file (VADER tab-separated format)
    --emoji-lexicon PATH   Emoji lexicon file
    --log-level LEVEL      Overrides VADERLITE_LOG_LEVEL
"""
import argparse
import json
import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from rich.console import Console

from vaderlite import config
from vaderlite.core.analyzer import SentimentIntensityAnalyzer, get_default_analyzer
from vaderlite.core.lexicon import LexiconLoadError, load_emoji_lexicon, load_lexicon
from vaderlite.demo import run_demo, scores_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_LOAD_ERROR = 3  # argparse already uses 2 for usage errors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vaderlite", description="Rule-based sentiment intensity scorer")
    parser.add_argument("--lexicon",       type=str, default=None)
    parser.add_argument("--emoji-lexicon", type=str, default=None)
    parser.add_argument("--log-level",     type=str, default=config.LOG_LEVEL)

    sub = parser.add_subparsers(dest="command", required=True)

    score = sub.add_parser("score", help="Score texts given as arguments or read from a file")
    score.add_argument("texts", nargs="*")
    score.add_argument("--file", type=str, default=None, help="One text per line; '-' reads stdin")
    score.add_argument("--json", action="store_true", help="Emit one JSON object per line")

    sub.add_parser("demo", help="Score the built-in example sentences")

    serve = sub.add_parser("serve", help="Start the HTTP service")
    serve.add_argument("--host", type=str, default=config.API_HOST)
    serve.add_argument("--port", type=int, default=config.API_PORT)
    return parser


def build_analyzer(args: argparse.Namespace) -> SentimentIntensityAnalyzer:
    if args.lexicon is None and args.emoji_lexicon is None:
        return get_default_analyzer()
    return SentimentIntensityAnalyzer(
        lexicon=load_lexicon(args.lexicon or config.LEXICON_PATH),
        emoji_lexicon=load_emoji_lexicon(args.emoji_lexicon or config.EMOJI_LEXICON_PATH),
    )


def iter_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line.rstrip("\n")
        if line.strip():
            yield line


def read_texts(args: argparse.Namespace, stdin: TextIO) -> List[str]:
    texts = list(args.texts)
    if args.file == "-":
        texts.extend(iter_lines(stdin))
    elif args.file:
        with open(args.file, encoding="utf-8") as f:
            texts.extend(iter_lines(f))
    return texts


def emit_scores(analyzer: SentimentIntensityAnalyzer, texts: Iterable[str],
                as_json: bool, out: TextIO) -> None:
    rows = [(t, analyzer.polarity_scores(t)) for t in texts]
    if as_json:
        for text, sc in rows:
            out.write(json.dumps({"text": text, **sc.as_dict(), "label": sc.label}, ensure_ascii=False))
            out.write("\n")
        return
    Console(file=out).print(scores_table(rows))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "serve":
        # imported lazily: uvicorn/fastapi are only needed for this command
        from vaderlite.server import run
        try:
            run(host=args.host, port=args.port)
        except LexiconLoadError as e:
            print(f"[vaderlite] Failed to load lexicon: {e}", file=sys.stderr)
            return EXIT_LOAD_ERROR
        return EXIT_OK

    try:
        analyzer = build_analyzer(args)
    except LexiconLoadError as e:
        print(f"[vaderlite] Failed to load lexicon: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    if args.command == "demo":
        run_demo(analyzer)
        return EXIT_OK

    try:
        texts = read_texts(args, sys.stdin)
    except OSError as e:
        print(f"[vaderlite] Cannot read {args.file}: {e}", file=sys.stderr)
        return EXIT_USAGE
    if not texts:
        print("[vaderlite] Nothing to score: pass TEXT arguments or --file", file=sys.stderr)
        return EXIT_USAGE

    emit_scores(analyzer, texts, args.json, sys.stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
