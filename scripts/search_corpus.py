"""Search a JSON training corpus from the command line, or run the diagnostic queries."""
from __future__ import annotations

import argparse
import json
import sys

from application.diagnostics import run_diagnostics
from application.use_cases.search import search
from domain.errors import RetrievalError
from infrastructure.config import ContainerConfig, build_default_container
from infrastructure.sources.json_fragment_source import scored_result_to_dict
from ui.logging_utils import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("query", nargs="?", help="Free-text query.")
    parser.add_argument(
        "--corpus",
        default="data/sample_corpus.json",
        help="JSON file with fragments (default: data/sample_corpus.json)",
    )
    parser.add_argument("--limit", type=int, default=5, help="Maximum number of results (default: 5)")
    parser.add_argument(
        "--scorer",
        choices=("lexical", "bm25"),
        default="lexical",
        help="Relevance scorer (default: lexical)",
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Run the fixed battery of plumbing test queries instead of a single query.",
    )
    args = parser.parse_args(argv)
    if not args.diagnostics and args.query is None:
        parser.error("a query is required unless --diagnostics is given")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging()
    container = build_default_container(ContainerConfig(scorer=args.scorer, corpus_path=args.corpus))

    def _search(query_text: str, limit: int):
        return search(
            query_text,
            corpus_index=container.corpus_index,
            tokenizer=container.tokenizer,
            scorer=container.scorer,
            limit=limit,
        )

    if args.diagnostics:
        print(json.dumps(run_diagnostics(_search).to_dict(), indent=2, ensure_ascii=False))
        return 0

    try:
        results = _search(args.query, args.limit)
    except RetrievalError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    payload = {"query": args.query, "results": [scored_result_to_dict(result) for result in results]}
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
