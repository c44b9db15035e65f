"""
Interactive search over a small document corpus.

Builds the keyword index from a document-list file and a noise-words file,
then repeatedly asks for two keywords and prints the top documents containing
either of them, highest frequency first.

Usage (from repo root):
    python -m littlesearch.search_cli \
        --docs data/docs.txt \
        --noise data/noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import NoiseWordsNotFoundError, DocumentNotFoundError
from .index_builder import build_index_from_files
from .occurrence import KeywordIndex
from .search import TOP_K, query_top5
from .tokenizer import strip_trailing_punctuation


def normalize_query_keyword(raw: str) -> str:
    """
    Normalize a typed keyword the same way document words are normalized
    (lowercase, trailing punctuation stripped).
    """
    return strip_trailing_punctuation(raw.strip())


def format_results(kw1: str, kw2: str, documents: List[str]) -> str:
    header = f"1: {kw1} 2: {kw2}"
    if not documents:
        return f"{header}\nNo documents matched either keyword."
    lines = [header]
    for rank, document in enumerate(documents, start=1):
        lines.append(f"{rank:2d}. {document}")
    return "\n".join(lines)


def _prompt(label: str) -> Optional[str]:
    try:
        return input(label).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def run_search_loop(index: KeywordIndex, top_k: int = TOP_K) -> None:
    """
    Interactive command-line search loop. Empty line or Ctrl+C exits.
    """
    print(f"Indexed {len(index.documents)} documents, {len(index)} keywords.")
    print("Enter two keywords per search. Empty line or Ctrl+C to exit.")

    while True:
        raw1 = _prompt("keyword 1> ")
        if not raw1:
            break
        raw2 = _prompt("keyword 2> ")
        if not raw2:
            break

        kw1 = normalize_query_keyword(raw1)
        kw2 = normalize_query_keyword(raw2)
        documents = query_top5(index, kw1, kw2, limit=top_k)
        print(format_results(kw1, kw2, documents))


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Little search engine: two-keyword OR search.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path("data/docs.txt"),
        help="File listing the document names to index, one per line.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path("data/noisewords.txt"),
        help="File listing the noise words, one per line.",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Directory document names are relative to (default: directory of --docs).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop on the first document that cannot be read instead of skipping it.",
    )
    parser.add_argument(
        "--show-index",
        action="store_true",
        help="Print the whole keyword index after building it.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=TOP_K,
        help="Number of documents to show per search.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log indexing details.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        index = build_index_from_files(
            args.docs,
            args.noise,
            base_dir=args.base_dir,
            strict=args.strict,
        )
    except (NoiseWordsNotFoundError, DocumentNotFoundError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if index.skipped_documents:
        print(f"Warning: skipped {len(index.skipped_documents)} unreadable document(s): "
              + ", ".join(index.skipped_documents))
    if args.show_index:
        print(index)

    run_search_loop(index, top_k=args.top)


if __name__ == "__main__":
    main()
