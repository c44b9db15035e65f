"""
Build the keyword index and print analytics for the corpus.

Usage:
    python build_index.py [--docs data/docs.txt] [--noise data/noisewords.txt]

Put the document-list file, the noise-words file and the documents in data/,
then run this script.

Output:
  - Analytics table printed to console (documents indexed/skipped, unique keywords,
    most widespread keywords)
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from littlesearch.errors import DocumentNotFoundError, NoiseWordsNotFoundError
from littlesearch.index_builder import build_index_from_files


def get_docs_path() -> Path:
    base = Path(__file__).resolve().parent
    return base / "data" / "docs.txt"


def get_noise_words_path() -> Path:
    base = Path(__file__).resolve().parent
    return base / "data" / "noisewords.txt"


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build keyword index and print analytics")
    parser.add_argument(
        "--docs",
        type=Path,
        default=None,
        help="Document-list file (default: data/docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=None,
        help="Noise-words file (default: data/noisewords.txt)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first unreadable document",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of keywords to list by document count",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    docs_path = args.docs or get_docs_path()
    noise_path = args.noise or get_noise_words_path()

    if not docs_path.exists():
        print(f"No document list found at {docs_path}.")
        sys.exit(1)

    try:
        index = build_index_from_files(docs_path, noise_path, strict=args.strict)
    except (NoiseWordsNotFoundError, DocumentNotFoundError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not index.documents:
        print("No documents could be indexed.")
        sys.exit(1)

    widest = sorted(
        index.keywords(),
        key=lambda kw: (-len(index.get_occurrences(kw)), kw),
    )[: args.top]

    print("\n" + "=" * 50)
    print("KEYWORD INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {len(index.documents)} |")
    print(f"| Number of skipped documents | {len(index.skipped_documents)} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print()
    if widest:
        print("| Keyword | Documents | Top document |")
        print("|---------|-----------|--------------|")
        for kw in widest:
            occs = index.get_occurrences(kw)
            print(f"| {kw} | {len(occs)} | {occs[0]} |")
        print()
    print("=" * 50)
    for document in index.skipped_documents:
        print(f"Warning: could not read {document}")
    print()


if __name__ == "__main__":
    main()
