"""
Index builder: constructs the keyword index from a list of documents.
Each document is scanned into its own keyword table, which is then merged
into the shared index one keyword at a time.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Callable, Iterable

from .errors import DocumentNotFoundError
from .occurrence import KeywordIndex, Occurrence
from .tokenizer import get_keywords, load_noise_words, read_document_text, read_text_file, tokenize

logger = logging.getLogger(__name__)

ContentProvider = Callable[[str], str]


class FileContentProvider:
    """
    Supplies document text from disk. Document names are resolved against base_dir
    (absolute names are used as-is). HTML documents yield their visible text.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else Path(".")

    def resolve(self, document: str) -> Path:
        return self.base_dir / document

    def __call__(self, document: str) -> str:
        filepath = self.resolve(document)
        if not filepath.is_file():
            raise DocumentNotFoundError(document)
        try:
            return read_document_text(filepath)
        except (OSError, ValueError) as e:
            raise DocumentNotFoundError(document, str(e)) from e


def read_document_list(filepath: Path) -> list[str]:
    """
    Read the corpus listing: document names separated by whitespace, in order.
    """
    filepath = Path(filepath)
    try:
        text = read_text_file(filepath)
    except (OSError, ValueError) as e:
        raise DocumentNotFoundError(str(filepath), getattr(e, "strerror", None) or str(e)) from e
    return tokenize(text)


def load_keywords(
    document: str,
    text: str,
    noise_words: frozenset[str] | set[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Scan one document and return its keyword table: keyword -> Occurrence
    carrying the keyword's total count in this document.
    """
    counts = Counter(get_keywords(text, noise_words))
    return {
        keyword: Occurrence(document=document, frequency=count)
        for keyword, count in counts.items()
    }


def build_index(
    document_ids: Iterable[str],
    noise_words: frozenset[str] | set[str],
    content_provider: ContentProvider,
    *,
    strict: bool = False,
) -> KeywordIndex:
    """
    Build the keyword index from documents, in the given order.
    - content_provider(document) returns the document's text or raises DocumentNotFoundError.
    - A document that cannot be read is skipped (recorded in index.skipped_documents),
      unless strict is set, in which case the error propagates.
    - A document listed more than once is indexed once.
    """
    index = KeywordIndex()
    for document in document_ids:
        if index.has_document(document):
            logger.debug("Skipping repeated document %s", document)
            continue
        try:
            text = content_provider(document)
        except DocumentNotFoundError as e:
            if strict:
                raise
            logger.warning("Could not read %s: %s", document, e)
            index.skipped_documents.append(document)
            continue

        index.merge_keywords(load_keywords(document, text, noise_words))
        index.add_document(document)

    logger.info(
        "Indexed %d documents (%d skipped), %d keywords",
        len(index.documents),
        len(index.skipped_documents),
        len(index),
    )
    return index


def build_index_from_files(
    docs_file: Path,
    noise_words_file: Path,
    *,
    base_dir: Path | None = None,
    strict: bool = False,
) -> KeywordIndex:
    """
    Build the keyword index from a document-list file and a noise-words file.
    Document names are resolved relative to base_dir (default: the list file's directory).
    Raises NoiseWordsNotFoundError if the noise words cannot be read.
    """
    docs_file = Path(docs_file)
    noise_words = load_noise_words(noise_words_file)
    document_ids = read_document_list(docs_file)
    provider = FileContentProvider(base_dir if base_dir is not None else docs_file.parent)
    return build_index(document_ids, noise_words, provider, strict=strict)
