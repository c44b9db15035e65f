"""
Occurrence and keyword index data structures.

An occurrence records how many times a keyword appears in one document.
The keyword index maps each keyword to its occurrences, kept in descending
order of frequency. New occurrences are placed with a single binary-search
insertion; the lists are never re-sorted.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document name, as listed in the corpus
    - frequency: number of times the keyword occurs in that document (>= 1)
    """

    document: str
    frequency: int

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(f"frequency must be positive, got {self.frequency}")

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


def find_insertion_point(
    occurrences: list[Occurrence],
    occurrence: Occurrence,
) -> tuple[int, list[int]]:
    """
    Binary search occurrences (descending by frequency) for where occurrence belongs.

    Returns (index, midpoints). On an equal frequency the new entry goes right after
    the first matching midpoint the search lands on, not after the last equal entry.
    Otherwise it goes to hi + 1 once the search is exhausted.
    """
    target = occurrence.frequency
    midpoints: list[int] = []
    lo, hi = 0, len(occurrences) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        freq = occurrences[mid].frequency
        if freq == target:
            return mid + 1, midpoints
        if freq < target:
            hi = mid - 1
        else:
            lo = mid + 1
    return hi + 1, midpoints


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence in the list to its place in descending frequency order.
    Elements 0..n-2 must already be in order.

    Returns the midpoints checked by the binary search, or None if the list
    has a single element.
    """
    if len(occurrences) < 2:
        return None
    index, midpoints = find_insertion_point(occurrences[:-1], occurrences[-1])
    if index != len(occurrences) - 1:
        occurrences.insert(index, occurrences.pop())
    return midpoints


class KeywordIndex:
    """
    Keyword index: map from keyword -> occurrences in descending frequency.
    Built one document at a time with merge_keywords, read-only afterwards.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        # Insertion-ordered set of merged documents
        self._documents: dict[str, None] = {}
        self.skipped_documents: list[str] = []

    def merge_keywords(self, keywords: dict[str, Occurrence]) -> None:
        """
        Merge one document's keyword table into the index.
        A document that is already in the index is not merged again.
        """
        if not keywords:
            return
        documents = {occ.document for occ in keywords.values()}
        if len(documents) != 1:
            raise ValueError(f"keyword table spans several documents: {sorted(documents)}")
        document = documents.pop()
        if self.has_document(document):
            logger.debug("Document %s already merged, ignoring", document)
            return

        for keyword, occurrence in keywords.items():
            if keyword not in self._index:
                self._index[keyword] = [occurrence]
            else:
                occurrences = self._index[keyword]
                occurrences.append(occurrence)
                insert_last_occurrence(occurrences)
        self._documents[document] = None
        logger.debug("Merged %d keywords from %s", len(keywords), document)

    def add_document(self, document: str) -> None:
        """Record a document that contributed no keywords."""
        if not self.has_document(document):
            self._documents[document] = None

    def has_document(self, document: str) -> bool:
        """True if document has already been merged."""
        return document in self._documents

    def get_occurrences(self, keyword: str) -> list[Occurrence]:
        """Return a copy of the occurrences for a keyword, or empty list."""
        return list(self._index.get(keyword, ()))

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    @property
    def documents(self) -> list[str]:
        """Documents merged so far, in merge order."""
        return list(self._documents)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def __repr__(self) -> str:
        return repr(self._index)

    def to_dict(self) -> dict:
        """Plain dict view, for printing or inspection."""
        return {
            keyword: [{"document": o.document, "frequency": o.frequency} for o in occurrences]
            for keyword, occurrences in self._index.items()
        }
