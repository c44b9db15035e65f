"""
Query engine: "kw1 OR kw2" search over the keyword index.

Both keywords' occurrence lists are already in descending frequency order,
so the ranking is a merge walk over the two lists. Ties in frequency go to
the first keyword. At most TOP_K distinct documents are returned.
"""

from .occurrence import KeywordIndex, Occurrence

TOP_K = 5


def merge_occurrences(
    occs1: list[Occurrence],
    occs2: list[Occurrence],
    limit: int = TOP_K,
) -> list[str]:
    """
    Merge two descending occurrence lists into up to `limit` distinct document names.
    Each document is ranked by the frequency it was first reached with.
    """
    results: list[str] = []
    seen: set[str] = set()

    def emit(document: str) -> None:
        if document not in seen:
            seen.add(document)
            results.append(document)

    i = j = 0
    while i < len(occs1) and j < len(occs2) and len(results) < limit:
        o1, o2 = occs1[i], occs2[j]
        if o1.frequency > o2.frequency:
            emit(o1.document)
            i += 1
        elif o1.frequency < o2.frequency:
            emit(o2.document)
            j += 1
        elif o1.document == o2.document:
            emit(o1.document)
            i += 1
            j += 1
        elif o1.document not in seen:
            emit(o1.document)
            i += 1
        elif o2.document not in seen:
            emit(o2.document)
            i += 1
            j += 1
        else:
            i += 1
            j += 1

    # Leftovers: first keyword's list before the second's
    for occs, start in ((occs1, i), (occs2, j)):
        for occ in occs[start:]:
            if len(results) >= limit:
                return results
            emit(occ.document)
    return results


def query_top5(index: KeywordIndex, kw1: str, kw2: str, limit: int = TOP_K) -> list[str]:
    """
    Search result for "kw1 or kw2": names of documents containing either keyword,
    in descending order of frequency, limited to `limit` entries.
    Unknown keywords match nothing; no match gives an empty list.
    """
    return merge_occurrences(index.get_occurrences(kw1), index.get_occurrences(kw2), limit)
