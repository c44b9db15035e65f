"""
Tokenizer and keyword normalizer for the little search engine.
Splits document text on whitespace and turns raw words into keywords:
lowercase, trailing punctuation stripped, letters only, not a noise word.
HTML documents are reduced to their visible text before tokenizing.
"""

import re
import warnings
from pathlib import Path
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

from .errors import NoiseWordsNotFoundError

# Only these characters are stripped, and only from the end of a word
PUNCTUATION = frozenset(".,?:;!")

HTML_SUFFIXES = {".html", ".htm"}

_KEYWORD_RE = re.compile(r"[a-z]+")
_TOKENIZER = WhitespaceTokenizer()


def tokenize(text: str) -> list[str]:
    """Split text into raw whitespace-delimited words (no cleanup)."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def strip_trailing_punctuation(word: str) -> str:
    """
    Lowercase word and strip its trailing run of punctuation.
    The first character is never stripped, so "." stays "." (and is rejected later).
    """
    word = word.lower()
    while len(word) > 1 and word[-1] in PUNCTUATION:
        word = word[:-1]
    return word


def get_keyword(word: str, noise_words: frozenset[str] | set[str] = frozenset()) -> str | None:
    """
    Return word as a keyword, or None if it is not indexable.

    A keyword is what is left after lowercasing and stripping TRAILING punctuation,
    provided it consists only of letters a-z and is not a noise word.
    Leading or embedded punctuation (and digits, apostrophes, hyphens) reject the word.
    """
    candidate = strip_trailing_punctuation(word)
    if not _KEYWORD_RE.fullmatch(candidate):
        return None
    if candidate in noise_words:
        return None
    return candidate


def get_keywords(text: str, noise_words: frozenset[str] | set[str] = frozenset()) -> list[str]:
    """Tokenize text and return the accepted keywords in document order."""
    keywords = []
    for word in tokenize(text):
        keyword = get_keyword(word, noise_words)
        if keyword is not None:
            keywords.append(keyword)
    return keywords


def load_noise_words(filepath: Path) -> frozenset[str]:
    """
    Read noise words (whitespace separated, usually one per line) into a lowercase set.
    """
    filepath = Path(filepath)
    try:
        text = read_text_file(filepath)
    except (OSError, ValueError) as e:
        raise NoiseWordsNotFoundError(filepath, getattr(e, "strerror", None) or str(e)) from e
    return frozenset(w.lower() for w in tokenize(text))


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def read_document_text(filepath: Path) -> str:
    """
    Read a document for indexing. HTML documents yield their visible text,
    anything else is returned as-is.
    """
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        return extract_text_from_html(content)
    return content
