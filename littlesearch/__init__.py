"""Little search engine: keyword index and two-keyword search."""

from .errors import DocumentNotFoundError, NoiseWordsNotFoundError
from .occurrence import Occurrence, KeywordIndex, insert_last_occurrence, find_insertion_point
from .index_builder import build_index, build_index_from_files, load_keywords, FileContentProvider
from .search import query_top5
from .tokenizer import get_keyword, tokenize, load_noise_words
