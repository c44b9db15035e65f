from pathlib import Path

import pytest


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Two small documents plus the document-list and noise-words files."""
    (tmp_path / "doc1.txt").write_text("Apple apple BANANA. banana, the\n", encoding="utf-8")
    (tmp_path / "doc2.txt").write_text("banana apple apple!\n", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("doc1.txt\ndoc2.txt\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("the\nis\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def noise_words() -> frozenset[str]:
    return frozenset({"the", "is"})
