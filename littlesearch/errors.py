"""Errors raised while loading the corpus and noise words."""


class DocumentNotFoundError(FileNotFoundError):
    """A document named in the corpus could not be located or read."""

    def __init__(self, document: str, reason: str | None = None) -> None:
        self.document = document
        message = f"Document not found: {document}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoiseWordsNotFoundError(FileNotFoundError):
    """The noise-word source could not be read. Indexing cannot proceed without it."""

    def __init__(self, path, reason: str | None = None) -> None:
        self.path = path
        message = f"Noise words file not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
