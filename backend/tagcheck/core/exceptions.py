"""
Tag Checker Exceptions

Only absent input and unreadable documents are errors. Malformed markup is
skipped by the extractor and imbalance is reported as a verdict.
"""


class TagCheckError(Exception):
    """Base exception for tag checker errors."""
    pass


class InvalidInputError(TagCheckError, ValueError):
    """Raised when no document text is supplied or the document type is unsupported."""
    def __init__(self, message: str = "No document text supplied"):
        self.message = message
        super().__init__(self.message)


class DocumentLoadError(TagCheckError):
    """Raised when a document exists but cannot be read."""
    def __init__(self, path, error: Exception):
        self.path = path
        self.original_error = error
        self.message = f"An error occurred when reading from {path}: {error}"
        super().__init__(self.message)
