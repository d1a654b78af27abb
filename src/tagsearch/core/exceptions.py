"""Custom exceptions for tagsearch."""


class TagsearchError(Exception):
    """Base exception for all tagsearch errors."""

    pass


class ConfigError(TagsearchError):
    """Configuration value is missing or invalid."""

    pass


class FileUnreadableError(TagsearchError):
    """A file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        """Initialize exception with path and reason.

        Args:
            path: Path of the file that could not be read.
            reason: Underlying error message.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class QueryError(TagsearchError):
    """Keyword query could not be compiled."""

    pass


class MalformedQueryTermError(QueryError):
    """Query term is empty once the negation marker is removed."""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Malformed query term: {term!r} (expected a tag name, or '!' followed by one)")


class SourceListError(TagsearchError):
    """Files under a root could not be listed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)
