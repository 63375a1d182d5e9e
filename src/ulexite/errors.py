"""Exceptions raised by ulexite. All of them abort the current command."""


class UlexiteError(Exception):
    pass


class SnippetReadError(UlexiteError):
    """A file selected for summarization could not be read."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot read '{path}': {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class CompletionError(UlexiteError):
    """The completion service failed or returned no usable message."""
