"""Error hierarchy for subtitle loading, parsing, saving and statistics."""


class SubtitleError(Exception):
    """Base subtitle error with a machine-readable code and optional detail."""

    def __init__(
        self,
        *,
        code: str,
        message: str,
        detail: str | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class SourceNotFoundError(SubtitleError):
    """Raised when the referenced subtitle file does not exist."""

    def __init__(self, source: str) -> None:
        super().__init__(
            code="source_not_found",
            message=f'File "{source}" not found.',
        )


class UnreadableSourceError(SubtitleError):
    """Raised when the subtitle file exists but yields no bytes."""

    def __init__(self, source: str, *, detail: str | None = None) -> None:
        super().__init__(
            code="unreadable_source",
            message=f"{source} could not be read or is empty.",
            detail=detail,
        )


class EncodingUndetectableError(SubtitleError):
    """Raised when no usable encoding label can be found for the source."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(
            code="encoding_undetectable",
            message=message,
            detail=detail,
        )


class InvalidFormatError(SubtitleError):
    """Raised when no cue block matches the subtitle grammar."""

    def __init__(self, source: str) -> None:
        super().__init__(
            code="invalid_format",
            message=f"{source or '<content>'} is not a proper .srt file.",
        )


class WriteFailureError(SubtitleError):
    """Raised when output could not be persisted."""

    def __init__(self, target: str, *, detail: str | None = None) -> None:
        super().__init__(
            code="write_failure",
            message=f"Unable to save the file {target}.",
            detail=detail,
        )


class EmptyDocumentStatisticsError(SubtitleError):
    """Raised when percentages are requested for a document without cues."""

    def __init__(self) -> None:
        super().__init__(
            code="empty_document_statistics",
            message="Cannot compute percentages for a subtitle without entries",
        )
