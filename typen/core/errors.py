"""Error kinds raised by the practice engine and its collaborators."""


class TypenError(Exception):
    """Base class for user-facing, recoverable Typen errors."""


class EmptyContentError(TypenError, ValueError):
    """Content normalized to nothing practiceable (too short or unsupported)."""


class ExtractionError(TypenError):
    """The document extraction service failed; the message is shown verbatim."""
