class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class ProcessingFailed(ProcessorError):
    """Raised when any pipeline stage fails unexpectedly.

    Wraps the underlying error so callers see a single failure kind no
    matter which stage broke. ``detail`` carries the diagnostic text.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
