"""Style engine error types."""


class StyleEngineError(Exception):
    """Base class for errors raised by the style engine."""


class UnknownExpanderError(StyleEngineError, KeyError):
    """Raised when a custom expander id is not registered."""

    def __init__(self, handler_id: str):
        self.handler_id = handler_id
        super().__init__(f"No value expander registered for {handler_id!r}")

    def __str__(self) -> str:
        return self.args[0]
