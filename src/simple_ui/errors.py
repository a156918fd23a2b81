"""Exceptions raised by the simple script executor."""


class SimpleError(RuntimeError):
    """Base class for simple renderer errors."""


class SimpleExecutionError(SimpleError):
    """The renderer process could not be started or its streams failed."""


class SimpleTimeoutError(SimpleExecutionError):
    """The renderer did not answer within the configured timeout."""

    def __init__(self, timeout_sec: float):
        super().__init__(f"simple did not respond within {timeout_sec:.1f}s")
        self.timeout_sec = timeout_sec


__all__ = ["SimpleError", "SimpleExecutionError", "SimpleTimeoutError"]
