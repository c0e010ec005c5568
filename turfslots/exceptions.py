# turfslots/exceptions.py
"""
Errors raised by the slot engine and the turf API client.
"""

from typing import Optional


class SlotEngineError(ValueError):
    """Base class for invalid input to the slot engine."""


class ParseError(SlotEngineError):
    """Time string is not H:MM / HH:MM[:SS]."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid time string: {value!r}")


class AmbiguousWindowError(SlotEngineError):
    """Operating window closes before it opens and is not flagged overnight."""

    def __init__(self, open_time: str, close_time: str):
        self.open_time = open_time
        self.close_time = close_time
        super().__init__(
            f"Operating window {open_time}-{close_time} closes before it opens; "
            f"set overnight=True if it runs past midnight"
        )


class TurfApiError(Exception):
    """Remote turf API returned an error or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
