# modern_timeline/exceptions.py
"""Exception hierarchy for modern_timeline."""

from typing import Dict, Optional


class TimelineError(Exception):
    """Base exception for all timeline errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        # "<message>: <reason> [key=value; ...]", reason first when given
        details = dict(self.details)
        text = self.message
        reason = details.pop("reason", None)
        if reason:
            text = f"{text}: {reason}"
        if details:
            text += " [" + "; ".join(f"{k}={v}" for k, v in details.items()) + "]"
        return text


class MalformedDateError(TimelineError):
    """Raised when a value cannot be decomposed into date components."""

    def __init__(self, value, reason: str):
        super().__init__(
            "Cannot read date value",
            details={"value": repr(value), "reason": reason},
        )
        self.value = value
        self.reason = reason


class PresenterError(TimelineError):
    """Raised when a slide presenter cannot render an event."""

    def __init__(self, page_title: str, reason: str):
        super().__init__(
            f"Cannot present event for page: {page_title}",
            details={"reason": reason},
        )
        self.page_title = page_title
        self.reason = reason


class MalformedResultError(TimelineError):
    """Raised when an exported query row cannot be turned into a subject."""
    pass


class ConfigurationError(TimelineError):
    """Raised when a timeline option has an invalid value."""

    def __init__(self, option: str, value, reason: str):
        super().__init__(
            f"Invalid value for option {option}",
            details={"value": repr(value), "reason": reason},
        )
        self.option = option
        self.value = value
