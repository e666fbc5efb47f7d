"""
bbcschedules.errors - Exception hierarchy

Validation errors are raised while building a schedule request, FetchFailed
while downloading the schedule page.
"""

from typing import Optional


class ScheduleError(Exception):
    """Base class for all bbcschedules errors"""


class ValidationError(ScheduleError, ValueError):
    """Invalid schedule configuration"""

    default_message = "Invalid schedule configuration"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class NotAMapping(ValidationError):
    default_message = "Input param has to be a mapping"


class MissingChannel(ValidationError):
    default_message = "Missing key channel"


class InvalidChannel(ValidationError):
    default_message = "Invalid value for channel"


class MissingRegion(ValidationError):
    default_message = "Missing key region"


class InvalidRegion(ValidationError):
    default_message = "Invalid value for region"


class MissingYear(ValidationError):
    default_message = "Missing key year from input"


class MissingMonth(ValidationError):
    default_message = "Missing key month from input"


class MissingDay(ValidationError):
    default_message = "Missing key day from input"


class UnexpectedKeyCount(ValidationError):
    default_message = "Invalid number of keys found in the input"


class FetchFailed(ScheduleError):
    """Schedule page could not be downloaded"""

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        message = f"Couldn't connect to [{url}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
