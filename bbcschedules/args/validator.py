"""
Argument validation module for bbcschedules

Handles validation of command-line arguments: channel, schedule date and
HTTP timeout. Full request validation happens in bbcschedules.request.
"""

import re
from datetime import date
from typing import Optional, Tuple

from ..dictionaries import CHANNELS, get_available_channels


class ArgumentValidator:
    """Validates command-line arguments"""

    DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")
    MAX_TIMEOUT = 300

    @classmethod
    def validate_channel(cls, channel: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate channel parameter

        Args:
            channel: Channel key to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if channel is None:
            return True, None

        if channel not in CHANNELS:
            return False, (
                f"Parameter [--channel] must be one of {', '.join(get_available_channels())}, got: {channel}"
            )

        return True, None

    @classmethod
    def validate_date(cls, value: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate date parameter (YYYY-MM-DD)

        Args:
            value: Date string to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            return True, None

        parts = cls.parse_date(value)
        if parts is None:
            return False, f"Parameter [--date] must be a valid YYYY-MM-DD date, got: {value}"

        return True, None

    @classmethod
    def validate_timeout(cls, timeout: Optional[int]) -> Tuple[bool, Optional[str]]:
        """Validate timeout parameter (1-300 seconds)"""
        if timeout is None:
            return True, None

        if timeout < 1 or timeout > cls.MAX_TIMEOUT:
            return False, f"Parameter [--timeout] must be 1-{cls.MAX_TIMEOUT} seconds, got: {timeout}"

        return True, None

    @classmethod
    def parse_date(cls, value: str) -> Optional[Tuple[int, int, int]]:
        """Split a YYYY-MM-DD string into (year, month, day), None if invalid"""
        match = cls.DATE_PATTERN.match(value.strip())
        if not match:
            return None

        year, month, day = (int(part) for part in match.groups())
        try:
            date(year, month, day)
        except ValueError:
            return None

        return year, month, day

    @classmethod
    def validate_all_arguments(cls, args) -> list:
        """
        Validate all arguments at once

        Args:
            args: Parsed arguments object

        Returns:
            List of error messages (empty if all valid)
        """
        errors = []

        for check, name in (
            (cls.validate_channel, "channel"),
            (cls.validate_date, "date"),
            (cls.validate_timeout, "timeout"),
        ):
            valid, error = check(getattr(args, name, None))
            if not valid:
                errors.append(error)

        return errors
