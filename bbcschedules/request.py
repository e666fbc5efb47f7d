"""
bbcschedules.request - Schedule request validation and URL construction

A schedule request is described by a plain mapping with the keys channel,
region (BBC One and BBC Two only) and an optional year/month/day triple.
validate() checks it against an ordered rule table and returns an immutable
ScheduleRequest; build_url() turns that into the "at a glance" page URL.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, List, Optional, Tuple, Type

from .dictionaries import BASE_URL, CHANNELS, REGIONS, get_channel_name, get_region_name, has_regions
from .errors import (
    InvalidChannel,
    InvalidRegion,
    MissingChannel,
    MissingDay,
    MissingMonth,
    MissingRegion,
    MissingYear,
    NotAMapping,
    UnexpectedKeyCount,
    ValidationError,
)

DATE_KEYS = ("year", "month", "day")


@dataclass(frozen=True)
class ScheduleRequest:
    """Validated description of one schedule page"""

    channel: str
    region: Optional[str]
    year: int
    month: int
    day: int

    @property
    def channel_name(self) -> Optional[str]:
        return get_channel_name(self.channel)

    @property
    def region_name(self) -> Optional[str]:
        return get_region_name(self.channel, self.region)

    @property
    def date_string(self) -> str:
        """Schedule date as YYYY-MM-DD"""
        return f"{self.year:0>4}-{self.month:0>2}-{self.day:0>2}"


def _present(config: Mapping, key: str) -> bool:
    return config.get(key) is not None


def _requires(key: str, other: str) -> Callable[[Mapping], bool]:
    """Rule: if key is given, other must be in the input too"""

    def check(config: Mapping) -> bool:
        return not _present(config, key) or other in config

    return check


def _date_key_count(config: Mapping) -> int:
    return 3 if all(_present(config, key) for key in DATE_KEYS) else 0


def _expected_key_count(config: Mapping) -> int:
    base = 2 if has_regions(config["channel"]) else 1
    return base + _date_key_count(config)


def _known_channel(config: Mapping) -> bool:
    channel = config["channel"]
    return isinstance(channel, str) and channel in CHANNELS


def _has_region(config: Mapping) -> bool:
    return not has_regions(config["channel"]) or "region" in config


def _known_region(config: Mapping) -> bool:
    if not has_regions(config["channel"]):
        return True
    region = config["region"]
    return isinstance(region, str) and region in REGIONS[config["channel"]]


# Checked in order, the first failing rule decides the reported error
VALIDATION_RULES: List[Tuple[Callable[[Any], bool], Type[ValidationError]]] = [
    (lambda config: isinstance(config, Mapping), NotAMapping),
    (lambda config: "channel" in config, MissingChannel),
    (_known_channel, InvalidChannel),
    (_requires("year", "month"), MissingMonth),
    (_requires("year", "day"), MissingDay),
    (_requires("month", "year"), MissingYear),
    (_requires("month", "day"), MissingDay),
    (_requires("day", "year"), MissingYear),
    (_requires("day", "month"), MissingMonth),
    (_has_region, MissingRegion),
    (_known_region, InvalidRegion),
    (lambda config: len(config) == _expected_key_count(config), UnexpectedKeyCount),
]


def check_rules(config: Any):
    """
    Run the validation rule table against a configuration

    Raises:
        ValidationError: subclass matching the first failing rule
    """
    for check, error in VALIDATION_RULES:
        if not check(config):
            raise error()


def validate(config: Any, today: Optional[Callable[[], date]] = None) -> ScheduleRequest:
    """
    Validate a schedule configuration

    Args:
        config: Mapping with channel, region and optional year/month/day
        today: Clock returning the local date, used when no date is given

    Returns:
        Immutable ScheduleRequest

    Raises:
        ValidationError: subclass describing the first problem found
    """
    check_rules(config)

    channel = config["channel"]
    region = config.get("region") if has_regions(channel) else None

    if _date_key_count(config):
        year, month, day = (config[key] for key in DATE_KEYS)
    else:
        current = (today or date.today)()
        year, month, day = current.year, current.month, current.day
        logging.debug("No date given, using today: %s", current.isoformat())

    request = ScheduleRequest(channel=channel, region=region, year=year, month=month, day=day)
    logging.debug(
        "Validated request: channel=%s region=%s date=%s",
        request.channel,
        request.region,
        request.date_string,
    )
    return request


def build_url(request: ScheduleRequest) -> str:
    """Build the "at a glance" schedule URL for a request"""
    url = f"{BASE_URL}/{request.channel}/programmes/schedules"
    if request.region is not None and request.region in REGIONS.get(request.channel, {}):
        url += f"/{request.region}"
    url += f"/{request.year}/{request.month}/{request.day}/ataglance"
    return url
