"""
bbcschedules - BBC TV programmes schedules

Fetches the BBC "at a glance" schedule page for a channel (and region, for
BBC One and BBC Two) on a given date and parses it into programme entries.
"""

__version__ = "0.6.0"
__author__ = "bbcschedules developers"
__license__ = "GPL-3.0"

from .dictionaries import BASE_URL, CHANNELS, REGIONS
from .downloader import ScheduleDownloader
from .errors import (
    FetchFailed,
    InvalidChannel,
    InvalidRegion,
    MissingChannel,
    MissingDay,
    MissingMonth,
    MissingRegion,
    MissingYear,
    NotAMapping,
    ScheduleError,
    UnexpectedKeyCount,
    ValidationError,
)
from .formatter import render, render_json
from .parser import ListingParser, ProgramEntry, parse_listings
from .request import ScheduleRequest, build_url, validate
from .schedules import ProgrammesSchedules

__all__ = [
    "BASE_URL",
    "CHANNELS",
    "REGIONS",
    "ScheduleDownloader",
    "FetchFailed",
    "InvalidChannel",
    "InvalidRegion",
    "MissingChannel",
    "MissingDay",
    "MissingMonth",
    "MissingRegion",
    "MissingYear",
    "NotAMapping",
    "ScheduleError",
    "UnexpectedKeyCount",
    "ValidationError",
    "render",
    "render_json",
    "ListingParser",
    "ProgramEntry",
    "parse_listings",
    "ScheduleRequest",
    "build_url",
    "validate",
    "ProgrammesSchedules",
]
