"""
bbcschedules.schedules - Programmes schedules for one channel and date

Combines request validation, URL construction, download and parsing. Listings
are fetched once per ProgrammesSchedules object and cached afterwards.
"""

import logging
from datetime import date
from typing import Any, Callable, Optional, Tuple

from .downloader import ScheduleDownloader
from .formatter import render, render_json
from .parser import ListingParser, ProgramEntry
from .request import ScheduleRequest, build_url, validate


class ProgrammesSchedules:
    """
    BBC programmes schedule for a channel, region and date

    Example:
        schedules = ProgrammesSchedules({"channel": "bbcone", "region": "london"})
        print(schedules)
    """

    def __init__(
        self,
        config: Any,
        downloader: Optional[Any] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Args:
            config: Mapping with channel, region and optional year/month/day
            downloader: Object with a fetch(url) -> str method, or such a callable
                        itself; a ScheduleDownloader is created on demand if None
            today: Clock used when config has no date

        Raises:
            ValidationError: if config is invalid
        """
        self.request: ScheduleRequest = validate(config, today=today)
        self._downloader = downloader
        self._owns_downloader = downloader is None
        self._parser = ListingParser()
        self._listings: Optional[Tuple[ProgramEntry, ...]] = None

    @property
    def channel_name(self) -> Optional[str]:
        return self.request.channel_name

    @property
    def region_name(self) -> Optional[str]:
        return self.request.region_name

    @property
    def downloader(self):
        if self._downloader is None:
            self._downloader = ScheduleDownloader()
        return self._downloader

    def get_url(self) -> str:
        return build_url(self.request)

    def get_listings(self) -> Tuple[ProgramEntry, ...]:
        """
        Get programmes listings, downloading them on first use

        Raises:
            FetchFailed: if the schedule page cannot be downloaded
        """
        if self._listings is not None:
            logging.debug("Using cached listings for %s", self.get_url())
            return self._listings

        url = self.get_url()
        fetch = getattr(self.downloader, "fetch", self.downloader)
        content = fetch(url)
        self._listings = tuple(self._parser.parse(content))
        logging.info(
            "%d programmes found for %s on %s",
            len(self._listings),
            self._display_name(),
            self.request.date_string,
        )
        return self._listings

    def as_string(self) -> str:
        """Listings in human readable format"""
        return render(self.get_listings())

    def as_json(self) -> str:
        return render_json(self.get_listings(), self.request)

    def _display_name(self) -> str:
        if self.region_name:
            return f"{self.channel_name} ({self.region_name})"
        return self.channel_name or self.request.channel

    def close(self):
        """Close the downloader if it was created here"""
        if self._owns_downloader and self._downloader is not None:
            self._downloader.close()
            self._downloader = None

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return (
            f"ProgrammesSchedules(channel={self.request.channel!r}, "
            f"region={self.request.region!r}, date={self.request.date_string!r})"
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
