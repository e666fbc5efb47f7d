"""
Listing parser for bbcschedules

Scans the "at a glance" schedule page line by line. The markup is not parsed
as a document tree: three line patterns (time range, programme link, title)
feed a small accumulator, and every title line closes the current programme.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..dictionaries import BASE_URL

# Listings wrap into the next day once a programme starts at hour 0 after
# more than this many programmes
WRAP_AFTER_COUNT = 3

FIELDS = ("start_time", "end_time", "url", "title")


@dataclass(frozen=True)
class ProgramEntry:
    """One scheduled programme"""

    start_time: str
    end_time: str
    title: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "start_time": self.start_time,
            "end_time": self.end_time,
            "title": self.title,
            "url": self.url,
        }


@dataclass
class ParserState:
    """Partial programme fields plus count of title lines seen"""

    fields: Dict[str, str] = field(default_factory=dict)
    completed: int = 0
    dropped: int = 0
    stopped: bool = False

    def is_complete(self) -> bool:
        return all(self.fields.get(name) for name in FIELDS)

    def reset(self):
        self.fields = {}


class ListingParser:
    """Parses schedule page markup into ProgramEntry records"""

    TIME_RANGE_PATTERN = re.compile(
        r'<span class="starttime">(.*)</span><span class="endtime">(?:&#8211;|–)(.*)</span>'
    )
    URL_PATTERN = re.compile(r'class="url" href="(.*)">')
    TITLE_PATTERN = re.compile(r'class="title">(.*)</span>')
    HOUR_PATTERN = re.compile(r"\s*([0-9]+)")

    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url

    def parse(self, markup: str) -> List[ProgramEntry]:
        """
        Parse schedule markup

        Args:
            markup: Raw page text, may be empty

        Returns:
            Programmes in document order
        """
        state = ParserState()
        listings: List[ProgramEntry] = []

        for line in (markup or "").split("\n"):
            line = line.strip()
            if not line:
                continue

            entry = self._parse_line(line, state)
            if state.stopped:
                logging.debug(
                    "Listing wrapped to next day after %d programmes, stopping", state.completed
                )
                break
            if entry:
                listings.append(entry)

        logging.debug(
            "Parsed %d programmes (%d incomplete dropped)", len(listings), state.dropped
        )
        return listings

    def _parse_line(self, line: str, state: ParserState) -> Optional[ProgramEntry]:
        """Apply the first matching line pattern to the parser state"""
        match = self.TIME_RANGE_PATTERN.search(line)
        if match:
            start_time, end_time = match.group(1), match.group(2)
            if state.completed > WRAP_AFTER_COUNT and self._start_hour(start_time) == 0:
                state.stopped = True
                return None
            state.fields["start_time"] = start_time
            state.fields["end_time"] = end_time
            return None

        match = self.URL_PATTERN.search(line)
        if match:
            state.fields["url"] = self.base_url + match.group(1)
            return None

        match = self.TITLE_PATTERN.search(line)
        if match:
            state.fields["title"] = match.group(1)
            entry = None
            if state.is_complete():
                entry = ProgramEntry(**{name: state.fields[name] for name in FIELDS})
            else:
                state.dropped += 1
                logging.debug("Dropping incomplete programme: %s", state.fields)
            state.reset()
            state.completed += 1
            return entry

        return None

    @classmethod
    def _start_hour(cls, start_time: str) -> int:
        """Leading digits of the hour, 0 when there are none"""
        match = cls.HOUR_PATTERN.match(start_time.split(":", 1)[0])
        return int(match.group(1)) if match else 0


def parse_listings(markup: str) -> List[ProgramEntry]:
    """Parse schedule markup with the default base URL"""
    return ListingParser().parse(markup)
