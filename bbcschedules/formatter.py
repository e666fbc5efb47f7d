"""
bbcschedules.formatter - Listing output

Text rendering is what existing consumers read, so labels and the separator
line must stay exactly as they are.
"""

import json
from typing import Iterable, List, Optional

from .dictionaries import CHANNELS, REGIONS
from .parser import ProgramEntry
from .request import ScheduleRequest

SEPARATOR = "-------------------"


def render(entries: Iterable[ProgramEntry]) -> str:
    """Render programmes as human readable text blocks"""
    blocks = []
    for entry in entries:
        blocks.append(
            f"Start Time: {entry.start_time}\n"
            f"End Time: {entry.end_time}\n"
            f"Title: {entry.title}\n"
            f"URL: {entry.url}\n"
            f"{SEPARATOR}\n"
        )
    return "".join(blocks)


def render_json(entries: Iterable[ProgramEntry], request: Optional[ScheduleRequest] = None) -> str:
    """Render programmes as a JSON document"""
    document = {}
    if request is not None:
        document["channel"] = request.channel
        document["region"] = request.region
        document["date"] = request.date_string
    document["programmes"] = [entry.to_dict() for entry in entries]
    return json.dumps(document, indent=2, ensure_ascii=False)


def render_channels() -> str:
    """Render the channel and region table"""
    key_width = max(len(key) for key in CHANNELS)
    name_width = max(len(name) for name in CHANNELS.values())

    lines: List[str] = []
    for channel, name in CHANNELS.items():
        regions = REGIONS[channel]
        if not regions:
            lines.append(f"{channel:<{key_width}}  {name:<{name_width}}  N/A")
            continue
        prefix = f"{channel:<{key_width}}  {name:<{name_width}}"
        for region, region_name in regions.items():
            lines.append(f"{prefix}  {region} ({region_name})")
            prefix = " " * len(prefix)
    return "\n".join(lines) + "\n"
