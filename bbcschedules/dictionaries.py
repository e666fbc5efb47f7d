"""
bbcschedules.dictionaries - Channel and region registries

Static lookup tables for the BBC channels whose schedules can be fetched and
the regional variants available for BBC One and BBC Two.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional

BASE_URL = "http://www.bbc.co.uk"

CHANNELS: Mapping[str, str] = MappingProxyType(
    {
        "bbcone": "BBC One",
        "bbctwo": "BBC Two",
        "bbcthree": "BBC Three",
        "bbcfour": "BBC Four",
        "bbchd": "BBC HD",
        "cbbc": "CBBC",
        "cbeebies": "CBeebies",
        "bbcnews": "BBC News Channel",
        "parliament": "BBC Parliament",
        "bbcalba": "BBC ALBA",
    }
)

# Only these channels take a region in the schedule URL
REGION_CHANNELS = ("bbcone", "bbctwo")

_BBCONE_REGIONS = {
    "cambridge": "Cambridgeshire",
    "channel_islands": "Channel Islands",
    "east": "East",
    "east_midlands": "East Midlands",
    "hd": "HD",
    "london": "London",
    "north_east": "North East & Cumbria",
    "ni": "Northern Ireland",
    "oxford": "Oxfordshire",
    "scotland": "Scotland",
    "south": "South",
    "south_east": "South East",
    "south_west": "South West",
    "west_midlands": "West Midlands",
    "east_yorkshire": "Yorks & Lincs",
}

_BBCTWO_REGIONS = {
    "england": "England",
    "ni": "Northern Ireland",
    "ni_analogue": "Northern Ireland (Analogue)",
    "scotland": "Scotland",
    "wales": "Wales",
    "wales_analogue": "Wales (Analogue)",
}

REGIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        channel: MappingProxyType(
            {"bbcone": _BBCONE_REGIONS, "bbctwo": _BBCTWO_REGIONS}.get(channel, {})
        )
        for channel in CHANNELS
    }
)


def get_channel_name(channel: str) -> Optional[str]:
    """Get display name for a channel key"""
    return CHANNELS.get(channel)


def get_region_name(channel: str, region: Optional[str]) -> Optional[str]:
    """Get display name for a region of the given channel"""
    if region is None:
        return None
    return REGIONS.get(channel, {}).get(region)


def has_regions(channel: str) -> bool:
    """Check if channel schedules are split by region"""
    return channel in REGION_CHANNELS


def get_available_channels() -> List[str]:
    """Get channel keys in registry order"""
    return list(CHANNELS.keys())
