"""
bbcschedules.parser - Schedule page parsing

Pure parsing logic without HTTP responsibilities.
"""

from .listing import ListingParser, ParserState, ProgramEntry, parse_listings

__all__ = [
    "ListingParser",   # Line-scanning parser
    "ParserState",     # Accumulator state
    "ProgramEntry",    # Parsed programme record
    "parse_listings",  # Convenience function
]
