#!/usr/bin/env python3
"""
bbcschedules - BBC TV programmes schedules

Command line front end: reads configuration, validates the schedule request,
downloads the listing page and prints the programmes.
"""

import logging
import logging.handlers
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from .args import ArgumentParser
from .config import ConfigManager
from .downloader import ScheduleDownloader
from .errors import ScheduleError
from .schedules import ProgrammesSchedules

# Package version
from . import __version__


def setup_logging(logging_config: dict, log_file: Optional[Path] = None):
    """Setup logging configuration according to specified levels"""
    if logging_config["level"] == "warning":
        level = logging.WARNING
    elif logging_config["level"] == "debug":
        level = logging.DEBUG
    else:  # default
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
        )
        root_logger.addHandler(file_handler)

    # Console logging only if --console is specified (and not --quiet)
    if logging_config["console"] and not logging_config["quiet"]:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)

    # Keep listings alone on stdout
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())


def main(argv=None) -> int:
    """Main application entry point"""
    arg_parser = ArgumentParser()
    args = arg_parser.parse_args(argv)

    setup_logging(arg_parser.get_logging_config(args), args.log_file)
    logging.info("=" * 60)
    logging.info("bbcschedules session started - Version %s", __version__)

    config_manager = ConfigManager(args.config_file)
    try:
        config_manager.load_config(channel=args.channel, region=args.region, timeout=args.timeout)
    except ET.ParseError as e:
        print(f"Error: cannot parse configuration file {args.config_file}: {e}", file=sys.stderr)
        return 2
    config_manager.log_config_summary()

    schedule_config = config_manager.get_schedule_config(args.schedule_date)

    try:
        with ScheduleDownloader(
            timeout=config_manager.get_timeout(), user_agent=config_manager.get_user_agent()
        ) as downloader:
            schedules = ProgrammesSchedules(schedule_config, downloader=downloader)
            logging.info("Schedule URL: %s", schedules.get_url())

            if args.url_only:
                print(schedules.get_url())
                return 0

            if args.format == "json":
                output = schedules.as_json() + "\n"
            else:
                output = schedules.as_string()

            logging.debug("Download statistics: %s", downloader.get_stats())

    except ScheduleError as e:
        logging.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    logging.info("bbcschedules session completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
