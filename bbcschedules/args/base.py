"""
Main argument parser module for bbcschedules

Orchestrates argument parsing, validation, and special actions handling.
"""

import argparse
import sys
from pathlib import Path

from .validator import ArgumentValidator

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "bbcschedules" / "bbcschedules.xml"


class ArgumentParser:
    """Command line argument parser for bbcschedules"""

    def __init__(self):
        self.parser = self._create_parser()
        self.validator = ArgumentValidator()

    def _create_parser(self):
        """Create the argument parser with all options"""
        parser = argparse.ArgumentParser(
            prog="bbcschedules",
            description="BBC TV programmes schedules (bbc.co.uk)",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog_text(),
        )

        # Special actions
        parser.add_argument(
            "--description", "-d", action="store_true",
            help="Show description and exit"
        )

        parser.add_argument(
            "--version", "-v", action="store_true",
            help="Show version and exit"
        )

        parser.add_argument(
            "--list-channels", action="store_true",
            help="Show channels and regions and exit"
        )

        parser.add_argument(
            "--create-config", action="store_true",
            help="Write a default configuration file and exit"
        )

        # Schedule selection
        parser.add_argument(
            "--channel", type=str,
            help="Channel key (bbcone, bbctwo, bbcthree, ...)"
        )

        parser.add_argument(
            "--region", type=str,
            help="Region key, BBC One and BBC Two only (london, scotland, ...)"
        )

        parser.add_argument(
            "--date", type=str, metavar="YYYY-MM-DD",
            help="Schedule date (default: today)"
        )

        # Output control
        parser.add_argument(
            "--url-only", action="store_true",
            help="Print the schedule URL without downloading it"
        )

        parser.add_argument(
            "--format", choices=["text", "json"], default="text",
            help="Output format (default: text)"
        )

        # Log level selection
        level_group = parser.add_mutually_exclusive_group()
        level_group.add_argument(
            "--warning", "-w", action="store_true",
            help="Only warnings and errors"
        )

        level_group.add_argument(
            "--debug", action="store_true",
            help="All debug information (very verbose)"
        )

        # Console output control
        console_group = parser.add_mutually_exclusive_group()
        console_group.add_argument(
            "--console", action="store_true",
            help="Display active log level to console (can combine with --warning/--debug)",
        )

        console_group.add_argument(
            "--quiet", "-q", action="store_true",
            help="No console output except listings",
        )

        parser.add_argument(
            "--log-file", type=Path,
            help="Also write logs to this file"
        )

        # Configuration
        parser.add_argument(
            "--config-file", type=Path,
            help=f"Configuration file path (default: {DEFAULT_CONFIG_FILE})"
        )

        parser.add_argument(
            "--timeout", type=int, metavar="SECONDS",
            help="HTTP timeout in seconds (1-300, default: 10)"
        )

        return parser

    def _get_epilog_text(self):
        """Get the epilog help text"""
        return """
Examples:
  bbcschedules --list-channels
  bbcschedules --channel bbcthree
  bbcschedules --channel bbcone --region london --date 2011-04-07
  bbcschedules --channel bbctwo --region scotland --format json
  bbcschedules --channel bbcone --region london --url-only
  bbcschedules --channel cbbc --debug --console

Configuration:
  Default config: ~/.config/bbcschedules/bbcschedules.xml
  Settings: channel, region, timeout, useragent
  Environment: BBCSCHEDULES_TIMEOUT, BBCSCHEDULES_USER_AGENT

Logging Levels:
  (default)       Info, warnings and errors, logged only with --console or --log-file
  --warning       Only warnings and errors
  --debug         All debug information
  --console       Display active log level on stderr
  --quiet         No console output except listings
        """

    def parse_args(self, args=None):
        """Parse command line arguments with validation"""
        args = self.parser.parse_args(args)

        # Handle special actions that exit immediately
        if self._handle_special_actions(args):
            sys.exit(0)

        # Validate arguments
        self._validate_args(args)

        # Normalize options
        self._normalize_options(args)

        return args

    def _handle_special_actions(self, args) -> bool:
        """Handle special actions that exit immediately"""
        if args.description:
            print("United Kingdom (bbc.co.uk programmes schedules using bbcschedules)")
            return True

        if args.version:
            from .. import __version__
            print(__version__)
            return True

        if args.list_channels:
            from ..formatter import render_channels
            sys.stdout.write(render_channels())
            return True

        if args.create_config:
            from ..config import ConfigManager
            ConfigManager(args.config_file or DEFAULT_CONFIG_FILE).create_default_config()
            return True

        return False

    def _validate_args(self, args):
        """Validate argument values"""
        errors = self.validator.validate_all_arguments(args)

        # parser.error exits on the first one
        for error in errors:
            self.parser.error(error)

    def _normalize_options(self, args):
        """Normalize various options"""
        args.schedule_date = self.validator.parse_date(args.date) if args.date else None
        del args.date

        if args.config_file is None:
            args.config_file = DEFAULT_CONFIG_FILE

    def get_logging_config(self, args):
        """Determine logging configuration from arguments"""
        config = {
            "level": "default",
            "console": False,
            "quiet": False,
        }

        if args.debug:
            config["level"] = "debug"
        elif args.warning:
            config["level"] = "warning"

        if args.console:
            config["console"] = True
        elif args.quiet:
            config["quiet"] = True

        return config
