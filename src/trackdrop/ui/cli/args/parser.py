"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trackdrop.config.paths import library_config_dir, library_log_file, resolve_library_root
from trackdrop.features.deposit.domain.models import OrganizeMode
from trackdrop.platform.logging import setup_logger
from trackdrop.shared.errors import ConfigError
from trackdrop.ui.cli.args.options import CLIArgs, InitArgs, RunArgs


def _organize_mode(value: str) -> OrganizeMode:
    """argparse ``type`` accepting DROP, A-Z and DATE in any case."""

    try:
        return OrganizeMode.from_user_input(value)
    except ConfigError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="trackdrop",
            description="trackdrop - tag media files from their titles and deposit them into a library.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        init_parser = subparsers.add_parser(
            "init",
            help="Write a default configuration file into the library",
        )
        ArgumentParser._add_common_arguments(init_parser)
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        for command, help_text in (
            ("tag", "Tag and rename files in the input directory from their titles"),
            ("deposit", "Move files from the input directory into the target directory"),
            ("process", "Run tag, then deposit"),
        ):
            run_parser = subparsers.add_parser(command, help=help_text)
            ArgumentParser._add_common_arguments(run_parser)
            ArgumentParser._add_run_arguments(run_parser)

        return parser

    @staticmethod
    def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--library",
            type=str,
            help="Library root holding .trackdrop/config.toml (defaults to $TRACKDROP_LIBRARY or the current directory)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--non-interactive",
            action="store_true",
            help="Never prompt; unconfirmed proposals and conflicts are skipped",
        )
        _ = parser.add_argument(
            "--organize",
            type=_organize_mode,
            metavar="{DROP,A-Z,DATE}",
            help="Override the ORGANIZE mode for this run",
        )
        _ = parser.add_argument(
            "--auto-overwrite",
            action="store_true",
            help="Replace existing destination files without asking",
        )
        _ = parser.add_argument(
            "--auto-tag",
            action="store_true",
            help="Apply tag proposals without asking",
        )
        _ = parser.add_argument(
            "--override-artist",
            action="store_true",
            help="Prefer the artist parsed from the title over the embedded artist",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argparse rejects the arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        library = resolve_library_root(parsed_args.library)
        command: str = parsed_args.command

        # Only initialized libraries get a log file
        log_file: Path | None = None
        if command == "init" or library_config_dir(library).is_dir():
            log_file = library_log_file(library)
        _ = setup_logger(log_file=log_file, console_level=log_level)

        if command == "init":
            return InitArgs(
                command="init",
                library=library,
                force=parsed_args.force,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        return RunArgs(
            command=parsed_args.command,
            library=library,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            non_interactive=parsed_args.non_interactive,
            organize=parsed_args.organize,
            auto_overwrite=parsed_args.auto_overwrite,
            auto_tag=parsed_args.auto_tag,
            override_artist=parsed_args.override_artist,
        )


__all__ = ["ArgumentParser"]
