"""Command line interface for trackdrop."""

from collections.abc import Sequence
from typing import Final, final

from trackdrop.config.config import load_library_config
from trackdrop.platform.logging import logger
from trackdrop.shared.errors import ConfigError, TrackdropError
from trackdrop.ui.cli.args import ArgumentParser
from trackdrop.ui.cli.args.options import CLIArgs, InitArgs
from trackdrop.ui.cli.commands import (
    CommandExecutor,
    DepositCommand,
    InitCommand,
    ProcessCommand,
    TagCommand,
)

EXIT_OK: Final[int] = 0
EXIT_FILE_FAILURES: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2
EXIT_INTERRUPTED: Final[int] = 130

_COMMANDS: Final[dict[str, type[CommandExecutor]]] = {
    "tag": TagCommand,
    "deposit": DepositCommand,
    "process": ProcessCommand,
}


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: 0 on success, 1 when any file failed or an unexpected
            error occurred, 2 on configuration errors, 130 on Ctrl-C.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, InitArgs):
                _ = InitCommand(args).execute()
                return EXIT_OK

            config = load_library_config(args.library, args.overrides())
            command = _COMMANDS[args.command](args, config)
            results = command.execute()
            if any(not r.success for r in results):
                return EXIT_FILE_FAILURES
            return EXIT_OK

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return EXIT_INTERRUPTED
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            return EXIT_CONFIG_ERROR
        except TrackdropError as e:
            logger.error("%s", e)
            return EXIT_FILE_FAILURES
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            logger.debug("Unexpected error details", exc_info=True)
            return EXIT_FILE_FAILURES


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
