"""Command execution package for CLI."""

from trackdrop.ui.cli.commands.executor import CommandExecutor
from trackdrop.ui.cli.commands.deposit import DepositCommand
from trackdrop.ui.cli.commands.init import InitCommand
from trackdrop.ui.cli.commands.process import ProcessCommand
from trackdrop.ui.cli.commands.tag import TagCommand

__all__ = [
    "CommandExecutor",
    "DepositCommand",
    "InitCommand",
    "ProcessCommand",
    "TagCommand",
]
