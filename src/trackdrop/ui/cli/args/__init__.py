"""Command line argument handling package."""

from trackdrop.ui.cli.args.parser import ArgumentParser
from trackdrop.ui.cli.args.options import CLIArgs, InitArgs, RunArgs

__all__ = ["ArgumentParser", "CLIArgs", "InitArgs", "RunArgs"]
