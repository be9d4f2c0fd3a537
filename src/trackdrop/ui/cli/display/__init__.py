"""Display management for CLI interface."""

from trackdrop.ui.cli.display.prompts import InteractivePrompts
from trackdrop.ui.cli.display.proposal import build_proposal_table
from trackdrop.ui.cli.display.result import ResultDisplay

__all__ = ["InteractivePrompts", "ResultDisplay", "build_proposal_table"]
