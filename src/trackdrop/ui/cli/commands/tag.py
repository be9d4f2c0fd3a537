"""src/trackdrop/ui/cli/commands/tag.py
What: Execute the tag step for the configured input directory.
Why: Bridge parsed arguments with the tag runner.
"""

from typing import override

from trackdrop.shared.processing_types import ProcessResult
from trackdrop.ui.cli.commands.executor import CommandExecutor


class TagCommand(CommandExecutor):
    """Command for tagging the input directory."""

    @override
    def execute(self) -> list[ProcessResult]:
        input_dir = self.config.require_input_dir()
        results = self.build_tag_runner().run(input_dir)
        self.display_results(results, "Tagging Summary")
        return results
