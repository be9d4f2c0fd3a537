"""src/trackdrop/ui/cli/commands/process.py
What: Chain the tag and deposit steps.
Why: Deposit sees the names and tags the tag step just wrote.
"""

from typing import override

from trackdrop.shared.processing_types import ProcessResult
from trackdrop.ui.cli.commands.executor import CommandExecutor


class ProcessCommand(CommandExecutor):
    """Command for tagging, then depositing the input directory."""

    @override
    def execute(self) -> list[ProcessResult]:
        # Both directories are checked before the first file is touched
        input_dir = self.config.require_input_dir()
        target_dir = self.config.require_target_dir()

        tag_results = self.build_tag_runner().run(input_dir)
        self.display_results(tag_results, "Tagging Summary")

        deposit_results = self.build_deposit_runner().run(input_dir, target_dir)
        self.display_results(deposit_results, "Deposit Summary")
        return tag_results + deposit_results
