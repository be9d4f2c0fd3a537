"""src/trackdrop/ui/cli/commands/deposit.py
What: Execute the deposit step from the input directory into the target directory.
Why: Bridge parsed arguments with the deposit runner.
"""

from typing import override

from trackdrop.shared.processing_types import ProcessResult
from trackdrop.ui.cli.commands.executor import CommandExecutor


class DepositCommand(CommandExecutor):
    """Command for depositing the input directory."""

    @override
    def execute(self) -> list[ProcessResult]:
        input_dir = self.config.require_input_dir()
        target_dir = self.config.require_target_dir()
        results = self.build_deposit_runner().run(input_dir, target_dir)
        self.display_results(results, "Deposit Summary")
        return results
