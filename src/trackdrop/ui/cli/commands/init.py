"""src/trackdrop/ui/cli/commands/init.py
What: Create the library configuration directory and default config file.
Why: Give new libraries a commented starting point.
"""

from typing import final

from trackdrop.config.config import write_default_config
from trackdrop.ui.cli.args.options import InitArgs


@final
class InitCommand:
    """Command for initializing a library."""

    args: InitArgs

    def __init__(self, args: InitArgs) -> None:
        self.args = args

    def execute(self) -> bool:
        """Write the default config; returns False when one already existed.

        An existing file is only replaced with ``--force``.
        """
        return write_default_config(self.args.library, overwrite=self.args.force)
