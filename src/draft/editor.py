"""Interactive editing of the draft file."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List

LOGGER = logging.getLogger(__name__)


class DraftEditor:
    """Opens the draft in an external editor and blocks until it exits."""

    def __init__(self, command: str) -> None:
        self.command = command

    def build_command(self, path: Path) -> List[str]:
        return [*shlex.split(self.command), str(path)]

    def edit(self, path: Path) -> None:
        cmd = self.build_command(path)
        LOGGER.debug("Launching editor: %s", cmd)
        # Inherits the terminal; a non-zero exit raises CalledProcessError.
        subprocess.run(cmd, check=True)
        print("")
