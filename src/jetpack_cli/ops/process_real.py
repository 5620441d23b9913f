"""Real process execution using subprocess.

All operations follow LBYL philosophy: check conditions before acting,
let unexpected exceptions bubble to error boundaries.
"""

import logging
import subprocess
from pathlib import Path

from jetpack_cli.core.errors import ExecutableNotFoundError
from jetpack_cli.ops.process import ProcessRunner

logger = logging.getLogger(__name__)


class RealProcessRunner(ProcessRunner):
    """Run a child process with the parent's standard streams.

    Output is not captured: the changelogger may prompt on stdin and its
    messages must be visible while it runs. The call blocks until the child
    exits and there is no timeout.

    Example:
        runner = RealProcessRunner()
        code = runner.run_inherited(Path("vendor/bin/changelogger"), ["add"], project_dir)
    """

    def run_inherited(self, executable: Path, arguments: list[str], cwd: Path) -> int:
        """Run executable from cwd and return its exit code.

        LBYL checks:
        - Validates cwd exists
        - Validates the resolved executable exists

        Raises:
            FileNotFoundError: If cwd doesn't exist
            ExecutableNotFoundError: If the executable is missing or cannot be started
        """
        if not cwd.is_dir():
            raise FileNotFoundError(f"Working directory not found: {cwd}")

        # Relative executables are relative to the child's cwd, not ours
        program = executable if executable.is_absolute() else cwd / executable
        if not program.exists():
            raise ExecutableNotFoundError(f"Executable not found: {program}")

        cmd = [str(program), *arguments]
        logger.debug("Spawning %s in %s", cmd, cwd)
        try:
            # check=False: the exit code is the result
            result = subprocess.run(cmd, cwd=cwd, check=False)
        except OSError as e:
            # Not executable, or not a format the kernel can exec
            raise ExecutableNotFoundError(f"Executable is not runnable: {program}") from e
        logger.debug("Child exited with %d", result.returncode)
        return result.returncode
