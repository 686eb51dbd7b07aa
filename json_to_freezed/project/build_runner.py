"""
Invocation of the Dart build_runner that generates the .freezed.dart and .g.dart part files.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ..pipeline.errors import GenerationError

logger = logging.getLogger(__name__)

BUILD_RUNNER_COMMAND = ["dart", "run", "build_runner", "build", "--delete-conflicting-outputs"]


class BuildRunnerError(GenerationError):
    """Raised when build_runner cannot be started or exits with an error."""

    pass


def run_build_runner(project_root: Path) -> None:
    """
    Run build_runner in the project root.

    Args:
        project_root: The Flutter project root

    Raises:
        BuildRunnerError: If dart is not available or build_runner fails
    """
    logger.info("Running build_runner in %s", project_root)
    try:
        result = subprocess.run(
            BUILD_RUNNER_COMMAND,
            cwd=project_root,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise BuildRunnerError(f"Unable to run dart: {e}") from e

    if result.returncode != 0:
        message = (result.stderr or "").strip() or f"build_runner exited with code {result.returncode}"
        raise BuildRunnerError(message)
