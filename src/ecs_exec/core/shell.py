"""Running the rendered command line locally."""

from __future__ import annotations

import subprocess


def run_shell_command(command: str) -> int:
    """Run ``command`` through ``sh -c`` attached to this process's stdio; return its exit status.

    A child killed by signal N is reported as 128 + N, as shells do.
    """
    completed = subprocess.run(["sh", "-c", command], check=False)
    if completed.returncode < 0:
        return 128 - completed.returncode
    return completed.returncode
