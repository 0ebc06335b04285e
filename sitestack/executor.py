""" Run container engine commands.
"""
import logging
import subprocess
from typing import NamedTuple

log = logging.getLogger(__name__)

# what a shell reports when the command cannot be found or started
LAUNCH_FAILURE_RC = 127


class CommandResult(NamedTuple):
    returncode: int
    output: str


class CommandExecutor(object):
    """Runs one command at a time, blocking until it exits.

    stdout and stderr are captured together and decoded as UTF-8, with undecodable bytes replaced. A command that
    cannot be started is reported as a result like any other failure rather than raised, so one broken site never
    stops the rest of a batch.
    """

    def run(self, command, cwd=None):
        argv = list(command.argv)
        log.debug("running %s (cwd: %s)", command, cwd)
        try:
            proc = subprocess.run(
                argv,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            log.warning("unable to run %s: %s", command, exc)
            return CommandResult(LAUNCH_FAILURE_RC, f"{argv[0]}: {exc.strerror or exc}")
        log.debug("%s exited with status %s", command, proc.returncode)
        return CommandResult(proc.returncode, proc.stdout)
