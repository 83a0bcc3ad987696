"""Atoms that run external commands."""

from __future__ import annotations

import getpass
import logging
import os
import subprocess
from dataclasses import dataclass, field

from dotplan.atoms.base import Atom, Outcome

__all__ = ["CommandAtom", "Exec", "ExecStatus", "new_run_command"]

logger = logging.getLogger(__name__)


class CommandAtom(Atom):
    """An atom that runs a command."""


@dataclass
class ExecStatus:
    """What a finished command left behind."""

    code: int = 0
    stdout: str = ""
    stderr: str = ""


@dataclass
class Exec(CommandAtom):
    """Run a command, optionally with elevated privileges through sudo."""

    command: str = ""
    arguments: list[str] = field(default_factory=list)
    working_dir: str | None = None
    environment: list[tuple[str, str]] = field(default_factory=list)
    privileged: bool = False
    status: ExecStatus = field(default_factory=ExecStatus, repr=False, compare=False)

    def elevate_if_required(self) -> tuple[str, list[str]]:
        """Return the command and arguments to run, prefixed with sudo if needed."""
        if not self.privileged or getpass.getuser() == "root":
            return self.command, list(self.arguments)
        return "sudo", [self.command, *self.arguments]

    def plan(self) -> Outcome:
        return Outcome(should_run=True)

    def execute(self) -> None:
        command, arguments = self.elevate_if_required()

        if command == "sudo":
            logger.info(
                "Sudo required for privilege elevation to run `%s %s`. Validating sudo ...",
                command,
                " ".join(arguments),
            )
            try:
                validated = subprocess.run(["sudo", "--validate"]).returncode == 0
            except OSError:
                validated = False
            if not validated:
                raise RuntimeError("Command requires sudo, but couldn't elevate privileges.")

        env = {**os.environ, **dict(self.environment)}
        cwd = self.working_dir if self.working_dir is not None else os.getcwd()

        completed = subprocess.run(
            [command, *arguments], env=env, cwd=cwd, capture_output=True
        )
        if completed.returncode < 0:
            raise RuntimeError("Cannot extract exit code")

        self.status.code = completed.returncode
        self.status.stdout = completed.stdout.decode("utf-8")
        self.status.stderr = completed.stderr.decode("utf-8")

        logger.debug("exit code: %s", self.status.code)
        logger.debug("stdout: %s", self.status.stdout)
        logger.debug("stderr: %s", self.status.stderr)

    def output_string(self) -> str:
        return self.status.stdout

    def error_message(self) -> str:
        return self.status.stderr

    def __str__(self) -> str:
        privileged = "true" if self.privileged else "false"
        return (
            f"RunCommand with privileged {privileged}: "
            f"{self.command} {' '.join(self.arguments)}"
        )


def new_run_command(command: str) -> Exec:
    """Create an unprivileged command atom with no arguments."""
    return Exec(command=command)