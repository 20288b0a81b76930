"""
Shell execution of resolved commands.

The executor runs a command template through the configured shell with the
binding map exported as environment variables. It performs no escaping or
sandboxing; the template is passed to the shell as a single argument.
"""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from typing import Protocol

from attrs import frozen

from automesh.config.models import Config

logger = logging.getLogger(__name__)


@frozen
class ExecutionResult:
    """Exit status and decoded output streams of one command run."""

    status: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.status == 0


class Executor(Protocol):
    """Anything that can run a resolved command template with bindings."""

    def run(self, command: str, env: Mapping[str, str]) -> ExecutionResult: ...


class ShellExecutor:
    """Runs command templates as ``<shell> <shell_args...> <command>``."""

    def __init__(
        self,
        shell: str,
        shell_args: Sequence[str] = (),
        base_env: Mapping[str, str] | None = None,
    ):
        """
        Initialize the executor.

        Params:
            shell: Shell executable, e.g. ``/bin/sh``
            shell_args: Arguments placed before the command, e.g. ``("-c",)``
            base_env: Environment every command starts from; defaults to the
                host's ``PATH`` only
        """
        self.shell = shell
        self.shell_args = tuple(shell_args)
        if base_env is None:
            base_env = {"PATH": os.environ.get("PATH", os.defpath)}
        self.base_env = dict(base_env)

    @classmethod
    def from_config(cls, config: Config) -> "ShellExecutor":
        return cls(config.shell, config.shell_args)

    def run(self, command: str, env: Mapping[str, str]) -> ExecutionResult:
        """
        Run one command template.

        Params:
            command: Template string from the resolved leaf
            env: Binding map, exported on top of ``base_env``

        Returns:
            Exit status with stdout and stderr decoded as UTF-8

        Raises:
            OSError: If the shell cannot be started
        """
        full_env = {**self.base_env, **env}
        logger.info("Executing: %s", command)
        completed = subprocess.run(
            [self.shell, *self.shell_args, command],
            env=full_env,
            capture_output=True,
            check=False,
        )
        return ExecutionResult(
            status=completed.returncode,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
        )
