"""
Command execution and message dispatch.

This package provides the shell executor for resolved commands and the
per-message pipeline tying resolution, execution and chunking together.
"""

from automesh.execution.dispatch import (
    NON_ZERO_EXIT_MESSAGE,
    ConfigHolder,
    MessageDispatcher,
)
from automesh.execution.runner import ExecutionResult, Executor, ShellExecutor

__all__ = [
    "ConfigHolder",
    "ExecutionResult",
    "Executor",
    "MessageDispatcher",
    "NON_ZERO_EXIT_MESSAGE",
    "ShellExecutor",
]
