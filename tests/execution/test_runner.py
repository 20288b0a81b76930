"""
Tests for running command templates through a shell.
"""

import shutil

import pytest

from automesh.execution.runner import ExecutionResult, ShellExecutor

SH = shutil.which("sh")

pytestmark = pytest.mark.skipif(SH is None, reason="requires a POSIX shell")


class TestExecutionResult:
    def test_succeeded(self):
        assert ExecutionResult(0, "ok", "").succeeded
        assert not ExecutionResult(3, "", "boom").succeeded


class TestShellExecutor:
    def test_bindings_exported_as_environment(self):
        executor = ShellExecutor(SH, ["-c"])

        result = executor.run('echo "Hello $name"', {"name": "Ada"})

        assert result.status == 0
        assert result.stdout == "Hello Ada\n"
        assert result.stderr == ""

    def test_non_zero_status_and_stderr(self):
        executor = ShellExecutor(SH, ["-c"])

        result = executor.run("echo oops >&2; exit 4", {})

        assert result.status == 4
        assert result.stderr == "oops\n"
        assert not result.succeeded

    def test_base_env_limited_to_path(self, monkeypatch):
        monkeypatch.setenv("AUTOMESH_TEST_SECRET", "leak")
        executor = ShellExecutor(SH, ["-c"])

        result = executor.run('echo "[$AUTOMESH_TEST_SECRET]"', {})

        assert result.stdout == "[]\n"

    def test_binding_overrides_base_env(self):
        executor = ShellExecutor(SH, ["-c"], base_env={"GREETING": "hi"})

        result = executor.run('echo "$GREETING"', {"GREETING": "yo"})

        assert result.stdout == "yo\n"

    def test_values_are_not_interpreted_by_template(self):
        executor = ShellExecutor(SH, ["-c"])

        result = executor.run('echo "$text"', {"text": "$(echo injected)"})

        assert result.stdout == "$(echo injected)\n"

    def test_from_config(self, sample_config):
        executor = ShellExecutor.from_config(sample_config)

        assert executor.shell == "/bin/sh"
        assert executor.shell_args == ("-c",)

    def test_missing_shell_raises_os_error(self, tmp_path):
        executor = ShellExecutor(str(tmp_path / "no-such-shell"), ["-c"])

        with pytest.raises(OSError):
            executor.run("true", {})
