"""
Shared test fixtures for the automesh test suite.
"""

import textwrap
from pathlib import Path

import pytest

from automesh.config.models import Arg, Command, Config, Flag


@pytest.fixture
def write_yaml(tmp_path):
    """Write dedented YAML text to a file under tmp_path and return its path.

    Usage:
        def test_something(write_yaml):
            path = write_yaml("config.yaml", '''
                device: /dev/ttyUSB0
            ''')
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_commands() -> tuple[Command, ...]:
    """A small tree with a plain leaf, a leaf with flags and a nested group."""
    return (
        Command(
            name="greet",
            help="Say hello",
            args=[Arg(name="name", help="Who to greet")],
            command='echo "Hello $name"',
        ),
        Command(
            name="uptime",
            help="Show uptime",
            command="uptime",
        ),
        Command(
            name="deploy",
            help="Deployment commands",
            commands=[
                Command(
                    name="prod",
                    help="Deploy to production",
                    flags=[
                        Flag(long="--force", short="-f", help="Skip checks"),
                        Flag(long="--tag", short="-t", arg="tag", default="latest"),
                    ],
                    command="deploy.sh prod",
                ),
            ],
        ),
    )


@pytest.fixture
def sample_config(sample_commands) -> Config:
    return Config(
        device="/dev/ttyUSB0",
        channel=1,
        shell="/bin/sh",
        shell_args=["-c"],
        max_text_bytes=200,
        chunk_delay=0,
        max_content_bytes=180,
        commands=sample_commands,
    )
