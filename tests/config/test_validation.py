"""
Tests for structural validation of the command tree.

Focus Areas:
1. Arg and flag level rules (empty defaults, name patterns, greedy flags)
2. Leaf/group exclusivity and group restrictions
3. Greedy placement rules on leaves
4. Config level rules
"""

import pytest

from automesh.config.models import Arg, Command, Config, Flag
from automesh.config.validation import (
    validate_arg,
    validate_command,
    validate_config,
    validate_flag,
)
from automesh.exceptions import ConfigValidationError


def _config(*commands: Command) -> Config:
    return Config(
        device="/dev/ttyACM0",
        channel=0,
        shell="sh",
        max_text_bytes=200,
        chunk_delay=100,
        max_content_bytes=180,
        commands=commands,
    )


class TestArgAndFlagRules:
    def test_arg_with_default_is_valid(self):
        validate_arg(Arg(name="n", default="10"))

    def test_arg_empty_default_rejected(self):
        with pytest.raises(ConfigValidationError, match="cannot be empty"):
            validate_arg(Arg(name="n", default=""))

    @pytest.mark.parametrize("long", ["--all", "--dry-run", "--x2", "--"])
    def test_valid_long_flags(self, long):
        validate_flag(Flag(long=long))

    @pytest.mark.parametrize("long", ["-a", "all", "--under_score", "--sp ace"])
    def test_invalid_long_flags(self, long):
        with pytest.raises(ConfigValidationError, match="Invalid long flag value"):
            validate_flag(Flag(long=long))

    @pytest.mark.parametrize("short", ["-ab", "--a", "a", "-_"])
    def test_invalid_short_flags(self, short):
        with pytest.raises(ConfigValidationError, match="Invalid short flag value"):
            validate_flag(Flag(long="--all", short=short))

    def test_flag_names_are_trimmed_before_matching(self):
        validate_flag(Flag(long=" --all ", short=" -a"))

    def test_greedy_flag_requires_arg(self):
        with pytest.raises(ConfigValidationError, match="must have an 'arg' field"):
            validate_flag(Flag(long="--msg", greedy=True))

    def test_greedy_flag_with_arg_is_valid(self):
        validate_flag(Flag(long="--msg", arg="msg", greedy=True))


class TestCommandShape:
    def test_empty_name_rejected(self):
        with pytest.raises(ConfigValidationError, match="names cannot be empty"):
            validate_command(Command(name="", command="true"))

    def test_neither_leaf_nor_group_rejected(self):
        with pytest.raises(ConfigValidationError, match="must have either"):
            validate_command(Command(name="empty"))

    def test_both_leaf_and_group_rejected(self):
        command = Command(
            name="both", command="true", commands=[Command(name="c", command="true")]
        )
        with pytest.raises(ConfigValidationError, match="cannot have both"):
            validate_command(command)

    def test_group_with_args_rejected(self):
        command = Command(
            name="grp",
            args=[Arg(name="a")],
            commands=[Command(name="c", command="true")],
        )
        with pytest.raises(ConfigValidationError, match="group commands cannot have args or flags"):
            validate_command(command)

    def test_group_with_flags_rejected(self):
        command = Command(
            name="grp",
            flags=[Flag(long="--all")],
            commands=[Command(name="c", command="true")],
        )
        with pytest.raises(ConfigValidationError, match="group commands cannot have args or flags"):
            validate_command(command)

    def test_nested_children_are_validated(self):
        command = Command(
            name="outer",
            commands=[Command(name="inner", commands=[Command(name="broken")])],
        )
        with pytest.raises(ConfigValidationError, match="'broken'"):
            validate_command(command)

    def test_leaf_args_and_flags_are_validated(self):
        command = Command(name="x", command="true", flags=[Flag(long="bad")])
        with pytest.raises(ConfigValidationError, match="Invalid long flag value: bad"):
            validate_command(command)


class TestGreedyRules:
    def test_single_greedy_last_arg_is_valid(self):
        validate_command(
            Command(
                name="say",
                command="echo $text",
                args=[Arg(name="channel"), Arg(name="text", greedy=True)],
            )
        )

    def test_greedy_arg_not_last_rejected(self):
        command = Command(
            name="say",
            command="echo",
            args=[Arg(name="text", greedy=True), Arg(name="channel")],
        )
        with pytest.raises(ConfigValidationError, match="greedy arg must be the last arg"):
            validate_command(command)

    def test_greedy_flag_not_last_rejected(self):
        command = Command(
            name="say",
            command="echo",
            flags=[Flag(long="--msg", arg="msg", greedy=True), Flag(long="--loud")],
        )
        with pytest.raises(ConfigValidationError, match="greedy flag must be the last flag"):
            validate_command(command)

    def test_greedy_arg_and_greedy_flag_rejected(self):
        command = Command(
            name="say",
            command="echo",
            args=[Arg(name="text", greedy=True)],
            flags=[Flag(long="--msg", arg="msg", greedy=True)],
        )
        with pytest.raises(ConfigValidationError, match="only one arg or flag can be greedy"):
            validate_command(command)


class TestConfigRules:
    def test_config_without_commands_rejected(self):
        with pytest.raises(ConfigValidationError, match="At least one command"):
            validate_config(_config())

    def test_config_validates_every_command(self):
        with pytest.raises(ConfigValidationError, match="'second'"):
            validate_config(_config(Command(name="first", command="true"), Command(name="second")))

    def test_valid_config(self, sample_config):
        validate_config(sample_config)
