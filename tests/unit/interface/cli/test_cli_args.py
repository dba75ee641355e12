from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Repeatable command collection.
3. Defaults map to None so the merge keeps stored values.
"""

from dirsim.interface.cli.args import args_to_overrides, build_parser
from dirsim.interface.cli.app import _merge_config


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_commands_are_collected_in_order():
    args = parse_args(["-c", "mkdir a", "--command", "cd a", "-c", "ls"])

    assert args.commands == ["mkdir a", "cd a", "ls"]
    assert args.script is None


def test_cli_namespace_settings_mapping():
    args = parse_args(["--root-name", "top", "--id-seed", "10", "--locale", "es", "--debug"])

    overrides = args_to_overrides(args)

    assert overrides["root_name"] == "top"
    assert overrides["id_seed"] == 10
    assert overrides["locale"] == "es"
    assert overrides["log_level"] == "DEBUG"


def test_cli_defaults_are_explicit_in_overrides():
    overrides = args_to_overrides(parse_args([]))

    assert overrides["root_name"] is None
    assert overrides["id_seed"] is None
    assert "log_level" not in overrides


def test_merge_skips_none_and_unknown_keys(mock_config_dict):
    merged = _merge_config(mock_config_dict, {"root_name": None, "locale": "es", "evil": 1})

    assert merged["root_name"] == "root"
    assert merged["locale"] == "es"
    assert "evil" not in merged


def test_save_config_flag():
    assert parse_args(["--save-config"]).save_config is True
    assert parse_args([]).save_config is False
