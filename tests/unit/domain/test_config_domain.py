from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Merge of stored settings over defaults.
4. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from dirsim.domain.config import (
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)
from dirsim.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def config_path(tmp_path):
    """Redirect CONFIG_FILE to a temporary location."""
    path = tmp_path / "dirsim" / "config.json"
    with patch("dirsim.domain.config.CONFIG_FILE", str(path)):
        yield path


def test_load_fresh_state_returns_defaults(config_path):
    assert not config_path.exists()

    state = load_app_state()

    assert state == get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION


def test_load_corrupted_file_returns_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{ incomplete json ", encoding="utf-8")

    state = load_app_state()

    assert state["settings"] == get_default_config()


def test_load_non_dict_payload_returns_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config() == get_default_config()


def test_stored_settings_merge_over_defaults(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text(
        json.dumps({"version": "0.9.0", "settings": {"locale": "es", "bogus": 1}}),
        encoding="utf-8",
    )

    cfg = load_config()

    assert cfg["locale"] == "es"
    assert cfg["root_name"] == "root"
    assert "bogus" not in cfg


def test_save_then_load_round_trip(config_path, mock_config_dict):
    mock_config_dict["id_seed"] = 10

    save_config(mock_config_dict)

    assert config_path.exists()
    stored = json.loads(config_path.read_text(encoding="utf-8"))
    assert stored["version"] == CURRENT_CONFIG_VERSION
    assert load_config()["id_seed"] == 10


def test_get_default_config_completeness():
    defaults = get_default_config()

    for k in ("root_name", "id_seed", "locale", "log_level", "save_log_file"):
        assert k in defaults
