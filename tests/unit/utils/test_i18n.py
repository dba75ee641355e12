from __future__ import annotations

"""
Unit tests for Internationalization (i18n) consistency.

Ensures that all locale files (en.json, es.json) share the exact
same key structure and dot-notation resolution works as expected.
"""

import json
import os
from typing import Any, Dict, Set

import pytest

from dirsim.domain.constants import SUPPORTED_LOCALES
from dirsim.utils.i18n import I18n

LOCALES_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "src", "dirsim", "interface", "locales")
)


def _get_flat_keys(d: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Helper to flatten nested dictionary keys into dot-notation sets."""
    keys = set()
    for k, v in d.items():
        new_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys.update(_get_flat_keys(v, new_key))
        else:
            keys.add(new_key)
    return keys


def _load(locale: str) -> Dict[str, Any]:
    with open(os.path.join(LOCALES_DIR, f"{locale}.json"), "r", encoding="utf-8") as f:
        return json.load(f)


def test_locales_key_parity() -> None:
    """TC-01: Verify that every supported locale has identical keys."""
    reference = _get_flat_keys(_load("en"))

    for locale in SUPPORTED_LOCALES:
        keys = _get_flat_keys(_load(locale))
        assert keys == reference, f"Key mismatch in {locale}.json: {keys ^ reference}"


def test_listing_keys_presence() -> None:
    """TC-02: The listing presentation contract must exist in every locale."""
    required = ["listing.total_files", "listing.total_directories", "listing.empty"]

    for locale in SUPPORTED_LOCALES:
        flat = _get_flat_keys(_load(locale))
        for key in required:
            assert key in flat, f"Key '{key}' is missing in {locale}.json"


def test_i18n_resolution_logic(tmp_path) -> None:
    """TC-03: Verify dot-notation resolution and interpolation."""
    dummy_content = {
        "test": {
            "hello": "Hello {name}!",
            "simple": "Simple Text"
        }
    }
    (tmp_path / "test_locale.json").write_text(json.dumps(dummy_content), encoding="utf-8")

    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("test_locale")

    assert service.is_loaded
    assert service.locale == "test_locale"
    assert service.t("test.simple") == "Simple Text"
    assert service.t("test.hello", name="World") == "Hello World!"
    assert service.t("missing.key") == "missing.key"
    assert service.t("test.simple.deeper") == "test.simple.deeper"


def test_missing_locale_keeps_fallback(tmp_path) -> None:
    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("zz")

    assert not service.is_loaded
    assert service.t("listing.empty") == "listing.empty"


@pytest.mark.parametrize("locale,expected", [
    ("en", "Directory is empty"),
    ("es", "Directorio vacio"),
])
def test_bundled_locales_translate(locale, expected) -> None:
    assert I18n(locale).t("listing.empty") == expected
