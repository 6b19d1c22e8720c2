from __future__ import annotations

from pathlib import Path
import textwrap

import pytest
from pydantic import ValidationError

from stablejson.config import (
    KEY_ORDER_ENV,
    StringifySettings,
    dedupe_defaults,
    load_config,
    merge_payload,
    stringify_defaults,
)


def _write_config(path: Path, body: str) -> Path:
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_stringify_defaults_reads_toml(tmp_path: Path, env_scope, restore_env) -> None:
    config_path = _write_config(
        tmp_path / "stablejson.toml",
        """
        [stringify]
        indent = 4
        key_order = "casefold"

        [dedupe]
        by = "id"
        """,
    )
    previous = env_scope({KEY_ORDER_ENV: None})
    try:
        defaults = stringify_defaults(root=tmp_path)
    finally:
        restore_env(previous)
    assert defaults == {"indent": 4, "key_order": "casefold"}
    assert dedupe_defaults(config_path=config_path) == {"by": "id"}


def test_load_config_tolerates_missing_and_malformed_files(tmp_path: Path) -> None:
    assert load_config(root=tmp_path) == {}
    broken = _write_config(tmp_path / "broken.toml", "[stringify\nindent = ")
    assert load_config(config_path=broken) == {}


def test_non_table_sections_are_ignored(tmp_path: Path, env_scope, restore_env) -> None:
    config_path = _write_config(
        tmp_path / "stablejson.toml",
        """
        stringify = "compact"
        dedupe = 3
        """,
    )
    previous = env_scope({KEY_ORDER_ENV: None})
    try:
        assert stringify_defaults(config_path=config_path) == {}
    finally:
        restore_env(previous)
    assert dedupe_defaults(config_path=config_path) == {}


def test_key_order_env_overrides_file(tmp_path: Path, env_scope, restore_env) -> None:
    config_path = _write_config(
        tmp_path / "stablejson.toml",
        """
        [stringify]
        key_order = "casefold"
        """,
    )
    previous = env_scope({KEY_ORDER_ENV: "reverse"})
    try:
        defaults = stringify_defaults(config_path=config_path)
    finally:
        restore_env(previous)
    assert defaults["key_order"] == "reverse"


def test_merge_payload_prefers_explicit_values() -> None:
    defaults = {"indent": 2, "key_order": "casefold"}
    merged = merge_payload({"indent": None, "key_order": "reverse"}, defaults)
    assert merged == {"indent": 2, "key_order": "reverse"}


def test_stringify_settings_normalizes_and_validates() -> None:
    settings = StringifySettings.model_validate({"key_order": " CaseFold "})
    assert settings.key_order == "casefold"
    assert settings.indent is None
    with pytest.raises(ValidationError):
        StringifySettings.model_validate({"key_order": "locale"})
    with pytest.raises(ValidationError):
        StringifySettings.model_validate({"indent": -1})
