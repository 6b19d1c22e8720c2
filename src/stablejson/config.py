from __future__ import annotations

import os
from datetime import date, datetime, time
from pathlib import Path
from typing import Optional, TypeAlias
import tomllib

from pydantic import BaseModel, field_validator

from stablejson.order_contract import KEY_ORDERS

DEFAULT_CONFIG_NAME = "stablejson.toml"
KEY_ORDER_ENV = "STABLEJSON_KEY_ORDER"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


class StringifySettings(BaseModel):
    indent: Optional[int] = None
    key_order: str = "codepoint"

    @field_validator("indent")
    @classmethod
    def _indent_not_negative(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("indent must be zero or positive")
        return value

    @field_validator("key_order")
    @classmethod
    def _known_key_order(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in KEY_ORDERS:
            allowed = ", ".join(sorted(KEY_ORDERS))
            raise ValueError(f"unknown key order {value!r} (expected one of: {allowed})")
        return normalized


class DedupeSettings(BaseModel):
    by: Optional[str] = None


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError:
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def stringify_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("stringify", {})
    defaults = dict(section) if isinstance(section, dict) else {}
    env_order = os.environ.get(KEY_ORDER_ENV, "").strip()
    if env_order:
        defaults["key_order"] = env_order
    return defaults


def dedupe_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("dedupe", {})
    return section if isinstance(section, dict) else {}


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged
