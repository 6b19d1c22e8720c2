from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable, Optional
import sys

import typer
from pydantic import ValidationError

from stablejson.canonical import canonicalize
from stablejson.compare import semantic_equals
from stablejson.config import (
    DedupeSettings,
    StringifySettings,
    dedupe_defaults,
    merge_payload,
    stringify_defaults,
)
from stablejson.dedupe import dedupe_by
from stablejson.json_types import ABSENT, JSONValue, PermissiveValue
from stablejson.order_contract import resolve_key_order
from stablejson.parse import ParseFailure, parse_safe
from stablejson.stringify import Canonicalizer, stable_digest, stable_stringify

app = typer.Typer(add_completion=False, help="Canonical JSON normalization tools.")

_STDIN_ALIAS = "-"


def _read_source(source: str) -> str:
    if source == _STDIN_ALIAS:
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {source}: {exc}") from exc


def _load_document(source: str) -> JSONValue:
    result = parse_safe(_read_source(source))
    if isinstance(result, ParseFailure):
        label = "stdin" if source == _STDIN_ALIAS else source
        raise typer.BadParameter(f"Invalid JSON in {label}: {result.error}")
    return result.value


def _stringify_settings(
    *,
    indent: Optional[int],
    key_order: Optional[str],
    config: Optional[Path],
) -> StringifySettings:
    defaults = stringify_defaults(config_path=config)
    merged = merge_payload({"indent": indent, "key_order": key_order}, defaults)
    try:
        return StringifySettings.model_validate(merged)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid stringify settings: {exc}") from exc


def _canonicalizer_for(settings: StringifySettings) -> Canonicalizer:
    return partial(canonicalize, key_order=resolve_key_order(settings.key_order))


def _field_key(field: str) -> Callable[[PermissiveValue], str]:
    def _key_of(item: PermissiveValue) -> str:
        if isinstance(item, dict):
            return stable_stringify(["field", item.get(field, ABSENT)])
        return stable_stringify(["item", item])

    return _key_of


@app.command()
def canon(
    source: str = typer.Argument(_STDIN_ALIAS, help="JSON file, or - for stdin."),
    indent: Optional[int] = typer.Option(None, "--indent"),
    key_order: Optional[str] = typer.Option(None, "--key-order"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the stable string of a JSON document."""
    settings = _stringify_settings(indent=indent, key_order=key_order, config=config)
    document = _load_document(source)
    typer.echo(
        stable_stringify(document, _canonicalizer_for(settings), indent=settings.indent)
    )


@app.command()
def digest(
    source: str = typer.Argument(_STDIN_ALIAS, help="JSON file, or - for stdin."),
) -> None:
    """Print the SHA-256 digest of a document's stable string."""
    typer.echo(stable_digest(_load_document(source)))


@app.command()
def equals(
    left: str = typer.Argument(..., help="First JSON file."),
    right: str = typer.Argument(..., help="Second JSON file."),
) -> None:
    """Exit 0 when both documents are semantically equal, 1 otherwise."""
    same = semantic_equals(_load_document(left), _load_document(right))
    typer.echo("equal" if same else "different")
    raise typer.Exit(code=0 if same else 1)


@app.command()
def dedupe(
    source: str = typer.Argument(_STDIN_ALIAS, help="JSON array file, or - for stdin."),
    by: Optional[str] = typer.Option(
        None,
        "--by",
        help="Deduplicate objects by this field only; other items compare whole.",
    ),
    indent: Optional[int] = typer.Option(None, "--indent"),
    key_order: Optional[str] = typer.Option(None, "--key-order"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print a JSON array with semantic duplicates removed."""
    settings = _stringify_settings(indent=indent, key_order=key_order, config=config)
    try:
        dedupe_settings = DedupeSettings.model_validate(
            merge_payload({"by": by}, dedupe_defaults(config_path=config))
        )
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid dedupe settings: {exc}") from exc
    document = _load_document(source)
    if not isinstance(document, list):
        raise typer.BadParameter("dedupe input must be a JSON array.")
    if dedupe_settings.by is None:
        unique = dedupe_by(document, stable_stringify)
    else:
        unique = dedupe_by(document, _field_key(dedupe_settings.by))
    typer.echo(
        stable_stringify(unique, _canonicalizer_for(settings), indent=settings.indent)
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
