"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.title import generate_title
from docstore.crud.loader import load_store
from docstore.crud.memory_repo import DocumentStore
from docstore.log import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _store(seed: str, settings: Settings) -> DocumentStore:
    try:
        return load_store(seed, settings)
    except ValueError as e:
        _fail(str(e))


def _dump(docs: list[Document]) -> str:
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False)


def search_cmd(
    seed: Annotated[str, typer.Argument(help="YAML or JSON file of documents to load")],
    prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contents: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    authors: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Created strictly after (ISO 8601)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Created strictly before (ISO 8601)")] = None,
    ):
    """Load documents and print those matching every given filter as JSON."""
    settings = _settings()
    store = _store(seed, settings)
    try:
        request = SearchRequest(
            title_prefixes=prefixes or None,
            contains_contents=contents or None,
            author_ids=authors or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search options", e)
    typer.echo(_dump(store.search(request)))


def show_cmd(
    seed: Annotated[str, typer.Argument(help="YAML or JSON file of documents to load")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Print a single document as JSON."""
    settings = _settings()
    doc = _store(seed, settings).find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}' in {Path(seed).name}")
    typer.echo(json.dumps(doc.model_dump(mode="json"), indent=2, ensure_ascii=False))


def title_cmd(
    text: Annotated[str, typer.Argument(help="Document content")],
    max_length: Annotated[Optional[int], typer.Option("--max-length", help="Max title length")] = None,
    ):
    """Print the title a new document with this content would get."""
    settings = _settings(overrides={"title_max_length": max_length})
    typer.echo(generate_title(text, settings.title_max_length))
