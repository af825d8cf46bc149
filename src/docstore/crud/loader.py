"""Seed file loading: build a DocumentStore from a YAML or JSON document list"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.config import Settings
from docstore.core.models import Document
from docstore.crud.memory_repo import DocumentStore


def _read(path: Path) -> Any:
    """Parse path as YAML or JSON according to its suffix."""
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    raise ValueError(f"Unsupported seed file type: {path.name} (expected .yaml, .yml or .json)")


def load_documents(path: str | Path) -> list[Document]:
    """Read Document entries from a list, or a mapping with a 'documents' list."""
    path = Path(path)
    try:
        raw = _read(path)
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("documents")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        return [Document.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def load_store(path: str | Path, settings: Settings | None = None) -> DocumentStore:
    """Return a new DocumentStore with every document in path saved to it."""
    store = DocumentStore(settings=settings)
    for doc in load_documents(path):
        store.save(doc)
    return store
