"""Unit tests for crud/loader.py"""

import json
from datetime import datetime, timezone

import pytest

from docstore.config import Settings
from docstore.crud.loader import load_documents, load_store


SEED_YAML = """\
documents:
  - id: d1
    title: Hello
    content: "Hello\\nxxfooyy"
    author: {id: a1, name: Ann}
    created: 2024-01-01T10:00:00Z
  - content: "A freshly created document with a long first line\\nbody"
    author: {id: b1, name: Bob}
"""


def test_load_documents_yaml(tmp_path):
    """A YAML mapping with a documents list is parsed into Documents."""
    path = tmp_path / "seed.yaml"
    path.write_text(SEED_YAML)
    docs = load_documents(path)
    assert [d.id for d in docs] == ["d1", None]
    assert docs[0].author.name == "Ann"
    assert docs[0].created == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)


def test_load_documents_json_list(tmp_path):
    """A bare JSON list is accepted."""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"id": "x", "content": "body"}]))
    assert [d.id for d in load_documents(path)] == ["x"]


def test_load_documents_empty_file(tmp_path):
    """An empty YAML file yields no documents."""
    path = tmp_path / "seed.yml"
    path.write_text("")
    assert load_documents(path) == []


def test_load_store_saves_each_document(tmp_path):
    """Entries with an id keep their title and created; others are generated."""
    path = tmp_path / "seed.yaml"
    path.write_text(SEED_YAML)
    store = load_store(path, Settings(title_max_length=10))
    assert len(store) == 2
    assert store.find_by_id("d1").title == "Hello"
    created = [d for d in store.all() if d.id != "d1"][0]
    assert created.title == "A freshly "
    assert created.created is not None


@pytest.mark.parametrize("name,text,match", [
    ("seed.txt", "[]", "Unsupported seed file type"),
    ("seed.yaml", "key: [unclosed\n", "Invalid seed.yaml"),
    ("seed.json", "{not json", "Invalid seed.json"),
    ("seed.json", '{"documents": {"id": "x"}}', "expected a list"),
    ("seed.json", '[{"id": "x"}]', "Invalid seed.json"),
])
def test_load_documents_rejects_bad_input(tmp_path, name, text, match):
    """Unreadable or malformed seed files raise ValueError naming the file."""
    path = tmp_path / name
    path.write_text(text)
    with pytest.raises(ValueError, match=match):
        load_documents(path)


def test_load_documents_missing_file(tmp_path):
    """A missing file raises ValueError."""
    with pytest.raises(ValueError, match="Cannot read"):
        load_documents(tmp_path / "nope.yaml")
