"""Root test configuration: isolate tests from a developer's config.yaml and env"""

import pytest

from docstore.config import Settings


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no DOCSTORE_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)
