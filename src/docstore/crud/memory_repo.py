"""In-memory document store: upsert, predicate search and lookup by id"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from docstore.config import Settings
from docstore.core.filters import matches
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.ids import new_id
from docstore.core.utils.title import generate_title
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentStore(DocumentRepo):
    """Documents keyed by id, held for the lifetime of the instance. Not thread-safe."""

    def __init__(
        self,
        settings: Settings | None = None,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
        ):
        self._settings = settings or Settings()
        self._id_factory = id_factory
        self._clock = clock
        self._docs: dict[str, Document] = {}

    def __len__(self) -> int:
        return len(self._docs)

    def all(self) -> list[Document]:
        """Every stored document in insertion order."""
        return list(self._docs.values())

    def save(self, document: Document) -> Document:
        """Upsert document and return the stored record.

        A document with an id is an update: its title and created values are
        stored as given. Without an id a new one is generated, the title is
        derived from the first line of content and created is set to now.
        """
        if document is None:
            raise ValueError("document must not be None")

        if document.id:
            doc_id, title, created = document.id, document.title, document.created
            logger.debug("Updating document %s", doc_id)
        else:
            doc_id = self._id_factory()
            title = generate_title(document.content, self._settings.title_max_length)
            created = self._clock()
            logger.debug("Creating document %s", doc_id)

        saved = Document(
            id=doc_id,
            title=title,
            content=document.content,
            author=document.author,
            created=created,
        )
        self._docs[doc_id] = saved
        return saved

    def search(self, request: SearchRequest | None) -> list[Document]:
        """Documents satisfying every set field of request; [] for a None request."""
        if request is None:
            return []
        found = [doc for doc in self._docs.values() if matches(doc, request)]
        logger.debug("Search matched %d of %d document(s)", len(found), len(self._docs))
        return found

    def find_by_id(self, doc_id: str | None) -> Document | None:
        """Return the stored document for doc_id, or None if not found."""
        if doc_id is None:
            return None
        return self._docs.get(doc_id)
