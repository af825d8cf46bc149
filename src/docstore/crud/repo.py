from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.core.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert by id and return the stored record."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest | None) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str | None) -> Document | None:
        raise NotImplementedError
