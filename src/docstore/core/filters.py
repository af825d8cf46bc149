"""Search predicates: one per SearchRequest dimension, each skipped when unset

A document missing the field a constraint inspects (no created date, no title,
no author) fails that constraint.
"""

from docstore.core.models import Document, SearchRequest


def created_after(doc: Document, request: SearchRequest) -> bool:
    """Strictly after created_from; a document created exactly at the bound is excluded."""
    if request.created_from is None:
        return True
    return doc.created is not None and doc.created > request.created_from


def created_before(doc: Document, request: SearchRequest) -> bool:
    """Strictly before created_to."""
    if request.created_to is None:
        return True
    return doc.created is not None and doc.created < request.created_to


def title_matches(doc: Document, request: SearchRequest) -> bool:
    """Title starts with any of the requested prefixes."""
    if request.title_prefixes is None:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in request.title_prefixes)


def content_matches(doc: Document, request: SearchRequest) -> bool:
    """Content contains any of the requested substrings."""
    if request.contains_contents is None:
        return True
    return any(needle in doc.content for needle in request.contains_contents)


def author_matches(doc: Document, request: SearchRequest) -> bool:
    """Author id is one of the requested ids."""
    if request.author_ids is None:
        return True
    return doc.author is not None and doc.author.id in request.author_ids


PREDICATES = (created_after, created_before, title_matches, content_matches, author_matches)


def matches(doc: Document, request: SearchRequest) -> bool:
    """True when doc satisfies every predicate in PREDICATES."""
    return all(predicate(doc, request) for predicate in PREDICATES)
