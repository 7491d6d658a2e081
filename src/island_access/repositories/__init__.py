"""Document store access used by the access resolver."""

from .document_store import Document, DocumentStore, SqlDocumentStore

__all__ = ["Document", "DocumentStore", "SqlDocumentStore"]
