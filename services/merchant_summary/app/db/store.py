# app/db/store.py

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from db.crud import get_summary_content
from db.database import create_session_factory

logger = logging.getLogger(__name__)


class DocumentStoreError(Exception):
    """Any store failure other than a missing key."""


class DocumentNotFound(DocumentStoreError):
    def __init__(self, key: str):
        super().__init__(f"document not found: {key}")
        self.key = key


class DocumentStore(ABC):
    """
    Read-only key/value access to merchant summary documents.

    get() returns the raw JSON content for an exact key, raises
    DocumentNotFound when nothing is stored under it and
    DocumentStoreError for anything else.
    """

    @abstractmethod
    def get(self, key: str) -> Dict[str, Any]:
        ...

    def close(self) -> None:
        pass


class SqlDocumentStore(DocumentStore):
    """Summary documents kept as JSON rows in a SQL table."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    def get(self, key: str) -> Dict[str, Any]:
        db = self.session_factory()
        try:
            content = get_summary_content(db, key)
        except SQLAlchemyError as e:
            raise DocumentStoreError(f"failed to get document {key}: {e}") from e
        finally:
            db.close()

        if content is None:
            raise DocumentNotFound(key)
        return content

    def close(self) -> None:
        self.engine.dispose()
