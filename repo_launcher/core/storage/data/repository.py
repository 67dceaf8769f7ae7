import logging
from typing import Optional
from repo_launcher.core.database.connection import SessionLocal
from .sql_models import KeyValueModel
from ..domain.interfaces import IKeyValueStore

logger = logging.getLogger(__name__)

class SqlKeyValueStore(IKeyValueStore):
    """
    SQLAlchemy-backed slot store. Every instance is scoped to one namespace,
    so the snapshot cache and the legacy pin scheme never share keys.
    """

    def __init__(self, namespace: str, session_factory=None):
        self.namespace = namespace
        self.session_factory = session_factory or SessionLocal

    def get(self, key: str) -> Optional[str]:
        with self.session_factory() as db:
            row = db.get(KeyValueModel, (self.namespace, key))
            return row.value if row else None

    def set(self, key: str, value: str) -> None:
        with self.session_factory() as db:
            try:
                row = db.get(KeyValueModel, (self.namespace, key))
                if row:
                    row.value = value
                else:
                    db.add(KeyValueModel(namespace=self.namespace, key=key, value=value))
                db.commit()
            except Exception as e:
                db.rollback()
                logger.error(f"Failed to write {self.namespace}/{key}: {e}")
                raise e
