from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime
from repo_launcher.core.database.base import Base

def utc_now():
    return datetime.now(timezone.utc)

class KeyValueModel(Base):
    __tablename__ = "kv_entries"

    # A slot is addressed by (namespace, key); there is exactly one row per slot.
    namespace = Column(String, primary_key=True)
    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
