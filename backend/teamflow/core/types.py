"""Custom SQLAlchemy types and column defaults shared by all models"""
from datetime import datetime, timezone
import uuid

from sqlalchemy import TypeDecorator, String


def generate_uuid() -> str:
    """Generate a UUID string"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp for DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class GUID(TypeDecorator):
    """Platform-independent GUID type that stores UUIDs as VARCHAR(36)

    Used for the public ``uuid`` of projects and tasks; primary keys stay
    integers so ids can be passed around as plain numbers.
    """
    impl = String(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            return str(value)
        return value
