from .credential_provider import CredentialProvider
from .entity_repository import EntityRepository
from .record_store import RecordStore

__all__ = [
    "CredentialProvider",
    "EntityRepository",
    "RecordStore",
]
