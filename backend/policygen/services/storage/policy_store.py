"""
Policy Store

Persists generated policies by identifier. Documents are write-once:
saving an identifier that already exists raises PolicyAlreadyExists.

Two implementations:
- InMemoryPolicyStore: process-local, lock-guarded dict
- SqlPolicyStore: SQLAlchemy-backed `policies` table

The application owns exactly one store instance (created at start-up)
and hands it to request handlers; there is no module-global store.
"""
from threading import Lock
from typing import Callable, Dict, List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from policygen.models.policy_document import PolicyDocument
from policygen.models.db_models import PolicyDB

logger = logging.getLogger(__name__)


class PolicyStoreError(Exception):
    """Raised when a policy store operation fails."""
    pass


class PolicyAlreadyExists(PolicyStoreError):
    """Raised when saving a policy whose identifier is already stored."""

    def __init__(self, policy_id: str):
        self.policy_id = policy_id
        super().__init__(f"Policy already exists: {policy_id}")


class PolicyStore:
    """Storage interface for generated policies."""

    def save(self, document: PolicyDocument) -> None:
        raise NotImplementedError

    def get(self, policy_id: str) -> Optional[PolicyDocument]:
        raise NotImplementedError

    def delete(self, policy_id: str) -> bool:
        raise NotImplementedError

    def list(self) -> List[PolicyDocument]:
        """All stored policies, newest first."""
        raise NotImplementedError


# =============================================================================
# IN-MEMORY STORE
# =============================================================================

class InMemoryPolicyStore(PolicyStore):
    """Process-local store. Contents are lost on restart."""

    def __init__(self):
        self._policies: Dict[str, PolicyDocument] = {}
        self._lock = Lock()

    def save(self, document: PolicyDocument) -> None:
        with self._lock:
            if document.id in self._policies:
                raise PolicyAlreadyExists(document.id)
            self._policies[document.id] = document
        logger.info(f"Stored policy {document.id} in memory")

    def get(self, policy_id: str) -> Optional[PolicyDocument]:
        with self._lock:
            return self._policies.get(policy_id)

    def delete(self, policy_id: str) -> bool:
        with self._lock:
            removed = self._policies.pop(policy_id, None) is not None
        if removed:
            logger.info(f"Deleted policy {policy_id} from memory")
        return removed

    def list(self) -> List[PolicyDocument]:
        with self._lock:
            documents = list(self._policies.values())
        return sorted(documents, key=lambda d: d.created_at, reverse=True)


# =============================================================================
# SQLALCHEMY STORE
# =============================================================================

class SqlPolicyStore(PolicyStore):
    """
    Database-backed store.

    Each operation runs in its own session from the injected factory.
    The full document is kept as JSON in PolicyDocument.to_dict() form.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def save(self, document: PolicyDocument) -> None:
        db = self.session_factory()
        try:
            if db.get(PolicyDB, document.id) is not None:
                raise PolicyAlreadyExists(document.id)
            db.add(PolicyDB(
                id=document.id,
                word_count=document.word_count,
                created_at=document.created_at,
                document=document.to_dict(),
            ))
            db.commit()
        except IntegrityError:
            db.rollback()
            raise PolicyAlreadyExists(document.id) from None
        finally:
            db.close()
        logger.info(f"Stored policy {document.id} in database")

    def get(self, policy_id: str) -> Optional[PolicyDocument]:
        db = self.session_factory()
        try:
            row = db.get(PolicyDB, policy_id)
            return PolicyDocument.from_dict(row.document) if row else None
        finally:
            db.close()

    def delete(self, policy_id: str) -> bool:
        db = self.session_factory()
        try:
            row = db.get(PolicyDB, policy_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
        finally:
            db.close()
        logger.info(f"Deleted policy {policy_id} from database")
        return True

    def list(self) -> List[PolicyDocument]:
        db = self.session_factory()
        try:
            rows = db.query(PolicyDB).order_by(PolicyDB.created_at.desc()).all()
            return [PolicyDocument.from_dict(row.document) for row in rows]
        finally:
            db.close()
