"""Policy storage collaborators."""
import os

from .policy_store import (
    PolicyStore,
    PolicyStoreError,
    PolicyAlreadyExists,
    InMemoryPolicyStore,
    SqlPolicyStore,
)

# "database" (default) or "memory"
POLICY_STORE = os.getenv("POLICY_STORE", "database")


def build_policy_store(kind: str = POLICY_STORE) -> PolicyStore:
    """Create the application's policy store."""
    if kind == "memory":
        return InMemoryPolicyStore()
    if kind == "database":
        from policygen.database import SessionLocal, init_db
        init_db()
        return SqlPolicyStore(SessionLocal)
    raise PolicyStoreError(f"Unknown policy store: {kind}")


__all__ = [
    "PolicyStore",
    "PolicyStoreError",
    "PolicyAlreadyExists",
    "InMemoryPolicyStore",
    "SqlPolicyStore",
    "POLICY_STORE",
    "build_policy_store",
]
