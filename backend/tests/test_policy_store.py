"""
Policy Store Tests

Both store implementations honour the same contract:
save / get / delete / list, write-once identifiers, newest first.
"""

import pytest
from datetime import datetime, timedelta, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from policygen.database import Base
from policygen.models import db_models  # noqa: F401  registers the policies table
from policygen.models.policy_document import MANDATORY_SECTIONS, PolicyDocument
from policygen.models.questionnaire import Sector
from policygen.services.policy_generator import get_regulatory_references
from policygen.services.storage import (
    InMemoryPolicyStore,
    SqlPolicyStore,
    PolicyAlreadyExists,
    PolicyStoreError,
    build_policy_store,
)


# =============================================================================
# FIXTURES
# =============================================================================

BASE_TIME = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_document(policy_id: str, minutes: int = 0) -> PolicyDocument:
    return PolicyDocument(
        id=policy_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        sections={s: f"{s.value} for {policy_id}" for s in MANDATORY_SECTIONS},
        regulatory_mapping=get_regulatory_references(Sector.PUBLIC_SECTOR),
        word_count=8000 + minutes,
    )


def sql_store() -> SqlPolicyStore:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return SqlPolicyStore(sessionmaker(autocommit=False, autoflush=False, bind=engine))


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        return InMemoryPolicyStore()
    return sql_store()


# =============================================================================
# CONTRACT TESTS
# =============================================================================

class TestPolicyStoreContract:
    """Tests run against every store implementation."""

    def test_save_and_get(self, store):
        document = make_document("policy-a")
        store.save(document)

        stored = store.get("policy-a")
        assert stored == document
        assert stored.content_hash() == document.content_hash()

    def test_get_unknown(self, store):
        assert store.get("does-not-exist") is None

    def test_write_once(self, store):
        store.save(make_document("policy-a"))

        with pytest.raises(PolicyAlreadyExists) as exc_info:
            store.save(make_document("policy-a", minutes=5))

        assert exc_info.value.policy_id == "policy-a"
        assert store.get("policy-a").word_count == 8000

    def test_delete(self, store):
        store.save(make_document("policy-a"))

        assert store.delete("policy-a") is True
        assert store.get("policy-a") is None
        assert store.delete("policy-a") is False

    def test_list_newest_first(self, store):
        store.save(make_document("older", minutes=0))
        store.save(make_document("newest", minutes=10))
        store.save(make_document("middle", minutes=5))

        assert [d.id for d in store.list()] == ["newest", "middle", "older"]

    def test_list_empty(self, store):
        assert store.list() == []

    def test_created_at_keeps_timezone(self, store):
        store.save(make_document("policy-a"))
        assert store.get("policy-a").created_at == BASE_TIME


class TestBuildPolicyStore:
    """Tests for store selection."""

    def test_memory_store(self):
        assert isinstance(build_policy_store("memory"), InMemoryPolicyStore)

    def test_unknown_store(self):
        with pytest.raises(PolicyStoreError):
            build_policy_store("redis")
