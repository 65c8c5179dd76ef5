"""
Policies API Tests

Exercises the HTTP boundary with an in-memory store injected in place
of the application's store.
"""

import pytest
from fastapi.testclient import TestClient

from policygen.main import app
from policygen.routers.policies import get_policy_store
from policygen.services.storage import InMemoryPolicyStore


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def store():
    return InMemoryPolicyStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_policy_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def submission():
    return {
        "sector": "Public Sector",
        "organizationSize": "2000+",
        "jurisdiction": "ACT",
        "regulatedBy": ["OAIC"],
        "highRisk": "Yes",
        "owner": "Dedicated Team",
    }


# =============================================================================
# GENERATE
# =============================================================================

class TestGeneratePolicy:
    """Tests for POST /api/generate."""

    def test_generate_success(self, client, store, submission):
        response = client.post("/api/generate", json=submission)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "complete"
        assert body["policyId"] == body["policy"]["id"]
        assert body["policy"]["wordCount"] >= 8000
        assert len(body["policy"]["regulatoryMapping"]) == 5
        assert store.get(body["policyId"]) is not None

    def test_generate_extended(self, client, submission):
        response = client.post("/api/generate?extended=true", json=submission)

        policy = response.json()["policy"]
        assert "dataGovernance" in policy
        assert "complianceMonitoring" in policy
        assert "incidentResponse" in policy

    def test_generate_without_extended(self, client, submission):
        policy = client.post("/api/generate", json=submission).json()["policy"]
        assert "dataGovernance" not in policy

    def test_missing_field(self, client, submission):
        del submission["sector"]
        response = client.post("/api/generate", json=submission)

        assert response.status_code == 400
        assert response.json() == {
            "error": "sector: Sector is required",
            "field": "sector",
            "code": "missing_field",
        }

    def test_invalid_enum(self, client, submission):
        submission["jurisdiction"] = "Mars"
        response = client.post("/api/generate", json=submission)

        assert response.status_code == 400
        assert response.json()["field"] == "jurisdiction"
        assert response.json()["code"] == "invalid_enum"

    def test_non_object_body(self, client):
        response = client.post("/api/generate", json=["Finance"])

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_value"

    def test_invalid_json(self, client):
        response = client.post(
            "/api/generate",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Invalid JSON in request body"}

    def test_rejected_submission_not_stored(self, client, store):
        client.post("/api/generate", json={"sector": "Finance"})
        assert store.list() == []


# =============================================================================
# RETRIEVE / LIST / DELETE
# =============================================================================

class TestStoredPolicies:
    """Tests for stored policy endpoints."""

    def test_get_policy(self, client, submission):
        created = client.post("/api/generate", json=submission).json()

        response = client.get(f"/api/policy/{created['policyId']}")

        assert response.status_code == 200
        assert response.json()["policy"] == created["policy"]

    def test_get_unknown_policy(self, client):
        response = client.get("/api/policy/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "Policy not found"}

    def test_list_policies(self, client, submission):
        first = client.post("/api/generate", json=submission).json()["policyId"]
        second = client.post("/api/generate?extended=true", json=submission).json()["policyId"]

        policies = client.get("/api/policies").json()["policies"]

        assert {p["id"] for p in policies} == {first, second}
        summary = next(p for p in policies if p["id"] == second)
        assert summary["sections"][-1] == "incidentResponse"
        assert summary["wordCount"] >= 8000

    def test_delete_policy(self, client, submission):
        policy_id = client.post("/api/generate", json=submission).json()["policyId"]

        response = client.delete(f"/api/policy/{policy_id}")

        assert response.status_code == 200
        assert response.json() == {"deleted": True}
        assert client.get(f"/api/policy/{policy_id}").status_code == 404

    def test_delete_unknown_policy(self, client):
        assert client.delete("/api/policy/unknown").status_code == 404


# =============================================================================
# QUESTIONNAIRE / SERVICE INFO
# =============================================================================

class TestServiceEndpoints:
    """Tests for questionnaire definition and root endpoints."""

    def test_questionnaire_pages(self, client):
        pages = client.get("/api/questionnaire").json()["pages"]

        assert [p["title"] for p in pages] == ["Organization Context", "AI Use Cases", "Governance Maturity"]
        sector = pages[0]["questions"][0]
        assert sector["id"] == "sector"
        assert sector["options"] == ["Finance", "Public Sector"]
        assert sector["required"] is True

    def test_root(self, client):
        body = client.get("/").json()
        assert body["name"] == "AI Governance Policy Generator"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
