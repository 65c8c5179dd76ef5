"""
AI Governance Policy Generator - Policies API Router

Request boundary around the policy engine:
- validates and generates policies
- persists them through the application's policy store
- serves, lists and deletes stored policies
"""
import json
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..models.policy_document import PolicySummary, EXTENDED_SECTIONS
from ..services.policy_generator import (
    PolicyAssembler,
    QuestionnaireValidationError,
    PolicyInvariantViolation,
    get_assembler,
    get_questionnaire,
)
from ..services.storage import PolicyStore, PolicyStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["policies"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class GenerateResponse(BaseModel):
    policyId: str
    status: str = "complete"
    policy: dict


class PolicyResponse(BaseModel):
    policy: dict


class PolicyListResponse(BaseModel):
    policies: List[dict]


class DeleteResponse(BaseModel):
    deleted: bool


class QuestionnaireResponse(BaseModel):
    pages: List[dict]


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_policy_store(request: Request) -> PolicyStore:
    """Dependency - the store instance owned by the application."""
    return request.app.state.policy_store


def get_policy_assembler() -> PolicyAssembler:
    """Dependency - the default policy assembler."""
    return get_assembler()


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("/generate", response_model=GenerateResponse)
async def generate_policy(
    request: Request,
    extended: bool = Query(False, description="Include data governance, compliance monitoring and incident response sections"),
    store: PolicyStore = Depends(get_policy_store),
    assembler: PolicyAssembler = Depends(get_policy_assembler),
):
    """
    Generate and store a policy from a questionnaire submission.

    Pipeline:
    1. Parse JSON body
    2. Validate questionnaire (400 naming the first bad field)
    3. Assemble and validate the policy (all-or-nothing)
    4. Save to the policy store
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"JSON parse error: {e}")
        return error_response(500, "Invalid JSON in request body")

    try:
        policy = assembler.generate(body, EXTENDED_SECTIONS if extended else ())
    except QuestionnaireValidationError as e:
        return error_response(400, str(e), field=e.field, code=e.code)
    except PolicyInvariantViolation as e:
        logger.error(f"Policy generation failed: {e}")
        return error_response(500, "Policy generation failed")

    try:
        store.save(policy)
    except PolicyStoreError as e:
        logger.error(f"Could not store policy {policy.id}: {e}")
        return error_response(500, "Policy generation failed")

    return GenerateResponse(policyId=policy.id, status="complete", policy=policy.to_dict())


@router.get("/policy/{policy_id}", response_model=PolicyResponse)
def get_policy(policy_id: str, store: PolicyStore = Depends(get_policy_store)):
    """Fetch a stored policy."""
    policy = store.get(policy_id)
    if policy is None:
        return error_response(404, "Policy not found")
    return PolicyResponse(policy=policy.to_dict())


@router.delete("/policy/{policy_id}", response_model=DeleteResponse)
def delete_policy(policy_id: str, store: PolicyStore = Depends(get_policy_store)):
    """Delete a stored policy."""
    if not store.delete(policy_id):
        return error_response(404, "Policy not found")
    return DeleteResponse(deleted=True)


@router.get("/policies", response_model=PolicyListResponse)
def list_policies(store: PolicyStore = Depends(get_policy_store)):
    """List stored policies, newest first."""
    return PolicyListResponse(
        policies=[PolicySummary.of(p).to_dict() for p in store.list()]
    )


@router.get("/questionnaire", response_model=QuestionnaireResponse)
def get_questionnaire_definition():
    """Questionnaire pages, questions and options."""
    return QuestionnaireResponse(pages=get_questionnaire())
