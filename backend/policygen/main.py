"""
AI Governance Policy Generator - FastAPI Application

Main entry point for the policy generator backend.

Architecture:
- Questionnaire → QuestionnaireValidator → QuestionnaireInput
- QuestionnaireInput → SectionComposer → ContentExpander → sections
- sections + regulatory references → PolicyAssembler → PolicyDocument
- PolicyDocument → PolicyValidator → PolicyStore
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import policies_router
from .services.storage import build_policy_store

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the application's policy store on startup."""
    app.state.policy_store = build_policy_store()
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="AI Governance Policy Generator",
    description="""
    AI Governance Policy Generator

    Turns an organizational questionnaire into a multi-section AI governance
    policy for Finance or Public Sector organizations.

    ## Pipeline
    1. **Validation**: Questionnaire → QuestionnaireInput
    2. **Composition**: QuestionnaireInput → section drafts
    3. **Expansion**: drafts → sections meeting their word targets
    4. **Assembly**: sections + regulatory mapping → PolicyDocument

    ## Key Principles
    - Policies are assembled deterministically (no LLMs)
    - Every policy has at least 8000 words and 5 regulatory references
    - Documents are immutable once generated
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(policies_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "AI Governance Policy Generator",
        "version": "1.0.0",
        "description": "AI Governance Policy Generation System",
        "docs": "/docs",
        "sectors": ["Finance", "Public Sector"],
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# For running with: python -m policygen.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
