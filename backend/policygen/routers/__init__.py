"""AI Governance Policy Generator - API Routers"""
from .policies import router as policies_router

__all__ = [
    "policies_router",
]
