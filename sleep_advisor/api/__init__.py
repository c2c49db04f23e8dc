"""
API Module — FastAPI Analysis Endpoints

Public API:
- app: FastAPI application instance
- router: API routes
"""

from .main import app
from .routes import router
from .schemas import RuleSummary, TopPriorityResponse

__all__ = [
    "app",
    "router",
    "RuleSummary",
    "TopPriorityResponse",
]
