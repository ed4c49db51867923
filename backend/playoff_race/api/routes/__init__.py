"""
API route modules.
"""

from .analyses_routes import router as analyses_router
from .teams_routes import router as teams_router

__all__ = ["analyses_router", "teams_router"]
