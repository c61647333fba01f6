"""
API Routers Package
Exposes all route modules for the CharLM service
"""

from . import charlm_router

__all__ = [
    "charlm_router",
]
