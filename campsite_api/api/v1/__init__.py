"""
API v1 Package
===============

Version 1 API controllers.
"""
from .campsite_controller import router as campsite_router
from .comment_controller import router as comment_router

__all__ = ["campsite_router", "comment_router"]
