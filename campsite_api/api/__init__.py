"""
API Package
===========

HTTP surface of the service (FastAPI routers and exception handlers).
"""
