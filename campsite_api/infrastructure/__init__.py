"""
Infrastructure Layer
====================

Concrete implementations of the domain collaborators:
- db: MongoDB connection manager and repositories
- auth: JWT bearer token principal resolver
"""
