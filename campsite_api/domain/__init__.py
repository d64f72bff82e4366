"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on web frameworks or infrastructure.

Contains:
- Models: Campsite aggregate with embedded comments, users, principals
- Authorization: pure decision engine for every operation
- Repository Interfaces: Abstract contracts for data access
"""
