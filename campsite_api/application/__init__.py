"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities, the authorization engine and
repositories.

Contains:
- Use Cases: one business operation each (create campsite, update comment, ...)
- Services: CampsiteService, the single entry point the API layer talks to
- DTOs: request/response bodies
"""
