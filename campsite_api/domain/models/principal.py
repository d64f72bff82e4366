"""
Principal Model
===============

Authenticated identity attached to a single request.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Per-request identity produced by the principal resolver; never persisted."""
    user_id: str
    is_admin: bool = False
