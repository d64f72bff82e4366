"""
User Model
==========

Read-only view of a user record owned by the user service.
"""
from typing import Optional
from dataclasses import dataclass


@dataclass
class User:
    """User as seen by this service (never written here)."""
    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    admin: bool = False
