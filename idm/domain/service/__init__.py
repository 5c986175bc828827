"""Domain services."""

from .auth_gate import AuthGate, AuthPolicy
from .base import Service
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "AuthGate",
    "AuthPolicy",
    "JWTService",
    "Service",
    "UserService",
]
