"""
Service modules for Daraja operations.
"""

from .auth_service import AuthService
from .dispatcher import OperationDispatcher

__all__ = [
    'AuthService',
    'OperationDispatcher',
]
