from .base import AppError, DomainError, InfrastructureError, StorageError
from .http import GENERIC_ERROR_MESSAGE, handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "GENERIC_ERROR_MESSAGE",
    "InfrastructureError",
    "StorageError",
    "handle_app_error",
    "register_error_handler",
]
