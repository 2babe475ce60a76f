from .base import BaseService
from .errors import (
    DependencyMissingError,
    ExternalCommandFailedError,
    ServiceFailure,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "DependencyMissingError",
    "ExternalCommandFailedError",
    "ServiceFailure",
    "ValidationFailedError",
]
