"""Domain layer: exceptions and the global id convention.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    AppException,
    DuplicateEmailException,
    DuplicateOrAmbiguousTagException,
    ResourceNotFoundException,
    UnroutableIdException,
    UserAlreadyExistsException,
    ValidationException,
)
from app.domain.node_ids import USER_TAG, USER_TYPE_NAME

__all__ = [
    # Exceptions
    "AppException",
    "DuplicateEmailException",
    "DuplicateOrAmbiguousTagException",
    "ResourceNotFoundException",
    "UnroutableIdException",
    "UserAlreadyExistsException",
    "ValidationException",
    # Global id tags
    "USER_TAG",
    "USER_TYPE_NAME",
]
