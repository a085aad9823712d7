"""Domain exceptions for the node API.

Defines domain-level exceptions that represent business rule violations and
registry misconfiguration. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers
and to GraphQL error extensions in the schema.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AppException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(AppException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(AppException):
    """Raised when creating a user whose email is already registered."""

    def __init__(self) -> None:
        super().__init__(
            "Email is already registered",
            "USER_ALREADY_EXISTS",
            {},
        )


class DuplicateEmailException(AppException):
    """Raised when updating a user to an email already registered by another user."""

    def __init__(self) -> None:
        super().__init__(
            "Email is already registered by another user",
            "DUPLICATE_EMAIL",
            {},
        )


class UnroutableIdException(AppException):
    """Raised when no registered type tag is a suffix of a global id.

    Either the id is malformed or it belongs to an entity type that was never
    registered. Retrying cannot change the outcome.
    """

    def __init__(self, global_id: str) -> None:
        """Initialize with the id that could not be routed.

        Args:
            global_id: The opaque id presented by the caller.
        """
        super().__init__(
            f"Invalid node id: {global_id}",
            "UNROUTABLE_ID",
            {"id": global_id},
        )


class DuplicateOrAmbiguousTagException(AppException):
    """Raised at registration time when a type tag collides with or shadows another.

    Fatal at startup: the process must not serve traffic with this registry.
    """

    def __init__(self, tag: str, conflicting_tag: str | None = None) -> None:
        """Initialize with the rejected tag and the registered tag it conflicts with.

        Args:
            tag: The tag being registered.
            conflicting_tag: Already-registered tag that equals, or is a suffix
                of / has as suffix, the new tag. None when the tag is empty.
        """
        if conflicting_tag is None:
            message = "Type tag must be a non-empty string"
        elif conflicting_tag == tag:
            message = f"Type tag already registered: {tag!r}"
        else:
            message = (
                f"Type tag {tag!r} is ambiguous with registered tag {conflicting_tag!r} "
                "(one is a suffix of the other)"
            )
        details: dict[str, Any] = {"tag": tag}
        if conflicting_tag is not None:
            details["conflicting_tag"] = conflicting_tag
        super().__init__(message, "DUPLICATE_OR_AMBIGUOUS_TAG", details)

