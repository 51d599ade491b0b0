"""
Data models for the contact inquiry domain.

These type-safe data structures define clear contracts between components:
- RawSubmission: untrusted form input, no invariants
- Submission: validated, immutable record (the only thing ever published)
- SubmitResult: explicit outcome of a submission attempt
"""

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# Intentionally loose address shape: no whitespace, one '@', a '.' after it.
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

MIN_MESSAGE_LENGTH = 10

NAME_REQUIRED = "name is required"
INVALID_EMAIL = "invalid email format"
MESSAGE_TOO_SHORT = f"message must be at least {MIN_MESSAGE_LENGTH} characters"

GENERIC_DELIVERY_FAILURE = (
    "Failed to accept the inquiry due to a server error. Please try again later."
)


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""
    pass


class ValidationError(DomainError):
    """Raised when a submission violates one of the domain rules.

    The message is a human-readable reason that is safe to return to the client.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def _text(value: Any) -> str:
    """Coerce an untrusted field value to a string; non-strings count as missing."""
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class RawSubmission:
    """
    Untrusted contact-form input as received from the HTTP request body.

    Attributes:
        name: Sender name (unvalidated)
        email: Sender email address (unvalidated)
        message: Inquiry text (unvalidated)
    """
    name: str = ""
    email: str = ""
    message: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawSubmission":
        """
        Extract the three form fields from a decoded JSON body.

        Unknown keys are dropped here so they can never reach the domain
        record or the published payload.

        Args:
            data: Decoded request body

        Returns:
            RawSubmission with missing or non-string fields set to ""
        """
        return cls(
            name=_text(data.get('name')),
            email=_text(data.get('email')),
            message=_text(data.get('message')),
        )


@dataclass(frozen=True)
class Submission:
    """
    Validated contact inquiry.

    Construction trims every field and enforces the domain rules, so an
    instance always satisfies them. Use Submission.create() for raw input.

    Attributes:
        name: Trimmed, non-empty sender name
        email: Trimmed sender address matching EMAIL_PATTERN
        message: Trimmed inquiry text, at least MIN_MESSAGE_LENGTH characters
    """
    name: str
    email: str
    message: str

    def __post_init__(self):
        name = _text(self.name).strip()
        email = _text(self.email).strip()
        message = _text(self.message).strip()

        # First failing rule wins
        if not name:
            raise ValidationError(NAME_REQUIRED)
        if not email or not EMAIL_PATTERN.match(email):
            raise ValidationError(INVALID_EMAIL)
        if len(message) < MIN_MESSAGE_LENGTH:
            raise ValidationError(MESSAGE_TOO_SHORT)

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'email', email)
        object.__setattr__(self, 'message', message)

    @classmethod
    def create(cls, raw: RawSubmission) -> "Submission":
        """
        Validate raw input and build a Submission from it.

        Args:
            raw: Untrusted form input

        Returns:
            Submission holding the trimmed name, email and message only

        Raises:
            ValidationError: With the reason of the first rule that fails
        """
        return cls(name=raw.name, email=raw.email, message=raw.message)

    def to_payload(self) -> Dict[str, str]:
        """Payload shape expected by downstream consumers."""
        return {
            'name': self.name,
            'email': self.email,
            'message': self.message,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), ensure_ascii=False)


class SubmitStatus(Enum):
    """Outcome categories of a submission attempt."""
    ACCEPTED = "accepted"
    VALIDATION_FAILURE = "validation_error"
    DELIVERY_FAILURE = "server_error"


@dataclass(frozen=True)
class SubmitResult:
    """
    Result of a submission attempt.

    This explicit result type lets the HTTP layer branch on the outcome
    instead of inspecting exception types.

    Attributes:
        status: Outcome category
        error_message: Reason (validation) or generic text (delivery); None on success
        message_id: Transport message identifier (accepted only)
    """
    status: SubmitStatus
    error_message: Optional[str] = None
    message_id: Optional[str] = None

    @classmethod
    def accepted(cls, message_id: Optional[str] = None) -> "SubmitResult":
        return cls(status=SubmitStatus.ACCEPTED, message_id=message_id)

    @classmethod
    def validation_failure(cls, reason: str) -> "SubmitResult":
        return cls(status=SubmitStatus.VALIDATION_FAILURE, error_message=reason)

    @classmethod
    def delivery_failure(cls) -> "SubmitResult":
        return cls(
            status=SubmitStatus.DELIVERY_FAILURE,
            error_message=GENERIC_DELIVERY_FAILURE
        )

    @property
    def success(self) -> bool:
        return self.status is SubmitStatus.ACCEPTED

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return f"SubmitResult(success=True, message_id={self.message_id})"
        return f"SubmitResult(success=False, status={self.status.value}, error={self.error_message})"
