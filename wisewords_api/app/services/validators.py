"""
Field checks run before any write.

Each ``*_violations`` function is pure: it inspects a payload or record
and returns the list of constraints it breaks, empty when the input is
acceptable.  ``ensure_valid`` turns a non-empty list into a
``ValidationFailedError``.  Email format is intentionally not checked
beyond being non-empty.
"""

from typing import List

from pydantic import BaseModel

from wisewords_api.app.core.errors import ValidationFailedError
from wisewords_api.app.schemas.contributor import ContributorPayload
from wisewords_api.app.schemas.quote import QuotePayload
from wisewords_api.app.services.store import encode_record


MIN_USERNAME_LENGTH = 3
MIN_AGE = 18
MIN_TEXT_LENGTH = 1
MIN_CATEGORY_LENGTH = 3


def contributor_violations(payload: ContributorPayload) -> List[str]:
    violations = []
    if len(payload.username) < MIN_USERNAME_LENGTH:
        violations.append(f"username: length must be at least {MIN_USERNAME_LENGTH}")
    if not payload.email:
        violations.append("email: must not be empty")
    if payload.age < MIN_AGE:
        violations.append(f"age: must be at least {MIN_AGE}")
    return violations


def quote_violations(payload: QuotePayload) -> List[str]:
    violations = []
    if len(payload.text) < MIN_TEXT_LENGTH:
        violations.append(f"text: length must be at least {MIN_TEXT_LENGTH}")
    if len(payload.category) < MIN_CATEGORY_LENGTH:
        violations.append(f"category: length must be at least {MIN_CATEGORY_LENGTH}")
    return violations


def size_violations(record: BaseModel, limit: int) -> List[str]:
    size = len(encode_record(record))
    if size > limit:
        return [f"record: serialized size {size} exceeds {limit} bytes"]
    return []


def ensure_valid(violations: List[str]) -> None:
    """Raise ``ValidationFailedError`` if any constraint failed."""
    if violations:
        raise ValidationFailedError(violations)
