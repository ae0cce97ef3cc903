"""
Typed errors raised by the service layer.

Every failure a caller can act on is one of three ``ServiceError``
subclasses.  Routers translate them into HTTP responses with
``to_http_exception``; the service layer never returns error values.

``StorageFault`` is deliberately outside that hierarchy: a counter that
cannot be persisted or a record that cannot be decoded means the
storage is corrupt, and the request fails with a server error.
"""

from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status


class ServiceError(Exception):
    """Base class for errors returned to API callers."""

    kind = "ServiceError"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "msg": self.msg}

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.to_dict())


class NotFoundError(ServiceError):
    """A looked up record, or any record at all, does not exist."""

    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailedError(ServiceError):
    """A payload does not satisfy the field constraints.

    ``violations`` lists every constraint that failed, in the order the
    validator checked them.
    """

    kind = "ValidationFailed"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, violations: List[str], msg: Optional[str] = None) -> None:
        super().__init__(msg or "; ".join(violations))
        self.violations = list(violations)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["violations"] = self.violations
        return data


class AuthenticationFailedError(ServiceError):
    """The caller does not own the contributor guarding the record."""

    kind = "AuthenticationFailed"
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, caller: str, contributor_id: int) -> None:
        super().__init__(
            f"Caller={caller} isn't the owner of the contributor with id={contributor_id}"
        )
        self.caller = caller
        self.contributor_id = contributor_id


class StorageFault(RuntimeError):
    """Unrecoverable storage failure (counter or record corruption)."""
