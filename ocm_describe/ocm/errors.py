"""Errors raised while talking to OCM."""

from typing import Optional

import httpx


class OCMError(Exception):
    """A request to the cluster management service failed.

    ``status`` is the HTTP status code of the response, or ``None`` when no
    response was received.
    """

    def __init__(self, message: str, status: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.reason = reason

    @classmethod
    def from_response(cls, response: httpx.Response) -> "OCMError":
        """Build an error from a non-successful response."""
        reason = None
        try:
            body = response.json()
            if isinstance(body, dict):
                reason = body.get("reason")
        except ValueError:
            pass

        message = f"status is {response.status_code}"
        if reason:
            message += f", reason is '{reason}'"
        return cls(message, status=response.status_code, reason=reason)


class ClusterNotFoundError(OCMError):
    """No cluster matched the given identifier."""

    def __init__(self, key: str):
        super().__init__(f"there is no cluster with identifier or name '{key}'", status=404)
        self.key = key
