"""Identity-token verification against the external identity provider."""

import logging
from abc import ABC, abstractmethod

import requests
from django.conf import settings
from django.utils.module_loading import import_string

from accounts.domain.errors import IdentityServiceUnavailableError, InvalidTokenError

logger = logging.getLogger(__name__)


class IdentityVerifier(ABC):
    """Turns an identity token into the subject id it was issued for."""

    @abstractmethod
    def verify_token(self, token: str) -> str:
        """Return the subject id.

        Raises:
            InvalidTokenError: If the token is invalid or expired.
        """
        ...


class HttpIdentityVerifier(IdentityVerifier):
    """Delegates token validation to the central identity service.

    Expects the service to answer GET on the validate URL with 200 and
    {"user_id": "<subject>"} for valid tokens.
    """

    def __init__(self, verify_url: str | None = None, timeout: float | None = None) -> None:
        self.verify_url = verify_url or settings.IDENTITY_VERIFY_URL
        self.timeout = timeout if timeout is not None else settings.IDENTITY_TIMEOUT_SECONDS

    def verify_token(self, token: str) -> str:
        try:
            resp = requests.get(
                self.verify_url,
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Identity service unreachable", extra={"error": str(exc)})
            raise IdentityServiceUnavailableError() from exc

        if resp.status_code == 200:
            user_id = resp.json().get("user_id")
            if user_id:
                return str(user_id)

        if resp.status_code >= 500:
            logger.error(
                "Identity service error", extra={"status_code": resp.status_code}
            )
            raise IdentityServiceUnavailableError()

        raise InvalidTokenError()


def get_identity_verifier() -> IdentityVerifier:
    """Instantiate the verifier named by the IDENTITY_VERIFIER setting."""
    return import_string(settings.IDENTITY_VERIFIER)()
