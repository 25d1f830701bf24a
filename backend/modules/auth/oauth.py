"""
Google OAuth client.

Builds the consent URL and turns an authorization code into a verified
GoogleIdentity. Both network hops (token endpoint and ID token
verification) are bounded by OAUTH_TIMEOUT_SECONDS.
"""

import asyncio
import logging
from typing import Optional
from urllib.parse import urlencode

import httpx
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from modules.users.models import normalize_email
from shared.config import Settings, get_settings
from shared.exceptions import ConfigurationError, UpstreamTimeoutError

from .exceptions import OAuthProviderError
from .models import GoogleIdentity


logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_SCOPES = ["openid", "email", "profile"]

# Tolerates small clock differences between this server and Google
CLOCK_SKEW_SECONDS = 60


class GoogleOAuthClient:
    """Authorization-code flow against Google's OAuth 2.0 endpoints."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.google_client_id and self._settings.google_client_secret)

    def _require_configuration(self) -> None:
        if not self.is_configured:
            raise ConfigurationError(
                "Google OAuth credentials not configured",
                code="GOOGLE_OAUTH_NOT_CONFIGURED",
            )

    def build_authorization_url(self, state: Optional[str] = None) -> str:
        """Build the Google consent screen URL."""
        self._require_configuration()
        params = {
            "client_id": self._settings.google_client_id,
            "redirect_uri": self._settings.google_redirect_uri,
            "response_type": "code",
            "scope": " ".join(GOOGLE_SCOPES),
            "access_type": "offline",
            "prompt": "consent",
        }
        if state:
            params["state"] = state
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> GoogleIdentity:
        """
        Exchange an authorization code for a verified identity.

        Raises:
            ConfigurationError: If Google credentials are not configured
            OAuthProviderError: If the exchange or verification fails
            UpstreamTimeoutError: If Google does not answer in time
        """
        self._require_configuration()
        raw_id_token = await self._fetch_id_token(code)
        claims = await self._verify_id_token(raw_id_token)

        email = normalize_email(str(claims.get("email", "")))
        if not email:
            raise OAuthProviderError("Google account has no email address", reason="missing email")
        if claims.get("email_verified") is False:
            raise OAuthProviderError("Google email address is not verified", reason="unverified email")

        return GoogleIdentity(
            email=email,
            name=claims.get("name") or claims.get("given_name") or "User",
            subject=str(claims["sub"]),
            picture=claims.get("picture"),
        )

    async def _fetch_id_token(self, code: str) -> str:
        timeout = self._settings.oauth_timeout_seconds
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    GOOGLE_TOKEN_URL,
                    data={
                        "code": code,
                        "client_id": self._settings.google_client_id,
                        "client_secret": self._settings.google_client_secret,
                        "redirect_uri": self._settings.google_redirect_uri,
                        "grant_type": "authorization_code",
                    },
                    timeout=timeout,
                )
        except httpx.TimeoutException:
            raise UpstreamTimeoutError("google", timeout)
        except httpx.HTTPError as e:
            raise OAuthProviderError("Could not reach Google", reason=str(e))

        if response.status_code != 200:
            # invalid_grant for bad or expired codes
            try:
                reason = response.json().get("error", "")
            except ValueError:
                reason = response.text[:200]
            logger.warning(f"Google token exchange failed: {response.status_code} {reason}")
            raise OAuthProviderError("Google sign-in code is invalid or expired", reason=reason)

        raw_id_token = response.json().get("id_token")
        if not raw_id_token:
            raise OAuthProviderError(reason="token response has no id_token")
        return raw_id_token

    async def _verify_id_token(self, raw_id_token: str) -> dict:
        timeout = self._settings.oauth_timeout_seconds
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(
                    id_token.verify_oauth2_token,
                    raw_id_token,
                    google_requests.Request(),
                    self._settings.google_client_id,
                    clock_skew_in_seconds=CLOCK_SKEW_SECONDS,
                ),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            raise UpstreamTimeoutError("google", timeout)
        except (ValueError, google_exceptions.GoogleAuthError) as e:
            logger.warning(f"Google ID token rejected: {e}")
            raise OAuthProviderError("Invalid Google ID token", reason=str(e))
