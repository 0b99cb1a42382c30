"""
Session lookup for Auth0-issued access tokens.

A request carries a session when it presents a bearer token (or the
`access_token` cookie set by the frontend) that verifies against the tenant's
JWKS. Anything else resolves to no session: authorization is decided by the
resolvers, never here.
"""
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import jwt
from fastapi import Depends, Request

from core.config import Settings, get_settings

logger = logging.getLogger(__name__)

SESSION_COOKIE = "access_token"


@dataclass
class Identity:
    """Claims and access token of the authenticated caller for one request."""

    claims: dict[str, Any] = field(default_factory=dict)
    access_token: str | None = None
    email_claim: str = "email"

    @property
    def email(self) -> str | None:
        """Email claim used to match the caller to a stored User."""
        return self.claims.get(self.email_claim)


@lru_cache
def get_jwks_client(jwks_url: str) -> jwt.PyJWKClient:
    """Get a cached JWKS client for the Auth0 tenant."""
    return jwt.PyJWKClient(jwks_url, cache_keys=True)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify an RS256 access token and return its claims.

    Raises:
        jwt.PyJWTError: Signature, expiry, audience, issuer or key lookup failed.
    """
    signing_key = get_jwks_client(settings.auth0_jwks_url).get_signing_key_from_jwt(token)
    return jwt.decode(
        token,
        signing_key.key,
        algorithms=["RS256"],
        audience=settings.auth0_audience or None,
        issuer=settings.auth0_issuer,
        options={
            "verify_aud": bool(settings.auth0_audience),
            "require": ["exp", "iss", "sub"],
        },
    )


def extract_token(request: Request) -> str | None:
    """Get the access token from the Authorization header or session cookie."""
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(SESSION_COOKIE) or None


def get_session(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Identity | None:
    """
    Resolve the optional session for a request.

    Sync on purpose: the JWKS fetch is blocking I/O, so FastAPI runs this
    dependency in its threadpool.
    """
    if settings.dev_mode:
        return Identity(claims={"sub": "dev|local", "email": settings.dev_user_email})

    token = extract_token(request)
    if token is None:
        return None

    if not settings.auth0_domain:
        logger.warning("auth0_not_configured")
        return None

    try:
        claims = decode_access_token(token, settings)
    except jwt.PyJWTError as e:
        logger.warning("session_verification_failed", extra={"error": str(e)})
        return None

    return Identity(
        claims=claims,
        access_token=token,
        email_claim=settings.auth0_email_claim,
    )
