"""OAuth client metadata, PKCE values and the authorization redirect."""

from __future__ import annotations

import base64
import hashlib
import secrets
import string
from typing import Any
from urllib.parse import quote

from smokesignal.http.utils import stringify

_ALPHANUMERIC = string.ascii_letters + string.digits
STATE_LENGTH = 30
PKCE_VERIFIER_LENGTH = 100


def client_metadata(external_base: str) -> dict[str, Any]:
    """The OAuth client metadata document served for this site."""
    return {
        "client_id": f"https://{external_base}/oauth/client-metadata.json",
        "dpop_bound_access_tokens": True,
        "application_type": "web",
        "redirect_uris": [f"https://{external_base}/oauth/callback"],
        "client_uri": f"https://{external_base}",
        "grant_types": ["authorization_code", "refresh_token"],
        "response_types": ["code"],
        "scope": "atproto transition:generic",
        "client_name": "Smoke Signal",
        "token_endpoint_auth_method": "private_key_jwt",
        "jwks_uri": f"https://{external_base}/.well-known/jwks.json",
        "logo_uri": f"https://{external_base}/logo-160x160x.png",
        "tos_uri": "https://docs.smokesignal.events/docs/about/terms/",
        "policy_uri": "https://docs.smokesignal.events/docs/about/privacy/",
        "subject_type": "public",
        "token_endpoint_auth_signing_alg": "ES256",
    }


def random_token(length: int = STATE_LENGTH) -> str:
    """A random string of ASCII letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))


def pkce_challenge(token: str) -> str:
    """The S256 code challenge for a verifier, base64url without padding."""
    digest = hashlib.sha256(token.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def gen_pkce() -> tuple[str, str]:
    """A new PKCE verifier and its challenge."""
    verifier = random_token(PKCE_VERIFIER_LENGTH)
    return verifier, pkce_challenge(verifier)


def authorization_url(
    authorization_endpoint: str, request_uri: str, external_base: str
) -> str:
    """The URL a user is sent to after a pushed authorization request."""
    client_id = f"https://{external_base}/oauth/client-metadata.json"
    query = stringify(
        [
            ("request_uri", quote(request_uri, safe="")),
            ("client_id", quote(client_id, safe="")),
        ]
    )
    return f"{authorization_endpoint}?{query}"