"""
Security helpers for password hashing and JWT authentication.

Tokens are compact JSON Web Tokens signed with HMAC-SHA256 and
base64url encoded.  They embed the admin's id (``sub``), username and
an expiration timestamp (``exp``).  The signing secret comes from the
``Settings`` object held on the application, so nothing here reads
configuration at import time.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16-byte salt;
the stored form is ``"<salt hex>$<hash hex>"``.
"""

import base64
import binascii
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import AuthenticationError, ForbiddenError

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode a base64-url string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], secret_key: str, expires_in: int) -> str:
    """Create a signed JWT carrying ``data``.

    Parameters
    ----------
    data : dict
        Claims to embed (e.g. ``{"sub": user_id, "username": "admin"}``).
    secret_key : str
        HMAC secret.
    expires_in : int
        Lifetime of the token in seconds.

    Returns
    -------
    str
        A token of the form ``header.payload.signature``.
    """
    to_encode = data.copy()
    to_encode["exp"] = int(time.time()) + expires_in
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str, secret_key: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT.

    Returns the payload when the signature matches and ``exp`` lies in
    the future, otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        # Constant-time comparison
        if not hmac.compare_digest(_sign(signing_input, secret_key), actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, (int, float)) or int(exp) < int(time.time()):
        return None
    return data


ADMIN_PREFIX = "/api/admin"
UNGUARDED_ADMIN_PATHS = frozenset({"/api/admin/login", "/api/admin/register"})

security = HTTPBearer(auto_error=False)


def requires_admin(path: str) -> bool:
    """True for every path under the admin prefix except login and register."""
    if path != ADMIN_PREFIX and not path.startswith(ADMIN_PREFIX + "/"):
        return False
    return path.rstrip("/") not in UNGUARDED_ADMIN_PATHS


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def authenticate_token(token: Optional[str], secret_key: str) -> Dict[str, Any]:
    """Turn a bearer token into the admin principal.

    Raises ``AuthenticationError`` (401) when there is no token and
    ``ForbiddenError`` (403) when it fails verification.
    """
    if not token:
        raise AuthenticationError("Access token required")
    payload = decode_access_token(token, secret_key)
    if payload is None:
        raise ForbiddenError("Invalid or expired token")
    return {"id": payload.get("sub"), "username": payload.get("username")}


def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency guarding every admin route.

    No bearer token yields 401; a token that fails verification yields
    403.  On success the decoded principal (``id`` and ``username``) is
    returned and also stored on ``request.state.admin``.  There is a
    single admin role, so no further permission checks happen here.
    """
    token = credentials.credentials if credentials else None
    principal = authenticate_token(token, request.app.state.settings.secret_key)
    request.state.admin = principal
    return principal


def hash_password(password: str) -> str:
    """Hash a password with PBKDF2-HMAC-SHA256 and a fresh salt."""
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored ``salt$hash`` string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
