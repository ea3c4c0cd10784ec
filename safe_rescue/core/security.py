"""
Security helpers for password hashing and bearer tokens.

Tokens are JSON Web Tokens signed with HMAC‑SHA256 using
``settings.secret_key``; each token carries the user id, the profile
type and an ``exp`` timestamp.  Passwords are stored as
``<salt hex>$<PBKDF2‑HMAC‑SHA256 hex>``.  Perfiles issues tokens at
login; any service can validate them with ``get_current_user``, which
also accepts ``settings.service_auth_secret`` from service clients.
"""

import base64
import binascii
import hashlib
import hmac
import json
import os
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token for ``claims``.

    Parameters
    ----------
    claims : dict
        Claims to embed (e.g. ``{"sub": "12", "tipo_perfil": "CIUDADANO"}``).
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        ``header.payload.signature``, each part base64url encoded.
    """
    payload = dict(claims)
    payload["exp"] = int(time.time()) + (expires_delta or settings.access_token_expire_minutes * 60)
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signature = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid token, or ``None``.

    A token is rejected when it is malformed, its signature does not
    match or its ``exp`` lies in the past.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    expected = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), settings.secret_key)
    try:
        actual = _b64_url_decode(signature_b64)
        claims = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, ValueError):
        return None
    if not hmac.compare_digest(expected, actual):
        return None
    if not isinstance(claims, dict) or int(claims.get("exp", 0)) < int(time.time()):
        return None
    return claims


security = HTTPBearer(auto_error=False)


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, Any]:
    """Dependency returning the claims of the bearer token or raising 401."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No autenticado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = credentials.credentials
    # Calls from other SAFE-Rescue services carry the shared secret
    # instead of a user token.
    if settings.service_auth_secret and hmac.compare_digest(
        token.encode("utf-8"), settings.service_auth_secret.encode("utf-8")
    ):
        return {"sub": "service", "tipo_perfil": "SERVICE"}
    claims = decode_access_token(token)
    if not claims:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token inválido o expirado",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims


def require_tipos_usuario(*tipos_usuario: int) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """Dependency factory allowing only tokens whose ``id_tipo_usuario``
    is one of ``tipos_usuario``; anything else answers 403.

    Use as ``Depends(require_tipos_usuario(4))`` on a route.
    """

    def _tipo_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("id_tipo_usuario") not in tipos_usuario:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Permisos insuficientes",
            )
        return current_user

    return _tipo_dependency


def hash_password(password: str) -> str:
    """Hash ``password`` with a fresh 16 byte salt."""
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check ``plain_password`` against a value produced by ``hash_password``."""
    if not hashed_password or "$" not in hashed_password:
        return False
    salt_hex, hash_hex = hashed_password.split("$", 1)
    try:
        salt = bytes.fromhex(salt_hex)
        stored = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(digest, stored)
