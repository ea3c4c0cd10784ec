"""
Authentication endpoints.

``POST /auth/register-ciudadano`` lets a citizen sign up together with
their address; ``POST /auth/login`` exchanges correo and contraseña for
a bearer token; ``GET /auth/me`` echoes the claims of that token.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from safe_rescue.core.error_handling import handle_service_errors
from safe_rescue.core.security import get_current_user
from safe_rescue.perfiles.schemas.auth import LoginRequest, RegistroCiudadanoRequest, TokenClaims, TokenResponse
from safe_rescue.perfiles.schemas.usuario import CiudadanoRead
from safe_rescue.perfiles.services.auth_service import AuthService

router = APIRouter()


@router.post("/register-ciudadano", response_model=CiudadanoRead, status_code=status.HTTP_201_CREATED)
@handle_service_errors
def register_ciudadano(request: RegistroCiudadanoRequest) -> CiudadanoRead:
    """Register a citizen; 409 when the RUN or correo is already in use."""
    return AuthService.register_ciudadano(request)


@router.post("/login", response_model=TokenResponse)
@handle_service_errors
def login(request: LoginRequest) -> TokenResponse:
    """Return a token; 404 for an unknown correo and 401 for a wrong password."""
    return AuthService.login(request)


@router.get("/me", response_model=TokenClaims)
def read_current_user(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    return current_user
