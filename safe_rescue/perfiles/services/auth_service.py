"""
Citizen self-registration and login.

Registration creates the citizen's address in Geolocalización first
(with default coordinates for Santiago when none are given) and then
stores the citizen as user type 5 in state 1.  Login checks the
password against the stored PBKDF2 hash and issues a bearer token whose
``tipo_perfil`` claim tells clients which profile screens to show.
"""

import logging
from typing import Optional

from safe_rescue.core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from safe_rescue.core.security import create_access_token, verify_password
from safe_rescue.core.validation import require, require_payload, require_text
from safe_rescue.perfiles import clients
from safe_rescue.perfiles.schemas.auth import LoginRequest, RegistroCiudadanoRequest, TokenResponse
from safe_rescue.perfiles.schemas.usuario import CiudadanoCreate, CiudadanoRead
from safe_rescue.perfiles.services.usuario_service import BomberoService, CiudadanoService, UsuarioService

logger = logging.getLogger(__name__)

TIPO_USUARIO_CIUDADANO = 5
ESTADO_ACTIVO = 1
LATITUD_DEFECTO = -33.45694
LONGITUD_DEFECTO = -70.64827


class AuthService:
    """Registration and login for the Perfiles service."""

    @classmethod
    def register_ciudadano(cls, request: Optional[RegistroCiudadanoRequest]) -> CiudadanoRead:
        """Register a citizen together with their address.

        Raises
        ------
        ValidationError
            When a field is missing or malformed.
        ConflictError
            When the RUN, correo, nombre de usuario or telefono is already
            registered.
        ExternalServiceError
            When Geolocalización cannot create the address.
        """
        require_payload(request, "La solicitud de registro")
        cls._validate_registro(request)
        if UsuarioService.exists_by_run(request.run):
            raise ConflictError("El RUN ya está registrado", details={"field": "run"})
        if UsuarioService.find_row_by_correo(request.correo) is not None:
            raise ConflictError("El correo electrónico ya está registrado", details={"field": "correo"})
        if UsuarioService.repository.find_where("nombre_usuario = ?", (request.nombre_usuario,)):
            raise ConflictError("El nombre de usuario ya está registrado", details={"field": "nombre_usuario"})
        if UsuarioService.repository.find_where("telefono = ?", (request.telefono,)):
            raise ConflictError("El teléfono ya está registrado", details={"field": "telefono"})

        direccion = request.direccion
        created = clients.geolocalizacion.crear_direccion(
            {
                "calle": direccion.calle,
                "numero": direccion.numero,
                "villa": direccion.villa,
                "complemento": direccion.complemento,
                "id_comuna": direccion.id_comuna,
                "coordenadas": {
                    "latitud": direccion.latitud if direccion.latitud is not None else LATITUD_DEFECTO,
                    "longitud": direccion.longitud if direccion.longitud is not None else LONGITUD_DEFECTO,
                },
            }
        )
        logger.info("Created direccion %s for new citizen", created["id_direccion"])

        ciudadano = CiudadanoCreate(
            run=request.run,
            dv=request.dv,
            nombre=request.nombre,
            a_paterno=request.a_paterno,
            a_materno=request.a_materno,
            telefono=request.telefono,
            correo=request.correo,
            nombre_usuario=request.nombre_usuario,
            contrasenia=request.contrasenia,
            id_estado=ESTADO_ACTIVO,
            id_tipo_usuario=TIPO_USUARIO_CIUDADANO,
            id_direccion=created["id_direccion"],
        )
        return CiudadanoService.save(ciudadano)

    @classmethod
    def login(cls, request: Optional[LoginRequest]) -> TokenResponse:
        require_payload(request, "La solicitud de inicio de sesión")
        require(request.correo, "correo")
        require(request.contrasenia, "contrasenia")
        row = UsuarioService.find_row_by_correo(request.correo.strip())
        if row is None:
            raise NotFoundError("Usuario", details={"correo": request.correo})

        id_usuario = row["id_usuario"]
        if not verify_password(request.contrasenia, row["contrasenia"]):
            UsuarioService.repository.update(id_usuario, {"intentos_fallidos": row["intentos_fallidos"] + 1})
            logger.warning("Failed login for usuario %s", id_usuario)
            raise AuthenticationError("Credenciales inválidas")
        if row["intentos_fallidos"]:
            UsuarioService.repository.update(id_usuario, {"intentos_fallidos": 0})

        tipo_perfil = cls._tipo_perfil(id_usuario)
        token = create_access_token(
            {
                "sub": str(id_usuario),
                "tipo_perfil": tipo_perfil,
                "id_tipo_usuario": row["id_tipo_usuario"],
            }
        )
        logger.info("Usuario %s logged in as %s", id_usuario, tipo_perfil)
        return TokenResponse(
            access_token=token,
            tipo_perfil=tipo_perfil,
            usuario=UsuarioService.find_by_id(id_usuario),
        )

    @staticmethod
    def _tipo_perfil(id_usuario: int) -> str:
        if CiudadanoService.subtype_repository.exists(id_usuario):
            return "CIUDADANO"
        if BomberoService.is_bombero(id_usuario):
            return "BOMBERO"
        return "USUARIO"

    @staticmethod
    def _validate_registro(request: RegistroCiudadanoRequest) -> None:
        require_text(request.nombre_usuario, "nombre_usuario", 20, min_length=5)
        if not request.nombre_usuario.isalnum():
            raise ValidationError(
                "El nombre de usuario sólo puede contener letras y números",
                field="nombre_usuario",
            )
        require_text(request.nombre, "nombre", 50, min_length=2)
        require(request.run, "run")
        require(request.correo, "correo")
        require(request.contrasenia, "contrasenia")
        direccion = request.direccion
        if direccion is None:
            raise ValidationError("La dirección es obligatoria", field="direccion")
        require_text(direccion.calle, "calle", 150)
        require_text(direccion.numero, "numero", 10)
        if not direccion.numero.isdigit():
            raise ValidationError("El número de la dirección sólo puede contener dígitos", field="numero")
        require(direccion.id_comuna, "id_comuna")
