"""User API routes."""

from fastapi import APIRouter, Depends, Path, status

from users_api.models.user import ErrorResponse, MessageResponse, User, UserPayload
from users_api.services import UserRegistry, get_user_registry

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Usuario no encontrado"},
}

# Plain decimal digits only; "02", "+2" or "2.0" are not user ids.
USER_ID_PATTERN = r"^(0|[1-9][0-9]*)$"


def get_user_id(
    user_id: str = Path(..., pattern=USER_ID_PATTERN, description="Identificador del usuario"),
) -> int:
    """Convert the path identifier to the stored integer type."""
    return int(user_id)


def _payload_name(payload: UserPayload | None) -> str | None:
    # A request without a body behaves like an empty JSON object.
    return payload.name if payload else None


@router.get(
    "",
    response_model=list[User],
    summary="Obtener todos los usuarios",
    response_description="Lista de usuarios",
)
@router.get("/", response_model=list[User], include_in_schema=False)
async def list_users(registry: UserRegistry = Depends(get_user_registry)) -> list[User]:
    return registry.list_users()


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Obtener un usuario por ID",
    response_description="Usuario encontrado",
    responses=NOT_FOUND_RESPONSE,
)
async def get_user(
    user_id: int = Depends(get_user_id),
    registry: UserRegistry = Depends(get_user_registry),
) -> User:
    return registry.get_user(user_id)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Crear un nuevo usuario",
    response_description="Usuario creado",
)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_user(
    payload: UserPayload | None = None,
    registry: UserRegistry = Depends(get_user_registry),
) -> User:
    return registry.create_user(_payload_name(payload))


@router.put(
    "/{user_id}",
    response_model=User,
    summary="Actualizar un usuario por ID",
    response_description="Usuario actualizado",
    responses=NOT_FOUND_RESPONSE,
)
async def update_user(
    user_id: int = Depends(get_user_id),
    payload: UserPayload | None = None,
    registry: UserRegistry = Depends(get_user_registry),
) -> User:
    return registry.update_user(user_id, _payload_name(payload))


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Eliminar un usuario por ID",
    response_description="Usuario eliminado",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_user(
    user_id: int = Depends(get_user_id),
    registry: UserRegistry = Depends(get_user_registry),
) -> MessageResponse:
    registry.delete_user(user_id)
    return MessageResponse(message="Usuario eliminado")
