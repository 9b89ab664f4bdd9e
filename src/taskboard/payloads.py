"""Parsing of raw request payloads and list parameters.

pydantic collects every violated field in one pass; ``parse_payload`` turns
those errors into ``FieldError`` values with the API's messages. Checks that
need the store (category existence) run afterwards in the mutation engine.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PositiveInt,
    StrictBool,
    StringConstraints,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .models import Priority, SortKey
from .results import FieldError, Ok, Result, validation_failed

M = TypeVar("M", bound=BaseModel)

TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]
DescriptionStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
CategoryNameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("a boolean is not an id")
    return value


# JSON true/false would otherwise coerce to 1/0.
IdInt = Annotated[PositiveInt, BeforeValidator(_reject_bool)]

FIELD_MESSAGES: Dict[str, str] = {
    "id": "debe ser un número positivo",
    "titulo": "debe tener entre 3 y 100 caracteres",
    "descripcion": "no puede exceder 500 caracteres",
    "prioridad": "debe ser baja, media o alta",
    "completada": "debe ser un booleano",
    "categoriaId": "debe ser un ID de categoría válido",
    "nombre": "debe tener entre 2 y 50 caracteres",
    "usuario_id": "debe ser un número positivo",
    "categoria_id": "debe ser un número positivo",
    "pagina": "debe ser un número positivo",
    "limite": "debe estar entre 1 y 100",
    "ordenar": "debe ser titulo, prioridad o fecha",
}

_ID_ADAPTER = TypeAdapter(IdInt)


class TaskCreate(BaseModel):
    """Body of a task creation."""

    model_config = ConfigDict(extra="ignore")

    title: TitleStr = Field(alias="titulo")
    description: DescriptionStr = Field(default="", alias="descripcion")
    priority: Priority = Field(default=Priority.MEDIUM, alias="prioridad")
    completed: StrictBool = Field(default=False, alias="completada")
    category_id: IdInt = Field(alias="categoriaId")


class TaskReplace(BaseModel):
    """Body of a full task replacement; every mutable field but the description is required."""

    model_config = ConfigDict(extra="ignore")

    title: TitleStr = Field(alias="titulo")
    description: DescriptionStr = Field(default="", alias="descripcion")
    priority: Priority = Field(alias="prioridad")
    completed: StrictBool = Field(alias="completada")
    category_id: IdInt = Field(alias="categoriaId")


class TaskPatch(BaseModel):
    """Body of a partial update. Unknown keys are rejected, supplied ones are validated like on create.

    Defaults are never validated, so an explicit ``null`` is an error while an
    absent key is simply left out of ``model_fields_set``.
    """

    model_config = ConfigDict(extra="forbid")

    title: TitleStr = Field(default=None, alias="titulo")  # type: ignore[assignment]
    description: DescriptionStr = Field(default=None, alias="descripcion")  # type: ignore[assignment]
    priority: Priority = Field(default=None, alias="prioridad")  # type: ignore[assignment]
    completed: StrictBool = Field(default=None, alias="completada")  # type: ignore[assignment]
    category_id: IdInt = Field(default=None, alias="categoriaId")  # type: ignore[assignment]

    def changes(self) -> Dict[str, Any]:
        """Supplied fields keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class CategoryCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: CategoryNameStr = Field(alias="nombre")


class TaskFilters(BaseModel):
    """Optional filter, sort and page parameters of the task listing."""

    model_config = ConfigDict(extra="ignore")

    completed: Optional[bool] = Field(default=None, alias="completada")
    priority: Optional[Priority] = Field(default=None, alias="prioridad")
    owner_id: Optional[PositiveInt] = Field(default=None, alias="usuario_id")
    category_id: Optional[PositiveInt] = Field(default=None, alias="categoria_id")
    query: Optional[str] = Field(default=None, alias="q")
    sort: Optional[SortKey] = Field(default=None, alias="ordenar")
    page: PositiveInt = Field(default=1, alias="pagina")
    page_size: int = Field(default=10, ge=1, le=100, alias="limite")

    @field_validator("completed", mode="before")
    @classmethod
    def _true_or_false(cls, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return value
        if value in ("true", "false"):
            return value == "true"
        raise ValueError("completada debe ser true o false")


def field_errors(exc: ValidationError) -> List[FieldError]:
    """One ``FieldError`` per offending field."""
    errors: List[FieldError] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        if field in seen:
            continue
        seen.add(field)
        if error["type"] == "extra_forbidden":
            message = "campo no permitido"
        elif error["type"] == "missing":
            message = "es obligatorio"
        else:
            message = FIELD_MESSAGES.get(field, error["msg"])
        errors.append(FieldError(field, message))
    return errors


def parse_payload(model: Type[M], payload: Mapping[str, Any]) -> Result[M]:
    """Validate ``payload`` against ``model``, collecting every field error."""
    try:
        return Ok(model.model_validate(dict(payload)))
    except ValidationError as exc:
        return validation_failed(field_errors(exc))


def parse_positive_int(value: Any) -> Optional[int]:
    """Positive integer from an int or a numeric string, else ``None``."""
    try:
        return _ID_ADAPTER.validate_python(value)
    except ValidationError:
        return None
