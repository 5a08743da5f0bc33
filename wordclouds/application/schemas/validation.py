"""Turn raw client input into validated DTOs or a domain ValidationError."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from wordclouds.domain.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_input(schema: type[ModelT], data: ModelT | Mapping[str, Any]) -> ModelT:
    """Return ``data`` as an instance of ``schema``.

    Already-validated instances pass straight through; mappings are
    validated and pydantic errors are re-raised as ValidationError.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "__root__",
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        raise ValidationError(errors) from exc
