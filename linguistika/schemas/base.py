from typing import ClassVar, FrozenSet

from pydantic import BaseModel, ValidationInfo, field_validator


class UpdateSchema(BaseModel):
    """
    Actualización parcial: los campos ausentes no se tocan.

    Un ``null`` explícito solo se acepta en los campos de ``nullable_fields``.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("no puede ser nulo")
        return value
