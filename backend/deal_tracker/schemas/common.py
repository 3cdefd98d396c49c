from typing import Any, ClassVar
from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Частичное обновление.

    Поле, не переданное в запросе, и поле, явно переданное как null, - это
    разные вещи: первое не меняется, второе обнуляет значение. Различаем их
    через model_fields_set. Для полей, которые в БД NOT NULL, явный null
    отклоняется.
    """
    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for field in self.model_fields_set & self.non_nullable:
            if getattr(self, field) is None:
                raise ValueError(f"{field} may not be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Только те поля, которые были переданы"""
        return self.model_dump(exclude_unset=True)
