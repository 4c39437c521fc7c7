from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from app.client.api_client import ApiClient
from app.imports.schemas import ImportContext, Record, ValidationError


@dataclass(frozen=True)
class FieldSpec:
    field: str
    label: str


class ImportStrategy(ABC):
    """Validation and submission rules for one entity type."""

    label: str
    fields: tuple[FieldSpec, ...]

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @abstractmethod
    def validate_record(self, record: Record, index: int) -> list[ValidationError]:
        """Return every problem found in the record; an empty list means valid."""
        ...

    @abstractmethod
    async def import_record(self, context: ImportContext, record: Record) -> None:
        """Submit one validated record to the platform API."""
        ...

    @property
    def columns(self) -> list[str]:
        return [spec.field for spec in self.fields]


def is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def as_text(value: Any) -> str:
    """Render a record value the way it appears in a spreadsheet cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def required_field_errors(
    record: Record, required: tuple[FieldSpec, ...], row: int
) -> list[ValidationError]:
    return [
        ValidationError(
            row=row,
            field=spec.label,
            error=f'Campo obrigatório "{spec.label}" não informado.',
        )
        for spec in required
        if is_blank(record.get(spec.field))
    ]
