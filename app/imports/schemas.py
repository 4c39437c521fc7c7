from dataclasses import dataclass

from pydantic import BaseModel

RecordValue = str | bool | None
Record = dict[str, RecordValue]


class ValidationError(BaseModel):
    model_config = {"frozen": True}

    row: int | None = None
    field: str
    error: str


class ImportSummary(BaseModel):
    total: int = 0
    imported: int = 0
    failed: int = 0
    errors: list[ValidationError] = []


class DataTypeInfo(BaseModel):
    data_type: str
    label: str
    columns: list[str]


@dataclass(frozen=True)
class ImportContext:
    base_url: str
    auth_token: str
    organization_id: str
    company_id: str


@dataclass(frozen=True)
class ImportFile:
    name: str
    content: bytes

    @property
    def extension(self) -> str:
        _, dot, ext = self.name.rpartition(".")
        return ext.lower() if dot else ""

    def text(self) -> str:
        """Decode bytes to string with encoding fallback."""
        try:
            return self.content.decode("utf-8-sig")
        except UnicodeDecodeError:
            return self.content.decode("latin-1")
