import structlog

from app.client.api_client import build_auth_headers
from app.imports.schemas import ImportContext, Record, ValidationError
from app.imports.strategies.base import (
    FieldSpec,
    ImportStrategy,
    as_text,
    is_blank,
    required_field_errors,
)
from app.imports.validators import is_integer

logger = structlog.get_logger()

ENDPOINT = "/client/tms-base/v2/veiculos/modelos"

REQUIRED_FIELDS = (
    FieldSpec("nome", "Nome"),
    FieldSpec("fabricante", "Fabricante"),
    FieldSpec("ativo", "Ativo"),
)

OPTIONAL_FIELDS = (
    FieldSpec("ano_inicio", "Ano Início"),
    FieldSpec("ano_fim", "Ano Fim"),
)

VALID_ATIVO = ("true", "false")


class VehicleModelImportStrategy(ImportStrategy):
    label = "Modelos de Veículos"
    fields = REQUIRED_FIELDS + OPTIONAL_FIELDS

    def validate_record(self, record: Record, index: int) -> list[ValidationError]:
        row = index + 1
        errors = required_field_errors(record, REQUIRED_FIELDS, row)

        ativo = record.get("ativo")
        if not is_blank(ativo) and as_text(ativo).strip().lower() not in VALID_ATIVO:
            errors.append(
                ValidationError(
                    row=row,
                    field="Ativo",
                    error=f'Valor "{as_text(ativo)}" inválido para "Ativo". Permitidos: true, false',
                )
            )

        for spec in OPTIONAL_FIELDS:
            value = record.get(spec.field)
            if is_blank(value) or (not isinstance(value, bool) and is_integer(str(value))):
                continue
            errors.append(
                ValidationError(
                    row=row,
                    field=spec.label,
                    error=f'Valor "{as_text(value)}" deve ser um número inteiro.',
                )
            )

        return errors

    async def import_record(self, context: ImportContext, record: Record) -> None:
        headers = build_auth_headers(context.auth_token, context.organization_id, context.company_id)

        data: dict[str, object] = {
            "nome": as_text(record.get("nome")).strip(),
            "fabricante": as_text(record.get("fabricante")).strip(),
            "ativo": as_text(record.get("ativo")).strip().lower() == "true",
        }
        for spec in OPTIONAL_FIELDS:
            value = record.get(spec.field)
            if not is_blank(value):
                data[spec.field] = int(str(value).strip())

        payload = {"doc": "false", "data": data}

        await self._client.post(f"{context.base_url}{ENDPOINT}", headers=headers, payload=payload)
        logger.info("vehicle_model_imported", nome=data["nome"], fabricante=data["fabricante"])
