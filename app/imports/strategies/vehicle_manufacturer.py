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

logger = structlog.get_logger()

ENDPOINT = "/client/tms-base/v2/veiculos/fabricantes"

REQUIRED_FIELDS = (
    FieldSpec("nome", "Nome"),
    FieldSpec("ativo", "Ativo"),
)

VALID_ATIVO = ("true", "false")


class VehicleManufacturerImportStrategy(ImportStrategy):
    label = "Fabricantes de Veículos"
    fields = REQUIRED_FIELDS

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

        return errors

    async def import_record(self, context: ImportContext, record: Record) -> None:
        headers = build_auth_headers(context.auth_token, context.organization_id, context.company_id)
        payload = {
            "doc": "false",
            "data": {
                "nome": as_text(record.get("nome")).strip(),
                "ativo": as_text(record.get("ativo")).strip().lower() == "true",
            },
        }

        await self._client.post(f"{context.base_url}{ENDPOINT}", headers=headers, payload=payload)
        logger.info("vehicle_manufacturer_imported", nome=payload["data"]["nome"])
