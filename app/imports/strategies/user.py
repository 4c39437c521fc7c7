import re

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
from app.imports.validators import end_of_current_decade, is_valid_cpf, is_valid_email

logger = structlog.get_logger()

ENDPOINT = "/client-admin/base/v2/usuarios"

REQUIRED_FIELDS = (
    FieldSpec("nome", "Nome"),
    FieldSpec("email", "E-mail"),
    FieldSpec("cpf", "CPF"),
)


class UserImportStrategy(ImportStrategy):
    label = "Usuários"
    fields = REQUIRED_FIELDS + (FieldSpec("telefone", "Telefone"),)

    def validate_record(self, record: Record, index: int) -> list[ValidationError]:
        row = index + 1
        errors = required_field_errors(record, REQUIRED_FIELDS, row)

        email = record.get("email")
        if not is_blank(email) and not is_valid_email(as_text(email)):
            errors.append(
                ValidationError(
                    row=row,
                    field="E-mail",
                    error=f'Valor "{as_text(email)}" não é um e-mail válido.',
                )
            )

        cpf = record.get("cpf")
        if not is_blank(cpf) and not is_valid_cpf(as_text(cpf)):
            errors.append(
                ValidationError(
                    row=row,
                    field="CPF",
                    error=f'Valor "{as_text(cpf)}" não é um CPF válido.',
                )
            )

        return errors

    async def import_record(self, context: ImportContext, record: Record) -> None:
        headers = build_auth_headers(context.auth_token, context.organization_id, context.company_id)
        telefone = record.get("telefone")

        payload = {
            "doc": "",
            "data": {
                "nome": as_text(record.get("nome")).strip(),
                "email": as_text(record.get("email")).strip(),
                "cpf": re.sub(r"\D", "", as_text(record.get("cpf"))),
                "telefone": as_text(telefone).strip() if telefone else "",
                "organizacao_ativa": {
                    "observacao": "",
                    "acesso_expira_em": end_of_current_decade(),
                    "ativo": True,
                    "integracao": {"identificacao_api": ""},
                    "pessoa": {"identificacao_api": ""},
                },
            },
        }

        await self._client.post(f"{context.base_url}{ENDPOINT}", headers=headers, payload=payload)
        logger.info("user_imported", email=payload["data"]["email"])
