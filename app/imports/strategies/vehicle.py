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
from app.imports.validators import is_numeric

logger = structlog.get_logger()

ENDPOINT = "/client/tms-base/v2/veiculos"

# Every vehicle column is mandatory
ALL_FIELDS = (
    FieldSpec("placa", "Placa"),
    FieldSpec("placa_estado_id", "Estado da Placa"),
    FieldSpec("renavam", "Renavam"),
    FieldSpec("chassi", "Chassi"),
    FieldSpec("ano", "Ano"),
    FieldSpec("ano_modelo", "Ano Modelo"),
    FieldSpec("cor", "Cor"),
    FieldSpec("tara", "Tara"),
    FieldSpec("lotacao_kg", "Lotação (kg)"),
    FieldSpec("lotacao_palete", "Lotação (palete)"),
    FieldSpec("capacidade_volume_m3", "Capacidade Volume (m³)"),
    FieldSpec("capacidade_litros", "Capacidade (litros)"),
    FieldSpec("situacao", "Situação"),
    FieldSpec("data_compra", "Data de Compra"),
    FieldSpec("tipo", "Tipo"),
    FieldSpec("tipo_rodado", "Tipo Rodado"),
    FieldSpec("tipo_carroceria", "Tipo Carroceria"),
    FieldSpec("tipo_roda", "Tipo Roda"),
    FieldSpec("quantidade_eixos", "Quantidade Eixos"),
    FieldSpec("cidade", "Cidade"),
    FieldSpec("fabricante", "Fabricante"),
    FieldSpec("fabricante_modelo", "Fabricante Modelo"),
    FieldSpec("tipo_carga", "Tipo Carga"),
    FieldSpec("utilizacao", "Utilização"),
    FieldSpec("veiculo_tipo", "Veículo Tipo"),
    FieldSpec("motorista_id", "Motorista ID"),
    FieldSpec("motorista_nome", "Motorista Nome"),
    FieldSpec("frota", "Frota"),
    FieldSpec("modelo", "Modelo"),
    FieldSpec("marca", "Marca"),
    FieldSpec("propriedade", "Propriedade"),
    FieldSpec("fornecedor", "Fornecedor"),
    FieldSpec("proprietario", "Proprietário"),
    FieldSpec("grupo", "Grupo"),
)

ENUM_FIELDS: dict[str, tuple[str, tuple[str, ...]]] = {
    "tipo": ("Tipo", ("TRA", "REB", "BIT", "SRB")),
    "tipo_rodado": ("Tipo Rodado", ("TOC", "TAN", "TRI")),
    "tipo_carroceria": ("Tipo Carroceria", ("NAP", "ABE", "FEC", "GRA", "TAN")),
    "tipo_roda": ("Tipo Roda", ("SIM", "DUP")),
    "propriedade": ("Propriedade", ("P", "T")),
}

NUMERIC_FIELDS = (
    "quantidade_eixos",
    "ano",
    "ano_modelo",
    "tara",
    "lotacao_kg",
    "lotacao_palete",
    "capacidade_volume_m3",
    "capacidade_litros",
    "grupo",
)


class VehicleImportStrategy(ImportStrategy):
    label = "Veículos"
    fields = ALL_FIELDS

    def validate_record(self, record: Record, index: int) -> list[ValidationError]:
        row = index + 1
        errors = required_field_errors(record, ALL_FIELDS, row)

        for field, (label, allowed) in ENUM_FIELDS.items():
            value = record.get(field)
            if is_blank(value) or as_text(value) in allowed:
                continue
            errors.append(
                ValidationError(
                    row=row,
                    field=label,
                    error=f'Valor "{as_text(value)}" inválido. Permitidos: {", ".join(allowed)}',
                )
            )

        for field in NUMERIC_FIELDS:
            value = record.get(field)
            if is_blank(value) or (not isinstance(value, bool) and is_numeric(str(value))):
                continue
            errors.append(
                ValidationError(
                    row=row,
                    field=field,
                    error=f'Valor "{as_text(value)}" deve ser numérico.',
                )
            )

        return errors

    async def import_record(self, context: ImportContext, record: Record) -> None:
        headers = build_auth_headers(context.auth_token, context.organization_id, context.company_id)
        payload = {"doc": "false", "data": record}

        await self._client.post(f"{context.base_url}{ENDPOINT}", headers=headers, payload=payload)
        logger.info("vehicle_imported", placa=record.get("placa"))
