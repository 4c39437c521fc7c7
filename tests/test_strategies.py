import asyncio

import pytest

from app.client.api_client import ApiError
from app.imports.strategies import (
    UserImportStrategy,
    VehicleImportStrategy,
    VehicleManufacturerImportStrategy,
    VehicleModelImportStrategy,
)
from app.imports.strategies.vehicle import ALL_FIELDS
from tests.helpers import VALID_CPF, FakeApiClient, api_failure


def _valid_vehicle() -> dict:
    record = {spec.field: "x" for spec in ALL_FIELDS}
    record.update(
        {
            "placa": "ABC1D23",
            "tipo": "TRA",
            "tipo_rodado": "TOC",
            "tipo_carroceria": "FEC",
            "tipo_roda": "DUP",
            "propriedade": "P",
            "quantidade_eixos": "3",
            "ano": "2020",
            "ano_modelo": "2021",
            "tara": "8000.5",
            "lotacao_kg": "25000",
            "lotacao_palete": "28",
            "capacidade_volume_m3": "90",
            "capacidade_litros": "0",
            "grupo": "1",
            "data_compra": "2021-02-01",
        }
    )
    return record


# --- Vehicle ---


def test_vehicle_valid_record_has_no_errors() -> None:
    strategy = VehicleImportStrategy(FakeApiClient())

    assert strategy.validate_record(_valid_vehicle(), 0) == []


def test_vehicle_every_field_is_required() -> None:
    strategy = VehicleImportStrategy(FakeApiClient())

    errors = strategy.validate_record({}, 4)

    assert len(errors) == len(ALL_FIELDS)
    assert {e.row for e in errors} == {5}
    assert [e.field for e in errors] == [spec.label for spec in ALL_FIELDS]


def test_vehicle_blank_values_count_as_missing() -> None:
    strategy = VehicleImportStrategy(FakeApiClient())
    record = _valid_vehicle()
    record["cor"] = "   "
    record["frota"] = None

    errors = strategy.validate_record(record, 0)

    assert [e.field for e in errors] == ["Cor", "Frota"]


def test_vehicle_enum_and_numeric_rules_accumulate() -> None:
    strategy = VehicleImportStrategy(FakeApiClient())
    record = _valid_vehicle()
    record["tipo"] = "CAR"
    record["tipo_roda"] = "sim"
    record["ano"] = "dois mil"
    record["tara"] = True

    errors = strategy.validate_record(record, 1)

    assert [(e.row, e.field) for e in errors] == [
        (2, "Tipo"),
        (2, "Tipo Roda"),
        (2, "ano"),
        (2, "tara"),
    ]
    assert "TRA, REB, BIT, SRB" in errors[0].error
    assert errors[2].error == 'Valor "dois mil" deve ser numérico.'


def test_vehicle_import_posts_record_as_data(context) -> None:
    client = FakeApiClient()
    strategy = VehicleImportStrategy(client)
    record = _valid_vehicle()

    asyncio.run(strategy.import_record(context, record))

    assert len(client.calls) == 1
    call = client.calls[0]
    assert call["url"] == "https://api.example.test/client/tms-base/v2/veiculos"
    assert call["payload"] == {"doc": "false", "data": record}
    assert call["headers"] == {
        "Content-Type": "application/json",
        "Authorization": "Bearer token-123",
        "sil-organization": "org-1",
        "sil-company": "company-1",
    }


# --- Vehicle manufacturer ---


@pytest.mark.parametrize("ativo", [True, False, "true", "FALSE", " True "])
def test_manufacturer_accepts_boolean_ativo(ativo) -> None:
    strategy = VehicleManufacturerImportStrategy(FakeApiClient())

    assert strategy.validate_record({"nome": "Acme", "ativo": ativo}, 0) == []


def test_manufacturer_rejects_other_ativo_values() -> None:
    strategy = VehicleManufacturerImportStrategy(FakeApiClient())

    errors = strategy.validate_record({"nome": "Acme", "ativo": "sim"}, 2)

    assert len(errors) == 1
    assert errors[0].row == 3
    assert errors[0].field == "Ativo"


def test_manufacturer_missing_fields() -> None:
    strategy = VehicleManufacturerImportStrategy(FakeApiClient())

    errors = strategy.validate_record({"nome": ""}, 0)

    assert [e.field for e in errors] == ["Nome", "Ativo"]
    assert errors[0].error == 'Campo obrigatório "Nome" não informado.'


def test_manufacturer_import_normalizes_payload(context) -> None:
    client = FakeApiClient()
    strategy = VehicleManufacturerImportStrategy(client)

    asyncio.run(strategy.import_record(context, {"nome": "  Acme  ", "ativo": "TRUE", "extra": "x"}))

    call = client.calls[0]
    assert call["url"] == "https://api.example.test/client/tms-base/v2/veiculos/fabricantes"
    assert call["payload"] == {"doc": "false", "data": {"nome": "Acme", "ativo": True}}


# --- Vehicle model ---


def test_model_requires_name_manufacturer_and_ativo() -> None:
    strategy = VehicleModelImportStrategy(FakeApiClient())

    errors = strategy.validate_record({}, 0)

    assert [e.field for e in errors] == ["Nome", "Fabricante", "Ativo"]


def test_model_optional_years_must_be_integers() -> None:
    strategy = VehicleModelImportStrategy(FakeApiClient())
    record = {"nome": "FH 540", "fabricante": "Volvo", "ativo": True, "ano_inicio": "2015", "ano_fim": "atual"}

    errors = strategy.validate_record(record, 0)

    assert len(errors) == 1
    assert errors[0].field == "Ano Fim"


@pytest.mark.parametrize("year", ["2015.7", "1e400", "2015.0", " 20 15 "])
def test_model_years_reject_non_integer_values(year: str) -> None:
    strategy = VehicleModelImportStrategy(FakeApiClient())
    record = {"nome": "FH 540", "fabricante": "Volvo", "ativo": True, "ano_inicio": year}

    errors = strategy.validate_record(record, 0)

    assert [(e.field, e.error) for e in errors] == [
        ("Ano Início", f'Valor "{year}" deve ser um número inteiro.')
    ]


def test_model_import_includes_present_years(context) -> None:
    client = FakeApiClient()
    strategy = VehicleModelImportStrategy(client)

    asyncio.run(
        strategy.import_record(
            context,
            {"nome": "FH 540", "fabricante": "Volvo", "ativo": "false", "ano_inicio": "2015", "ano_fim": ""},
        )
    )

    call = client.calls[0]
    assert call["url"] == "https://api.example.test/client/tms-base/v2/veiculos/modelos"
    assert call["payload"]["data"] == {
        "nome": "FH 540",
        "fabricante": "Volvo",
        "ativo": False,
        "ano_inicio": 2015,
    }


# --- User ---


def test_user_valid_record() -> None:
    strategy = UserImportStrategy(FakeApiClient())

    record = {"nome": "Ana", "email": "ana@example.com", "cpf": "529.982.247-25"}

    assert strategy.validate_record(record, 0) == []


def test_user_invalid_email_and_cpf_both_reported() -> None:
    strategy = UserImportStrategy(FakeApiClient())

    errors = strategy.validate_record({"nome": "Ana", "email": "ana@", "cpf": "12345678900"}, 0)

    assert [e.field for e in errors] == ["E-mail", "CPF"]
    assert all(e.row == 1 for e in errors)


def test_user_missing_fields_skip_format_checks() -> None:
    strategy = UserImportStrategy(FakeApiClient())

    errors = strategy.validate_record({"nome": "Ana"}, 0)

    assert [e.field for e in errors] == ["E-mail", "CPF"]
    assert all("obrigatório" in e.error for e in errors)


def test_user_import_payload(context, monkeypatch) -> None:
    monkeypatch.setattr("app.imports.strategies.user.end_of_current_decade", lambda: "2029-12-31")
    client = FakeApiClient()
    strategy = UserImportStrategy(client)

    asyncio.run(
        strategy.import_record(
            context,
            {"nome": " Ana ", "email": "ana@example.com ", "cpf": "529.982.247-25", "telefone": "011 99999"},
        )
    )

    call = client.calls[0]
    assert call["url"] == "https://api.example.test/client-admin/base/v2/usuarios"
    data = call["payload"]["data"]
    assert call["payload"]["doc"] == ""
    assert data["nome"] == "Ana"
    assert data["email"] == "ana@example.com"
    assert data["cpf"] == VALID_CPF
    assert data["telefone"] == "011 99999"
    assert data["organizacao_ativa"]["acesso_expira_em"] == "2029-12-31"
    assert data["organizacao_ativa"]["ativo"] is True


def test_import_failure_propagates(context) -> None:
    client = FakeApiClient(fail_on={0: api_failure("[DUP] Registro duplicado")})
    strategy = VehicleManufacturerImportStrategy(client)

    with pytest.raises(ApiError) as exc_info:
        asyncio.run(strategy.import_record(context, {"nome": "Acme", "ativo": True}))

    assert exc_info.value.message == "[DUP] Registro duplicado"


def test_template_columns() -> None:
    client = FakeApiClient()

    assert UserImportStrategy(client).columns == ["nome", "email", "cpf", "telefone"]
    assert VehicleManufacturerImportStrategy(client).columns == ["nome", "ativo"]
    assert len(VehicleImportStrategy(client).columns) == 34
