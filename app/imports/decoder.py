"""Turns an uploaded file into an ordered list of loosely-typed records.

Only structural parsing and cell coercion happen here; business rules belong
to the import strategies.
"""

import json
import re

import structlog

from app.exceptions import InvalidFormatError, UnsupportedFormatError
from app.imports.schemas import ImportFile, Record, RecordValue

logger = structlog.get_logger()

SUPPORTED_EXTENSIONS = ("json", "csv")

BOOLEAN_LITERALS = {"true": True, "false": False}

DATE_PATTERN = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4}|[0-9]{2})")


def detect_separator(header_line: str) -> str:
    """Pick ';' only when it outnumbers ','; ties fall back to ','."""
    return ";" if header_line.count(";") > header_line.count(",") else ","


def normalize_date(value: str) -> str:
    """Rewrite D/M/YY or D/M/YYYY as YYYY-MM-DD, leaving anything else untouched."""
    match = DATE_PATTERN.fullmatch(value)
    if match is None:
        return value

    day, month, year = match.groups()
    if len(year) == 2:
        short = int(year)
        year = str(2000 + short if short <= 49 else 1900 + short)
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def coerce_cell(raw: str) -> RecordValue:
    value = raw.strip()
    lowered = value.lower()
    if lowered in BOOLEAN_LITERALS:
        return BOOLEAN_LITERALS[lowered]
    if DATE_PATTERN.fullmatch(value):
        return normalize_date(value)
    # Kept as text so CPFs, phone numbers and codes keep their leading zeros
    return value


def decode_json(text: str) -> list[Record]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidFormatError(f"JSON inválido: {exc.msg} (linha {exc.lineno})") from exc
    except RecursionError as exc:
        raise InvalidFormatError("JSON muito profundo ou inválido.") from exc

    if isinstance(parsed, dict):
        return [parsed]

    if not isinstance(parsed, list):
        raise InvalidFormatError("Formato JSON inválido. Esperado um array ou objeto.")

    for idx, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise InvalidFormatError(
                f"Formato JSON inválido. O item {idx + 1} do array não é um objeto."
            )
    return parsed


def decode_csv(text: str, separator: str | None = None) -> list[Record]:
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]

    if len(lines) < 2:
        raise InvalidFormatError(
            "CSV deve conter ao menos uma linha de cabeçalho e uma de dados."
        )

    sep = separator or detect_separator(lines[0])
    headers = [header.strip() for header in lines[0].split(sep)]

    records: list[Record] = []
    for line in lines[1:]:
        values = line.split(sep)
        record: Record = {}
        for idx, header in enumerate(headers):
            record[header] = coerce_cell(values[idx]) if idx < len(values) else ""
        records.append(record)

    logger.debug("csv_decoded", separator=sep, columns=len(headers), rows=len(records))
    return records


def decode(file: ImportFile) -> list[Record]:
    """Decode a file by extension; raises DecodeError subclasses on failure."""
    ext = file.extension
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(ext)

    text = file.text()
    if ext == "json":
        return decode_json(text)
    return decode_csv(text)
