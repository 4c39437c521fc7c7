import structlog

from app.exceptions import DecodeError, UnknownDataTypeError
from app.imports import decoder
from app.imports.registry import StrategyRegistry
from app.imports.schemas import ImportContext, ImportFile, ImportSummary, ValidationError

logger = structlog.get_logger()

CONFIG_FIELD = "Configuração"
FILE_FIELD = "Arquivo"
API_FIELD = "API"

GENERIC_IMPORT_ERROR = "Erro desconhecido ao importar o registro."


def _decode_failure(exc: DecodeError) -> ValidationError:
    return ValidationError(
        field=FILE_FIELD,
        error=(
            f"Não foi possível ler o arquivo: {exc.message} "
            "Use um CSV separado por ';' ou ',' com uma linha de cabeçalho, "
            "ou um JSON com um objeto ou um array de objetos."
        ),
    )


class ImportOrchestrator:
    """Runs the validate-all and import-all workflows for one file at a time."""

    def __init__(self, registry: StrategyRegistry) -> None:
        self._registry = registry

    async def validate_import(self, data_type: str, file: ImportFile) -> list[ValidationError]:
        """Validate every record in the file and return all problems found.

        Configuration and file-level problems come back as a single error entry
        without a row number instead of being raised.
        """
        try:
            strategy = self._registry.resolve(data_type)
        except UnknownDataTypeError:
            logger.warning("import_unknown_data_type", data_type=data_type)
            return [
                ValidationError(
                    field=CONFIG_FIELD,
                    error=f'Serviço de importação não encontrado para: "{data_type}"',
                )
            ]

        try:
            records = decoder.decode(file)
        except DecodeError as exc:
            logger.warning("import_decode_failed", filename=file.name, error=exc.message)
            return [_decode_failure(exc)]

        if not records:
            return [ValidationError(field=FILE_FIELD, error="O arquivo não contém registros.")]

        first = records[0]
        if len(first) == 1:
            header = next(iter(first))
            if ";" in header:
                return [
                    ValidationError(
                        field=FILE_FIELD,
                        error=(
                            "O separador de colunas não foi reconhecido. "
                            f'Cabeçalho lido como uma única coluna: "{header}"'
                        ),
                    )
                ]

        errors: list[ValidationError] = []
        for index, record in enumerate(records):
            errors.extend(strategy.validate_record(record, index))

        logger.info(
            "import_validated",
            data_type=data_type,
            filename=file.name,
            records=len(records),
            errors=len(errors),
        )
        return errors

    async def execute_import(
        self, data_type: str, file: ImportFile, context: ImportContext
    ) -> ImportSummary:
        """Submit every record in file order, one at a time.

        Raises UnknownDataTypeError for an unregistered data type; every other
        failure is recorded in the returned summary.
        """
        strategy = self._registry.resolve(data_type)

        try:
            records = decoder.decode(file)
        except DecodeError as exc:
            logger.warning("import_decode_failed", filename=file.name, error=exc.message)
            return ImportSummary(total=0, imported=0, failed=1, errors=[_decode_failure(exc)])

        summary = ImportSummary(total=len(records))

        for index, record in enumerate(records):
            try:
                await strategy.import_record(context, record)
                summary.imported += 1
            except Exception as exc:
                summary.failed += 1
                message = getattr(exc, "message", None) or str(exc) or GENERIC_IMPORT_ERROR
                summary.errors.append(ValidationError(row=index + 1, field=API_FIELD, error=message))
                logger.warning(
                    "import_row_failed",
                    data_type=data_type,
                    filename=file.name,
                    row=index + 1,
                    error=message,
                )

        logger.info(
            "import_completed",
            data_type=data_type,
            filename=file.name,
            total=summary.total,
            imported=summary.imported,
            failed=summary.failed,
        )
        return summary
