from fastapi import APIRouter, Response, UploadFile

from app.dependencies import ImportContextDep, OrchestratorDep, RegistryDep
from app.imports.schemas import DataTypeInfo, ImportFile, ImportSummary, ValidationError

router = APIRouter()


async def _read_upload(file: UploadFile, default_name: str) -> ImportFile:
    content = await file.read()
    return ImportFile(name=file.filename or default_name, content=content)


@router.get("/", response_model=list[DataTypeInfo])
async def list_data_types(registry: RegistryDep) -> list[DataTypeInfo]:
    return [
        DataTypeInfo(data_type=data_type, label=strategy.label, columns=strategy.columns)
        for data_type, strategy in registry.items()
    ]


@router.get("/{data_type}/template")
async def download_template(data_type: str, registry: RegistryDep) -> Response:
    strategy = registry.resolve(data_type)
    header = ";".join(strategy.columns)
    return Response(
        content=f"{header}\n",
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{data_type}.csv"'},
    )


@router.post("/{data_type}/validate", response_model=list[ValidationError])
async def validate_file(
    data_type: str,
    file: UploadFile,
    orchestrator: OrchestratorDep,
) -> list[ValidationError]:
    upload = await _read_upload(file, "upload.csv")
    return await orchestrator.validate_import(data_type, upload)


@router.post("/{data_type}/import", response_model=ImportSummary)
async def import_file(
    data_type: str,
    file: UploadFile,
    orchestrator: OrchestratorDep,
    context: ImportContextDep,
) -> ImportSummary:
    upload = await _read_upload(file, "upload.csv")
    return await orchestrator.execute_import(data_type, upload, context)
