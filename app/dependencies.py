from typing import Annotated

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import settings
from app.exceptions import UnauthorizedError
from app.imports.orchestrator import ImportOrchestrator
from app.imports.registry import StrategyRegistry
from app.imports.schemas import ImportContext

_bearer = HTTPBearer(auto_error=False)


def get_registry(request: Request) -> StrategyRegistry:
    return request.app.state.registry


def get_orchestrator(request: Request) -> ImportOrchestrator:
    return request.app.state.orchestrator


async def get_import_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    x_organization_id: Annotated[str | None, Header()] = None,
    x_company_id: Annotated[str | None, Header()] = None,
) -> ImportContext:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Não autenticado.")
    if not x_organization_id:
        raise UnauthorizedError("Organização não selecionada.")
    if not x_company_id:
        raise UnauthorizedError("Empresa não selecionada.")

    return ImportContext(
        base_url=settings.platform_base_url,
        auth_token=credentials.credentials,
        organization_id=x_organization_id,
        company_id=x_company_id,
    )


RegistryDep = Annotated[StrategyRegistry, Depends(get_registry)]
OrchestratorDep = Annotated[ImportOrchestrator, Depends(get_orchestrator)]
ImportContextDep = Annotated[ImportContext, Depends(get_import_context)]
