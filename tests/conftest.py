import pytest

from app.imports.orchestrator import ImportOrchestrator
from app.imports.registry import StrategyRegistry, build_default_registry
from app.imports.schemas import ImportContext
from tests.helpers import FakeApiClient


@pytest.fixture
def fake_client() -> FakeApiClient:
    return FakeApiClient()


@pytest.fixture
def registry(fake_client: FakeApiClient) -> StrategyRegistry:
    return build_default_registry(fake_client)


@pytest.fixture
def orchestrator(registry: StrategyRegistry) -> ImportOrchestrator:
    return ImportOrchestrator(registry)


@pytest.fixture
def context() -> ImportContext:
    return ImportContext(
        base_url="https://api.example.test",
        auth_token="token-123",
        organization_id="org-1",
        company_id="company-1",
    )
