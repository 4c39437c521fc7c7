from app.imports.orchestrator import ImportOrchestrator
from app.imports.registry import StrategyRegistry, build_default_registry
from app.imports.schemas import ImportContext, ImportFile, ImportSummary, ValidationError

__all__ = [
    "ImportContext",
    "ImportFile",
    "ImportOrchestrator",
    "ImportSummary",
    "StrategyRegistry",
    "ValidationError",
    "build_default_registry",
]
