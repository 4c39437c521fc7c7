"""Maps import data-type identifiers to their strategies."""

import structlog

from app.client.api_client import ApiClient
from app.exceptions import UnknownDataTypeError
from app.imports.strategies import (
    ImportStrategy,
    UserImportStrategy,
    VehicleImportStrategy,
    VehicleManufacturerImportStrategy,
    VehicleModelImportStrategy,
)

logger = structlog.get_logger()


class StrategyRegistry:
    """Registry of import strategies keyed by data type.

    Registration is expected to finish during application start-up, before any
    lookup; there is no locking between ``register`` and ``resolve``.
    """

    def __init__(self) -> None:
        self._strategies: dict[str, ImportStrategy] = {}

    def register(self, data_type: str, strategy: ImportStrategy) -> None:
        """Bind a data type to a strategy, replacing any previous binding."""
        if data_type in self._strategies:
            logger.warning("import_strategy_replaced", data_type=data_type)
        self._strategies[data_type] = strategy

    def resolve(self, data_type: str) -> ImportStrategy:
        strategy = self._strategies.get(data_type)
        if strategy is None:
            raise UnknownDataTypeError(data_type)
        return strategy

    def data_types(self) -> list[str]:
        return list(self._strategies)

    def items(self) -> list[tuple[str, ImportStrategy]]:
        return list(self._strategies.items())


def build_default_registry(client: ApiClient) -> StrategyRegistry:
    """Register every supported entity type. To add one, write a strategy and bind it here."""
    registry = StrategyRegistry()
    registry.register("veiculos", VehicleImportStrategy(client))
    registry.register("veiculos-fabricantes", VehicleManufacturerImportStrategy(client))
    registry.register("veiculos-modelos", VehicleModelImportStrategy(client))
    registry.register("usuarios", UserImportStrategy(client))

    logger.info("import_strategies_registered", data_types=registry.data_types())
    return registry
