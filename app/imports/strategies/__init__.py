from app.imports.strategies.base import FieldSpec, ImportStrategy
from app.imports.strategies.user import UserImportStrategy
from app.imports.strategies.vehicle import VehicleImportStrategy
from app.imports.strategies.vehicle_manufacturer import VehicleManufacturerImportStrategy
from app.imports.strategies.vehicle_model import VehicleModelImportStrategy

__all__ = [
    "FieldSpec",
    "ImportStrategy",
    "UserImportStrategy",
    "VehicleImportStrategy",
    "VehicleManufacturerImportStrategy",
    "VehicleModelImportStrategy",
]
