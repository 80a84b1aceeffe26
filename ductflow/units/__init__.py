from .registry import PhysicalQuantity, Unit, UnitRegistry

from .tables import DEFAULT_UNITS, UNIT_REGISTRY, create_default_registry

from .exceptions import (
    UnitError,
    UnknownUnitError,
    DuplicateUnitError,
    InvalidFactorError
)
