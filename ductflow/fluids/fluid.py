from typing import List, Mapping
from dataclasses import dataclass
from types import MappingProxyType
import math
from .. import Quantity
from .exceptions import UnknownFluidError


Q_ = Quantity


@dataclass(frozen=True)
class FluidProperties:
    """Properties of an incompressible reference fluid.

    Attributes
    ----------
    name:
        Name of the fluid.
    density:
        Mass density of the fluid in kg/m³.
    dynamic_viscosity:
        Dynamic (absolute) viscosity of the fluid in Pa.s.

    The kinematic viscosity is always derived from density and dynamic
    viscosity; it is not an attribute that can be set independently.
    """
    name: str
    density: float
    dynamic_viscosity: float

    def __post_init__(self):
        for attr in ('density', 'dynamic_viscosity'):
            value = getattr(self, attr)
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(
                    f"{attr} of fluid '{self.name}' must be > 0, got {value}"
                )

    @property
    def kinematic_viscosity(self) -> float:
        """Get the kinematic viscosity in m²/s."""
        return self.dynamic_viscosity / self.density

    @property
    def rho(self) -> Quantity:
        return Q_(self.density, 'kg / m ** 3')

    @property
    def mu(self) -> Quantity:
        return Q_(self.dynamic_viscosity, 'Pa * s')

    @property
    def nu(self) -> Quantity:
        return Q_(self.kinematic_viscosity, 'm ** 2 / s')

    @classmethod
    def get(cls, name: str) -> 'FluidProperties':
        """Returns the reference fluid with the given name (case-insensitive).

        Raises
        ------
        UnknownFluidError:
            If no reference fluid with this name exists.
        """
        key = name.strip().lower()
        try:
            return FLUIDS[key]
        except KeyError:
            raise UnknownFluidError(
                f"unknown fluid '{name}'; choose from: {', '.join(FLUIDS)}"
            ) from None

    @staticmethod
    def names() -> List[str]:
        return list(FLUIDS)


AIR = FluidProperties('air', density=1.205, dynamic_viscosity=1.82e-5)
WATER = FluidProperties('water', density=998.2, dynamic_viscosity=1.0e-3)

FLUIDS: Mapping[str, FluidProperties] = MappingProxyType({
    AIR.name: AIR,
    WATER.name: WATER
})
