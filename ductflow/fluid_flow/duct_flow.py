from typing import Dict, Union
from dataclasses import dataclass, asdict
import math
from .. import Quantity
from ..fluids import FluidProperties
from .constants import WALL_ROUGHNESS
from .exceptions import InvalidFlowError
from .friction_factor import FlowRegime, flow_regime, solve_friction_factor
from .geometry import DuctGeometry

Q_ = Quantity

TFluid = Union[FluidProperties, str]


@dataclass(frozen=True)
class FlowState:
    """Result of a duct-flow calculation. All values are in SI units.

    Attributes
    ----------
    area:
        Cross-sectional area of the duct, m².
    perimeter:
        Internal perimeter of the cross-section, m.
    hydraulic_diameter:
        Hydraulic diameter of the cross-section, m.
    velocity:
        Mean flow velocity, m/s.
    reynolds:
        Reynolds number.
    friction_factor:
        Darcy friction factor.
    pressure_loss_per_length:
        Frictional pressure loss per unit length of duct, Pa/m.
    pressure_drop:
        Frictional pressure drop along the duct, Pa.
    """
    area: float
    perimeter: float
    hydraulic_diameter: float
    velocity: float
    reynolds: float
    friction_factor: float
    pressure_loss_per_length: float
    pressure_drop: float

    @property
    def regime(self) -> FlowRegime:
        return flow_regime(self.reynolds)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def to_quantities(self) -> Dict[str, Quantity]:
        """Returns the flow state as a dict of pint quantities."""
        return {
            'area': Q_(self.area, 'm ** 2'),
            'perimeter': Q_(self.perimeter, 'm'),
            'hydraulic_diameter': Q_(self.hydraulic_diameter, 'm'),
            'velocity': Q_(self.velocity, 'm / s'),
            'reynolds': Q_(self.reynolds, 'dimensionless'),
            'friction_factor': Q_(self.friction_factor, 'dimensionless'),
            'pressure_loss_per_length': Q_(self.pressure_loss_per_length, 'Pa / m'),
            'pressure_drop': Q_(self.pressure_drop, 'Pa')
        }


def _resolve_fluid(fluid: TFluid) -> FluidProperties:
    if isinstance(fluid, FluidProperties):
        return fluid
    return FluidProperties.get(fluid)


def _ensure_in_range(name: str, value: float, flow_rate: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidFlowError(
            f"{name} is out of range ({value}) at volume flow rate "
            f"{flow_rate} m³/s"
        )


def compute_flow(
    width: float,
    height: float,
    length: float,
    flow_rate: float,
    fluid: TFluid = 'air'
) -> FlowState:
    """Calculates the flow of `fluid` through a straight rectangular duct.

    Parameters
    ----------
    width:
        Internal width of the duct, m.
    height:
        Internal height of the duct, m.
    length:
        Length of the duct, m.
    flow_rate:
        Volume flow rate, m³/s.
    fluid:
        A `FluidProperties` object or the name of a reference fluid.

    Returns
    -------
    FlowState

    Raises
    ------
    InvalidGeometryError:
        If width, height or length is not a positive number, or if area,
        perimeter or hydraulic diameter under- or overflows.
    InvalidFlowError:
        If the flow rate is not a positive number, or if velocity,
        Reynolds number, friction loss or pressure drop under- or overflows.
    UnknownFluidError:
        If `fluid` is the name of an unknown fluid.
    """
    duct = DuctGeometry(width, height, length)
    if not math.isfinite(flow_rate) or flow_rate <= 0.0:
        raise InvalidFlowError(
            f"volume flow rate must be a positive number, got {flow_rate}"
        )
    fluid = _resolve_fluid(fluid)
    A = duct.area
    P = duct.perimeter
    dh = duct.hydraulic_diameter
    v = flow_rate / A
    Re = v * dh / fluid.kinematic_viscosity
    _ensure_in_range('velocity', v, flow_rate)
    _ensure_in_range('Reynolds number', Re, flow_rate)
    f = solve_friction_factor(Re, dh, WALL_ROUGHNESS)
    # R = dp / L = f / D_h * rho / 2 * v²
    try:
        R = f / dh * fluid.density / 2 * v ** 2
    except OverflowError:
        R = math.inf
    _ensure_in_range('friction loss', R, flow_rate)
    _ensure_in_range('pressure drop', R * duct.length, flow_rate)
    return FlowState(
        area=A,
        perimeter=P,
        hydraulic_diameter=dh,
        velocity=v,
        reynolds=Re,
        friction_factor=f,
        pressure_loss_per_length=R,
        pressure_drop=R * duct.length
    )
