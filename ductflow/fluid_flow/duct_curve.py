from typing import Dict, Iterable, Mapping, Optional, Tuple
import numpy as np
import pandas as pd
from ..units import PhysicalQuantity, UnitRegistry, UNIT_REGISTRY
from .duct_flow import FlowState, TFluid, compute_flow
from .exceptions import InvalidFlowError, UnknownFieldError
from .geometry import DuctGeometry

PQ = PhysicalQuantity

# column label and physical quantity of the `FlowState` fields in a table
TABLE_COLUMNS: Dict[str, Tuple[str, PhysicalQuantity]] = {
    'area': ('cross-section', PQ.AREA),
    'perimeter': ('circumference', PQ.LENGTH),
    'hydraulic_diameter': ('hydraulic diameter', PQ.LENGTH),
    'velocity': ('velocity', PQ.VELOCITY),
    'reynolds': ('Reynolds number', PQ.DIMENSIONLESS),
    'friction_factor': ('friction factor', PQ.DIMENSIONLESS),
    'pressure_loss_per_length': ('friction loss', PQ.PRESSURE_GRADIENT),
    'pressure_drop': ('pressure drop', PQ.PRESSURE)
}


class DuctCurve:
    """Pressure drop across a given duct as a function of the volume flow
    rate of a given fluid.
    """

    def __init__(
        self,
        duct: DuctGeometry,
        fluid: TFluid = 'air',
        registry: UnitRegistry = UNIT_REGISTRY
    ) -> None:
        self.duct = duct
        self.fluid = fluid
        self.registry = registry

    def flow_state(self, flow_rate: float) -> FlowState:
        """Returns the flow state at volume flow rate `flow_rate` (m³/s)."""
        d = self.duct
        return compute_flow(d.width, d.height, d.length, flow_rate, self.fluid)

    def pressure_drop(self, flow_rate: float) -> float:
        """Returns the pressure drop (Pa) at volume flow rate `flow_rate` (m³/s)."""
        return self.flow_state(flow_rate).pressure_drop

    def axes(
        self,
        flow_ini: float,
        flow_fin: float,
        num: int = 50
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Returns the coordinate-axes of the curve.

        Parameters
        ----------
        flow_ini:
            First volume flow rate of the curve (m³/s), must be > 0.
        flow_fin:
            Last volume flow rate of the curve (m³/s).
        num: optional
            Number of points on the curve, start- and endpoint included.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            The volume flow rate axis (m³/s) and the pressure drop axis (Pa).
        """
        if flow_ini <= 0.0:
            raise InvalidFlowError(
                f"first volume flow rate of the curve must be > 0, got {flow_ini}"
            )
        V_ax = np.linspace(flow_ini, flow_fin, num, endpoint=True)
        dP_ax = np.array([self.pressure_drop(float(V)) for V in V_ax])
        return V_ax, dP_ax

    def table(
        self,
        flow_rates: Iterable[float],
        units: Optional[Mapping[str, str]] = None,
        flow_unit: str = 'm³/s'
    ) -> pd.DataFrame:
        """Returns a Pandas DataFrame with one row per volume flow rate in
        `flow_rates` (expressed in `flow_unit`) and a column for each
        calculated quantity. Through `units` the display unit of any
        `FlowState` field can be chosen, e.g. `{'velocity': 'km/h'}`;
        other fields are shown in their SI base unit. An unknown field name
        raises `UnknownFieldError`. The unit is added to
        the column header between square brackets.
        """
        units = dict(units or {})
        unknown = [field for field in units if field not in TABLE_COLUMNS]
        if unknown:
            raise UnknownFieldError(
                f"unknown field(s): {', '.join(unknown)}; "
                f"choose from: {', '.join(TABLE_COLUMNS)}"
            )
        reg = self.registry
        header = {}
        for field, (label, quantity) in TABLE_COLUMNS.items():
            unit = reg.get(quantity, units.get(field, reg.base_unit(quantity).symbol))
            header[field] = (f'{label} [{unit.symbol}]', quantity, unit.name)
        flow_header = f'flow rate [{reg.get(PQ.VOLUME_FLOW_RATE, flow_unit).symbol}]'
        table = {flow_header: []}
        table.update({col: [] for col, *_ in header.values()})
        for V in flow_rates:
            V_SI = reg.to_base(PQ.VOLUME_FLOW_RATE, V, flow_unit)
            state = self.flow_state(V_SI)
            table[flow_header].append(V)
            for field, value in state.as_dict().items():
                col, quantity, unit_name = header[field]
                table[col].append(reg.from_base(quantity, value, unit_name))
        return pd.DataFrame(table)
