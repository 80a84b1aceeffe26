"""
Calculator that connects a form-like front end to the hydraulics engine.

A front end holds, for each input field, the raw text typed by the user and
the selected unit, and for each output field the selected display unit. The
`DuctCalculator` parses the raw text, converts the inputs to SI units,
calls the hydraulics engine and returns every output converted to its display
unit and formatted for display.
"""
from typing import Dict, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field
from .exceptions import DuctFlowError
from .fluid_flow import FlowState, compute_flow
from .fluid_flow.duct_flow import TFluid
from .formatting import format_number, DEFAULT_PRECISION
from .units import PhysicalQuantity, UnitRegistry, UNIT_REGISTRY

PQ = PhysicalQuantity

TRawValue = Union[str, float]

INPUT_FIELDS: Dict[str, PhysicalQuantity] = {
    'width': PQ.LENGTH,
    'height': PQ.LENGTH,
    'length': PQ.LENGTH,
    'flow': PQ.VOLUME_FLOW_RATE
}

# output field -> (physical quantity, attribute of `FlowState`)
OUTPUT_FIELDS: Dict[str, Tuple[PhysicalQuantity, str]] = {
    'cross_section': (PQ.AREA, 'area'),
    'circumference': (PQ.LENGTH, 'perimeter'),
    'hydraulic_diameter': (PQ.LENGTH, 'hydraulic_diameter'),
    'velocity': (PQ.VELOCITY, 'velocity'),
    'reynolds': (PQ.DIMENSIONLESS, 'reynolds'),
    'friction_factor': (PQ.DIMENSIONLESS, 'friction_factor'),
    'friction_loss': (PQ.PRESSURE_GRADIENT, 'pressure_loss_per_length'),
    'pressure_drop': (PQ.PRESSURE, 'pressure_drop')
}

DEFAULT_INPUT_VALUE = 1.0


class InvalidInputError(DuctFlowError):
    pass


@dataclass(frozen=True)
class OutputValue:
    text: str
    unit: str
    value: float


@dataclass(frozen=True)
class CalculationResult:
    flow_state: FlowState
    outputs: Dict[str, OutputValue] = field(default_factory=dict)

    def __getitem__(self, name: str) -> str:
        return self.outputs[name].text


def parse_value(name: str, raw: TRawValue) -> float:
    """Parses the raw value of input field `name` to a float."""
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(
            f"{name}: '{raw}' is not a number"
        ) from None


class DuctCalculator:

    def __init__(
        self,
        registry: UnitRegistry = UNIT_REGISTRY,
        fluid: TFluid = 'air',
        precision: int = DEFAULT_PRECISION
    ) -> None:
        self.registry = registry
        self.fluid = fluid
        self.precision = precision

    def input_options(self) -> Dict[str, List[str]]:
        """Returns for each input field the unit symbols that can be selected."""
        return {
            name: self.registry.symbols(quantity)
            for name, quantity in INPUT_FIELDS.items()
        }

    def output_options(self) -> Dict[str, List[str]]:
        """Returns for each output field the unit symbols that can be selected."""
        return {
            name: self.registry.symbols(quantity)
            for name, (quantity, _) in OUTPUT_FIELDS.items()
        }

    def default_inputs(self) -> Dict[str, Tuple[float, str]]:
        """Returns the initial value and unit of each input field."""
        return {
            name: (DEFAULT_INPUT_VALUE, self.registry.base_unit(quantity).symbol)
            for name, quantity in INPUT_FIELDS.items()
        }

    def calculate(
        self,
        inputs: Mapping[str, Tuple[TRawValue, str]],
        output_units: Optional[Mapping[str, str]] = None
    ) -> CalculationResult:
        """Calculates and formats all output fields.

        Parameters
        ----------
        inputs:
            Raw value and unit of the input fields 'width', 'height',
            'length' and 'flow'. Missing fields take their default value.
        output_units: optional
            Display unit per output field. Output fields that are not
            mentioned are shown in their SI base unit.

        Raises
        ------
        InvalidInputError:
            If a field name is unknown or a raw value is not a number.
        UnknownUnitError, InvalidGeometryError, InvalidFlowError,
        UnknownFluidError:
            Propagated from the unit registry and the hydraulics engine.
        """
        output_units = dict(output_units or {})
        self._check_field_names(inputs, INPUT_FIELDS)
        self._check_field_names(output_units, OUTPUT_FIELDS)
        values = {**self.default_inputs(), **inputs}
        si = {}
        for name, quantity in INPUT_FIELDS.items():
            raw, unit = values[name]
            si[name] = self.registry.to_base(quantity, parse_value(name, raw), unit)
        state = compute_flow(
            si['width'], si['height'], si['length'], si['flow'], self.fluid
        )
        outputs = {}
        for name, (quantity, attr) in OUTPUT_FIELDS.items():
            unit = self.registry.get(
                quantity,
                output_units.get(name, self.registry.base_unit(quantity).symbol)
            )
            value = self.registry.from_base(quantity, getattr(state, attr), unit.name)
            outputs[name] = OutputValue(
                format_number(value, self.precision), unit.symbol, value
            )
        return CalculationResult(state, outputs)

    @staticmethod
    def _check_field_names(given: Mapping, known: Mapping) -> None:
        unknown = [name for name in given if name not in known]
        if unknown:
            raise InvalidInputError(
                f"unknown field(s): {', '.join(unknown)}; "
                f"choose from: {', '.join(known)}"
            )
