"""
Registry of the units in which duct dimensions, flow rates and the calculated
flow quantities can be expressed.

Every unit belongs to exactly one physical quantity and carries a
multiplicative factor to the SI base unit of that quantity, so that
`value_SI = value * factor`. Conversions between two units of the same
quantity always pass through the SI base unit.
"""
from typing import Dict, List, Union
from dataclasses import dataclass
from enum import Enum
import math
from .. import Quantity
from .exceptions import UnknownUnitError, DuplicateUnitError, InvalidFactorError


class PhysicalQuantity(str, Enum):
    LENGTH = 'length'
    AREA = 'area'
    VOLUME_FLOW_RATE = 'volume flow rate'
    VELOCITY = 'velocity'
    PRESSURE_GRADIENT = 'pressure gradient'
    PRESSURE = 'pressure'
    DIMENSIONLESS = 'dimensionless'

    @property
    def pint_unit(self) -> str:
        """Get the SI base unit of the quantity as a pint unit expression."""
        return _PINT_BASE_UNITS[self]


_PINT_BASE_UNITS: Dict[PhysicalQuantity, str] = {
    PhysicalQuantity.LENGTH: 'm',
    PhysicalQuantity.AREA: 'm ** 2',
    PhysicalQuantity.VOLUME_FLOW_RATE: 'm ** 3 / s',
    PhysicalQuantity.VELOCITY: 'm / s',
    PhysicalQuantity.PRESSURE_GRADIENT: 'Pa / m',
    PhysicalQuantity.PRESSURE: 'Pa',
    PhysicalQuantity.DIMENSIONLESS: 'dimensionless'
}

# ASCII spellings of the superscripts used in unit symbols
_ASCII_SUPERSCRIPTS = {'^2': '²', '^3': '³'}

TQuantity = Union[PhysicalQuantity, str]


@dataclass(frozen=True)
class Unit:
    quantity: PhysicalQuantity
    name: str
    symbol: str
    factor: float

    @property
    def is_base(self) -> bool:
        return self.factor == 1


class UnitRegistry:
    """Holds per physical quantity a table of named units. A unit can be
    referred to by its name (e.g. 'cubic_meter_per_hour'), by its symbol
    (e.g. 'm³/h') or by the ASCII spelling of its symbol (e.g. 'm^3/h').
    """

    def __init__(self) -> None:
        self._units: Dict[PhysicalQuantity, Dict[str, Unit]] = {
            quantity: {} for quantity in PhysicalQuantity
        }

    def register(
        self,
        quantity: TQuantity,
        name: str,
        symbol: str,
        factor: float
    ) -> Unit:
        """Adds a unit to the table of `quantity`.

        Parameters
        ----------
        quantity:
            The physical quantity the unit measures.
        name:
            Name of the unit, unique within the quantity.
        symbol:
            Display symbol of the unit, also unique within the quantity.
        factor:
            Multiplicative factor to the SI base unit of the quantity. A
            factor of 1 makes the unit the base unit; a quantity has only
            one base unit.

        Raises
        ------
        DuplicateUnitError:
            If the name or symbol already refers to a unit of `quantity`.
        InvalidFactorError:
            If `factor` is not a finite, strictly positive number, or if it
            is 1 while the quantity already has a base unit.
        """
        quantity = PhysicalQuantity(quantity)
        table = self._units[quantity]
        for key in (name, symbol):
            if self._find(quantity, key) is not None:
                raise DuplicateUnitError(
                    f"unit '{key}' is already registered for {quantity.value}"
                )
        if not math.isfinite(factor) or factor <= 0:
            raise InvalidFactorError(
                f"factor of unit '{name}' must be a positive number, got {factor}"
            )
        if factor == 1 and any(unit.is_base for unit in table.values()):
            raise InvalidFactorError(
                f"{quantity.value} already has a base unit; "
                f"'{name}' cannot have factor 1"
            )
        unit = Unit(quantity, name, symbol, factor)
        table[name] = unit
        return unit

    def _find(self, quantity: PhysicalQuantity, unit: str) -> Unit | None:
        table = self._units[quantity]
        if unit in table:
            return table[unit]
        for candidate in table.values():
            if candidate.symbol == unit:
                return candidate
        for ascii_, superscript in _ASCII_SUPERSCRIPTS.items():
            unit = unit.replace(ascii_, superscript)
        for candidate in table.values():
            if candidate.symbol == unit:
                return candidate
        return None

    def get(self, quantity: TQuantity, unit: str) -> Unit:
        """Returns the `Unit` of `quantity` that is referred to by `unit`
        (name, symbol or ASCII symbol).

        Raises
        ------
        UnknownUnitError:
            If no such unit is registered for `quantity`.
        """
        quantity = PhysicalQuantity(quantity)
        found = self._find(quantity, unit)
        if found is None:
            raise UnknownUnitError(
                f"unknown {quantity.value} unit '{unit}'"
            )
        return found

    def base_unit(self, quantity: TQuantity) -> Unit:
        """Returns the SI base unit of `quantity`."""
        quantity = PhysicalQuantity(quantity)
        for unit in self._units[quantity].values():
            if unit.is_base:
                return unit
        raise UnknownUnitError(f"no base unit registered for {quantity.value}")

    def units(self, quantity: TQuantity) -> List[Unit]:
        """Returns the units of `quantity` in the order they were registered."""
        return list(self._units[PhysicalQuantity(quantity)].values())

    def symbols(self, quantity: TQuantity) -> List[str]:
        return [unit.symbol for unit in self.units(quantity)]

    def to_base(self, quantity: TQuantity, value: float, unit: str) -> float:
        """Converts `value` expressed in `unit` to the SI base unit."""
        return value * self.get(quantity, unit).factor

    def from_base(self, quantity: TQuantity, value_SI: float, unit: str) -> float:
        """Converts `value_SI` expressed in the SI base unit to `unit`."""
        return value_SI / self.get(quantity, unit).factor

    def convert(
        self,
        quantity: TQuantity,
        value: float,
        from_unit: str,
        to_unit: str
    ) -> float:
        value_SI = self.to_base(quantity, value, from_unit)
        return self.from_base(quantity, value_SI, to_unit)

    def to_quantity(self, quantity: TQuantity, value: float, unit: str) -> Quantity:
        """Returns `value` expressed in `unit` as a pint `Quantity` in the SI
        base unit.
        """
        quantity = PhysicalQuantity(quantity)
        return Quantity(self.to_base(quantity, value, unit), quantity.pint_unit)

    def from_quantity(self, quantity: TQuantity, qty: Quantity, unit: str) -> float:
        """Returns the magnitude of pint quantity `qty` expressed in `unit`.
        `qty` may be expressed in any unit pint knows, as long as its
        dimensionality matches `quantity`.
        """
        quantity = PhysicalQuantity(quantity)
        value_SI = qty.to(quantity.pint_unit).magnitude
        return self.from_base(quantity, value_SI, unit)
