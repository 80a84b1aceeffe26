import pint

UNITS = pint.UnitRegistry()
Quantity = UNITS.Quantity

pint.set_application_registry(UNITS)
