from .registry import PhysicalQuantity, UnitRegistry

PQ = PhysicalQuantity

# (quantity, name, symbol, factor to SI base unit)
DEFAULT_UNITS = [
    (PQ.LENGTH, 'meter', 'm', 1.0),
    (PQ.LENGTH, 'decimeter', 'dm', 0.1),
    (PQ.LENGTH, 'centimeter', 'cm', 0.01),
    (PQ.LENGTH, 'millimeter', 'mm', 0.001),
    (PQ.AREA, 'square_meter', 'm²', 1.0),
    (PQ.AREA, 'square_decimeter', 'dm²', 0.01),
    (PQ.AREA, 'square_centimeter', 'cm²', 0.0001),
    (PQ.AREA, 'square_millimeter', 'mm²', 0.000001),
    (PQ.VOLUME_FLOW_RATE, 'cubic_meter_per_second', 'm³/s', 1.0),
    (PQ.VOLUME_FLOW_RATE, 'cubic_meter_per_hour', 'm³/h', 1 / 3600),
    (PQ.VELOCITY, 'meter_per_second', 'm/s', 1.0),
    (PQ.VELOCITY, 'meter_per_hour', 'm/h', 1 / 3600),
    (PQ.VELOCITY, 'kilometer_per_second', 'km/s', 1000.0),
    (PQ.VELOCITY, 'kilometer_per_hour', 'km/h', 1000 / 3600),
    (PQ.PRESSURE_GRADIENT, 'pascal_per_meter', 'Pa/m', 1.0),
    (PQ.PRESSURE_GRADIENT, 'kilopascal_per_meter', 'kPa/m', 1000.0),
    (PQ.PRESSURE, 'pascal', 'Pa', 1.0),
    (PQ.PRESSURE, 'kilopascal', 'kPa', 1000.0),
    (PQ.DIMENSIONLESS, 'one', '-', 1.0),
]


def create_default_registry() -> UnitRegistry:
    """Returns a new `UnitRegistry` populated with the default unit tables."""
    registry = UnitRegistry()
    for quantity, name, symbol, factor in DEFAULT_UNITS:
        registry.register(quantity, name, symbol, factor)
    return registry


UNIT_REGISTRY = create_default_registry()
