import pytest

from ductflow.calculator import (
    INPUT_FIELDS,
    OUTPUT_FIELDS,
    DuctCalculator,
    InvalidInputError,
)
from ductflow.fluid_flow import InvalidFlowError, InvalidGeometryError, compute_flow
from ductflow.formatting import format_number
from ductflow.units import UnknownUnitError


@pytest.fixture()
def calculator(registry):
    return DuctCalculator(registry=registry)


def test_default_inputs(calculator):
    assert calculator.default_inputs() == {
        'width': (1.0, 'm'),
        'height': (1.0, 'm'),
        'length': (1.0, 'm'),
        'flow': (1.0, 'm³/s'),
    }


def test_options(calculator):
    assert calculator.input_options()['width'] == ['m', 'dm', 'cm', 'mm']
    assert calculator.input_options()['flow'] == ['m³/s', 'm³/h']
    assert calculator.output_options()['friction_loss'] == ['Pa/m', 'kPa/m']
    assert set(calculator.output_options()) == set(OUTPUT_FIELDS)


def test_calculate_with_units(calculator):
    result = calculator.calculate(
        {
            'width': ('500', 'mm'),
            'height': ('30', 'cm'),
            'length': ('10', 'm'),
            'flow': ('1800', 'm^3/h'),
        },
        {'cross_section': 'cm²', 'velocity': 'km/h', 'pressure_drop': 'kPa'}
    )
    expected = compute_flow(0.5, 0.3, 10.0, 0.5)
    assert result.flow_state.velocity == pytest.approx(expected.velocity)
    assert result.outputs['cross_section'].value == pytest.approx(1500.0)
    assert result['cross_section'] == '1500'
    assert result.outputs['velocity'].unit == 'km/h'
    assert result.outputs['velocity'].value == pytest.approx(expected.velocity * 3.6)
    assert result['pressure_drop'] == format_number(expected.pressure_drop / 1000)
    assert result.outputs['reynolds'].unit == '-'


def test_all_output_fields_present(calculator):
    result = calculator.calculate({})
    assert set(result.outputs) == set(OUTPUT_FIELDS)
    assert result['circumference'] == '4.000'
    assert result['hydraulic_diameter'] == '1.000'


def test_numeric_inputs_accepted(calculator):
    result = calculator.calculate({'width': (2.0, 'm'), 'height': (1, 'm')})
    assert result.flow_state.area == 2.0


def test_precision(registry):
    result = DuctCalculator(registry=registry, precision=5).calculate({})
    assert result['circumference'] == '4.00000'


def test_non_numeric_input(calculator):
    with pytest.raises(InvalidInputError, match='width'):
        calculator.calculate({'width': ('abc', 'mm')})


def test_unknown_fields(calculator):
    with pytest.raises(InvalidInputError):
        calculator.calculate({'diameter': ('1', 'm')})
    with pytest.raises(InvalidInputError):
        calculator.calculate({}, {'temperature': 'K'})


def test_errors_propagate(calculator):
    with pytest.raises(UnknownUnitError):
        calculator.calculate({'width': ('1', 'km')})
    with pytest.raises(InvalidGeometryError):
        calculator.calculate({'height': ('0', 'm')})
    with pytest.raises(InvalidFlowError):
        calculator.calculate({'flow': ('-1', 'm³/h')})


def test_input_fields():
    assert list(INPUT_FIELDS) == ['width', 'height', 'length', 'flow']
