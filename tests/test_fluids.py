import dataclasses

import pytest

from ductflow.fluids import AIR, FLUIDS, FluidProperties, UnknownFluidError, WATER


def test_reference_values():
    assert AIR.density == 1.205
    assert AIR.dynamic_viscosity == 1.82e-5
    assert WATER.density == 998.2
    assert WATER.dynamic_viscosity == 1.0e-3


@pytest.mark.parametrize("fluid", list(FLUIDS.values()))
def test_kinematic_viscosity_is_derived(fluid):
    assert fluid.kinematic_viscosity == fluid.dynamic_viscosity / fluid.density


def test_kinematic_viscosity_not_a_field():
    names = [f.name for f in dataclasses.fields(FluidProperties)]
    assert 'kinematic_viscosity' not in names


def test_get_by_name():
    assert FluidProperties.get('air') is AIR
    assert FluidProperties.get(' Water ') is WATER
    assert FluidProperties.names() == ['air', 'water']


def test_unknown_fluid():
    with pytest.raises(UnknownFluidError):
        FluidProperties.get('glycol')


def test_table_is_read_only():
    with pytest.raises(TypeError):
        FLUIDS['oil'] = AIR
    with pytest.raises(dataclasses.FrozenInstanceError):
        AIR.density = 1.0


def test_pint_views():
    assert AIR.rho.to('kg / m ** 3').magnitude == pytest.approx(1.205)
    assert WATER.mu.to('mPa * s').magnitude == pytest.approx(1.0)
    assert AIR.nu.to('m ** 2 / s').magnitude == pytest.approx(AIR.kinematic_viscosity)


@pytest.mark.parametrize("density, viscosity", [(0.0, 1e-5), (1.2, -1e-5), (float('nan'), 1e-5)])
def test_invalid_properties(density, viscosity):
    with pytest.raises(ValueError):
        FluidProperties('bad', density=density, dynamic_viscosity=viscosity)
