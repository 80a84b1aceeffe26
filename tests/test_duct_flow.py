import dataclasses
import math

import pytest

from ductflow.fluids import AIR, WATER, FluidProperties, UnknownFluidError
from ductflow.fluid_flow import (
    DuctGeometry,
    FlowRegime,
    InvalidFlowError,
    InvalidGeometryError,
    compute_flow,
    solve_friction_factor,
)
from ductflow.fluid_flow.constants import WALL_ROUGHNESS


@pytest.fixture()
def state():
    return compute_flow(width=2.0, height=1.0, length=10.0, flow_rate=1.0, fluid=AIR)


class TestDuctGeometry:
    def test_derived_properties(self):
        duct = DuctGeometry(0.5, 0.3, 10.0)
        assert duct.area == pytest.approx(0.15)
        assert duct.perimeter == pytest.approx(1.6)
        assert duct.hydraulic_diameter == pytest.approx(0.375)

    def test_square_duct_hydraulic_diameter_equals_side(self):
        assert DuctGeometry(0.4, 0.4, 1.0).hydraulic_diameter == pytest.approx(0.4)

    @pytest.mark.parametrize("width, height, length", [
        (0.0, 1.0, 1.0),
        (1.0, -1.0, 1.0),
        (1.0, 1.0, 0.0),
        (float('inf'), 1.0, 1.0),
        (1.0, float('nan'), 1.0),
    ])
    def test_invalid_dimensions(self, width, height, length):
        with pytest.raises(InvalidGeometryError):
            DuctGeometry(width, height, length)


class TestComputeFlow:
    def test_geometry(self, state):
        assert state.area == 2.0
        assert state.perimeter == 6.0
        assert state.hydraulic_diameter == pytest.approx(8 / 6)
        assert state.velocity == 0.5

    def test_derived_quantities_follow_formulas(self, state):
        dh = 4 * 2.0 / 6.0
        reynolds = 0.5 * dh / AIR.kinematic_viscosity
        f = solve_friction_factor(reynolds, dh, WALL_ROUGHNESS)
        loss = f / dh * AIR.density / 2 * 0.5 ** 2
        assert state.reynolds == reynolds
        assert state.friction_factor == f
        assert state.pressure_loss_per_length == loss
        assert state.pressure_drop == loss * 10.0

    def test_turbulent_air(self, state):
        assert state.regime is FlowRegime.TURBULENT
        assert state.reynolds == pytest.approx(44139, rel=1e-3)
        assert 0.015 < state.friction_factor < 0.03

    def test_laminar_water(self):
        # slow water flow through a small duct
        state = compute_flow(0.01, 0.01, 1.0, 1.0e-6, WATER)
        assert state.regime is FlowRegime.LAMINAR
        assert state.friction_factor == 64 / state.reynolds

    def test_fluid_by_name(self, state):
        assert compute_flow(2.0, 1.0, 10.0, 1.0, 'air') == state
        assert compute_flow(2.0, 1.0, 10.0, 1.0) == state

    def test_custom_fluid(self):
        oil = FluidProperties('oil', density=870.0, dynamic_viscosity=0.03)
        state = compute_flow(0.1, 0.1, 1.0, 0.001, oil)
        assert state.reynolds == pytest.approx(0.1 * 0.1 / (0.03 / 870.0))

    def test_idempotent(self, state):
        again = compute_flow(width=2.0, height=1.0, length=10.0, flow_rate=1.0, fluid=AIR)
        assert again == state
        assert again.as_dict() == state.as_dict()

    def test_flow_state_is_immutable(self, state):
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.velocity = 1.0

    def test_pressure_drop_proportional_to_length(self):
        short = compute_flow(0.5, 0.3, 5.0, 0.5)
        long = compute_flow(0.5, 0.3, 20.0, 0.5)
        assert long.pressure_loss_per_length == short.pressure_loss_per_length
        assert long.pressure_drop == pytest.approx(4 * short.pressure_drop)

    @pytest.mark.parametrize("flow_rate", [0.0, -1.0, float('nan'), float('inf')])
    def test_invalid_flow(self, flow_rate):
        with pytest.raises(InvalidFlowError):
            compute_flow(0.5, 0.3, 10.0, flow_rate)

    def test_geometry_checked_before_flow(self):
        with pytest.raises(InvalidGeometryError):
            compute_flow(0.0, 0.3, 10.0, 0.0)

    def test_unknown_fluid(self):
        with pytest.raises(UnknownFluidError):
            compute_flow(0.5, 0.3, 10.0, 1.0, 'steam')

    def test_to_quantities(self, state):
        qties = state.to_quantities()
        assert set(qties) == set(state.as_dict())
        assert qties['pressure_drop'].to('kPa').magnitude == pytest.approx(state.pressure_drop / 1000)
        assert qties['velocity'].to('km / hr').magnitude == pytest.approx(1.8)
        assert math.isclose(qties['reynolds'].magnitude, state.reynolds)

    def test_area_underflow(self):
        with pytest.raises(InvalidGeometryError):
            compute_flow(1e-200, 1e-200, 1.0, 1.0)

    def test_area_overflow(self):
        with pytest.raises(InvalidGeometryError):
            compute_flow(1e200, 1e200, 1.0, 1.0)

    def test_velocity_overflow(self):
        with pytest.raises(InvalidFlowError):
            compute_flow(0.001, 0.001, 1.0, 1e308)

    def test_pressure_loss_overflow(self):
        # velocity and Reynolds number stay finite, their square does not
        with pytest.raises(InvalidFlowError):
            compute_flow(1.0, 1.0, 1.0, 1e200)

    def test_tiny_flow(self):
        # the laminar friction factor 64 / Re overflows
        with pytest.raises(InvalidFlowError):
            compute_flow(1.0, 1.0, 1.0, 5e-324)
