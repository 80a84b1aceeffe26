"""PRESSURE DROP ACROSS A RECTANGULAR AIR DUCT
---------------------------------------------
A straight supply air duct with an internal width of 600 mm and an internal
height of 400 mm is 25 m long. Determine the friction loss and the pressure
drop when 4000 m³/h of air flows through the duct, and tabulate the pressure
drop for air flow rates between 1000 and 6000 m³/h.
"""
from ductflow.units import UNIT_REGISTRY as ureg
from ductflow.fluid_flow import DuctGeometry, DuctCurve, compute_flow
from ductflow.formatting import format_number


w = ureg.to_base('length', 600, 'mm')
h = ureg.to_base('length', 400, 'mm')
L = ureg.to_base('length', 25, 'm')
V = ureg.to_base('volume flow rate', 4000, 'm³/h')

state = compute_flow(w, h, L, V, fluid='air')

print(
    f"hydraulic diameter = {format_number(ureg.from_base('length', state.hydraulic_diameter, 'mm'))} mm",
    f"velocity = {format_number(state.velocity)} m/s",
    f"Reynolds number = {format_number(state.reynolds)} ({state.regime.value})",
    f"friction factor = {format_number(state.friction_factor)}",
    f"friction loss = {format_number(state.pressure_loss_per_length)} Pa/m",
    f"pressure drop = {format_number(state.pressure_drop)} Pa",
    sep='\n'
)

curve = DuctCurve(DuctGeometry(w, h, L), fluid='air')
table = curve.table(
    range(1000, 7000, 1000),
    units={'velocity': 'm/s', 'pressure_drop': 'Pa'},
    flow_unit='m³/h'
)
print(table.to_string(index=False))
