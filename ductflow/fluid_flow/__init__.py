from .geometry import DuctGeometry

from .friction_factor import (
    FlowRegime,
    ColebrookSolution,
    flow_regime,
    colebrook_white,
    solve_friction_factor
)

from .duct_flow import FlowState, compute_flow

from .duct_curve import DuctCurve

from .exceptions import (
    FlowError,
    InvalidGeometryError,
    InvalidFlowError,
    UnknownFieldError
)
