"""
Darcy friction factor of fully developed flow in a duct.

For laminar flow the friction factor follows from the closed form 64 / Re.
For turbulent flow the implicit Colebrook-White equation

    1 / √f = -2 * log10(2.51 / (Re * √f) + k / (3.71 * D_h))

is solved by fixed-point iteration. At Re = 2300 both branches do not agree;
this discontinuity belongs to the model.
"""
from typing import NamedTuple
from enum import Enum
import math
from ..logging import ModuleLogger
from .constants import (
    WALL_ROUGHNESS,
    LAMINAR_LIMIT,
    INITIAL_FRICTION_FACTOR,
    MAX_ITERATIONS,
    MAX_DIFFERENCE
)

logger = ModuleLogger.get_logger(__name__)


class FlowRegime(Enum):
    LAMINAR = 'laminar'
    TURBULENT = 'turbulent'


class ColebrookSolution(NamedTuple):
    friction_factor: float
    iterations: int
    converged: bool


def flow_regime(reynolds: float) -> FlowRegime:
    if reynolds < LAMINAR_LIMIT:
        return FlowRegime.LAMINAR
    return FlowRegime.TURBULENT


def colebrook_white(
    reynolds: float,
    hydraulic_diameter: float,
    roughness: float = WALL_ROUGHNESS,
    max_iterations: int = MAX_ITERATIONS,
    max_difference: float = MAX_DIFFERENCE
) -> ColebrookSolution:
    """Solves the Colebrook-White equation for the Darcy friction factor by
    fixed-point iteration, starting from f = 0.02.

    Iteration stops as soon as two successive estimates differ less than
    `max_difference`, or when `max_iterations` is reached. In the latter case
    the last estimate is returned with `converged` set to False; no exception
    is raised.

    Parameters
    ----------
    reynolds:
        Reynolds number of the flow.
    hydraulic_diameter:
        Hydraulic diameter of the duct in m.
    roughness:
        Absolute wall roughness in m (same unit as `hydraulic_diameter`).
    max_iterations:
        Maximum number of iterations.
    max_difference:
        Tolerance on the difference between two successive estimates.

    Returns
    -------
    ColebrookSolution
    """
    _check_arguments(reynolds, hydraulic_diameter, roughness, max_iterations)
    relative_term = roughness / (3.71 * hydraulic_diameter)
    f_prev = INITIAL_FRICTION_FACTOR
    i = 0
    while True:
        i += 1
        log_term = math.log10(2.51 / (reynolds * math.sqrt(f_prev)) + relative_term)
        f = (1 / (-2 * log_term)) ** 2
        difference = abs(f - f_prev)
        f_prev = f
        if difference < max_difference:
            return ColebrookSolution(f, i, True)
        if i >= max_iterations:
            logger.debug(
                f"Colebrook-White iteration stopped after {i} iterations "
                f"without convergence (Re = {reynolds:.6g}, "
                f"last difference = {difference:.3e})"
            )
            return ColebrookSolution(f, i, False)


def solve_friction_factor(
    reynolds: float,
    hydraulic_diameter: float,
    roughness: float = WALL_ROUGHNESS,
    max_iterations: int = MAX_ITERATIONS,
    max_difference: float = MAX_DIFFERENCE
) -> float:
    """Returns the Darcy friction factor for the given Reynolds number.

    Laminar flow (Re < 2300): f = 64 / Re.
    Turbulent flow (Re >= 2300): see `colebrook_white`.
    """
    _check_arguments(reynolds, hydraulic_diameter, roughness, max_iterations)
    if flow_regime(reynolds) is FlowRegime.LAMINAR:
        return 64 / reynolds
    solution = colebrook_white(
        reynolds, hydraulic_diameter, roughness,
        max_iterations, max_difference
    )
    return solution.friction_factor


def _check_arguments(
    reynolds: float,
    hydraulic_diameter: float,
    roughness: float,
    max_iterations: int
) -> None:
    if not math.isfinite(reynolds) or reynolds <= 0.0:
        raise ValueError(f"Reynolds number must be > 0, got {reynolds}")
    if not math.isfinite(hydraulic_diameter) or hydraulic_diameter <= 0.0:
        raise ValueError(f"hydraulic diameter must be > 0, got {hydraulic_diameter}")
    if not math.isfinite(roughness) or roughness < 0.0:
        raise ValueError(f"wall roughness must be >= 0, got {roughness}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
