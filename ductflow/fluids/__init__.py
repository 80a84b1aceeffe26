from .fluid import FluidProperties, FLUIDS, AIR, WATER

from .exceptions import FluidError, UnknownFluidError
