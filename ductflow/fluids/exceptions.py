from ..exceptions import DuctFlowError


class FluidError(DuctFlowError):
    pass


class UnknownFluidError(FluidError):
    pass
