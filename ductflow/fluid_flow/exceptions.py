from ..exceptions import DuctFlowError


class FlowError(DuctFlowError):
    pass


class InvalidGeometryError(FlowError):
    pass


class InvalidFlowError(FlowError):
    pass


class UnknownFieldError(FlowError):
    pass
