from ..exceptions import DuctFlowError


class UnitError(DuctFlowError):
    pass


class UnknownUnitError(UnitError):
    pass


class DuplicateUnitError(UnitError):
    pass


class InvalidFactorError(UnitError):
    pass
