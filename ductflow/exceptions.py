class DuctFlowError(Exception):
    """Base class of all errors raised by the `ductflow` package."""
    pass
