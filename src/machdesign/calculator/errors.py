"""
Error kinds raised by the calculator.

Every error is a DesignError (and therefore a ValueError) carrying a stable
``code`` that validation messages and the CLI reuse.
"""


class DesignError(ValueError):
    """Base class for rejected design parameters."""
    code = "DESIGN_ERROR"


class InvalidGeometry(DesignError):
    """Non-positive or out-of-range tooth counts, modules or lengths."""
    code = "INVALID_GEOMETRY"


class ConfigurationError(DesignError):
    """Missing or inconsistent configuration (e.g. planetary fixed member)."""
    code = "CONFIGURATION_ERROR"


class UnclosableLinkage(DesignError):
    """Four-bar link lengths cannot form a closed loop."""
    code = "UNCLOSABLE_LINKAGE"


class InvalidLoad(DesignError):
    """Negative force, negative load factor or non-positive rating."""
    code = "INVALID_LOAD"


class InvalidSpeed(DesignError):
    """Non-positive rotational speed."""
    code = "INVALID_SPEED"


class DivisionByZero(DesignError, ZeroDivisionError):
    """Zero equivalent load in a life calculation."""
    code = "DIVISION_BY_ZERO"
