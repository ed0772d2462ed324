"""
Machdesign - closed-form machine design calculations.

Gear train ratio composition (simple, internal and planetary stages),
four-bar linkage feasibility and bearing rating life.

Example:
    >>> from machdesign import compose, GearTrain, GearStage
    >>>
    >>> train = GearTrain(stages=[
    ...     GearStage(module_mm=2.0, teeth_driver=20, teeth_driven=60),
    ...     GearStage(module_mm=2.0, teeth_driver=18, teeth_driven=54),
    ... ])
    >>> compose(train).overall_ratio
    9.0

Note: All imports are lazy-loaded. The enums can be imported without
triggering the Pydantic models.
"""

__version__ = "1.0.0-alpha"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"StageKind", "FixedMember", "LinkageClass", "BearingType"}

_CALCULATOR = {
    "compose",
    "stage_ratio",
    "output_speed",
    "output_torque",
    "analyze",
    "is_grashof",
    "grashof_class",
    "transmission_angle",
    "equivalent_load",
    "life_revolutions",
    "life_hours",
    "adjusted_life_hours",
    "required_dynamic_capacity",
    "evaluate_bearing",
    "evaluate_case",
    "Severity",
    "ValidationResult",
    "DesignError",
    "InvalidGeometry",
    "ConfigurationError",
    "UnclosableLinkage",
    "InvalidLoad",
    "InvalidSpeed",
    "DivisionByZero",
}

_IO = {
    "load_case_json",
    "save_case_json",
    "GearStage",
    "PlanetaryStage",
    "GearTrain",
    "FourBarLinkage",
    "BearingLoadCase",
    "DesignCase",
    "GearTrainResult",
    "LinkageResult",
    "BearingLifeResult",
    "AnalysisReport",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'machdesign' has no attribute {name!r}")


__all__ = [
    "__version__",
    *sorted(_ENUMS),
    *sorted(_CALCULATOR),
    *sorted(_IO),
]
