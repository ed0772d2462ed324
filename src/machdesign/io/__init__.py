"""
Machdesign IO - value objects and JSON case files.

Example:
    >>> from machdesign.io import load_case_json
    >>> from machdesign.calculator import evaluate_case
    >>>
    >>> case = load_case_json("gearbox.json")
    >>> report, validation = evaluate_case(case)
"""

from .loaders import (
    SCHEMA_VERSION,
    load_case_json,
    save_case_json,
    GearStage,
    PlanetaryStage,
    GearTrain,
    FourBarLinkage,
    BearingLoadCase,
    DesignCase,
    GearTrainResult,
    LinkageResult,
    BearingLifeResult,
    AnalysisReport,
)

__all__ = [
    "SCHEMA_VERSION",

    # Loaders
    "load_case_json",
    "save_case_json",

    # Inputs
    "GearStage",
    "PlanetaryStage",
    "GearTrain",
    "FourBarLinkage",
    "BearingLoadCase",
    "DesignCase",

    # Results
    "GearTrainResult",
    "LinkageResult",
    "BearingLifeResult",
    "AnalysisReport",
]
