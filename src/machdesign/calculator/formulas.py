"""
Closed-form machine element formulas.

Single-expression building blocks shared by the gear train, linkage and
bearing calculators. Inputs are assumed pre-validated; callers gate them
with the checks in ``ranges``.

Reference texts:
- Shigley's Mechanical Engineering Design
- Machinery's Handbook
"""

from math import pi, sin

from .constants import ADDENDUM_COEFFICIENT, DEDENDUM_COEFFICIENT, MM_TO_M, RPM_TO_RAD_PER_S


def gear_ratio(teeth_driver: int, teeth_driven: int) -> float:
    """Speed reduction ratio of a gear mesh (driven / driver)"""
    return teeth_driven / teeth_driver


def pitch_diameter(module_mm: float, num_teeth: int) -> float:
    """Pitch diameter d = m × z (mm)"""
    return module_mm * num_teeth


def tip_diameter(module_mm: float, num_teeth: int) -> float:
    """Tip (outside) diameter of a standard external gear d_a = m (z + 2 h_a) (mm)"""
    return module_mm * (num_teeth + 2 * ADDENDUM_COEFFICIENT)


def root_diameter(module_mm: float, num_teeth: int) -> float:
    """Root diameter of a standard external gear d_f = m (z - 2 h_f) (mm)"""
    return module_mm * (num_teeth - 2 * DEDENDUM_COEFFICIENT)


def centre_distance(module_mm: float, teeth_a: int, teeth_b: int, internal: bool = False) -> float:
    """
    Centre distance between two meshing gears (mm).

    External mesh: a = m (z1 + z2) / 2
    Internal mesh: a = m (z_ring - z_pinion) / 2
    """
    if internal:
        return module_mm * abs(teeth_b - teeth_a) / 2
    return module_mm * (teeth_a + teeth_b) / 2


def belt_ratio(driver_diameter_mm: float, driven_diameter_mm: float) -> float:
    """Belt drive speed ratio, ignoring slip"""
    return driven_diameter_mm / driver_diameter_mm


def open_belt_length(
    small_diameter_mm: float,
    large_diameter_mm: float,
    centre_distance_mm: float
) -> float:
    """
    Pitch length of an open belt (mm).

    L = 2C + π(D + d)/2 + (D - d)² / 4C
    """
    return (
        2 * centre_distance_mm
        + pi * (large_diameter_mm + small_diameter_mm) / 2
        + (large_diameter_mm - small_diameter_mm) ** 2 / (4 * centre_distance_mm)
    )


def chain_length_pitches(
    teeth_driver: int,
    teeth_driven: int,
    centre_distance_pitches: float
) -> float:
    """
    Roller chain length in pitches (round up to an even number in practice).

    L/p = 2C/p + (N1 + N2)/2 + (N2 - N1)² / (4π² C/p)
    """
    return (
        2 * centre_distance_pitches
        + (teeth_driver + teeth_driven) / 2
        + (teeth_driven - teeth_driver) ** 2 / (4 * pi ** 2 * centre_distance_pitches)
    )


def spring_index(mean_coil_diameter_mm: float, wire_diameter_mm: float) -> float:
    """Helical spring index C = D / d"""
    return mean_coil_diameter_mm / wire_diameter_mm


def wahl_factor(index: float) -> float:
    """Wahl stress correction factor K = (4C - 1)/(4C - 4) + 0.615/C"""
    return (4 * index - 1) / (4 * index - 4) + 0.615 / index


def solid_shaft_diameter(torque_nm: float, allowable_shear_mpa: float) -> float:
    """
    Minimum solid shaft diameter for pure torsion (mm).

    d = (16 T / (π τ))^(1/3), with T in N·mm and τ in MPa
    """
    torque_nmm = torque_nm * 1e3
    return (16 * torque_nmm / (pi * allowable_shear_mpa)) ** (1 / 3)


def flywheel_energy(moment_of_inertia_kgm2: float, speed_rpm: float) -> float:
    """Kinetic energy stored in a flywheel E = ½ I ω² (J)"""
    omega = speed_rpm * RPM_TO_RAD_PER_S
    return 0.5 * moment_of_inertia_kgm2 * omega ** 2


def bolt_tensile_stress_area(nominal_diameter_mm: float, pitch_mm: float) -> float:
    """ISO 898-1 tensile stress area A_s = π/4 (d - 0.9382 P)² (mm²)"""
    return pi / 4 * (nominal_diameter_mm - 0.9382 * pitch_mm) ** 2


def pitch_line_velocity(pitch_diameter_mm: float, speed_rpm: float) -> float:
    """Pitch line velocity v = ω r (m/s)"""
    return speed_rpm * RPM_TO_RAD_PER_S * pitch_diameter_mm * MM_TO_M / 2


def planet_circle_clearance(
    module_mm: float,
    sun_teeth: int,
    planet_teeth: int,
    num_planets: int
) -> float:
    """
    Gap between tip circles of adjacent, equally spaced planets (mm).

    Negative means the planets overlap and cannot be assembled.
    """
    carrier_radius = module_mm * (sun_teeth + planet_teeth) / 2
    chord = 2 * carrier_radius * sin(pi / num_planets)
    return chord - tip_diameter(module_mm, planet_teeth)
