"""
Friction factor and frictional pressure drop of fully developed flow in a
smooth circular tube.

Laminar flow: f = 64 / Re (Hagen-Poiseuille).
Turbulent flow: Blasius correlation f = 0.3164 * Re ** -0.25. This correlation
is meant for smooth tubes and moderate Reynolds numbers (up to about 1e5); at
higher Reynolds numbers it underestimates the friction factor.
"""
import math
from refpipe import Quantity


Q_ = Quantity

Re_crit = 2300


def laminar_friction_factor(Re: float) -> float:
    return 64.0 / Re


def blasius_friction_factor(Re: float) -> float:
    return 0.3164 * Re ** -0.25


def friction_factor(Re: float, Re_crit: float = Re_crit) -> float:
    """Returns the Darcy friction factor.

    Parameters
    ----------
    Re:
        Reynolds number of the flow.
    Re_crit:
        Reynolds number at which the flow is considered to be turbulent. The
        laminar branch applies below `Re_crit`, the turbulent branch from
        `Re_crit` on. There is no interpolation across the transition region.

    Returns
    -------
    Zero if `Re` is not positive (no flow).
    """
    if Re <= 0.0:
        return 0.0
    if Re < Re_crit:
        return laminar_friction_factor(Re)
    return blasius_friction_factor(Re)


def cross_sectional_area(D: Quantity) -> Quantity:
    """Returns the cross-sectional area of a circular tube with diameter `D`."""
    return math.pi * D ** 2 / 4


def reynolds_number(rho: Quantity, u: Quantity, D: Quantity, mu: Quantity) -> float:
    """Returns the Reynolds number. Returns zero if the viscosity is zero."""
    if mu.magnitude == 0.0:
        return 0.0
    Re = rho * u * D / mu
    return Re.to('frac').m


def darcy_pressure_drop(f: float, L: Quantity, D: Quantity, rho: Quantity, u: Quantity) -> Quantity:
    """Returns the frictional pressure drop according to Darcy-Weisbach:
    dP = f * (L / D) * rho * u ** 2 / 2.

    The mass to force conversion (g_c in the inch-pound system) is taken care
    of by the unit registry.
    """
    dP = f * (L / D) * rho * u ** 2 / 2
    return dP.to('Pa')
