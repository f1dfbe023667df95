"""
Constant physical properties of the refrigerants supported by the line sizing
routines.

The properties are fixed approximations that don't depend on the refrigerant
state (temperature, pressure). Densities are in lb/ft³, the dynamic viscosity
in lb/(ft.s) and the refrigerating effect in Btu/lb.
"""
from dataclasses import dataclass
from types import MappingProxyType
from refpipe import Quantity
from refpipe.line_type import LineType
from .exceptions import UnsupportedRefrigerant


Q_ = Quantity


@dataclass(frozen=True)
class RefrigerantProperties:
    """Dataclass holding the constant properties of a refrigerant.

    Parameters
    ----------
    code:
        Refrigerant designation, e.g. 'R134a'.
    rho_vap:
        Vapor density.
    rho_liq:
        Liquid density.
    mu_vap:
        Dynamic viscosity of the vapor.
    q_eff:
        Refrigerating effect, i.e. the enthalpy increase per unit mass of
        refrigerant flowing through the evaporator.
    """
    code: str
    rho_vap: Quantity
    rho_liq: Quantity
    mu_vap: Quantity
    q_eff: Quantity


def _create_record(code, rho_vap, rho_liq, mu_vap, q_eff) -> RefrigerantProperties:
    return RefrigerantProperties(
        code=code,
        rho_vap=Q_(rho_vap, 'lb / ft ** 3'),
        rho_liq=Q_(rho_liq, 'lb / ft ** 3'),
        mu_vap=Q_(mu_vap, 'lb / (ft * s)'),
        q_eff=Q_(q_eff, 'Btu / lb')
    )


# code, vapor density (lb/ft³), liquid density (lb/ft³),
# vapor viscosity (lb/(ft.s)), refrigerating effect (Btu/lb)
_REFRIGERANT_DATA = [
    ('R134a', 0.30, 75.0, 2.5e-5, 70.0),
    ('R22', 0.35, 66.0, 2.5e-5, 85.0),
    ('R410A', 0.40, 64.0, 2.3e-5, 75.0),
    ('R12', 0.28, 80.0, 2.6e-5, 65.0),
]

REFRIGERANTS = MappingProxyType({
    record[0]: _create_record(*record)
    for record in _REFRIGERANT_DATA
})


def lookup_refrigerant(code: str) -> RefrigerantProperties:
    """Returns the properties of the refrigerant with designation `code`.

    Raises
    ------
    UnsupportedRefrigerant
        If the refrigerant is not in the property table.
    """
    try:
        return REFRIGERANTS[code]
    except KeyError:
        raise UnsupportedRefrigerant(code) from None


def list_refrigerants() -> list[str]:
    """Returns the designations of all supported refrigerants."""
    return list(REFRIGERANTS.keys())


def select_density(code: str, line_type: LineType | str) -> Quantity:
    """Returns the liquid density for a liquid line, and the vapor density for
    a suction or discharge line.
    """
    rfg = lookup_refrigerant(code)
    if LineType.parse(line_type) is LineType.LIQUID:
        return rfg.rho_liq
    return rfg.rho_vap


def select_viscosity(code: str, line_type: LineType | str) -> Quantity:
    """Returns the dynamic viscosity of the refrigerant.

    Notes
    -----
    The vapor viscosity is returned for all line types, also for liquid lines.
    The property table holds no liquid viscosity; this is a simplification of
    the sizing method.
    """
    return lookup_refrigerant(code).mu_vap


def select_refrigerating_effect(code: str) -> Quantity:
    """Returns the refrigerating effect used to convert the system capacity
    into a refrigerant mass flow rate.
    """
    return lookup_refrigerant(code).q_eff
