from dataclasses import dataclass
from refpipe import Quantity


Q_ = Quantity


@dataclass(frozen=True)
class DesignCriteria:
    """Design limits used to check and select refrigerant line sizes.

    Parameters
    ----------
    u_riser_min:
        Minimum vapor velocity in a vertical riser (oil return).
    u_riser_max:
        Maximum vapor velocity in a vertical riser (noise, pressure drop).
    u_horizontal_min:
        Minimum vapor velocity in a horizontal run (oil return).
    u_liquid_max:
        Maximum velocity in a liquid line (pressure drop, flash gas).
    dT_max_liquid:
        Maximum equivalent temperature loss of a liquid line.
    dT_max_vapor:
        Maximum equivalent temperature loss of a suction or discharge line.
    dT_per_dP_suction:
        Equivalent saturation temperature loss per unit of pressure drop in a
        suction line.
    dT_per_dP_other:
        Equivalent saturation temperature loss per unit of pressure drop in a
        discharge or liquid line.
    L_eq_min:
        Equivalent lengths below this value are replaced by this value.
    Re_crit:
        Transition Reynolds number between laminar and turbulent flow.
    """
    u_riser_min: Quantity = Q_(8.0, 'm / s')
    u_riser_max: Quantity = Q_(12.0, 'm / s')
    u_horizontal_min: Quantity = Q_(4.0, 'm / s')
    u_liquid_max: Quantity = Q_(300.0, 'ft / min')
    dT_max_liquid: Quantity = Q_(1.0, 'delta_degF')
    dT_max_vapor: Quantity = Q_(2.0, 'delta_degF')
    dT_per_dP_suction: Quantity = Q_(1.0, 'delta_degF / psi')
    dT_per_dP_other: Quantity = Q_(0.5, 'delta_degF / psi')
    L_eq_min: Quantity = Q_(0.01, 'ft')
    Re_crit: float = 2300.0


DEFAULT_CRITERIA = DesignCriteria()
