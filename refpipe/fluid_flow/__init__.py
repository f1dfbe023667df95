from .friction import (
    Re_crit,
    friction_factor,
    laminar_friction_factor,
    blasius_friction_factor,
    cross_sectional_area,
    reynolds_number,
    darcy_pressure_drop
)
