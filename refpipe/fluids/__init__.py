from .exceptions import (
    RefrigerantDataError,
    UnsupportedRefrigerant,
    InvalidRefrigeratingEffect
)

from .refrigerant import (
    RefrigerantProperties,
    REFRIGERANTS,
    lookup_refrigerant,
    list_refrigerants,
    select_density,
    select_viscosity,
    select_refrigerating_effect
)
