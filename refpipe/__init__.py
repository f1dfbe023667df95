import pint

UNITS = pint.UnitRegistry()
Quantity = UNITS.Quantity

unit_definitions = [
    'fraction = [] = frac',
    'percent = 1e-2 frac = % = pct'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)

from .fluids import (  # noqa: E402
    RefrigerantProperties,
    lookup_refrigerant,
    list_refrigerants,
    UnsupportedRefrigerant,
    InvalidRefrigeratingEffect
)

from .refrigerant_piping import (  # noqa: E402
    CopperTube,
    list_copper_tubes,
    LineType,
    SizingInput,
    SizingResult,
    SizingOutcome,
    SizingStatus,
    TubeEvaluation,
    DesignCriteria,
    size_line,
    try_size_line
)

__version__ = '0.1.0'
