from refpipe.line_type import LineType

from .copper_tubing import (
    CopperTube,
    CopperTubing,
    RAW_COPPER_TUBES,
    build_copper_tubing,
    list_copper_tubes
)

from .criteria import DesignCriteria, DEFAULT_CRITERIA

from .sizing import (
    SizingInput,
    TubeEvaluation,
    SizingResult,
    SizingStatus,
    SizingOutcome,
    SuctionLine,
    DischargeLine,
    LiquidLine,
    SuctionLineSizer,
    DischargeLineSizer,
    LiquidLineSizer,
    evaluate_tube,
    size_line,
    try_size_line
)

from .report import (
    evaluations_to_frame,
    format_table,
    format_selection,
    format_error
)
