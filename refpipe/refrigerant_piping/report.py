"""
Text and table output of refrigerant line sizing results.
"""
import pandas as pd
from refpipe.line_type import LineType
from .sizing import SizingResult, SizingOutcome


NO_SELECTION_ADVISORY = (
    "No standard copper tube size meets both the temperature loss and the "
    "flow velocity criterion. Review the equivalent length, the capacity, or "
    "the design criteria."
)

NO_WARNINGS_NOTE = (
    "No basic flow velocity or temperature loss warnings for this selection."
)

LINE_TYPE_REMARKS = {
    LineType.LIQUID: (
        "Also check the available subcooling and the static head losses to "
        "avoid flashing in the liquid line."
    ),
    LineType.SUCTION: (
        "Check oil traps and line slopes, and whether a double riser is needed "
        "when the part load is very low."
    ),
}


def evaluations_to_frame(result: SizingResult) -> pd.DataFrame:
    """Returns the evaluations of all copper tubes as a Pandas DataFrame, in
    catalog order. Column 'selected' flags the selected copper tube.
    """
    rows = []
    for i, evaluation in enumerate(result.evaluations):
        copper_tube = evaluation.copper_tube
        rows.append({
            'DN': copper_tube.DN,
            'D_ext [in]': copper_tube.D_ext.to('inch').m,
            'D_int [in]': copper_tube.D_int.to('inch').m,
            'u [ft/min]': evaluation.u.to('ft / min').m,
            'dP [psi]': evaluation.dP.to('psi').m,
            'dT [°F]': evaluation.dT.to('delta_degF').m,
            'Re': evaluation.Re,
            'selected': result.is_selected(i)
        })
    columns = [
        'DN', 'D_ext [in]', 'D_int [in]', 'u [ft/min]',
        'dP [psi]', 'dT [°F]', 'Re', 'selected'
    ]
    return pd.DataFrame(rows, columns=columns)


def format_table(result: SizingResult) -> str:
    """Returns the evaluations of all copper tubes as a text table. The row of
    the selected copper tube is marked with an asterisk.
    """
    df = evaluations_to_frame(result)
    df['selected'] = df['selected'].map(lambda b: '*' if b else '')
    formatters = {
        'D_ext [in]': '{:.3f}'.format,
        'D_int [in]': '{:.3f}'.format,
        'u [ft/min]': '{:.1f}'.format,
        'dP [psi]': '{:.3f}'.format,
        'dT [°F]': '{:.3f}'.format,
        'Re': '{:.0f}'.format,
    }
    return df.to_string(index=False, formatters=formatters)


def format_selection(result: SizingResult) -> str:
    """Returns a summary of the selected copper tube with its design warnings,
    or an advisory if no copper tube was selected.
    """
    selected = result.selected
    if selected is None:
        return NO_SELECTION_ADVISORY
    copper_tube = selected.copper_tube
    lines = [
        f"Selected copper tube: {copper_tube.DN} "
        f"(OD ≈ {copper_tube.D_ext.to('inch').m:.3f} in, "
        f"ID ≈ {copper_tube.D_int.to('inch').m:.3f} in)",
        f"  - flow velocity ≈ {selected.u.to('ft / min').m:.1f} ft/min "
        f"({selected.u_si.m:.2f} m/s)",
        f"  - pressure drop ≈ {selected.dP.to('psi').m:.3f} psi",
        f"  - equivalent temperature loss ≈ "
        f"{selected.dT.to('delta_degF').m:.3f} °F",
        f"  - Reynolds number ≈ {selected.Re:.0f}",
    ]
    if selected.warnings:
        lines.append("Warnings:")
        lines.extend(f"  - {warning}" for warning in selected.warnings)
    else:
        lines.append(NO_WARNINGS_NOTE)
    remark = LINE_TYPE_REMARKS.get(result.sizing_input.line_type)
    if remark is not None:
        lines.append(remark)
    return '\n'.join(lines)


def format_error(outcome: SizingOutcome) -> str:
    """Returns the error message of a sizing outcome that has no result."""
    return f"Error ({outcome.status.value}): {outcome.error}"
