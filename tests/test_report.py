import pytest
from refpipe import Quantity
from refpipe.refrigerant_piping import (
    SizingInput,
    evaluations_to_frame,
    format_table,
    format_selection,
    format_error,
    size_line,
    try_size_line
)
from refpipe.refrigerant_piping.report import NO_SELECTION_ADVISORY, NO_WARNINGS_NOTE

Q_ = Quantity


@pytest.fixture
def liquid_result():
    si = SizingInput(
        refrigerant='R134a',
        line_type='liquid',
        Q_dot=Q_(60000, 'Btu / hr'),
        L_eq=Q_(50, 'ft')
    )
    return size_line(si)


@pytest.fixture
def unsized_result():
    si = SizingInput(
        refrigerant='R134a',
        line_type='suction',
        Q_dot=Q_(1e9, 'Btu / hr'),
        L_eq=Q_(50, 'ft')
    )
    return size_line(si)


def test_frame(liquid_result):
    df = evaluations_to_frame(liquid_result)
    assert len(df) == 22
    assert df['selected'].sum() == 1
    assert df.loc[df['selected'], 'DN'].item() == '1/2'
    assert df['D_int [in]'].is_monotonic_increasing


def test_table(liquid_result):
    table = format_table(liquid_result)
    lines = table.splitlines()
    assert len(lines) == 23
    assert 'u [ft/min]' in lines[0]
    marked = [line for line in lines[1:] if line.rstrip().endswith('*')]
    assert len(marked) == 1
    assert marked[0].split()[0] == '1/2'


def test_selection_summary(liquid_result):
    text = format_selection(liquid_result)
    assert text.startswith('Selected copper tube: 1/2')
    assert 'ft/min' in text and 'm/s' in text
    assert NO_WARNINGS_NOTE in text
    assert 'subcooling' in text


def test_no_selection_advisory(unsized_result):
    assert unsized_result.selected is None
    assert format_selection(unsized_result) == NO_SELECTION_ADVISORY


def test_error_message():
    si = SizingInput(
        refrigerant='R404A',
        line_type='liquid',
        Q_dot=Q_(60000, 'Btu / hr'),
        L_eq=Q_(50, 'ft')
    )
    outcome = try_size_line(si)
    message = format_error(outcome)
    assert message.startswith('Error (unsupported refrigerant)')
    assert 'R404A' in message
