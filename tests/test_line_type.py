import pytest
from refpipe.line_type import LineType


@pytest.mark.parametrize('name, expected', [
    ('liquid', LineType.LIQUID),
    ('Suction', LineType.SUCTION),
    (' DISCHARGE ', LineType.DISCHARGE),
    ('liquido', LineType.LIQUID),
    ('líquido', LineType.LIQUID),
    ('succion', LineType.SUCTION),
    ('Succión', LineType.SUCTION),
    ('descarga', LineType.DISCHARGE),
    (LineType.SUCTION, LineType.SUCTION),
])
def test_parse(name, expected):
    assert LineType.parse(name) is expected


@pytest.mark.parametrize('name', ['gas', '', 'hot gas', 'liquids'])
def test_parse_unknown_line_type(name):
    with pytest.raises(ValueError):
        LineType.parse(name)


def test_vapor_lines():
    assert LineType.SUCTION.is_vapor_line
    assert LineType.DISCHARGE.is_vapor_line
    assert not LineType.LIQUID.is_vapor_line
