import pytest
from refpipe.refrigerant_piping import (
    CopperTubing,
    RAW_COPPER_TUBES,
    build_copper_tubing,
    list_copper_tubes
)


def test_catalog_size():
    assert len(list_copper_tubes()) == len(RAW_COPPER_TUBES) == 22


def test_catalog_sorted_by_inside_diameter():
    D_int = [ct.D_int.to('inch').m for ct in list_copper_tubes()]
    assert all(d > 0.0 for d in D_int)
    assert all(d1 <= d2 for d1, d2 in zip(D_int, D_int[1:]))


def test_diameters_converted_from_mm():
    first = list_copper_tubes()[0]
    assert first.DN == '1/4'
    assert first.D_ext.to('inch').m == pytest.approx(6.35 / 25.4)
    assert first.D_int.to('inch').m == pytest.approx((6.35 - 2 * 0.8) / 25.4)
    assert first.t_raw == 0.8
    assert first.t.to('mm').m == pytest.approx(0.8)


def test_wall_thickness_variants_are_kept():
    tubes = list_copper_tubes()
    # the thicker wall has the smaller inside diameter and comes first
    assert (tubes[3].DN, tubes[3].t_raw) == ('5/8', 1.0)
    assert (tubes[4].DN, tubes[4].t_raw) == ('5/8', 0.8)
    assert tubes[3].D_ext == tubes[4].D_ext


def test_build_sorts_rows():
    rows = [('big', 20.0, 1.0), ('small', 10.0, 1.0), ('mid', 15.0, 2.0)]
    tubes = build_copper_tubing(rows)
    assert [ct.DN for ct in tubes] == ['small', 'mid', 'big']


def test_build_rejects_non_positive_inside_diameter():
    with pytest.raises(ValueError):
        build_copper_tubing([('bad', 2.0, 1.0)])


def test_get_records():
    variants = CopperTubing.get_records('7/8')
    assert [ct.t_raw for ct in variants] == [1.14, 1.0]
    assert len(CopperTubing.get_records('1/2', '3/4')) == 2
    assert CopperTubing.get_records() == list_copper_tubes()


def test_get_record():
    assert CopperTubing.get_record('1 3/8').t_raw == 1.4
    assert CopperTubing.get_record('9') is None


def test_to_frame():
    df = CopperTubing.to_frame()
    assert df.shape == (22, 4)
    assert list(df.columns) == ['DN', 'D_ext [in]', 'D_int [in]', 't [mm]']
    assert df['D_int [in]'].is_monotonic_increasing
