import pytest

from pdl_core.protocol import TYPE_NAMES
from pdl_core.records import ParseCandidate, PDLRecord, type_name


def test_known_type_names():
    assert type_name(3437124069) == "Vehicle"
    assert type_name(1462988517) == "Road"


@pytest.mark.parametrize("type_id", [0, 1, 42, 1462988516, 3437124070, 0xFFFFFFFF])
def test_unknown_types_fall_back(type_id):
    assert type_name(type_id) == "Object"


def test_type_table_is_read_only():
    with pytest.raises(TypeError):
        TYPE_NAMES[7] = "Tree"


def test_record_exposes_type_name():
    rec = PDLRecord(type_id=1462988517, x=1.0, y=2.0, z=3.0, offset=16)
    assert rec.type_name == "Road"


def test_empty_candidate():
    empty = ParseCandidate.empty()
    assert empty.record_size == 0
    assert empty.header_offset == 0
    assert empty.byte_order is None
    assert empty.byte_order_name is None
    assert empty.records == ()
