import warnings

import pytest

from seq_ops import InvalidArgumentError, ds, reorder
from seq_ops.deprecated import move_element


def test_move_element_routes_to_reorder():
    with pytest.warns(DeprecationWarning, match="use seq_ops.sequences.reorder"):
        assert move_element([1, 2, 3, 4], 0, 2) == [2, 3, 1, 4]


def test_move_element_errors_match_reorder():
    with pytest.warns(DeprecationWarning):
        with pytest.raises(InvalidArgumentError, match="First argument should be a list"):
            move_element({"a": 1}, 0, 0)


def test_alias_metadata():
    assert move_element.__name__ == "move_element"
    assert move_element.__deprecated_by__ is reorder


def test_ds_helpers():
    with pytest.warns(DeprecationWarning, match="is_list"):
        assert ds.is_list([1, 2])
    with pytest.warns(DeprecationWarning, match="traversable_to_array"):
        assert ds.traversable_to_array(iter([1, 2])) == [1, 2]
    with pytest.warns(DeprecationWarning, match="get_type"):
        assert ds.get_type({}) == "dict"


def test_warning_can_be_disabled(monkeypatch):
    monkeypatch.setenv("SEQ_OPS_WARN_DEPRECATED", "false")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert move_element([1, 2], 1, 0) == [2, 1]
