# FILE: tests/test_validation.py
import pytest

from pattern_core.distribution import distribute
from pattern_core.placement import place
from pattern_core.validation import InvalidConfiguration, check_multiset, run_self_test, validate_config


@pytest.mark.parametrize("rows,cols,num_values", [
    (2, 2, 0),
    (2, 2, -1),
    (2, 2, 27),
    (0, 5, 3),
    (5, 0, 3),
    (-1, 5, 3),
    (2.0, 2, 2),
    (True, 2, 2),
    ("3", 3, 3),
])
def test_invalid_configuration_rejected(rows, cols, num_values):
    with pytest.raises(InvalidConfiguration):
        validate_config(rows, cols, num_values)
    with pytest.raises(InvalidConfiguration):
        distribute(rows, cols, num_values)


def test_invalid_configuration_is_value_error():
    assert issubclass(InvalidConfiguration, ValueError)


def test_large_sizes_beyond_ui_limits_are_fine():
    validate_config(200, 3, 26)
    assert len(distribute(120, 60, 1)) == 7200


def test_check_multiset_length():
    check_multiset(2, 2, ["a", "b", "c", "d"])
    with pytest.raises(InvalidConfiguration):
        check_multiset(2, 2, ["a", "b", "c"])
    with pytest.raises(InvalidConfiguration):
        check_multiset(0, 2, [])


def test_self_test_passes():
    results = run_self_test()
    assert results["tests"]
    assert all(ok for _, ok in results["tests"])


def test_check_multiset_rejects_non_integer_sizes():
    with pytest.raises(InvalidConfiguration):
        check_multiset(2, "2", ["a", "b", "c", "d"])
    with pytest.raises(InvalidConfiguration):
        place(2.5, 2, list("abcde"))
