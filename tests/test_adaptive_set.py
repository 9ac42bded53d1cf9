import pytest

from patternkit.adaptive_set import (
    SWITCH_THRESHOLD,
    AdaptiveSet,
    ArrayBackend,
    HashBackend,
    main,
)


def test_new_set_is_empty_and_uses_array():
    s = AdaptiveSet()
    assert len(s) == 0
    assert s.backend_name() == "array"


def test_stays_array_up_to_threshold():
    s = AdaptiveSet(range(SWITCH_THRESHOLD))
    assert len(s) == SWITCH_THRESHOLD
    assert s.backend_name() == "array"


def test_one_past_threshold_settles_back_on_array():
    s = AdaptiveSet(range(SWITCH_THRESHOLD + 1))
    assert len(s) == SWITCH_THRESHOLD + 1
    assert s.backend_name() == "array"


def test_two_past_threshold_uses_hash():
    s = AdaptiveSet(range(SWITCH_THRESHOLD + 2))
    assert s.backend_name() == "hash"


def test_contents_survive_migrations():
    values = list(range(50))
    s = AdaptiveSet(values)
    assert set(s) == set(values)
    for value in values[5:]:
        assert s.remove(value)
    assert set(s) == set(values[:5])
    assert s.backend_name() == "array"


def test_duplicate_add_does_not_grow():
    s = AdaptiveSet([1, 2, 3])
    s.add(2)
    assert len(s) == 3
    assert sorted(s) == [1, 2, 3]


def test_duplicate_add_at_boundary_keeps_contents():
    values = list(range(SWITCH_THRESHOLD + 1))
    s = AdaptiveSet(values)
    s.add(values[0])
    assert len(s) == len(values)
    assert set(s) == set(values)


def test_remove_reports_presence():
    s = AdaptiveSet([4, 5])
    assert s.remove(4) is True
    assert s.remove(4) is False
    assert 4 not in s
    assert 5 in s


def test_shrinking_returns_to_array():
    s = AdaptiveSet(range(SWITCH_THRESHOLD + 2))
    assert s.backend_name() == "hash"
    s.remove(0)
    assert s.backend_name() == "array"
    assert len(s) == SWITCH_THRESHOLD + 1


@pytest.mark.parametrize(
    "left, right",
    [
        ([], []),
        ([1, 2, 3], [3, 4]),
        (list(range(1, 16)), [10, 15, 20]),
        (list(range(30)), list(range(20, 60))),
    ],
)
def test_union_and_intersection_match_set_semantics(left, right):
    a = AdaptiveSet(left)
    b = AdaptiveSet(right)
    assert set(a.union(b)) == set(left) | set(right)
    assert len(a.union(b)) == len(set(left) | set(right))
    assert set(a.intersection(b)) == set(left) & set(right)


def test_operations_leave_operands_unchanged():
    a = AdaptiveSet([1, 2, 3])
    b = AdaptiveSet([3, 4])
    a.union(b)
    a.intersection(b)
    assert sorted(a) == [1, 2, 3]
    assert sorted(b) == [3, 4]


def test_array_backend_keeps_insertion_order():
    backend = ArrayBackend([3, 1, 2])
    assert list(backend) == [3, 1, 2]
    assert backend.add(1) is False
    assert backend.remove(1) is True
    assert list(backend) == [3, 2]


def test_hash_backend_add_and_remove():
    backend = HashBackend()
    assert backend.add(7) is True
    assert backend.add(7) is False
    assert 7 in backend
    assert backend.remove(7) is True
    assert backend.remove(7) is False
    assert len(backend) == 0


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Added 1, size: 1, using array"
    assert lines[14] == "Added 15, size: 15, using hash"
    expected_union = len(set(range(1, 16)) | {10, 15, 20})
    expected_inter = len(set(range(1, 16)) & {10, 15, 20})
    assert lines[15] == f"Union size: {expected_union}"
    assert lines[16] == f"Intersection size: {expected_inter}"