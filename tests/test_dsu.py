import pytest

from weeklysolvers.dsu import DSU, largest_component


def test_fresh_elements_are_their_own_leaders():
    dsu = DSU(5)
    assert [dsu.leader(i) for i in range(5)] == list(range(5))
    assert all(dsu.size(i) == 1 for i in range(5))


def test_merge_joins_sets():
    dsu = DSU(4)
    dsu.merge(0, 1)
    assert dsu.same(0, 1)
    assert not dsu.same(0, 2)
    assert dsu.size(1) == 2


def test_merge_is_transitive():
    dsu = DSU(6)
    dsu.merge(0, 1)
    dsu.merge(1, 2)
    dsu.merge(4, 5)
    assert dsu.same(0, 2)
    assert dsu.leader(2) == dsu.leader(0)
    assert not dsu.same(2, 4)


def test_merge_of_equal_sizes_keeps_first_leader():
    dsu = DSU(2)
    assert dsu.merge(0, 1) == 0


def test_merge_larger_set_stays_leader():
    dsu = DSU(4)
    big = dsu.merge(1, 2)
    assert dsu.merge(3, 1) == big


def test_merge_within_a_set_returns_leader():
    dsu = DSU(3)
    root = dsu.merge(0, 1)
    assert dsu.merge(1, 0) == root
    assert dsu.size(0) == 2


def test_groups_partition_elements():
    dsu = DSU(7)
    dsu.merge(0, 3)
    dsu.merge(3, 6)
    dsu.merge(2, 5)
    groups = dsu.groups()
    assert sorted(x for g in groups for x in g) == list(range(7))
    assert [0, 3, 6] in groups and [2, 5] in groups
    assert all(g == sorted(g) for g in groups)


def test_group_sizes_match_size():
    dsu = DSU(5)
    dsu.merge(0, 4)
    dsu.merge(1, 4)
    for group in dsu.groups():
        assert all(dsu.size(x) == len(group) for x in group)


def test_out_of_range_raises():
    dsu = DSU(3)
    with pytest.raises(IndexError):
        dsu.leader(3)
    with pytest.raises(IndexError):
        dsu.merge(-1, 0)
    with pytest.raises(IndexError):
        dsu.same(0, 5)


def test_empty_dsu_has_no_groups():
    assert DSU().groups() == []


def test_largest_component_of_chain():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert largest_component(6, edges) == 4


def test_largest_component_without_edges():
    assert largest_component(5, []) == 1


def test_largest_component_of_nothing():
    assert largest_component(0, []) == 0


def test_largest_component_ignores_repeated_edges():
    edges = [(1, 2), (2, 1), (1, 2), (3, 4)]
    assert largest_component(4, edges) == 2