import sys

import suite
from dgen import from_schema
from lazyq import P, from_range, empty, Grouping

# --- setup ---
test = suite.test
assert_that = suite.assert_that
counting = suite.counting

# --- test data & schemas ---
object_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10}),
    'name': 'word',
    'category': {'_qen_provider': 'choice', 'from': ['a', 'b', 'c']},
    'value': ('pyfloat', {'min_value': 10, 'max_value': 100}),
}


# --- group_by ---

@test("group_by groups items by key, in key order")
def test_group_by_core():
    groups = P(['pear', 'fig', 'apple', 'kiwi', 'plum']).group.group_by(len).to.list()
    assert_that([g.key for g in groups] == [3, 4, 5], "keys sorted, not in encounter order")
    assert_that(all(isinstance(g, Grouping) for g in groups), "default results are groupings")
    assert_that(groups[1].to.list() == ['pear', 'kiwi', 'plum'], "values keep source order")


@test("group_by with generated records")
def test_group_by_records():
    data = from_schema(object_schema, seed=42).take(50)
    groups = data.group.group_by(lambda x: x['category']).to.list()
    assert_that([g.key for g in groups] == sorted(g.key for g in groups), "keys in order")
    assert_that(sum(g.to.count() for g in groups) == 50, "every record lands in one group")
    for group in groups:
        assert_that(group.to.all(lambda item: item['category'] == group.key),
                    f"all items in group '{group.key}' must have that category")


@test("group_by with element and result selectors")
def test_group_by_selectors():
    result = from_range(0, 10).group.group_by(
        lambda x: x % 3,
        element_selector=lambda x: x * 10,
        result_selector=lambda key, values: (key, values.to.list())
    ).to.list()
    assert_that(result == [(0, [0, 30, 60, 90]), (1, [10, 40, 70]), (2, [20, 50, 80])], f"got {result}")


@test("group_by with a comparer orders and merges keys by it")
def test_group_by_comparer():
    def descending(left, right):
        return (left < right) - (left > right)
    def case_insensitive(left, right):
        left, right = left.lower(), right.lower()
        return (left > right) - (left < right)
    by_desc = P([1, 3, 2, 3]).group.group_by(lambda x: x, comparer=descending).select(lambda g: g.key).to.list()
    assert_that(by_desc == [3, 2, 1], f"comparer decides key order, got {by_desc}")
    merged = P(['a', 'A', 'b']).group.group_by(lambda x: x, comparer=case_insensitive).to.list()
    assert_that([g.key for g in merged] == ['a', 'b'], "first key of an equivalence class is kept")
    assert_that(merged[0].to.list() == ['a', 'A'], "equivalent keys share a group")


@test("group_by is deferred and computed once")
def test_group_by_cached():
    key_selector = counting(lambda x: x % 2)
    grouped = P([1, 2, 3, 4]).group.group_by(key_selector)
    assert_that(key_selector.calls == 0, "nothing runs at construction")
    first = [g.to.list() for g in grouped]
    second = [g.to.list() for g in grouped]
    assert_that(first == second == [[2, 4], [1, 3]], f"got {first}")
    assert_that(key_selector.calls == 4, f"one key per element overall, got {key_selector.calls}")


@test("group_by handles edge cases")
def test_group_by_edges():
    assert_that(empty().group.group_by(lambda x: x).to.list() == [], "empty source, no groups")
    single = P(['a', 'b', 'c']).group.group_by(lambda x: 'same_key').to.list()
    assert_that(len(single) == 1 and single[0].to.list() == ['a', 'b', 'c'], "single group")


@test("group_by accepts unhashable keys")
def test_group_by_unhashable_keys():
    words = P(['ab', 'ba', 'cd', 'ab'])
    groups = words.group.group_by(lambda w: sorted(w)).to.list()
    assert_that([g.key for g in groups] == [['a', 'b'], ['c', 'd']], "keys in natural order")
    assert_that(groups[0].to.list() == ['ab', 'ba', 'ab'], "anagrams share a group")


@test("groups can be enumerated backwards")
def test_group_by_reversible():
    groups = P([1, 2, 3]).group.group_by(lambda x: x)
    assert_that(groups.traits.reversible, "materialized results are bidirectional")
    assert_that(groups.to.last().key == 3, "last group found from the end")


# --- windowing ---

@test("chunk splits into fixed-size lists")
def test_chunk():
    assert_that(from_range(1, 7).group.chunk(3).to.list() == [[1, 2, 3], [4, 5, 6], [7]], "last chunk shorter")
    assert_that(empty().group.chunk(2).to.list() == [], "empty")
    suite.assert_raises(ValueError, lambda: P([1]).group.chunk(0), "size must be positive")


@test("window yields sliding windows")
def test_window():
    assert_that(from_range(1, 4).group.window(2).to.list() == [[1, 2], [2, 3], [3, 4]], "size 2")
    assert_that(P([1]).group.window(2).to.list() == [], "too short for a window")
    suite.assert_raises(ValueError, lambda: P([1]).group.window(-1), "size must be positive")


@test("pairwise yields consecutive pairs")
def test_pairwise():
    assert_that(P([1, 2, 3]).group.pairwise().to.list() == [(1, 2), (2, 3)], "two pairs")
    assert_that(P([1]).group.pairwise().to.list() == [], "no pairs")


@test("windowing streams over infinite sources")
def test_window_lazy():
    naturals = P(iter(range(1, 10 ** 9)))
    assert_that(naturals.group.window(3).take(2).to.list() == [[1, 2, 3], [2, 3, 4]], "two windows only")
    assert_that(naturals.group.chunk(2).take(1).to.list() == [[1, 2]], "one chunk only")


if __name__ == "__main__":
    sys.exit(suite.run(title="lazyq grouping test"))
