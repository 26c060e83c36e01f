import sys

import suite
from lazyq import P, empty

test = suite.test
assert_that = suite.assert_that
counting = suite.counting


def by_id(left, right):
    """compares records on their id field only"""
    return (left['id'] > right['id']) - (left['id'] < right['id'])


def case_insensitive(left, right):
    left, right = left.lower(), right.lower()
    return (left > right) - (left < right)


records = [
    {'id': 1, 'name': 'alice'},
    {'id': 2, 'name': 'bob'},
    {'id': 1, 'name': 'alice (duplicate)'},
    {'id': 3, 'name': 'carol'},
    {'id': 2, 'name': 'bob (duplicate)'},
]


# --- distinct ---

@test("distinct keeps the first instance of each element")
def test_distinct_basic():
    result = P([3, 1, 3, 2, 1]).set.distinct().to.list()
    assert_that(result == [3, 1, 2], f"order of first appearance, got {result}")


@test("distinct with a comparer treats equivalent records as duplicates")
def test_distinct_comparer():
    result = P(records).set.distinct(by_id).select(lambda r: r['name']).to.list()
    assert_that(result == ['alice', 'bob', 'carol'], f"first instance per id should survive, got {result}")


@test("distinct with a key selector")
def test_distinct_key_selector():
    result = P(records).set.distinct(key_selector=lambda r: r['id']).select(lambda r: r['name']).to.list()
    assert_that(result == ['alice', 'bob', 'carol'], f"got {result}")


@test("distinct is lazy and streams")
def test_distinct_lazy():
    comparer = counting(case_insensitive)
    distinct = P(['a', 'B', 'A', 'b', 'c']).set.distinct(comparer)
    assert_that(comparer.calls == 0, "no comparison before the first pull")
    cursor = iter(distinct)
    assert_that(next(cursor) == 'a', "first element streams immediately")
    assert_that(list(cursor) == ['B', 'c'], "case-insensitive duplicates dropped")


# --- union ---

@test("union yields distinct elements of both sequences in order")
def test_union_basic():
    result = P([1, 2, 2, 3]).set.union([3, 4, 1, 5]).to.list()
    assert_that(result == [1, 2, 3, 4, 5], f"got {result}")


@test("union with a comparer suppresses cross-sequence duplicates")
def test_union_comparer():
    result = P(['Apple', 'pear']).set.union(['APPLE', 'Plum', 'PEAR'], case_insensitive).to.list()
    assert_that(result == ['Apple', 'pear', 'Plum'], f"first spelling wins, got {result}")


@test("union with an empty side")
def test_union_empty():
    assert_that(empty().set.union([1, 1, 2]).to.list() == [1, 2], "empty first")
    assert_that(P([1, 1]).set.union([]).to.list() == [1], "empty second")


# --- except / intersect ---

@test("except removes elements present in the second sequence")
def test_except_basic():
    assert_that(P([1, 2, 3]).set.except_([2]).to.list() == [1, 3], "except([1,2,3],[2])")


@test("intersect keeps elements present in the second sequence")
def test_intersect_basic():
    assert_that(P([1, 2, 3]).set.intersect([2, 4]).to.list() == [2], "intersect([1,2,3],[2,4])")


@test("except and intersect with a comparer use the sorted lookup")
def test_except_intersect_comparer():
    words = P(['Alpha', 'beta', 'Gamma', 'delta'])
    removed = words.set.except_(['ALPHA', 'DELTA'], case_insensitive).to.list()
    kept = words.set.intersect(['GAMMA', 'BETA', 'omega'], case_insensitive).to.list()
    assert_that(removed == ['beta', 'Gamma'], f"got {removed}")
    assert_that(kept == ['beta', 'Gamma'], f"got {kept}")


@test("intersect keeps duplicates of the first sequence")
def test_intersect_duplicates():
    assert_that(P([2, 1, 2]).set.intersect([2]).to.list() == [2, 2], "both 2s remain")


@test("the second sequence is read once, on first demand")
def test_except_materializes_once():
    reads = counting(lambda: [2, 3])
    def second():
        yield from reads()
    difference = P([1, 2, 3, 4]).set.except_(second())
    assert_that(reads.calls == 0, "second sequence untouched at construction")
    assert_that(difference.to.list() == [1, 4], "first enumeration")
    assert_that(difference.to.list() == [1, 4], "second enumeration reuses the lookup")
    assert_that(reads.calls == 1, f"second sequence read once, got {reads.calls}")


@test("except does not read the second sequence when the first is empty")
def test_except_empty_first():
    reads = counting(lambda: [1])
    def second():
        yield from reads()
    assert_that(empty().set.except_(second()).to.list() == [], "empty result")
    assert_that(reads.calls == 0, "lookup never built")


# --- unhashable elements ---

@test("distinct and union order unhashable elements naturally")
def test_distinct_union_unhashable():
    assert_that(P([[1], [1], [2]]).set.distinct().to.list() == [[1], [2]], "lists deduplicated")
    result = P([[2], [1]]).set.union([[1], [3]]).to.list()
    assert_that(result == [[2], [1], [3]], f"union keeps first appearance, got {result}")
    keyed = P(records).set.distinct(key_selector=lambda r: [r['id']]).select(lambda r: r['name']).to.list()
    assert_that(keyed == ['alice', 'bob', 'carol'], f"unhashable keys, got {keyed}")


@test("except and intersect accept unhashable elements")
def test_except_intersect_unhashable():
    assert_that(P([[1], [2]]).set.except_([[2]]).to.list() == [[1]], "except over lists")
    assert_that(P([[1], [2], [1]]).set.intersect([[1]]).to.list() == [[1], [1]], "intersect over lists")
    assert_that(P([[1], [3]]).set.except_(iter([[3], [4]])).to.list() == [[1]], "one-shot second side")


# --- secondary inputs ---

@test("one-shot second sequences are read lazily, once")
def test_secondary_one_shot():
    pulled = counting(lambda x: x)
    removed = P([1, 2, 3]).set.except_(map(pulled, [2]))
    assert_that(pulled.calls == 0, "nothing read at construction")
    assert_that(removed.to.list() == [1, 3] and removed.to.list() == [1, 3], "stable over enumerations")
    assert_that(pulled.calls == 1, f"second sequence read once, got {pulled.calls}")


# --- concat ---

@test("concat yields all of the first then all of the second")
def test_concat():
    assert_that(P([1, 2]).set.concat([2, 3]).to.list() == [1, 2, 2, 3], "duplicates kept")
    assert_that(empty().set.concat([]).to.list() == [], "two empties")


@test("concat of a one-shot iterator can be enumerated twice")
def test_concat_one_shot():
    joined = P([0]).set.concat(iter([1, 2]))
    assert_that(joined.to.list() == [0, 1, 2], "first traversal")
    assert_that(joined.to.list() == [0, 1, 2], "second traversal")


if __name__ == "__main__":
    sys.exit(suite.run(title="lazyq set operations test"))
