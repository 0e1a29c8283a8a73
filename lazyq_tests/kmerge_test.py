import logging
from collections import Counter, namedtuple
from itertools import count, islice
from operator import length_hint

import suite
from dgen import CountingIterator, from_schema, int_runs, is_non_decreasing
from lazyq import kmerge, KMerge

assert_that = suite.assert_that
assert_equal = suite.assert_equal

Tagged = namedtuple('Tagged', ['key', 'source'])

event_schema = {
    'ts': ('pyint', {'min_value': 0, 'max_value': 50}),
    'host': {'_qen_provider': 'choice', 'from': ['web-1', 'web-2', 'db-1']},
    'message': 'sentence',
}


# --- basic merging ---

@suite.test("kmerge merges three sorted lists")
def test_kmerge_example():
    assert_equal(list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]])), [0, 1, 2, 3, 4, 5, 6, 7])


@suite.test("kmerge of no sources is empty")
def test_kmerge_no_sources():
    assert_equal(list(kmerge([])), [])
    assert_equal(list(kmerge(iter([]))), [])


@suite.test("kmerge of one source yields that source unchanged")
def test_kmerge_single_source():
    assert_equal(list(kmerge([[1, 1, 2, 3, 5, 8]])), [1, 1, 2, 3, 5, 8])


@suite.test("kmerge skips empty sources")
def test_kmerge_empty_sources():
    assert_equal(list(kmerge([[], [2, 4], [], [1, 3], []])), [1, 2, 3, 4])


@suite.test("kmerge accepts a generator of generators")
def test_kmerge_generator_sources():
    sources = (range(start, 20, 4) for start in range(4))
    assert_equal(list(kmerge(sources)), list(range(20)))


@suite.test("kmerge of generated runs is sorted and keeps every element")
def test_kmerge_generated_runs():
    for seed in range(5):
        runs = int_runs(8, (0, 30), seed=seed)
        result = list(kmerge(runs))
        assert_that(is_non_decreasing(result), f"output not sorted for seed {seed}")
        expected = Counter()
        for run in runs:
            expected.update(run)
        assert_equal(Counter(result), expected, "multiset should be the union of all runs")


# --- ordering and ties ---

@suite.test("kmerge emits equal keys in source order")
def test_kmerge_tie_break():
    sources = [
        [Tagged(1, 0), Tagged(2, 0)],
        [Tagged(1, 1), Tagged(1, 1)],
        [Tagged(0, 2), Tagged(1, 2)],
    ]
    result = list(kmerge(sources, key=lambda t: t.key))
    assert_equal([t.key for t in result], [0, 1, 1, 1, 1, 2])
    assert_equal([t.source for t in result], [2, 0, 1, 1, 2, 0])


@suite.test("kmerge never compares elements with equal keys")
def test_kmerge_incomparable_elements():
    # dicts do not support <, so only the key may be compared
    sources = [[{'k': 1}, {'k': 3}], [{'k': 1}, {'k': 2}]]
    result = list(kmerge(sources, key=lambda d: d['k']))
    assert_equal([d['k'] for d in result], [1, 1, 2, 3])


@suite.test("kmerge by key over generated log events")
def test_kmerge_records():
    provider = from_schema(event_schema, seed=21)
    runs = provider.sorted_runs(5, (0, 15), key=lambda e: e['ts'])
    result = list(kmerge(runs, key=lambda e: e['ts']))
    assert_that(is_non_decreasing(result, key=lambda e: e['ts']), "events should be ordered by ts")
    assert_equal(len(result), sum(len(r) for r in runs))


@suite.test("kmerge with reverse and with a comparer")
def test_kmerge_ordering_options():
    assert_equal(list(kmerge([[5, 3], [4, 1], [6]], reverse=True)), [6, 5, 4, 3, 1])
    by_length = lambda a, b: len(a) - len(b)
    assert_equal(list(kmerge([['x', 'xxx'], ['yy']], comparer=by_length)), ['x', 'yy', 'xxx'])


# --- laziness ---

@suite.test("kmerge does nothing until the first request")
def test_kmerge_lazy_priming():
    sources = [CountingIterator([1, 4]), CountingIterator([2, 3])]
    merged = kmerge(sources)
    assert_equal(sum(s.pulled for s in sources), 0, "construction should not pull")
    assert_equal(next(merged), 1)
    assert_equal([s.pulled for s in sources], [1, 1], "priming pulls one element per source")


@suite.test("kmerge refills a source only on the following request")
def test_kmerge_deferred_refill():
    first, second = CountingIterator([1, 2, 3]), CountingIterator([10])
    merged = kmerge([first, second])
    assert_equal(next(merged), 1)
    assert_equal(first.pulled, 1)
    assert_equal(next(merged), 2)
    assert_equal(first.pulled, 2)


@suite.test("kmerge over infinite sources can be partially consumed")
def test_kmerge_infinite():
    result = list(islice(kmerge([count(0, 3), count(1, 3), count(2, 3)]), 9))
    assert_equal(result, list(range(9)))


@suite.test("kmerge stays exhausted and reports its length")
def test_kmerge_fused_and_hint():
    merged = kmerge([[1, 2], [3]])
    assert_that(isinstance(merged, KMerge), "free function should build a KMerge")
    assert_equal(length_hint(merged), 0, "unprimed merge knows nothing yet")
    next(merged)
    assert_equal(length_hint(merged), 2)
    assert_equal(list(merged), [2, 3])
    suite.assert_raises(StopIteration, lambda: next(merged))


# --- errors ---

def failing_key(fail_on_call):
    """identity key that raises once, on the given call number"""
    calls = []

    def key(x):
        calls.append(x)
        if len(calls) == fail_on_call:
            raise RuntimeError(f"key failed on {x}")
        return x
    return key


@suite.test("a key that fails while priming loses no elements")
def test_kmerge_key_fails_while_priming():
    sources = [CountingIterator([1, 4]), CountingIterator([2, 5]), CountingIterator([3, 6])]
    merged = kmerge(sources, key=failing_key(2))
    suite.assert_raises(RuntimeError, lambda: next(merged))
    assert_equal([s.pulled for s in sources], [1, 1, 0], "priming should stop at the failing source")
    assert_equal(list(merged), [1, 2, 3, 4, 5, 6])


@suite.test("a key that fails while refilling loses no elements")
def test_kmerge_key_fails_while_refilling():
    sources = [CountingIterator([1, 4]), CountingIterator([2, 5]), CountingIterator([3, 6])]
    merged = kmerge(sources, key=failing_key(4))
    assert_equal(next(merged), 1)
    suite.assert_raises(RuntimeError, lambda: next(merged))
    assert_equal(sources[0].pulled, 2)
    assert_equal(next(merged), 2)
    assert_equal(sources[0].pulled, 2, "the retry should reuse the element already pulled")
    assert_equal(list(merged), [3, 4, 5, 6])


@suite.test("kmerge logs priming and exhaustion at debug level")
def test_kmerge_logging():
    records = []

    class Collect(logging.Handler):
        def emit(self, record):
            records.append(record.getMessage())

    logger = logging.getLogger('lazyq.adaptors.merge')
    handler = Collect()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        list(kmerge([[1], [], [2]]))
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)

    assert_that("kmerge primed 2 of 3 sources" in records, f"missing priming log: {records}")
    assert_that("kmerge exhausted after 2 elements" in records, f"missing exhaustion log: {records}")


if __name__ == "__main__":
    suite.main(title="lazyq k-way merge test suite")
