import suite
from dgen import from_schema, int_runs, is_non_decreasing, CountingIterator, Generator
from lazyq import Seq

assert_that = suite.assert_that
assert_equal = suite.assert_equal

account_schema = {
    'account_id': ('pyint', {'min_value': 1, 'max_value': 9999}),
    'owner': 'name',
    'tier': {'_qen_provider': 'choice', 'from': ['free', 'pro']},
    'label': {'_qen_provider': 'ref', 'key': 'tier'},
    'region': {'_qen_provider': 'literal', 'value': 'eu'},
}


@suite.test("take returns a sequence of generated records")
def test_take():
    accounts = from_schema(account_schema, seed=1).take(5)
    assert_that(isinstance(accounts, Seq), "take should return a Seq")
    records = accounts.to.list()
    assert_equal(len(records), 5)
    for record in records:
        assert_that(record['tier'] in ('free', 'pro'), f"unexpected tier: {record['tier']}")
        assert_equal(record['label'], record['tier'], "ref should copy a sibling field")
        assert_equal(record['region'], 'eu')


@suite.test("the same seed gives the same records")
def test_seeded():
    first = from_schema(account_schema, seed=99).take(4).to.list()
    second = from_schema(account_schema, seed=99).take(4).to.list()
    assert_equal(first, second)


@suite.test("sorted_runs gives sorted runs within the size range")
def test_sorted_runs():
    runs = from_schema(account_schema, seed=4).sorted_runs(6, (0, 7), key=lambda a: a['account_id'])
    assert_equal(len(runs), 6)
    for run in runs:
        assert_that(0 <= len(run) <= 7, f"run length out of range: {len(run)}")
        assert_that(is_non_decreasing(run, key=lambda a: a['account_id']), "each run should be sorted")


@suite.test("int_runs gives sorted python ints")
def test_int_runs():
    runs = int_runs(4, (3, 3), low=-5, high=5, seed=2)
    assert_equal([len(r) for r in runs], [3, 3, 3, 3])
    for run in runs:
        assert_equal(run, sorted(run))
        assert_that(all(type(x) is int and -5 <= x <= 5 for x in run), f"bad values: {run}")


@suite.test("CountingIterator counts only the elements pulled")
def test_counting_iterator():
    counted = CountingIterator([1, 2, 3])
    assert_equal(counted.pulled, 0)
    assert_equal(next(counted), 1)
    assert_equal(list(counted), [2, 3])
    assert_equal(counted.pulled, 3, "exhaustion should not count as a pull")


@suite.test("unknown providers and missing refs are errors")
def test_errors():
    generator = Generator(seed=0)
    suite.assert_raises(ValueError, lambda: generator.create({'_qen_provider': 'nope'}))
    suite.assert_raises(ValueError, lambda: generator.create({'_qen_provider': 'ref', 'key': 'missing'}))
    suite.assert_raises(ValueError, lambda: generator.create({'_qen_provider': 'literal'}))
    suite.assert_raises(ValueError, lambda: generator.create(('not_a_faker_provider', {})))


if __name__ == "__main__":
    suite.main(title="dgen test suite")
