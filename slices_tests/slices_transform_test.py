import suite
from dgen import from_schema
from slices import map_, filter_

test = suite.test
assert_that = suite.assert_that

product_schema = {
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0}),
    'category': {'_qen_provider': 'choice', 'from': ['electronics', 'books', 'clothing']}
}


def _is_even(x):
    return x % 2 == 0


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x is y for y in it) for x in sub)


# --- map_ ---

@test("map_ applies the selector to every element")
def test_map_basic():
    assert_that(map_(['a', 'bb'], len) == [1, 2], "lengths of the strings")


@test("map_ can change the element type")
def test_map_changes_type():
    users = [{'name': 'alois'}, {'name': 'creekorful'}]
    assert_that(map_(users, lambda u: u['name']) == ['alois', 'creekorful'], "dicts to names")


@test("map_ on empty input gives an empty list")
def test_map_empty():
    result = map_([], str)
    assert_that(result == [] and isinstance(result, list), "should be an empty list")


@test("map_ calls the selector once per element, in order")
def test_map_call_order():
    calls = []
    map_([3, 1, 2], lambda x: calls.append(x))
    assert_that(calls == [3, 1, 2], f"got {calls}")


@test("map_ keeps the length of generated data")
def test_map_length():
    products = from_schema(product_schema, seed=21).take(30).to.list()
    prices = map_(products, lambda p: round(p['price'], 2))
    assert_that(len(prices) == len(products), "one output per input")
    assert_that(all(isinstance(p, float) for p in prices), "prices are floats")


# --- filter_ ---

@test("filter_ keeps matching elements in order")
def test_filter_basic():
    assert_that(filter_([1, 2, 3, 4], _is_even) == [2, 4], "even numbers")


@test("filter_ with no match gives an empty list")
def test_filter_no_match():
    result = filter_([1, 3, 5], _is_even)
    assert_that(result == [] and isinstance(result, list), "should be an empty list")


@test("filter_ does not touch its input")
def test_filter_no_mutation():
    data = [1, 2, 3, 4]
    result = filter_(data, lambda x: True)
    assert_that(result == data and result is not data, "a copy, not the input itself")
    assert_that(data == [1, 2, 3, 4], "input unchanged")


@test("filter_ result is a subsequence whose elements satisfy the predicate")
def test_filter_subsequence():
    products = from_schema(product_schema, seed=22).take(50).to.list()
    is_book = lambda p: p['category'] == 'books'
    books = filter_(products, is_book)

    assert_that(all(is_book(b) for b in books), "only books")
    assert_that(_is_subsequence(books, products), "relative order is kept")
    assert_that(len(books) == sum(1 for p in products if is_book(p)), "no book is lost")


@test("map_ lets selector errors through")
def test_map_propagates_errors():
    suite.assert_raises(KeyError, lambda: map_([{}], lambda d: d['missing']))


if __name__ == "__main__":
    suite.run(title="slices transform test suite")
