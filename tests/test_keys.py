import numpy as np

from memokit.cache.keys import KeyDerivationError, make_key


def test_hashable_values_are_their_own_key():
    assert make_key(5) == 5
    assert make_key("abc") == "abc"
    assert make_key((1, "a")) == (1, "a")
    assert make_key(1) == make_key(1.0)


def test_containers_are_frozen_and_tagged():
    assert make_key([1, 2]) == make_key([1, 2])
    assert make_key([1, 2]) != make_key((1, 2))
    assert make_key({"b": [2], "a": 1}) == make_key({"a": 1, "b": [2]})
    assert make_key({1, 2}) == make_key({2, 1})
    hash(make_key({"x": [{"y": {1, 2}}]}))


def test_derived_keys_never_match_plain_tuples():
    assert make_key([1, 2]) != make_key(("list", (1, 2)))
    assert make_key([[2]]) != make_key([("list", (2,))])
    assert make_key({"a": [1]}) != make_key(("dict", (("a", ("list", (1,))),)))
    a = np.arange(3)
    assert make_key(a) != make_key(make_key(a)[1:])


def test_array_keys_follow_contents_dtype_and_shape():
    a = np.arange(6, dtype=np.int64)
    assert make_key(a) == make_key(a.copy())
    assert make_key(a) != make_key(a.astype(np.int32))
    assert make_key(a) != make_key(a.reshape(2, 3))
    assert make_key(a.reshape(2, 3).T) == make_key(np.ascontiguousarray(a.reshape(2, 3).T))
    assert make_key([a]) == make_key([a.copy()])


def test_unkeyable_values_raise():
    class Opaque:
        __hash__ = None

    try:
        make_key([Opaque()])
        assert False
    except KeyDerivationError as exc:
        assert "Opaque" in str(exc)

    try:
        make_key(np.array([object()], dtype=object))
        assert False
    except TypeError as exc:
        assert "object-dtype" in str(exc)
