import pytest

from pholi.indexedstack import IndexedStack


def test_find_returns_latest_binding():
    st = IndexedStack()
    st.push("x", 1)
    st.push("y", 2)
    st.push("x", 3)
    assert st.find("x") == ("x", 3)
    assert st.find("y") == ("y", 2)
    assert st.find("z") is None


def test_pop_reveals_shadowed_binding():
    st = IndexedStack()
    st.push("x", 1)
    st.push("x", 2)
    assert st.pop() == ("x", 2)
    assert st.find("x") == ("x", 1)
    st.pop()
    assert st.find("x") is None
    assert len(st) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        IndexedStack().pop()


def test_restore_truncates():
    st = IndexedStack()
    for i, k in enumerate("abcab"):
        st.push(k, i)
    st.restore(2)
    assert list(st) == [("a", 0), ("b", 1)]
    assert st.find("c") is None
    assert st.find("a") == ("a", 0)


def test_restore_larger_size_is_noop():
    st = IndexedStack()
    st.push("a", 0)
    st.restore(10)
    assert list(st) == [("a", 0)]


def test_str_format():
    st = IndexedStack()
    st.push("k", "v")
    assert str(st) == "Indexedstack:\n   k : v\n"