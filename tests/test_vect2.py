import pytest

from polybag.vect2 import Vect2


def test_default_is_zero():
    assert Vect2() == Vect2(0, 0)
    assert str(Vect2()) == "{0, 0}"


def test_str_format():
    assert str(Vect2(1, 2)) == "{1, 2}"


def test_repr():
    assert repr(Vect2(5, 8)) == "Vect2(5, 8)"


def test_getitem_components():
    v = Vect2(5, 8)
    assert v[0] == 5
    assert v[1] == 8


@pytest.mark.parametrize("index", [2, -1, 7])
def test_getitem_other_index_is_y(index):
    assert Vect2(5, 8)[index] == 8


def test_setitem():
    v = Vect2(5, 8)
    v[0] = 42
    v[1] = 666
    assert tuple(v) == (42, 666)


def test_setitem_other_index_sets_y():
    v = Vect2(5, 8)
    v[-1] = 123
    assert v == Vect2(5, 123)


def test_iter():
    assert tuple(Vect2(3, 4)) == (3, 4)


def test_add_commutes():
    a, b = Vect2(1, 2), Vect2(10, 20)
    assert a + b == b + a


def test_sub_undoes_add():
    a, b = Vect2(1, 2), Vect2(10, 20)
    assert (a + b) - b == a
    assert (a - a) == Vect2()


def test_mul_is_repeated_add():
    a = Vect2(1, 2)
    assert a * 3 == a + a + a
    assert 3 * a == a * 3


def test_mul_example_from_source():
    assert Vect2(2, 2) * 2 == Vect2(4, 4)
    assert not (Vect2(2, 2) * 2 == Vect2(4, 5))


def test_operators_do_not_mutate():
    a, b = Vect2(1, 2), Vect2(10, 20)
    _ = a + b
    _ = a - b
    _ = a * 5
    assert a == Vect2(1, 2)
    assert b == Vect2(10, 20)


def test_iadd_in_place():
    v = Vect2(2, 3)
    alias = v
    v += Vect2(1, 1)
    assert v is alias
    assert v == Vect2(2, 3) + Vect2(1, 1)


def test_isub_in_place():
    v = Vect2(2, 3)
    alias = v
    v -= Vect2(1, 1)
    assert v is alias
    assert v == Vect2(2, 3) - Vect2(1, 1)


def test_imul_in_place():
    v = Vect2(2, 3)
    alias = v
    v *= 2
    assert v is alias
    assert v == Vect2(2, 3) * 2


def test_not_equal_to_tuple():
    assert (Vect2(1, 2) == (1, 2)) is False


def test_equal_and_not_equal():
    assert Vect2(1, 2) != Vect2(2, 1)
    assert not (Vect2(1, 2) != Vect2(1, 2))


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vect2(1, 2))


def test_mul_by_non_int_raises():
    with pytest.raises(TypeError):
        Vect2(1, 2) * "a"


def test_add_int_raises():
    with pytest.raises(TypeError):
        Vect2(1, 2) + 1