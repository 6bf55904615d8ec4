import pytest

from patternkit.prototype import ConcretePrototype1, ConcretePrototype2, Prototype


@pytest.mark.parametrize(
    "original",
    [ConcretePrototype1(1, 2, 3), ConcretePrototype2(4, 5), ConcretePrototype1(), ConcretePrototype2()],
)
def test_clone_is_equal_but_distinct(original):
    copy = original.clone()
    assert copy == original
    assert copy is not original
    assert type(copy) is type(original)
    assert copy.describe() == original.describe()


def test_clone_is_independent():
    original = ConcretePrototype1(1, 2, 3)
    copy = original.clone()
    copy.data1 = 42
    assert original.data1 == 1
    assert copy.data2 == original.data2


def test_describe_prototype1():
    assert ConcretePrototype1(1, 2, 3).describe() == "ConcretePrototype1: 1, 2, 3. "


def test_describe_prototype2():
    assert ConcretePrototype2(4, 5).describe() == "ConcretePrototype2: 4, 5. "


def test_defaults_are_zero():
    p1 = ConcretePrototype1()
    p2 = ConcretePrototype2()
    assert (p1.data1, p1.data2, p1.data3) == (0, 0, 0)
    assert (p2.data4, p2.data5) == (0, 0)


def test_describe_starts_with_class_label():
    assert ConcretePrototype1(7, 8, 9).describe().startswith("ConcretePrototype1: ")
    assert ConcretePrototype2(7, 8).describe().startswith("ConcretePrototype2: ")


def test_prototype_is_abstract():
    with pytest.raises(TypeError):
        Prototype()