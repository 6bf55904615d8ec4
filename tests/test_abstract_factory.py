import pytest

from patternkit.abstract_factory import (
    AbstractFactory,
    AbstractProductA,
    AbstractProductB,
    ConcreteFactory1,
    ConcreteFactory2,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)


def test_factory1_builds_family_one():
    factory = ConcreteFactory1()
    a = factory.create_product_a()
    b = factory.create_product_b()
    assert isinstance(a, ConcreteProductA1)
    assert isinstance(b, ConcreteProductB1)
    assert a.useful_function_a() == "A1 "
    assert b.useful_function_b() == "B1 "


def test_factory2_builds_family_two():
    factory = ConcreteFactory2()
    a = factory.create_product_a()
    b = factory.create_product_b()
    assert isinstance(a, ConcreteProductA2)
    assert isinstance(b, ConcreteProductB2)
    assert a.useful_function_a() == "A2 "
    assert b.useful_function_b() == "B2 "


def test_families_differ():
    one, two = ConcreteFactory1(), ConcreteFactory2()
    assert one.create_product_a().useful_function_a() != two.create_product_a().useful_function_a()
    assert one.create_product_b().useful_function_b() != two.create_product_b().useful_function_b()


@pytest.mark.parametrize("cls", [AbstractFactory, AbstractProductA, AbstractProductB])
def test_abstract_types_cannot_be_instantiated(cls):
    with pytest.raises(TypeError):
        cls()