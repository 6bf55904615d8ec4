import pytest

from patternkit.decorator import (
    AbstractComponent,
    ConcreteComponentA,
    ConcreteComponentB,
    ConcreteComponentDecoratorA,
    ConcreteComponentDecoratorB,
    ConcreteComponentDecoratorC,
)


def test_base_components():
    assert ConcreteComponentA().numeric_state() == 10
    assert ConcreteComponentA().description() == "ConcreteComponentA "
    assert ConcreteComponentB().numeric_state() == 5
    assert ConcreteComponentB().description() == "ConcreteComponentB "


@pytest.mark.parametrize(
    "decorator_cls, increment, suffix",
    [
        (ConcreteComponentDecoratorA, 3, "+ DecoratorA added behaviour "),
        (ConcreteComponentDecoratorB, 2, "+ DecoratorB added behaviour "),
        (ConcreteComponentDecoratorC, 1, "+ DecoratorC added behaviour "),
    ],
)
@pytest.mark.parametrize("base_cls", [ConcreteComponentA, ConcreteComponentB])
def test_single_decorator(decorator_cls, increment, suffix, base_cls):
    base = base_cls()
    decorated = decorator_cls(base)
    assert decorated.numeric_state() - base.numeric_state() == increment
    assert decorated.description() == base.description() + suffix


def test_stacked_decorators():
    base = ConcreteComponentA()
    inner = ConcreteComponentDecoratorA(base)
    outer = ConcreteComponentDecoratorC(inner)
    assert outer.numeric_state() == inner.numeric_state() + 1
    assert inner.numeric_state() == base.numeric_state() + 3
    assert outer.description().startswith("ConcreteComponentA + DecoratorA added behaviour ")
    assert outer.description().endswith("+ DecoratorC added behaviour ")


def test_same_decorator_twice():
    base = ConcreteComponentB()
    twice = ConcreteComponentDecoratorB(ConcreteComponentDecoratorB(base))
    assert twice.numeric_state() == base.numeric_state() + 4
    assert twice.description().count("DecoratorB") == 2


def test_abstract_component_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractComponent()