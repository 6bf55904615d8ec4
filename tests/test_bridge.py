import pytest

from patternkit.bridge import (
    AbstractImplementor,
    Abstraction,
    ConcreteImplementor1,
    ConcreteImplementor2,
    RefinedAbstraction1,
    RefinedAbstraction2,
)


def test_implementors():
    assert ConcreteImplementor1().implement() == "Concrete implementation 1 to "
    assert ConcreteImplementor2().implement() == "Concrete implementation 2 to "


@pytest.mark.parametrize("abstraction_cls, suffix", [
    (RefinedAbstraction1, "Abstraction 1."),
    (RefinedAbstraction2, "Abstraction 2."),
])
@pytest.mark.parametrize("implementor_cls", [ConcreteImplementor1, ConcreteImplementor2])
def test_every_combination(abstraction_cls, suffix, implementor_cls):
    implementor = implementor_cls()
    result = abstraction_cls(implementor).operation()
    assert result.startswith(implementor.implement())
    assert result.endswith(suffix)
    assert len(result) == len(implementor.implement()) + len(suffix)


def test_implementor_can_be_swapped():
    abstraction = RefinedAbstraction1(ConcreteImplementor1())
    first = abstraction.operation()
    abstraction.implementor = ConcreteImplementor2()
    second = abstraction.operation()
    assert first != second
    assert second.startswith("Concrete implementation 2 to ")


@pytest.mark.parametrize("cls", [AbstractImplementor])
def test_implementor_interface_is_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_abstraction_is_abstract():
    with pytest.raises(TypeError):
        Abstraction(ConcreteImplementor1())