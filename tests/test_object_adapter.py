import pytest

from patternkit.object_adapter import (
    AbstractAdaptee,
    ConcreteAdaptee1,
    ConcreteAdaptee2,
    ObjAdapter,
    ObjTarget,
)


@pytest.mark.parametrize(
    "adaptee, expected",
    [
        (ConcreteAdaptee1(), "ConcreteAdaptee1 operation."),
        (ConcreteAdaptee2(), "ConcreteAdaptee2 operation."),
    ],
)
def test_adapter_forwards_request(adaptee, expected):
    adapter = ObjAdapter(adaptee)
    assert adapter.request() == expected
    assert adapter.adaptee is adaptee


def test_adapters_are_interchangeable_targets():
    targets = [ObjAdapter(ConcreteAdaptee1()), ObjAdapter(ConcreteAdaptee2())]
    assert [target.request() for target in targets] == [
        "ConcreteAdaptee1 operation.",
        "ConcreteAdaptee2 operation.",
    ]


@pytest.mark.parametrize("cls", [AbstractAdaptee, ObjTarget])
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()