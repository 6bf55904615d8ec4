import pytest

from patternkit.strategy import (
    ConcreteStrategyA,
    ConcreteStrategyB,
    NoStrategyError,
    Strategy,
    StrategyContext,
)


def test_context_with_strategy_a():
    assert StrategyContext(ConcreteStrategyA()).do_context_logic() == "abcde"


def test_switching_strategy():
    context = StrategyContext(ConcreteStrategyA())
    context.strategy = ConcreteStrategyB()
    assert context.do_context_logic() == "edcba"


def test_strategies_are_reverses_of_each_other():
    data = ["hello", "world", "xy"]
    assert ConcreteStrategyB().do_algorithm(data) == ConcreteStrategyA().do_algorithm(data)[::-1]


def test_strategy_a_sorts_characters_not_items():
    result = ConcreteStrategyA().do_algorithm(["ba", "c"])
    assert result == "".join(sorted(result))
    assert sorted(result) == sorted("bac")


def test_empty_data():
    assert ConcreteStrategyA().do_algorithm([]) == ""
    assert ConcreteStrategyB().do_algorithm([]) == ""


def test_missing_strategy_raises():
    with pytest.raises(NoStrategyError):
        StrategyContext().do_context_logic()


def test_strategy_is_abstract():
    with pytest.raises(TypeError):
        Strategy()