# patternkit

A collection of small, self-contained implementations of twenty classic
design patterns, each in its own module, together with a command that runs
a short console demonstration of any one of them. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

## Running a demonstration

The `patternkit` command (also installed as `patternkit-demo`) takes the
number of the pattern to demonstrate:

```
patternkit 9
```

| Number | Pattern          | Module                         |
|-------:|------------------|--------------------------------|
| 1      | Factory method   | `patternkit.factory`           |
| 2      | Abstract factory | `patternkit.abstract_factory`  |
| 3      | Prototype        | `patternkit.prototype`         |
| 4      | Builder          | `patternkit.builder`           |
| 5      | Singleton        | `patternkit.singleton`         |
| 6      | Class adapter    | `patternkit.class_adapter`     |
| 7      | Object adapter   | `patternkit.object_adapter`    |
| 8      | Bridge           | `patternkit.bridge`            |
| 9      | Composite        | `patternkit.composite`         |
| 10     | Decorator        | `patternkit.decorator`         |
| 11     | Facade           | `patternkit.facade`            |
| 12     | Flyweight        | `patternkit.flyweight`         |
| 13     | Proxy            | `patternkit.proxy`             |
| 14     | Command          | `patternkit.command`           |
| 15     | Interpreter      | `patternkit.interpreter`       |
| 16     | Iterator         | `patternkit.iterator`          |
| 17     | Observer         | `patternkit.observer`          |
| 18     | State            | `patternkit.state`             |
| 19     | Template method  | `patternkit.template_method`   |
| 20     | Strategy         | `patternkit.strategy`          |

The command exits with status 1 and a usage message when it is not given
exactly one argument or the argument is not a whole number. A number
outside 1–20 runs nothing and exits with status 0.

Some demonstrations read from standard input:

- abstract factory, prototype and object adapter ask for `1` or `2`; any
  other answer (or end of input) ends the demonstration without output;
- proxy asks for hosts one after another, answering each through the proxy
  (`tiktok.com` is refused), until you enter `exit` or input ends.

## Using the modules

Every pattern can also be used directly from Python. The classes return
strings rather than printing, so their results can be inspected:

```python
from patternkit.factory import Creator
from patternkit.decorator import ConcreteComponentA, ConcreteComponentDecoratorA
from patternkit.interpreter import Plus, Minus, Number
from patternkit.strategy import StrategyContext, ConcreteStrategyA

product = Creator().create("ConcreteProduct1")
print(product.operation1())                       # CP1-operation1

decorated = ConcreteComponentDecoratorA(ConcreteComponentA())
print(decorated.description(), decorated.numeric_state())   # ... 13

expression = Plus(Minus(Number(7), Number(2)), Number(6))
print(expression.render(), "=", expression.evaluate())      # ((7 - 2) + 6) = 11

print(StrategyContext(ConcreteStrategyA()).do_context_logic())  # abcde
```

A few notes on behaviour:

- `Creator.create` raises `UnknownProductError` (a `KeyError`) for a name
  that is not registered; `Creator.register` adds or replaces a constructor.
- `Composite.add` raises `CompositeCycleError` when the component being added
  already contains the composite; `Leaf.add` and `Leaf.remove` do nothing.
- `Singleton()` raises `TypeError`; use `Singleton.get_instance()`. Copying
  or pickling the instance yields the same instance.
- `Variable.evaluate` raises `UnassignedVariableError` until `assign` is called.
- `StrategyContext.do_context_logic` raises `NoStrategyError` when no
  strategy is set.
- `FlyweightFactory.get_flyweight` returns the same object for the same key;
  `len()` of a factory is the number of flyweights it has created.

Each demonstration is also available as a function in `patternkit.demos`,
for example `run_composite()` or `run_flyweight()`; `patternkit.demos.main`
takes an optional list of arguments.

## Tests

```
pip install ".[test]"
pytest
```