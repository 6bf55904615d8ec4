"""Console demonstrations of every pattern, selectable by number."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from patternkit.abstract_factory import AbstractFactory, ConcreteFactory1, ConcreteFactory2
from patternkit.bridge import (
    ConcreteImplementor1,
    ConcreteImplementor2,
    RefinedAbstraction1,
    RefinedAbstraction2,
)
from patternkit.builder import ComplexBuilder, ConcreteBuilder, Director, Director2
from patternkit.class_adapter import Adapter
from patternkit.command import Invoker, Receiver
from patternkit.composite import Component, Composite, CompositeCycleError, Leaf
from patternkit.decorator import (
    ConcreteComponentA,
    ConcreteComponentB,
    ConcreteComponentDecoratorA,
    ConcreteComponentDecoratorB,
    ConcreteComponentDecoratorC,
)
from patternkit.facade import Facade, Subsystem1, Subsystem2
from patternkit.factory import Creator, UnknownProductError
from patternkit.flyweight import Flyweight, FW1Factory, FW2Factory
from patternkit.interpreter import Minus, Number, Plus
from patternkit.iterator import Container, Data
from patternkit.object_adapter import ConcreteAdaptee1, ConcreteAdaptee2, ObjAdapter
from patternkit.observer import ConcreteObserver, ConcreteSubject
from patternkit.prototype import ConcretePrototype1, ConcretePrototype2, Prototype
from patternkit.proxy import Proxy
from patternkit.singleton import Singleton
from patternkit.state import Context, Driver, Pilot, Walker
from patternkit.strategy import ConcreteStrategyA, ConcreteStrategyB, StrategyContext
from patternkit.template_method import ConcreteClass1, ConcreteClass2, client_code


def _read_choice(prompt: str) -> str:
    """Read one non-blank character from the user, or '' when there is none."""
    try:
        answer = input(prompt)
    except EOFError:
        return ""
    return answer.strip()[:1]


def run_factory() -> None:
    factory = Creator()
    for key, operation in (
        ("ConcreteProduct1", "operation1"),
        ("ConcreteProduct2", "operation2"),
        ("ConcreteProduct5", "operation1"),
    ):
        try:
            product = factory.create(key)
        except UnknownProductError:
            print("not in the map")
        else:
            print(getattr(product, operation)())


def run_abstract_factory() -> None:
    factories: dict[str, Callable[[], AbstractFactory]] = {
        "1": ConcreteFactory1,
        "2": ConcreteFactory2,
    }
    choice = _read_choice("Enter type (1 or 2): ")
    if choice not in factories:
        return
    factory = factories[choice]()
    print(f"A type: {factory.create_product_a().useful_function_a()}")
    print(f"B type: {factory.create_product_b().useful_function_b()}")


def run_prototype() -> None:
    prototypes: dict[str, Callable[[], Prototype]] = {
        "1": lambda: ConcretePrototype1(1, 2, 3),
        "2": lambda: ConcretePrototype2(4, 5),
    }
    choice = _read_choice("Enter concrete prototype ('1' or '2'): ")
    if choice not in prototypes:
        return
    prototype = prototypes[choice]()
    copy = prototype.clone()
    print(f"prototype address: {id(prototype):#x}, {prototype.describe()}")
    print(f"copy address:      {id(copy):#x}, {copy.describe()}")


def run_builder() -> None:
    print(Director(ComplexBuilder()).construct().describe())

    builder = ConcreteBuilder()
    Director2().construct(builder)
    print(builder.get_product().describe())


def run_singleton() -> None:
    first = Singleton.get_instance()
    second = Singleton.get_instance()
    print(f"spt1 points to {id(first):#x}")
    print(f"stp2 points to {id(second):#x}")


def run_class_adapter() -> None:
    print(Adapter().request())


def run_object_adapter() -> None:
    adaptees = {"1": ConcreteAdaptee1, "2": ConcreteAdaptee2}
    print("Choose adaptee (1 or 2)")
    choice = _read_choice("")
    if choice not in adaptees:
        return
    print(ObjAdapter(adaptees[choice]()).request())


def run_bridge() -> None:
    for abstraction, implementor in (
        (RefinedAbstraction1, ConcreteImplementor1),
        (RefinedAbstraction2, ConcreteImplementor1),
        (RefinedAbstraction1, ConcreteImplementor2),
        (RefinedAbstraction2, ConcreteImplementor2),
    ):
        print(abstraction(implementor()).operation())


def _show_tree(root: Component) -> None:
    for line in root.operation():
        print(line)
    print()


def run_composite() -> None:
    root = Composite("Root")
    l1 = Leaf("L1")
    l2 = Leaf("L2")
    subtree = Composite("Sub-tree")
    l3 = Leaf("L3")
    l4 = Leaf("L4")

    root.add(l1)
    root.add(l2)
    root.add(subtree)
    subtree.add(l3)
    subtree.add(l4)

    print("The whole tree: ")
    _show_tree(root)

    print("try to remove L3 from Root: ")
    root.remove(l3)
    _show_tree(root)

    print("Remove L2 from Root: ")
    root.remove(l2)
    _show_tree(root)

    print("Return L2 to Root: ")
    root.add(l2)
    _show_tree(root)

    print("Try to add Root to Subtree: ")
    try:
        subtree.add(root)
    except CompositeCycleError as error:
        print(error)
    _show_tree(root)

    print("Remove Subtree (L3, L4) from the Root: ")
    root.remove(subtree)
    _show_tree(root)

    print("Try to add Root to L1: ")
    l1.add(root)
    _show_tree(root)


def run_decorator() -> None:
    first = ConcreteComponentDecoratorC(ConcreteComponentDecoratorA(ConcreteComponentA()))
    print(f"Abstract Component 1: {first.description()} = {first.numeric_state()}")
    second = ConcreteComponentDecoratorB(ConcreteComponentB())
    print(f"Abstract Component 2: {second.description()} = {second.numeric_state()}")


def run_facade() -> None:
    facade = Facade(Subsystem1(), Subsystem2())
    print(facade.start(), end="")
    print("First operation is done.")
    print(facade.work(), end="")
    print("Second operation is done.")


def _show_map(matrix: list[list[Flyweight | None]]) -> None:
    for row, cells in enumerate(matrix):
        for col, unit in enumerate(cells):
            if unit is not None:
                print(unit.describe(row, col))


def run_flyweight() -> None:
    matrix: list[list[Flyweight | None]] = [[None] * 4 for _ in range(4)]

    soldiers = FW1Factory()
    tanks = FW2Factory()
    matrix[1][1] = tanks.get_flyweight(100)
    matrix[2][2] = tanks.get_flyweight(100)
    matrix[0][1] = soldiers.get_flyweight(50)
    matrix[1][3] = soldiers.get_flyweight(50)
    matrix[3][0] = soldiers.get_flyweight(50)

    _show_map(matrix)
    print()

    hit = tanks.get_flyweight(7)
    matrix[1][1] = hit
    print("fw2 (a tank) was hit!")
    print(hit.describe(1, 1))
    print()

    _show_map(matrix)


def run_proxy() -> None:
    web = Proxy()
    while True:
        print("Enter a URL:\n(hint: tiktok.com was access modified by proxy)")
        try:
            host = input().strip()
        except EOFError:
            return
        print(web.request(host))
        print()
        if host == "exit":
            return


def run_command() -> None:
    receiver = Receiver(Invoker("Moshe"))
    print(receiver.execute_command1())
    print(receiver.execute_command2())


def run_interpreter() -> None:
    expression = Plus(Minus(Number(7), Number(2)), Number(6))
    print(f"{expression.render()} = {format(float(expression.evaluate()), 'g')}")


def run_iterator() -> None:
    print("Int test")
    numbers: Container[int] = Container()
    for value in range(1, 15, 2):
        numbers.add(value)
    for value in numbers.create_iterator():
        print(value)

    print("Data test (Data is a custom class/type)")
    records: Container[Data] = Container()
    for value in (100, 200, 300):
        records.add(Data(value))
    for record in records.create_iterator():
        print(record.data)


def run_observer() -> None:
    print("Create ConcreteSubject.")
    subject = ConcreteSubject()

    print('Set ConcreteSubject\'s state to "State 1".')
    subject.state = "State 1"
    for message in subject.last_notifications:
        print(message)

    print("Create a ConcreteObserver which observe (listen to) ConcreteSubject.")
    ConcreteObserver(subject)

    print('Change ConcreteSubject\'s state to "State 2".')
    subject.state = "State 2"
    for message in subject.last_notifications:
        print(message)

    print("END")


def run_state() -> None:
    for state in (Walker(), Driver(), Pilot()):
        print(Context(state).result)


def run_template_method() -> None:
    print("Template Method + ConcreteClass1:")
    print(client_code(ConcreteClass1()))
    print("Template Method + ConcreteClass2:")
    print(client_code(ConcreteClass2()))


def run_strategy() -> None:
    context = StrategyContext(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    print(context.do_context_logic())
    print()

    context.strategy = ConcreteStrategyB()
    print("Client: Strategy is set to reverse sorting.")
    print(context.do_context_logic())
    print()
    print("DONE")


DEMOS: dict[int, Callable[[], None]] = {
    1: run_factory,
    2: run_abstract_factory,
    3: run_prototype,
    4: run_builder,
    5: run_singleton,
    6: run_class_adapter,
    7: run_object_adapter,
    8: run_bridge,
    9: run_composite,
    10: run_decorator,
    11: run_facade,
    12: run_flyweight,
    13: run_proxy,
    14: run_command,
    15: run_interpreter,
    16: run_iterator,
    17: run_observer,
    18: run_state,
    19: run_template_method,
    20: run_strategy,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration whose number is the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: patternkit-demo NUMBER", file=sys.stderr)
        return 1
    try:
        number = int(args[0])
    except ValueError:
        print(f"not a demo number: {args[0]!r}", file=sys.stderr)
        return 1
    demo = DEMOS.get(number)
    if demo is not None:
        demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())