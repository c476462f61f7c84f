import pytest

from patternkit.decorator import (
    Component,
    ConcreteComponent,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
    Decorator,
    main,
)


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()


def test_concrete_component(capsys):
    ConcreteComponent().operation()
    assert capsys.readouterr().out == "ConcreteComponent Operation\n"


def test_plain_decorator_forwards(capsys):
    Decorator(ConcreteComponent()).operation()
    assert capsys.readouterr().out == "ConcreteComponent Operation\n"


def test_decorator_without_component_does_nothing(capsys):
    Decorator(None).operation()
    assert capsys.readouterr().out == ""


def test_decorator_a_adds_state(capsys):
    decorator = ConcreteDecoratorA(ConcreteComponent())
    decorator.operation()
    assert decorator.added_state == "Added State A"
    assert capsys.readouterr().out.splitlines() == [
        "ConcreteComponent Operation",
        "ConcreteDecoratorA Operation with Added State A",
    ]


def test_decorator_b_added_behavior(capsys):
    ConcreteDecoratorB(None).added_behavior()
    assert capsys.readouterr().out == "ConcreteDecoratorB Added Behavior\n"


def test_decorators_stack_in_order(capsys):
    ConcreteDecoratorA(ConcreteDecoratorB(ConcreteComponent())).operation()
    assert capsys.readouterr().out.splitlines() == [
        "ConcreteComponent Operation",
        "ConcreteDecoratorB Added Behavior",
        "ConcreteDecoratorA Operation with Added State A",
    ]


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "ConcreteComponent Operation",
        "ConcreteDecoratorA Operation with Added State A",
        "ConcreteDecoratorB Added Behavior",
    ]