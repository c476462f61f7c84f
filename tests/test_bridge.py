import pytest

from patternkit.bridge import (
    Abstraction,
    ConcreteImplementorA,
    ConcreteImplementorB,
    Implementor,
    RefinedAbstraction,
    main,
)


def test_implementor_is_abstract():
    with pytest.raises(TypeError):
        Implementor()


def test_concrete_implementor_a_output(capsys):
    ConcreteImplementorA().operation_impl()
    assert capsys.readouterr().out == "ConcreteImplementorA OperationImpl executed.\n"


def test_concrete_implementor_b_output(capsys):
    ConcreteImplementorB().operation_impl()
    assert capsys.readouterr().out == "ConcreteImplementorB OperationImpl executed.\n"


def test_plain_abstraction_only_delegates(capsys):
    Abstraction(ConcreteImplementorB()).operation()
    assert capsys.readouterr().out == "ConcreteImplementorB OperationImpl executed.\n"


def test_refined_abstraction_announces_then_delegates(capsys):
    RefinedAbstraction(ConcreteImplementorA()).operation()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "RefinedAbstraction Operation executed.",
        "ConcreteImplementorA OperationImpl executed.",
    ]


def test_implementor_can_be_swapped(capsys):
    abstraction = RefinedAbstraction(ConcreteImplementorA())
    abstraction.implementor = ConcreteImplementorB()
    abstraction.operation()
    assert capsys.readouterr().out.splitlines()[-1] == (
        "ConcreteImplementorB OperationImpl executed."
    )


def test_main_runs_both(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "RefinedAbstraction Operation executed.",
        "ConcreteImplementorA OperationImpl executed.",
        "RefinedAbstraction Operation executed.",
        "ConcreteImplementorB OperationImpl executed.",
    ]