import pytest

from patternkit.visitor import (
    ConcreteElementA,
    ConcreteElementB,
    ConcreteVisitor1,
    ConcreteVisitor2,
    Element,
    ObjectStructure,
    Visitor,
    main,
)


class RecordingVisitor(Visitor):
    def __init__(self):
        self.seen = []

    def visit_element_a(self, element):
        self.seen.append(("a", element))

    def visit_element_b(self, element):
        self.seen.append(("b", element))


def test_elements_dispatch_to_matching_method():
    a = ConcreteElementA()
    b = ConcreteElementB()
    visitor = RecordingVisitor()
    b.accept(visitor)
    a.accept(visitor)
    assert visitor.seen == [("b", b), ("a", a)]


def test_structure_visits_in_insertion_order():
    a1, b, a2 = ConcreteElementA(), ConcreteElementB(), ConcreteElementA()
    structure = ObjectStructure()
    for element in (a1, b, a2):
        structure.add_element(element)
    visitor = RecordingVisitor()
    structure.accept(visitor)
    assert [element for _, element in visitor.seen] == [a1, b, a2]
    assert [kind for kind, _ in visitor.seen] == ["a", "b", "a"]


def test_concrete_visitor1_output(capsys):
    visitor = ConcreteVisitor1()
    ConcreteElementA().accept(visitor)
    ConcreteElementB().accept(visitor)
    assert capsys.readouterr().out.splitlines() == [
        "ConcreteVisitor1: Visiting ConcreteElementA",
        "ConcreteVisitor1: Visiting ConcreteElementB",
    ]


def test_empty_structure_visits_nothing():
    visitor = RecordingVisitor()
    ObjectStructure().accept(visitor)
    assert visitor.seen == []


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Visitor()
    with pytest.raises(TypeError):
        Element()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "ConcreteVisitor1: Visiting ConcreteElementA",
        "ConcreteVisitor1: Visiting ConcreteElementB",
        "ConcreteVisitor2: Visiting ConcreteElementA",
        "ConcreteVisitor2: Visiting ConcreteElementB",
    ]


def test_visitor2_distinct_from_visitor1(capsys):
    ConcreteElementB().accept(ConcreteVisitor2())
    assert capsys.readouterr().out == "ConcreteVisitor2: Visiting ConcreteElementB\n"