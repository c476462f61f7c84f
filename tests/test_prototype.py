import pytest

from patternkit.prototype import (
    ConcretePrototype,
    Prototype,
    SubclassPrototype,
    client_code,
    main,
)


@pytest.mark.parametrize("prototype", [ConcretePrototype(10), SubclassPrototype(20)])
def test_clone_is_equal_but_distinct(prototype):
    copy = prototype.clone()
    assert copy == prototype
    assert copy is not prototype
    assert type(copy) is type(prototype)


def test_clone_is_independent_of_original():
    original = ConcretePrototype(10)
    copy = original.clone()
    copy.field1 = 99
    assert original.field1 == 10


def test_client_code_returns_a_copy():
    original = SubclassPrototype(20)
    copy = client_code(original)
    assert copy == original
    assert copy is not original


def test_prototype_is_abstract():
    with pytest.raises(TypeError):
        Prototype()


def test_main_returns_zero(capsys):
    assert main() == 0
    assert capsys.readouterr().out == ""