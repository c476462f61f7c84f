import dataclasses

import pytest

from patternkit.memento import Caretaker, Memento, Originator, main


def test_memento_round_trip():
    originator = Originator()
    originator.state = "State1"
    memento = originator.create_memento()
    originator.state = "State2"
    originator.restore(memento)
    assert originator.state == "State1"


def test_memento_is_immutable():
    memento = Memento("State1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        memento.state = "State2"
    assert memento.state == "State1"


def test_restore_none_keeps_state():
    originator = Originator("State2")
    originator.restore(None)
    assert originator.state == "State2"


def test_caretaker_starts_empty_and_restoring_from_it_is_harmless():
    caretaker = Caretaker()
    originator = Originator("State1")
    originator.restore(caretaker.memento)
    assert caretaker.memento is None
    assert originator.state == "State1"


def test_caretaker_keeps_latest():
    caretaker = Caretaker()
    first = Memento("State1")
    second = Memento("State2")
    caretaker.save_memento(first)
    caretaker.save_memento(second)
    assert caretaker.memento is second


def test_memento_snapshot_independent_of_later_changes():
    originator = Originator("State1")
    memento = originator.create_memento()
    originator.state = "State2"
    assert memento.state == "State1"


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Originator State: State1",
        "Originator State: State2",
        "Restored Originator State: State1",
    ]