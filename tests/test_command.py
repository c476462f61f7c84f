import pytest

from patternkit.command import Command, ConcreteCommand, Invoker, Receiver, main


class RecordingReceiver(Receiver):
    def __init__(self):
        self.calls = 0

    def action(self):
        self.calls += 1


class RecordingCommand(Command):
    def __init__(self, log, name):
        self.log = log
        self.name = name

    def execute(self):
        self.log.append(self.name)


def test_receiver_action_prints(capsys):
    Receiver().action()
    assert capsys.readouterr().out == "Receiver: Performing an action.\n"


def test_concrete_command_calls_receiver():
    receiver = RecordingReceiver()
    command = ConcreteCommand(receiver)
    command.execute()
    command.execute()
    assert receiver.calls == 2


def test_invoker_runs_commands_in_order():
    log = []
    invoker = Invoker()
    for name in ["first", "second", "third"]:
        invoker.add_command(RecordingCommand(log, name))
    invoker.invoke()
    assert log == ["first", "second", "third"]


def test_invoker_can_invoke_repeatedly():
    log = []
    invoker = Invoker()
    invoker.add_command(RecordingCommand(log, "x"))
    invoker.invoke()
    invoker.invoke()
    assert log == ["x", "x"]


def test_empty_invoker_does_nothing(capsys):
    Invoker().invoke()
    assert capsys.readouterr().out == ""


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "Receiver: Performing an action.\n"