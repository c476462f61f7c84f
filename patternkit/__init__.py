"""Runnable examples of the classic object-oriented design patterns."""

__version__ = "0.1.0"

__all__ = [
    "adapter",
    "bridge",
    "builder",
    "chain",
    "command",
    "composite",
    "decorator",
    "facade",
    "factory",
    "flyweight",
    "interpreter",
    "iterator",
    "mediator",
    "memento",
    "messenger",
    "observer",
    "prototype",
    "proxy",
    "singleton",
    "state",
    "strategy",
    "visitor",
]