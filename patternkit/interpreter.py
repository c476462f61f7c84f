"""Interpreter pattern: a tree of expressions interpreted against a context."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Context:
    """Information shared by every expression during interpretation."""


class AbstractExpression(ABC):
    """A node of the expression tree."""

    @abstractmethod
    def interpret(self, context: Context) -> None:
        """Interpret this expression in the given context."""


class TerminalExpression(AbstractExpression):
    """A leaf expression with no sub-expressions."""

    def interpret(self, context: Context) -> None:
        print("TerminalExpression: Interpreting context")


class NonterminalExpression(AbstractExpression):
    """An expression made of sub-expressions, interpreted in insertion order."""

    def __init__(self) -> None:
        self._expressions: list[AbstractExpression] = []

    def add_expression(self, expression: AbstractExpression) -> None:
        self._expressions.append(expression)

    def interpret(self, context: Context) -> None:
        print("NonterminalExpression: Interpreting context")
        for expression in self._expressions:
            expression.interpret(context)


def main(argv: list[str] | None = None) -> int:
    """Interpret a non-terminal expression holding one terminal expression."""
    context = Context()
    nonterminal = NonterminalExpression()
    nonterminal.add_expression(TerminalExpression())
    nonterminal.interpret(context)
    return 0