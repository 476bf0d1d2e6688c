"""Errors raised while reading and interpreting formulas.

Each error carries one human-readable message,
available as `str(error)`.
"""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#


class LogicLabError(ValueError):
    """Base class of errors about formulas."""


class EmptyInputError(LogicLabError):
    """No expression given."""


class ParseError(LogicLabError):
    """Token sequence is not a formula."""


class FormulaSyntaxError(ParseError):
    """Malformed bracketing, operator, or operand."""


class EndOfInputError(ParseError):
    """Tokens ran out before the formula ended."""


class TrailingInputError(ParseError):
    """Tokens remain after a complete formula."""


class EvaluationError(LogicLabError):
    """Formula cannot be evaluated."""


class ArityError(EvaluationError):
    """Operator applied to the wrong number of operands."""


class UnboundLiteralError(EvaluationError):
    """Assignment lacks a literal of the formula."""

    def __init__(self, name):
        self.name = name
        super().__init__(
            f'The literal {name!r} has '
            'no truth value in the assignment.')


class LiteralLimitError(LogicLabError):
    """Too many literals for a naive decision tree."""


class NestingError(LogicLabError):
    """Formula nested deeper than the interpreter's recursion limit."""

    def __init__(self):
        super().__init__(
            'The formula is nested too deeply.')
