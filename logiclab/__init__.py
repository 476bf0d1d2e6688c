"""Propositional formulas, their evaluation, and decision diagrams."""
from logiclab._parser import parse, parse_expr, tokenize
from logiclab.bdd import Assignments, Reduced, build, reduce
from logiclab.exceptions import (
    ArityError,
    EmptyInputError,
    EndOfInputError,
    EvaluationError,
    FormulaSyntaxError,
    LiteralLimitError,
    LogicLabError,
    NestingError,
    ParseError,
    TrailingInputError,
    UnboundLiteralError)
from logiclab.formula import evaluate, literals
from logiclab.graph import GraphDescription, to_nx
from logiclab.lab import bdd_graph, formula_graph, read_expr
try:
    from ._version import version as __version__
except ImportError:
    __version__ = None
