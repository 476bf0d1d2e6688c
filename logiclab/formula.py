"""Syntax trees of propositional formulas, and their evaluation.

A formula is a tree whose leaves are literals
and whose internal nodes are operators:

```
(A AND (B OR (NOT C)))
```

is the tree:

```
AND
 |-- A
 `-- OR
      |-- B
      `-- NOT
           `-- C
```
"""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import logging
import typing as _ty

import astutils.ast

import logiclab._abc as _labc
import logiclab.exceptions as _exc
import logiclab.graph as _graph


logger = logging.getLogger(__name__)
# operator keyword -> (min arity, max arity)
# `None` means unbounded
OPERATORS: _ty.Final = {
    'NOT': (1, 1),
    'AND': (2, None),
    'OR': (2, None),
    'IMP': (2, 2),
    'IFF': (2, 2)}
_ARITY_TEXT: _ty.Final = {
    'NOT': 'exactly one argument',
    'AND': 'at least two arguments',
    'OR': 'at least two arguments',
    'IMP': 'exactly two arguments',
    'IFF': 'exactly two arguments'}
BRACKETS: _ty.Final = ('(', ')')


def is_literal(
        token:
            _labc.Token |
            None
        ) -> _labc.Yes:
    """Return `True` if `token` can name a literal.

    Operator keywords, brackets, and
    `None` (end of input) are not literals.
    """
    return not (
        token is None or
        token in OPERATORS or
        token in BRACKETS)


class Literal(astutils.ast.Terminal):
    """Leaf of a formula, a propositional variable."""

    def __init__(
            self,
            name:
                _labc.LiteralName
            ) -> None:
        super().__init__(name, 'var')

    def __repr__(
            self
            ) -> str:
        return f'{type(self).__name__}({self.value!r})'

    @property
    def operands(
            self
            ) -> list:
        return list()


class Operator(astutils.ast.Operator):
    """Operator applied to subformulas."""

    def __eq__(
            self,
            other
            ) -> bool:
        return (
            getattr(other, 'type', None) == 'operator' and
            self.operator == other.operator and
            self.operands == other.operands)

    def __str__(
            self
            ) -> str:
        """Return fully parenthesized formula."""
        if len(self.operands) == 1:
            operand, = self.operands
            return f'({self.operator} {operand})'
        infix = f' {self.operator} '.join(
            map(str, self.operands))
        return f'({infix})'


FormulaNode: _ty.TypeAlias = (
    Literal |
    Operator)


def to_expr(
        tree:
            FormulaNode
        ) -> str:
    """Return text that parses to `tree`."""
    return str(tree)


def evaluate(
        tree:
            FormulaNode,
        values:
            _abc.Mapping[_labc.LiteralName, bool]
        ) -> _labc.Yes:
    """Return truth value of `tree` under `values`.

    Operands are evaluated from left to right,
    before the operator is applied.

    @param values:
        assignment of truth values to literals
    @raise UnboundLiteralError:
        if a literal of `tree` is missing
        from `values`
    @raise ArityError:
        if an operator has the wrong
        number of operands
    @raise NestingError:
        if `tree` is deeper than
        the recursion limit
    """
    try:
        return _evaluate(tree, values)
    except RecursionError as error:
        raise _exc.NestingError() from error


def _evaluate(tree, values):
    """Recurse to evaluate `tree`."""
    match tree.type:
        case 'var':
            if tree.value not in values:
                raise _exc.UnboundLiteralError(tree.value)
            return bool(values[tree.value])
        case 'operator':
            operands = [
                _evaluate(x, values)
                for x in tree.operands]
            return _apply(tree.operator, operands)
    raise ValueError(
        f'unknown node type: {tree.type!r}')


def _apply(
        operator:
            _labc.OperatorName,
        operands:
            list[bool]
        ) -> _labc.Yes:
    """Return result of applying `operator`."""
    _assert_arity(operator, len(operands))
    match operator:
        case 'NOT':
            x, = operands
            return not x
        case 'AND':
            return all(operands)
        case 'OR':
            return any(operands)
        case 'IMP':
            x, y = operands
            return (not x) or y
        case 'IFF':
            x, y = operands
            return x == y
    raise AssertionError(operator)


def _assert_arity(
        operator:
            str,
        n:
            int
        ) -> None:
    """Raise `ArityError` if `operator` cannot take `n` operands."""
    if operator not in OPERATORS:
        raise _exc.EvaluationError(
            f'{operator!r} is not a valid operator.')
    least, most = OPERATORS[operator]
    if n >= least and (most is None or n <= most):
        return
    raise _exc.ArityError(
        f'Incorrect number of arguments to {operator}. '
        f'{operator} takes {_ARITY_TEXT[operator]}.')


def literals(
        tree:
            FormulaNode
        ) -> list[_labc.LiteralName]:
    """Return names of literals in `tree`.

    Each name appears once, in the order
    of its first occurrence from left to right.
    """
    names = dict()
    stack = [tree]
    while stack:
        u = stack.pop()
        if u.type == 'var':
            names.setdefault(u.value, None)
            continue
        stack.extend(reversed(u.operands))
    return list(names)


def to_graph(
        tree:
            FormulaNode
        ) -> _graph.GraphDescription:
    """Return graph description of `tree`.

    Ids are assigned in post-order, children
    from left to right. Each occurrence of
    a literal is a separate node.
    """
    graph = _graph.GraphDescription()
    try:
        _add_to_graph(tree, graph)
    except RecursionError as error:
        raise _exc.NestingError() from error
    logger.debug(
        f'formula graph with {len(graph)} nodes')
    return graph


def _add_to_graph(
        tree:
            FormulaNode,
        graph:
            _graph.GraphDescription
        ) -> _labc.NodeId:
    """Add `tree` to `graph`, and return id of its root."""
    if tree.type == 'var':
        return graph.add_node(tree.value)
    successors = [
        _add_to_graph(x, graph)
        for x in tree.operands]
    u = graph.add_node(tree.operator)
    for v in successors:
        graph.add_edge(u, v)
    return u
