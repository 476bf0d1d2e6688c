"""From text to graph descriptions.

```python
import logiclab.lab as _lab

graph = _lab.bdd_graph('(A AND (B OR (NOT C)))')
```

Errors are instances of `LogicLabError`,
whose message can be shown in place of a graph.
"""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#
import logging

import logiclab._abc as _labc
import logiclab._parser as _parser
import logiclab.bdd as _bdd
import logiclab.exceptions as _exc
import logiclab.formula as _formula
import logiclab.graph as _graph


logger = logging.getLogger(__name__)


def read_expr(
        text:
            str
        ) -> _formula.FormulaNode:
    """Return syntax tree of `text`.

    @raise EmptyInputError:
        if `text` has no tokens
    @raise ParseError:
        if `text` is not a formula
    @raise NestingError:
        if `text` nests brackets beyond
        the recursion limit
    """
    tokens = _parser.tokenize(text)
    if not tokens:
        raise _exc.EmptyInputError(
            'No boolean expression provided.')
    return _parser.parse(tokens)


def formula_graph(
        text:
            str
        ) -> _graph.GraphDescription:
    """Return graph description of the syntax tree of `text`."""
    tree = read_expr(text)
    return _formula.to_graph(tree)


def bdd_graph(
        text:
            str,
        reduced:
            _labc.Yes=True,
        order:
            _labc.LiteralOrder |
            None=None,
        **kw
        ) -> _graph.GraphDescription:
    """Return graph description of the decision diagram of `text`.

    @param reduced:
        if `False`, then describe
        the naive decision tree
    @param order:
        literals to test, by default
        in order of first occurrence
    @param kw:
        passed to `logiclab.bdd.build()`
    """
    tree = read_expr(text)
    root = _bdd.build(tree, order, **kw)
    if reduced:
        graph = _bdd.reduce(root).to_graph()
    else:
        graph = _bdd.to_graph(root)
    logger.debug(
        f'{len(graph)} nodes in diagram of {text!r}')
    return graph
