"""Decision diagrams of formulas, built naively and then reduced.

The naive diagram of a formula over `n` literals is
the complete decision tree of depth `n`: it tests
the literals in a fixed order, and has one leaf
for each of the `2**n` assignments. Only the two
terminal nodes are shared.

Reduction merges structurally equal subtrees,
from the leaves upwards, into a shared graph.


References
==========

Randal E. Bryant
    "Graph-based algorithms for Boolean function manipulation"
    IEEE Transactions on Computers
    Volume C-35, No. 8, August, 1986, pages 677--690

Henrik R. Andersen
    "An introduction to binary decision diagrams"
    Lecture notes for "Efficient Algorithms and Programs", 1999
    The IT University of Copenhagen
"""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import logging
import operator as _op
import typing as _ty

import logiclab._abc as _labc
import logiclab.exceptions as _exc
import logiclab.formula as _formula
import logiclab.graph as _graph


logger = logging.getLogger(__name__)
# The naive tree has `2**(n + 1) - 1` nodes
# for `n` literals.
MAX_LITERALS: _ty.Final = 20
WARN_LITERALS: _ty.Final = 12
TERMINAL_COLORS: _ty.Final = {
    False: 'red',
    True: 'green'}


class Assignments(_abc.Sequence):
    """All total assignments to literals in `order`.

    Assignment `i` maps the literal at position `k`
    to bit `n - 1 - k` of `i`, where `n = len(order)`.
    So the first literal varies slowest, and
    the last literal fastest:

    ```
    >>> list(Assignments(['A', 'B']))
    [{'A': False, 'B': False},
     {'A': False, 'B': True},
     {'A': True, 'B': False},
     {'A': True, 'B': True}]
    ```

    Assignments are computed when indexed,
    so iterating again restarts from index 0.
    """

    def __init__(self, order):
        order = list(order)
        if len(set(order)) != len(order):
            raise ValueError(
                f'duplicate literal names in: {order}')
        self.order = order

    def __len__(self):
        return 2**len(self.order)

    def __getitem__(self, i):
        if isinstance(i, slice):
            return [
                self[j]
                for j in range(*i.indices(len(self)))]
        i = _op.index(i)
        if i < 0:
            i += len(self)
        if not 0 <= i < len(self):
            raise IndexError(i)
        n = len(self.order)
        return {
            var: bool((i >> (n - 1 - k)) & 1)
            for k, var in enumerate(self.order)}

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __repr__(self):
        return f'{type(self).__name__}({self.order!r})'


def truth_table(
        tree:
            _formula.FormulaNode,
        order:
            _labc.LiteralOrder |
            None=None
        ) -> list[tuple[_labc.Assignment, bool]]:
    """Return pairs of assignment and value of `tree`.

    @param order:
        literals to assign, by default
        those of `tree` by first occurrence
    """
    if order is None:
        order = _formula.literals(tree)
    return [
        (values, _formula.evaluate(tree, values))
        for values in Assignments(order)]


class Terminal:
    """Leaf with a truth value."""

    var = None
    low = None
    high = None

    def __init__(self, value):
        self.value = bool(value)

    def __len__(self):
        return 1

    def __repr__(self):
        return f'{type(self).__name__}({self.value})'


class Node:
    """Test of literal `var`.

    Attributes:
      - `var`: literal name
      - `low`: successor if `var` is false
      - `high`: successor if `var` is true
    """

    value = None

    def __init__(self, var, low, high):
        self.var = var
        self.low = low
        self.high = high

    def __len__(self):
        """Return number of nodes on all paths."""
        return 1 + len(self.low) + len(self.high)

    def __repr__(self):
        return (
            f'{type(self).__name__}('
            f'{self.var!r}, {self.low!r}, {self.high!r})')


def build(
        tree:
            _formula.FormulaNode,
        order:
            _labc.LiteralOrder |
            None=None,
        max_literals:
            int=MAX_LITERALS,
        warn_literals:
            int=WARN_LITERALS
        ) -> Node | Terminal:
    """Return naive decision tree of `tree`.

    Node at depth `d` tests literal `order[d]`.
    Leaves are the two shared terminals.

    @param order:
        literals to test, by default
        those of `tree` by first occurrence
    @param max_literals:
        raise `LiteralLimitError` if `order`
        is longer than this
    @param warn_literals:
        log a warning if `order`
        is longer than this
    """
    if order is None:
        order = _formula.literals(tree)
    order = list(order)
    n = len(order)
    n_nodes = 2**(n + 1) - 1
    if n > max_literals:
        raise _exc.LiteralLimitError(
            f'The formula has {n} literals, which is more than '
            f'the limit of {max_literals}. Its decision tree '
            f'would have {n_nodes} nodes.')
    if n > warn_literals:
        logger.warning(
            f'building a decision tree with {n} literals '
            f'({n_nodes} nodes)')
    models = iter(Assignments(order))
    terminals = (Terminal(False), Terminal(True))
    root = _build(tree, order, 0, models, terminals)
    if next(models, None) is not None:
        raise AssertionError(
            'unused assignments after building')
    logger.info(
        f'naive decision tree: {n} literals, {n_nodes} nodes')
    return root


def _build(tree, order, depth, models, terminals):
    """Recurse to build the subtree at `depth`.

    The low subtree consumes the assignments
    that map `order[depth]` to `False`, then
    the high subtree those that map it to `True`.
    """
    if depth == len(order):
        values = next(models)
        value = _formula.evaluate(tree, values)
        return terminals[value]
    low = _build(tree, order, depth + 1, models, terminals)
    high = _build(tree, order, depth + 1, models, terminals)
    return Node(order[depth], low, high)


def reduce(root, eliminate=False):
    """Return `Reduced` diagram of `root`.

    Visits nodes in post-order (low, high, node).
    Terminals are keyed by value, other nodes by
    the identities of their reduced successors.
    The first node with a key defines the identity,
    later nodes with the same key reuse it.

    The key omits the literal, so nodes that test
    different literals and have the same reduced
    successors are merged.

    @param root:
        `Node` or `Terminal`, possibly
        sharing subgraphs
    @param eliminate:
        if `True`, then a node whose
        reduced successors coincide
        is replaced by that successor
    @rtype:
        `Reduced`
    """
    reduced = Reduced()
    umap = dict()
    table = dict()
    reduced.root = _reduce(root, umap, table, reduced, eliminate)
    logger.debug(
        f'reduced {len(umap)} distinct nodes '
        f'to {len(reduced)} nodes')
    return reduced


def _reduce(u, umap, table, reduced, eliminate):
    """Recurse to return identity of `u`."""
    # visited ?
    r = umap.get(id(u))
    if r is not None:
        return r
    # terminal ?
    if u.var is None:
        key = u.value
        r = table.get(key)
        if r is None:
            r = reduced._add_terminal(u.value)
            table[key] = r
        umap[id(u)] = r
        return r
    # non-terminal
    p = _reduce(u.low, umap, table, reduced, eliminate)
    q = _reduce(u.high, umap, table, reduced, eliminate)
    if eliminate and p == q:
        umap[id(u)] = p
        return p
    key = (p, q)
    r = table.get(key)
    if r is None:
        r = reduced._add_node(u.var, p, q)
        table[key] = r
    umap[id(u)] = r
    return r


class Reduced:
    """Reduced diagram, as an index of node identities.

    Identities are consecutive integers from 0,
    in the order that reduction first meets them,
    so successors precede their predecessors.

    Attributes:
      - `root`: identity of the root node
    """

    def __init__(self):
        # node -> (var, low, high)
        # nat -> tuple(str, nat, nat)
        # for terminals: (None, None, None)
        self._succ = dict()
        # terminal -> truth value
        # nat -> bool
        self._value = dict()
        self.root = None

    def __len__(self):
        return len(self._succ)

    def __contains__(self, u):
        return u in self._succ

    def __iter__(self):
        return iter(self._succ)

    def __eq__(self, other):
        if not isinstance(other, Reduced):
            return NotImplemented
        return (
            self.root == other.root and
            self._succ == other._succ and
            self._value == other._value)

    def __str__(self):
        return (
            'Reduced decision diagram:\n'
            '-------------------------\n'
            f'root: {self.root}\n'
            f'nodes: {self._succ}\n'
            f'terminals: {self._value}\n')

    def _add_terminal(self, value):
        u = len(self._succ)
        self._succ[u] = (None, None, None)
        self._value[u] = value
        return u

    def _add_node(self, var, low, high):
        if low not in self._succ:
            raise AssertionError(low)
        if high not in self._succ:
            raise AssertionError(high)
        u = len(self._succ)
        self._succ[u] = (var, low, high)
        return u

    def succ(self, u):
        """Return `(var, low, high)` for node `u`."""
        return self._succ[u]

    def value(self, u):
        """Return truth value of terminal `u`."""
        if u not in self._value:
            raise ValueError(
                f'{u} is not a terminal node')
        return self._value[u]

    def is_terminal(self, u):
        return u in self._value

    @property
    def false(self):
        """Identity of the `False` terminal, or `None`."""
        return self._terminal(False)

    @property
    def true(self):
        """Identity of the `True` terminal, or `None`."""
        return self._terminal(True)

    def _terminal(self, value):
        for u, v in self._value.items():
            if v == value:
                return u
        return None

    def to_node(self):
        """Return root of the shared graph of `Node`s."""
        nodes = dict()
        for u, (var, low, high) in self._succ.items():
            if u in self._value:
                nodes[u] = Terminal(self._value[u])
            else:
                nodes[u] = Node(var, nodes[low], nodes[high])
        return nodes[self.root]

    def evaluate(self, values):
        """Return truth value reached by following `values`.

        @param values:
            assignment of truth values to literals
        """
        u = self.root
        while u not in self._value:
            var, low, high = self._succ[u]
            if var not in values:
                raise _exc.UnboundLiteralError(var)
            u = high if values[var] else low
        return self._value[u]

    def count(self, order):
        """Return number of satisfying assignments.

        @param order:
            literals of the diagram,
            in the order of testing
        """
        levels = {var: i for i, var in enumerate(order)}
        n = len(levels)
        def level(u):
            var, _, _ = self._succ[u]
            if var is None:
                return n
            return levels[var]
        counts = dict()
        for u, (var, low, high) in self._succ.items():
            if u in self._value:
                counts[u] = int(self._value[u])
                continue
            i = level(u)
            counts[u] = (
                counts[low] * 2**(level(low) - i - 1) +
                counts[high] * 2**(level(high) - i - 1))
        return counts[self.root] * 2**level(self.root)

    def to_graph(self, colors=None):
        """Return graph description.

        Node ids are the identities.
        Edges are labeled `F` (low) and `T` (high),
        or `F/T` if both lead to the same node.

        @param colors:
            `dict` that maps truth values to
            colors of terminal nodes
        """
        if colors is None:
            colors = TERMINAL_COLORS
        graph = _graph.GraphDescription()
        for u, (var, low, high) in self._succ.items():
            if u in self._value:
                value = self._value[u]
                graph.add_node(value, colors.get(value))
            else:
                graph.add_node(var)
                _add_branches(graph, u, low, high)
        return graph


def _add_branches(graph, u, low, high):
    """Add labeled edges from `u` to `low` and `high`."""
    if low == high:
        graph.add_edge(u, low, 'F/T')
        graph.add_edge(u, high, 'F/T')
        return
    graph.add_edge(u, low, 'F')
    graph.add_edge(u, high, 'T')


def to_graph(root, colors=None):
    """Return graph description of diagram `root`.

    Ids are assigned in post-order (low, high, node).
    Nodes shared in memory, such as the terminals
    of a naive tree, become one graph node.

    @param colors:
        `dict` that maps truth values to
        colors of terminal nodes
    """
    if colors is None:
        colors = TERMINAL_COLORS
    graph = _graph.GraphDescription()
    _add_to_graph(root, graph, dict(), colors)
    return graph


def _add_to_graph(u, graph, ids, colors):
    """Add `u` to `graph`, and return its id."""
    r = ids.get(id(u))
    if r is not None:
        return r
    if u.var is None:
        r = graph.add_node(u.value, colors.get(u.value))
    else:
        p = _add_to_graph(u.low, graph, ids, colors)
        q = _add_to_graph(u.high, graph, ids, colors)
        r = graph.add_node(u.var)
        _add_branches(graph, r, p, q)
    ids[id(u)] = r
    return r
