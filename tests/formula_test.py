"""Tests of module `logiclab.formula`."""
# This file is released in the public domain.
#
import itertools as _itr

import logiclab._parser as _parser
import logiclab.exceptions as _exc
import logiclab.formula as _formula
import pytest


Literal = _formula.Literal
Operator = _formula.Operator


def _apply(op, *values):
    """Return value of `op` applied to constants."""
    names = [f'x{i}' for i in range(len(values))]
    tree = Operator(op, *map(Literal, names))
    assignment = dict(zip(names, values))
    return _formula.evaluate(tree, assignment)


def test_evaluate_operators():
    assert _apply('NOT', True) is False
    assert _apply('NOT', False) is True
    assert _apply('AND', True, False) is False
    assert _apply('AND', True, True) is True
    assert _apply('OR', True, False) is True
    assert _apply('OR', False, False) is False
    for x in (False, True):
        assert _apply('IMP', False, x) is True, x
    assert _apply('IMP', True, False) is False
    assert _apply('IMP', True, True) is True
    assert _apply('IFF', True, True) is True
    assert _apply('IFF', True, False) is False
    assert _apply('IFF', False, False) is True


def test_evaluate_n_ary():
    for values in _itr.product([False, True], repeat=3):
        r = _apply('AND', *values)
        assert r == all(values), (values, r)
        r = _apply('OR', *values)
        assert r == any(values), (values, r)


def test_evaluate_example():
    tree = _parser.parse_expr('(A AND (B OR (NOT C)))')
    values = dict(A=True, B=False, C=True)
    r = _formula.evaluate(tree, values)
    assert r is False, r
    values = dict(A=True, B=False, C=False)
    r = _formula.evaluate(tree, values)
    assert r is True, r


def test_evaluate_literal():
    tree = Literal('A')
    assert _formula.evaluate(tree, dict(A=True)) is True
    assert _formula.evaluate(tree, dict(A=False)) is False
    # extra literals are ignored
    assert _formula.evaluate(tree, dict(A=True, B=False)) is True


def test_evaluate_does_not_change_tree():
    text = '((A IMP B) IFF (NOT C))'
    tree = _parser.parse_expr(text)
    _formula.evaluate(tree, dict(A=True, B=True, C=False))
    assert _formula.to_expr(tree) == text


def test_unbound_literal():
    tree = _parser.parse_expr('(A AND B)')
    with pytest.raises(_exc.UnboundLiteralError) as excinfo:
        _formula.evaluate(tree, dict(A=True))
    error = excinfo.value
    assert error.name == 'B', error.name
    assert "'B'" in str(error), error
    assert isinstance(error, _exc.EvaluationError), error


@pytest.mark.parametrize('tree', [
    Operator('NOT', Literal('A'), Literal('B')),
    Operator('AND', Literal('A')),
    Operator('OR', Literal('A')),
    Operator('IMP', Literal('A')),
    Operator('IFF', Literal('A'), Literal('B'), Literal('C')),
    ])
def test_arity_error(tree):
    values = dict(A=True, B=True, C=True)
    with pytest.raises(_exc.ArityError) as excinfo:
        _formula.evaluate(tree, values)
    message = str(excinfo.value)
    assert message.startswith(
        f'Incorrect number of arguments to {tree.operator}.'), message


def test_arity_error_from_text():
    tree = _parser.parse_expr('(A NOT B)')
    with pytest.raises(_exc.ArityError) as excinfo:
        _formula.evaluate(tree, dict(A=True, B=False))
    message = str(excinfo.value)
    message_ = (
        'Incorrect number of arguments to NOT. '
        'NOT takes exactly one argument.')
    assert message == message_, message


def test_unknown_operator():
    tree = Operator('XOR', Literal('A'), Literal('B'))
    with pytest.raises(_exc.EvaluationError):
        _formula.evaluate(tree, dict(A=True, B=True))


def test_first_evaluation_error_wins():
    tree = Operator(
        'AND',
        Literal('X'),
        Operator('NOT', Literal('A'), Literal('B')))
    # left operand first
    with pytest.raises(_exc.UnboundLiteralError):
        _formula.evaluate(tree, dict(A=True, B=True))
    # operands before operator
    tree = Operator(
        'NOT',
        Literal('X'),
        Operator('NOT', Literal('A')))
    with pytest.raises(_exc.UnboundLiteralError):
        _formula.evaluate(tree, dict(A=True))


def test_is_literal():
    assert _formula.is_literal('A')
    assert _formula.is_literal('not')
    assert _formula.is_literal('a-b')
    for token in ['NOT', 'AND', 'OR', 'IMP', 'IFF', '(', ')', None]:
        assert not _formula.is_literal(token), token


def test_literals():
    tree = _parser.parse_expr('(B AND (A OR (NOT B)))')
    names = _formula.literals(tree)
    assert names == ['B', 'A'], names
    tree = _parser.parse_expr('x')
    names = _formula.literals(tree)
    assert names == ['x'], names
    tree = _parser.parse_expr('((c IMP a) IFF (b OR c))')
    names = _formula.literals(tree)
    assert names == ['c', 'a', 'b'], names


def test_equality():
    assert Literal('A') == Literal('A')
    assert Literal('A') != Literal('B')
    assert Literal('A') != Operator('NOT', Literal('A'))
    assert Operator('NOT', Literal('A')) != Literal('A')
    u = Operator('AND', Literal('A'), Literal('B'))
    v = Operator('AND', Literal('A'), Literal('B'))
    w = Operator('AND', Literal('B'), Literal('A'))
    assert u == v
    assert u != w
    assert u != Operator('OR', Literal('A'), Literal('B'))


def test_to_expr():
    tree = Operator(
        'IMP',
        Operator('NOT', Literal('p')),
        Operator('OR', Literal('q'), Literal('r')))
    expr = _formula.to_expr(tree)
    assert expr == '((NOT p) IMP (q OR r))', expr
    assert _formula.to_expr(Literal('p')) == 'p'


def test_to_graph_example():
    tree = _parser.parse_expr('(A AND (B OR (NOT C)))')
    graph = _formula.to_graph(tree)
    ids = {0: 'A', 1: 'B', 2: 'C', 3: 'NOT', 4: 'OR', 5: 'AND'}
    assert graph.ids == ids, graph.ids
    edges = {3: [2], 4: [1, 3], 5: [0, 4]}
    assert graph.edges == edges, graph.edges
    assert graph.colors == dict(), graph.colors


def test_to_graph_repeated_literal():
    tree = _parser.parse_expr('(A IFF A)')
    graph = _formula.to_graph(tree)
    ids = {0: 'A', 1: 'A', 2: 'IFF'}
    assert graph.ids == ids, graph.ids
    assert graph.edges == {2: [0, 1]}, graph.edges


def test_to_graph_literal():
    graph = _formula.to_graph(Literal('A'))
    assert graph.ids == {0: 'A'}, graph.ids
    assert graph.edges == dict(), graph.edges


def test_nesting_limit():
    tree = Literal('A')
    for _ in range(5000):
        tree = Operator('NOT', tree)
    with pytest.raises(_exc.NestingError):
        _formula.evaluate(tree, dict(A=True))
    with pytest.raises(_exc.NestingError):
        _formula.to_graph(tree)
