"""From a formula to a reduced decision diagram.

The naive decision tree tests every literal
along every path. Reduction shares the subtrees
that compute the same function, so the diagram
shrinks while its truth values stay the same.
"""
import textwrap as _tw

import logiclab.bdd as _bdd
import logiclab.formula as _formula
import logiclab.graph as _graph
import logiclab.lab as _lab


def formula_to_bdd_example():
    text = '(A AND (B OR (NOT C)))'
    tree = _lab.read_expr(text)
    order = _formula.literals(tree)
    print(f'formula: {tree}')
    print(f'literals: {order}')
    naive = _bdd.build(tree, order)
    print(f'naive tree: {len(naive)} nodes')
    reduced = _bdd.reduce(naive)
    print(f'reduced diagram: {len(reduced)} nodes')
    print(reduced)
    n = reduced.count(order)
    print(f'{n} satisfying assignments')
    # the diagram answers as the formula does
    for values in _bdd.Assignments(order):
        expected = _formula.evaluate(tree, values)
        result = reduced.evaluate(values)
        if result == expected:
            continue
        raise AssertionError(_tw.dedent(f'''
            Expected the diagram and the formula to agree,
            but under {values = }:
            {expected = }
            and:
            {result = }
            '''))
    # hand off to `networkx`
    g = _graph.to_nx(reduced.to_graph())
    print(f'{len(g)} nodes, {g.number_of_edges()} edges')
    for u, v, d in g.edges(data=True):
        label = d.get('label')
        print(f'{u} -> {v} [{label}]')


if __name__ == '__main__':
    formula_to_bdd_example()
