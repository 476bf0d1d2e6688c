"""Truth tables, and how assignments are enumerated.

Assignment `i` maps the first literal to
the most significant bit of `i`, so the
first column of a table changes slowest.
"""
import logiclab.bdd as _bdd
import logiclab.formula as _formula
import logiclab.lab as _lab


def print_truth_table(
        text:
            str
        ) -> list[bool]:
    """Print the truth table of `text`.

    @return:
        column of results,
        one per assignment
    """
    tree = _lab.read_expr(text)
    order = _formula.literals(tree)
    print(text)
    print(' '.join(order) + ' | value')
    column = list()
    for values, value in _bdd.truth_table(tree, order):
        row = ' '.join(
            str(int(values[var])).rjust(len(var))
            for var in order)
        print(f'{row} | {int(value)}')
        column.append(value)
    return column


def classify_formulas():
    """Tell tautologies from contradictions."""
    formulas = [
        '((p IMP q) IFF ((NOT q) IMP (NOT p)))',
        '(p AND (NOT p))',
        '((p IMP q) AND (q IMP p))']
    for text in formulas:
        column = print_truth_table(text)
        if all(column):
            kind = 'tautology'
        elif not any(column):
            kind = 'contradiction'
        else:
            kind = 'contingent'
        print(f'{kind}\n')
    # the number of rows is `2**n`
    assignments = _bdd.Assignments(['x', 'y', 'z'])
    print(f'{len(assignments)} assignments to x, y, z')
    print(f'the last one is {assignments[-1]}')


if __name__ == '__main__':
    classify_formulas()
