"""Tokenize and parse fully parenthesized formulas.

Grammar:

```
expr := '(' 'NOT' operand ')'
      | '(' expr operator expr ')'
      | literal
operand := '(' expr ')' | literal
operator := 'NOT' | 'AND' | 'OR' | 'IMP' | 'IFF'
```

A literal is any token that is neither
an operator keyword nor a bracket.
"""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import logging
import typing as _ty

import astutils

import logiclab._abc as _labc
import logiclab.exceptions as _exc
import logiclab.formula as _formula


logger = logging.getLogger(__name__)
_TRAILING_INPUT: _ty.Final = (
    'You have extra tokens at the end of your input '
    '(or you forgot to enclose the whole input in brackets).')


class _Token(_ty.Protocol):
    type: str
    value: str


class Lexer(astutils.Lexer):
    """Lexer for formulas.

    Only the space character separates tokens.
    Brackets are tokens of length one.
    Any other run of characters is one token.
    """

    def __init__(
            self,
            **kw
            ) -> None:
        self.reserved = {
            keyword: keyword
            for keyword in _formula.OPERATORS}
        self.delimiters = [
            'LPAREN',
            'RPAREN']
        self.operators = list()
        self.misc = [
            'NAME']
        super().__init__(**kw)

    def t_NAME(
            self,
            token:
                _Token
            ) -> _Token:
        r' [^\x20()]+ '
        token.type = self.reserved.get(
            token.value, 'NAME')
        return token

    t_LPAREN = r' \( '
    t_RPAREN = r' \) '
    t_ignore = '\x20'


_lexers = dict()


def lex(
        text:
            str
        ) -> _abc.Iterator[_Token]:
    """Yield typed tokens of `text`."""
    if 'formula' not in _lexers:
        _lexers['formula'] = Lexer()
    lexer = _lexers['formula'].lexer.clone()
    lexer.input(text)
    yield from lexer


def tokenize(
        text:
            str
        ) -> list[_labc.Token]:
    """Return tokens of `text`, from left to right.

    Never fails. Empty text has no tokens.
    """
    tokens = [
        token.value
        for token in lex(text)]
    logger.debug(
        f'{len(tokens)} tokens in {text!r}')
    return tokens


class _TokenStream:
    """Cursor over a token sequence."""

    def __init__(
            self,
            tokens:
                _abc.Sequence[_labc.Token]
            ) -> None:
        self.tokens = tokens
        self.index = 0

    def read(
            self
            ) -> _labc.Token:
        """Return next token, and advance.

        @raise EndOfInputError:
            if no tokens remain
        """
        if self.index >= len(self.tokens):
            raise _exc.EndOfInputError(
                'Unexpected end of input.')
        token = self.tokens[self.index]
        self.index += 1
        return token

    def peek(
            self
            ) -> (
                _labc.Token |
                None):
        """Return next token, or `None` at the end."""
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]


class Parser:
    """Recursive-descent parser of formulas.

    The first error aborts parsing,
    and is raised unchanged.
    """

    def parse(
            self,
            tokens:
                _abc.Sequence[_labc.Token]
            ) -> _formula.FormulaNode:
        """Return syntax tree of `tokens`.

        All of `tokens` must be consumed.

        @raise FormulaSyntaxError:
            if `tokens` violate the grammar
        @raise EndOfInputError:
            if `tokens` end before the formula
        @raise TrailingInputError:
            if tokens remain after the formula
        @raise NestingError:
            if brackets nest beyond
            the recursion limit
        """
        stream = _TokenStream(tokens)
        try:
            tree = self._parse_expr(stream)
        except RecursionError as error:
            raise _exc.NestingError() from error
        if stream.peek() is not None:
            raise _exc.TrailingInputError(_TRAILING_INPUT)
        logger.debug(f'parsed: {tree}')
        return tree

    def _parse_expr(
            self,
            stream:
                _TokenStream
            ) -> _formula.FormulaNode:
        """Return formula, bracketed or literal."""
        if stream.peek() == '(':
            return self._parse_bracketed(stream)
        return self._parse_literal(stream)

    def _parse_bracketed(
            self,
            stream:
                _TokenStream
            ) -> _formula.Operator:
        """Return negation or binary application."""
        if stream.read() != '(':
            raise _exc.FormulaSyntaxError(
                'Expected an opening bracket.')
        if stream.peek() == 'NOT':
            stream.read()
            operand = self._parse_negated(stream)
            self._parse_closing(stream)
            return _formula.Operator('NOT', operand)
        left = self._parse_expr(stream)
        operator = stream.read()
        if operator not in _formula.OPERATORS:
            raise _exc.FormulaSyntaxError(
                f"'{operator}' is not a valid operator.")
        right = self._parse_expr(stream)
        self._parse_closing(stream)
        return _formula.Operator(operator, left, right)

    def _parse_negated(
            self,
            stream:
                _TokenStream
            ) -> _formula.FormulaNode:
        """Return operand of `NOT`."""
        if stream.peek() == '(':
            return self._parse_bracketed(stream)
        return self._parse_literal(stream)

    def _parse_literal(
            self,
            stream:
                _TokenStream
            ) -> _formula.Literal:
        token = stream.read()
        if not _formula.is_literal(token):
            raise _exc.FormulaSyntaxError(
                'Expected a literal or a formula, '
                f"got '{token}'.")
        return _formula.Literal(token)

    def _parse_closing(
            self,
            stream:
                _TokenStream
            ) -> None:
        if stream.read() != ')':
            raise _exc.FormulaSyntaxError(
                'Expected a closing bracket.')


_parsers = dict()


def parse(
        tokens:
            _abc.Sequence[_labc.Token]
        ) -> _formula.FormulaNode:
    """Return syntax tree of `tokens`."""
    if 'formula' not in _parsers:
        _parsers['formula'] = Parser()
    parser = _parsers['formula']
    return parser.parse(tokens)


def parse_expr(
        text:
            str
        ) -> _formula.FormulaNode:
    """Return syntax tree of `text`."""
    return parse(tokenize(text))
