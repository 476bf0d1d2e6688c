"""Type aliases shared by the modules of `logiclab`."""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import typing as _ty


Yes: _ty.TypeAlias = bool
Nat: _ty.TypeAlias = int
LiteralName: _ty.TypeAlias = str
Token: _ty.TypeAlias = str
OperatorName: _ty.TypeAlias = _ty.Literal[
    'NOT',
    'AND',
    'OR',
    'IMP',
    'IFF']
Assignment: _ty.TypeAlias = dict[
    LiteralName, bool]
LiteralOrder: _ty.TypeAlias = _abc.Sequence[
    LiteralName]
NodeId: _ty.TypeAlias = Nat
    # identity of a node in
    # a graph description
Label: _ty.TypeAlias = (
    LiteralName |
    OperatorName |
    bool)
