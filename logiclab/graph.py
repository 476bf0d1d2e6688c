"""Graph descriptions handed to renderers."""
# Copyright 2026 by the logiclab developers
# All rights reserved. Licensed under BSD-3.
#
import typing as _ty

import logiclab._abc as _labc
# inline:
# import networkx


_Edge: _ty.TypeAlias = tuple[
    _labc.NodeId,
    _labc.NodeId]


class GraphDescription:
    """Directed graph as plain mappings.

    Attributes:
      - `ids`: `dict` that maps each node id to its label
        (literal name, operator name, or `bool`)
      - `edges`: `dict` that maps a node id to
        the `list` of its successors, in order
      - `colors`: `dict` that maps (some) node ids
        to color names
      - `edge_labels`: `dict` that maps `(parent, child)`
        pairs to edge labels
    """

    def __init__(
            self,
            ids:
                dict[_labc.NodeId, _labc.Label] |
                None=None,
            edges:
                dict[_labc.NodeId, list[_labc.NodeId]] |
                None=None,
            colors:
                dict[_labc.NodeId, str] |
                None=None,
            edge_labels:
                dict[_Edge, str] |
                None=None
            ) -> None:
        self.ids = dict() if ids is None else ids
        self.edges = dict() if edges is None else edges
        self.colors = dict() if colors is None else colors
        self.edge_labels = (
            dict() if edge_labels is None
            else edge_labels)

    def __len__(
            self
            ) -> int:
        """Return number of nodes."""
        return len(self.ids)

    def __eq__(
            self,
            other
            ) -> bool:
        if not isinstance(other, GraphDescription):
            return NotImplemented
        return (
            self.ids == other.ids and
            self.edges == other.edges and
            self.colors == other.colors and
            self.edge_labels == other.edge_labels)

    def __repr__(
            self
            ) -> str:
        return (
            f'{type(self).__name__}('
            f'ids={self.ids!r}, '
            f'edges={self.edges!r}, '
            f'colors={self.colors!r}, '
            f'edge_labels={self.edge_labels!r})')

    def add_node(
            self,
            label:
                _labc.Label,
            color:
                str |
                None=None
            ) -> _labc.NodeId:
        """Return id of new node labeled `label`.

        Ids are consecutive integers,
        in the order of addition.
        """
        u = len(self.ids)
        self.ids[u] = label
        if color is not None:
            self.colors[u] = color
        return u

    def add_edge(
            self,
            u:
                _labc.NodeId,
            v:
                _labc.NodeId,
            label:
                str |
                None=None
            ) -> None:
        """Append `v` to the successors of `u`."""
        if u not in self.ids:
            raise ValueError(
                f'no node with id {u}')
        if v not in self.ids:
            raise ValueError(
                f'no node with id {v}')
        self.edges.setdefault(u, list()).append(v)
        if label is not None:
            self.edge_labels[u, v] = label

    def successors(
            self,
            u:
                _labc.NodeId
            ) -> list[_labc.NodeId]:
        return list(self.edges.get(u, list()))


def to_nx(
        graph:
            GraphDescription):
    """Return `networkx.MultiDiGraph` of `graph`.

    The resulting graph has:

      - nodes labeled with:
        - `label`: `str`
        - `color`: `str`, only for colored nodes
      - edges labeled with:
        - `label`: `str`, only for labeled edges

    Repeated successors of a node yield one edge,
    so a decision node whose branches coincide
    has a single edge, labeled `F/T`.

    @rtype:
        `networkx.MultiDiGraph`
    """
    import networkx as nx
    g = nx.MultiDiGraph()
    for u, label in graph.ids.items():
        attr = dict(label=str(label))
        color = graph.colors.get(u)
        if color is not None:
            attr['color'] = color
        g.add_node(u, **attr)
    for u, successors in graph.edges.items():
        # distinct, in order
        for v in dict.fromkeys(successors):
            label = graph.edge_labels.get((u, v))
            if label is None:
                g.add_edge(u, v)
            else:
                g.add_edge(u, v, label=label)
    return g

