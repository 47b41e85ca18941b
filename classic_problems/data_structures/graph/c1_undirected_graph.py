"""
带权无向图：用邻接表（节点名 -> [(邻居, 权重), ...]）表示。

`Graph` 只规定子类必须提供邻接表，其余操作（添加节点、添加边、查询节点和边）
都在接口上实现；`UndirectedGraph` 是唯一的具体实现。

在本示例中，我们结合一个实战应用：描述几个城市之间的道路及其距离。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)

AdjacencyTable = dict[str, list[tuple[str, int]]]


class NodeNotInGraph(KeyError):
    """访问了图中不存在的节点"""

    def __init__(self, node: str) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"accessing a node that is not in the graph: {self.node!r}"


class Graph(ABC):
    """带权图的能力接口"""

    @property
    @abstractmethod
    def adjacency_table(self) -> AdjacencyTable:
        """返回底层邻接表"""

    def add_node(self, node: str) -> bool:
        """添加节点，节点已存在时返回 False"""
        table = self.adjacency_table
        if node in table:
            return False
        table[node] = []
        return True

    def add_edge(self, edge: tuple[str, str, int]) -> None:
        """
        添加一条无向边，两端节点不存在时自动创建

        >>> graph = UndirectedGraph()
        >>> graph.add_edge(("a", "b", 5))
        >>> graph.neighbours("b")
        [('a', 5)]
        """
        from_node, to_node, weight = edge
        self.add_node(from_node)
        self.add_node(to_node)

        table = self.adjacency_table
        table[from_node].append((to_node, weight))
        table[to_node].append((from_node, weight))
        logger.debug("edge %s - %s (%s)", from_node, to_node, weight)

    def contains(self, node: str) -> bool:
        return node in self.adjacency_table

    def nodes(self) -> set[str]:
        return set(self.adjacency_table)

    def edges(self) -> list[tuple[str, str, int]]:
        """返回所有边，无向边的两个方向各出现一次"""
        return [
            (from_node, to_node, weight)
            for from_node, neighbours in self.adjacency_table.items()
            for to_node, weight in neighbours
        ]

    def neighbours(self, node: str) -> list[tuple[str, int]]:
        """返回节点的邻居列表（副本）"""
        if node not in self.adjacency_table:
            raise NodeNotInGraph(node)
        return list(self.adjacency_table[node])

    def to_adjacency_matrix(self, order: Sequence[str] | None = None) -> np.ndarray:
        """
        返回权重邻接矩阵，默认按节点名排序；平行边的权重相加，没有边的位置为 0

        >>> graph = UndirectedGraph()
        >>> graph.add_edge(("a", "b", 5))
        >>> graph.add_edge(("b", "c", 10))
        >>> graph.to_adjacency_matrix().tolist()
        [[0, 5, 0], [5, 0, 10], [0, 10, 0]]
        """
        order = sorted(self.adjacency_table) if order is None else list(order)
        position = {node: i for i, node in enumerate(order)}
        if len(position) != len(order):
            raise ValueError(f"duplicate node names in order: {order}")
        for node in order:
            if node not in self.adjacency_table:
                raise NodeNotInGraph(node)

        matrix = np.zeros((len(order), len(order)), dtype=np.int64)
        for from_node, to_node, weight in self.edges():
            if from_node in position and to_node in position:
                matrix[position[from_node], position[to_node]] += weight
        return matrix


class UndirectedGraph(Graph):
    """
    基于字典邻接表的无向图

    >>> graph = UndirectedGraph()
    >>> graph.add_node("x")
    True
    >>> graph.add_node("x")
    False
    >>> graph.contains("x"), graph.contains("y")
    (True, False)
    """

    def __init__(self) -> None:
        self._adjacency_table: AdjacencyTable = {}

    @property
    def adjacency_table(self) -> AdjacencyTable:
        return self._adjacency_table


# 实战应用示例：城市之间的道路
if __name__ == "__main__":
    from doctest import testmod

    testmod()
    roads = UndirectedGraph()
    roads.add_edge(("北京", "天津", 137))
    roads.add_edge(("北京", "石家庄", 283))
    roads.add_edge(("天津", "石家庄", 310))

    print("城市:", sorted(roads.nodes()))
    print("北京的邻居:", roads.neighbours("北京"))
    print("邻接矩阵:")
    print(roads.to_adjacency_matrix())
