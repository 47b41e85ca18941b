from .c1_undirected_graph import Graph, NodeNotInGraph, UndirectedGraph

__all__ = ["Graph", "NodeNotInGraph", "UndirectedGraph"]
