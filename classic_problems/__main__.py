#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
练习演示入口

    python -m classic_problems merge --list-a 1,3,5,7 --list-b 2,4,6,8
    python -m classic_problems graph --edge a,b,5 --edge b,c,10
"""

import argparse
import logging

from classic_problems.data_structures.graph import UndirectedGraph
from classic_problems.data_structures.linked_list import LinkedList

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _int_list(text):
    """把 "1,3,5" 解析为整数列表，空字符串表示空链表"""
    try:
        return [int(item) for item in text.split(",") if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma-separated integer list: {text!r}")


def _edge(text):
    """把 "a,b,5" 解析为 (from, to, weight)"""
    parts = [item.strip() for item in text.split(",")]
    if len(parts) != 3 or not parts[0] or not parts[1]:
        raise argparse.ArgumentTypeError(f"edge must look like FROM,TO,WEIGHT: {text!r}")
    try:
        return parts[0], parts[1], int(parts[2])
    except ValueError:
        raise argparse.ArgumentTypeError(f"edge weight must be an integer: {text!r}")


def build_parser():
    parser = argparse.ArgumentParser(prog="classic_problems", description="Classic data structure exercises.")
    parser.add_argument("--log-level", type=str, default="WARNING", choices=LOG_LEVELS, help="Logging level.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge_parser = subparsers.add_parser("merge", help="Merge two sorted linked lists.")
    merge_parser.add_argument("--list-a", type=_int_list, default=[1, 3, 5, 7], help="First sorted list, e.g. 1,3,5.")
    merge_parser.add_argument("--list-b", type=_int_list, default=[2, 4, 6, 8], help="Second sorted list, e.g. 2,4,6.")

    graph_parser = subparsers.add_parser("graph", help="Build an undirected weighted graph.")
    graph_parser.add_argument("--edge", type=_edge, action="append", default=[], help="Edge FROM,TO,WEIGHT; repeatable.")
    graph_parser.add_argument("--node", type=str, action="append", default=[], help="Isolated node; repeatable.")
    return parser


def parse_arguments(argv=None):
    return build_parser().parse_args(argv)


def run_merge(args):
    list_a = LinkedList.from_iterable(args.list_a)
    list_b = LinkedList.from_iterable(args.list_b)
    print(f"list a: {list_a}")
    print(f"list b: {list_b}")
    merged = LinkedList.merge(list_a, list_b)
    print(f"merged: {merged}")
    return merged


def run_graph(args):
    graph = UndirectedGraph()
    for node in args.node:
        graph.add_node(node)
    for edge in args.edge:
        graph.add_edge(edge)
    order = sorted(graph.nodes())
    print(f"nodes: {', '.join(order)}")
    for from_node, to_node, weight in graph.edges():
        print(f"{from_node} -> {to_node} ({weight})")
    print(graph.to_adjacency_matrix(order))
    return graph


def main(argv=None):
    args = parse_arguments(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    logger.info("running %s", args.command)
    if args.command == "merge":
        run_merge(args)
    else:
        run_graph(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
