from .c1_merge_sorted_lists import LinkedList, Node, merge_lists

__all__ = ["LinkedList", "Node", "merge_lists"]
