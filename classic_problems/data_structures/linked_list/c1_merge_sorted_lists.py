"""
算法：将两个已排序的单链表合并为一个排序的单链表。

链表维护头指针、尾指针和长度，尾指针只用于 O(1) 追加。合并使用双指针法：
每次比较两个游标当前的值，取较小者（相等时取第一个链表，保证稳定），
复制到新链表的新节点中；一个链表耗尽后，另一个链表剩余元素按原顺序追加。

在本示例中，我们结合一个实战应用：把两个班级已排好序的成绩单合并为一个成绩单。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """链表节点"""
    data: Any
    next_node: Node | None = None

    def __str__(self) -> str:
        """返回本节点及其后续节点的值，用逗号分隔"""
        values = []
        node = self
        while node:
            values.append(str(node.data))
            node = node.next_node
        return ", ".join(values)


class LinkedList:
    """
    带尾指针的单链表

    >>> lst = LinkedList()
    >>> lst.append(1)
    >>> lst.append(2)
    >>> lst.append(3)
    >>> len(lst)
    3
    >>> print(lst)
    1, 2, 3
    >>> lst.get(2)
    3
    >>> lst.get(3) is None
    True
    """

    def __init__(self) -> None:
        """初始化空链表"""
        self.length: int = 0
        self.head: Node | None = None
        self.tail: Node | None = None  # 仅用于追加，不负责释放

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> LinkedList:
        """按顺序追加所有元素，返回新链表"""
        new_list = cls()
        for value in values:
            new_list.append(value)
        return new_list

    def __iter__(self) -> Iterator[Any]:
        """返回链表的迭代器"""
        node = self.head
        while node:
            yield node.data
            node = node.next_node

    def __len__(self) -> int:
        """返回链表的长度"""
        return self.length

    def __str__(self) -> str:
        """返回链表的字符串表示，元素之间用逗号分隔"""
        return str(self.head) if self.head else ""

    def __repr__(self) -> str:
        return f"LinkedList({', '.join(repr(item) for item in self)})"

    def append(self, value: Any) -> None:
        """在链表尾部追加一个新节点"""
        new_node = Node(value)
        if self.tail is None:  # 空链表
            self.head = new_node
        else:
            self.tail.next_node = new_node
        self.tail = new_node
        self.length += 1

    def get(self, index: int) -> Any | None:
        """
        返回下标 index 处的值，下标越界时返回 None

        >>> LinkedList.from_iterable(["A", "B", "C"]).get(1)
        'B'
        >>> LinkedList.from_iterable(["A", "B", "C"]).get(-1) is None
        True
        """
        if not 0 <= index < self.length:
            return None
        node = self.head
        for _ in range(index):
            node = node.next_node
        return node.data

    def clear(self) -> None:
        """逐个断开并释放所有节点，空链表上调用也是安全的"""
        node = self.head
        self.head = self.tail = None
        self.length = 0
        while node:
            next_node = node.next_node
            node.next_node = None
            node = next_node

    @staticmethod
    def merge(list_a: LinkedList, list_b: LinkedList) -> LinkedList:
        """
        合并两个已排序的链表，返回一个新的排序链表

        两个输入链表在合并后被清空，不应再使用。输入必须各自按非递减顺序排列，
        否则结果不保证有序（不做检查，也不抛出异常）。

        >>> a = LinkedList.from_iterable([1, 3, 5, 7])
        >>> b = LinkedList.from_iterable([2, 4, 6, 8])
        >>> print(LinkedList.merge(a, b))
        1, 2, 3, 4, 5, 6, 7, 8
        >>> len(a), len(b)
        (0, 0)
        """
        for arg in (list_a, list_b):
            if not isinstance(arg, LinkedList):
                raise TypeError(f"expected LinkedList, got {type(arg).__name__}")
        if list_a is list_b:
            raise ValueError("cannot merge a linked list with itself")

        merged = LinkedList()
        a_curr, b_curr = list_a.head, list_b.head

        while a_curr or b_curr:
            # 相等时取第一个链表，保持稳定
            if b_curr is None or (a_curr is not None and a_curr.data <= b_curr.data):
                value = a_curr.data
                a_curr = a_curr.next_node
            else:
                value = b_curr.data
                b_curr = b_curr.next_node
            merged.append(value)

        logger.debug("merged %d + %d nodes", list_a.length, list_b.length)

        list_a.clear()
        list_b.clear()
        return merged


def merge_lists(list_a: LinkedList, list_b: LinkedList) -> LinkedList:
    """
    合并两个排序链表并返回一个新的排序链表

    >>> a = LinkedList.from_iterable([11, 33, 44, 88, 89, 90, 100])
    >>> b = LinkedList.from_iterable([1, 22, 30, 45])
    >>> list(merge_lists(a, b))
    [1, 11, 22, 30, 33, 44, 45, 88, 89, 90, 100]
    """
    return LinkedList.merge(list_a, list_b)


# 实战应用示例：合并两个班级的成绩单
if __name__ == "__main__":
    from doctest import testmod

    testmod()
    class_a_grades = LinkedList.from_iterable([70, 78, 85, 90, 92])  # 班级A的成绩（已排序）
    class_b_grades = LinkedList.from_iterable([80, 85, 88, 91, 95])  # 班级B的成绩（已排序）
    print(f"班级A: {class_a_grades}")
    print(f"班级B: {class_b_grades}")

    merged_grades = merge_lists(class_a_grades, class_b_grades)
    print(f"合并后的排序成绩单: {merged_grades}")
    print(f"第 3 名（下标 2）的成绩: {merged_grades.get(2)}")
