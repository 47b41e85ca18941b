"""经典数据结构练习：有序单链表合并、带权无向图。"""

__version__ = "0.1.0"
