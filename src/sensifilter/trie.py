"""
敏感词字典树

每个节点按字符索引子节点，并用 is_terminal 标记是否有敏感词在此结束。
子节点字典按需创建，叶子节点不占用额外的 dict。
"""
from __future__ import annotations

from typing import Dict, Optional

from loguru import logger

from .chars import is_ignorable


class Node:
    """字典树节点"""

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: Optional[Dict[str, Node]] = None
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        size = len(self.children) if self.children else 0
        return f"Node(is_terminal={self.is_terminal}, children={size})"


def lookup(node: Node, ch: str) -> Optional[Node]:
    """返回字符 ch 对应的子节点，不存在时返回 None。"""
    if node.children is None:
        return None
    return node.children.get(ch)


def ensure_child(node: Node, ch: str) -> Node:
    """返回字符 ch 对应的子节点，不存在时先创建。"""
    if node.children is None:
        node.children = {}
    child = node.children.get(ch)
    if child is None:
        child = Node()
        node.children[ch] = child
    return child


def insert(root: Node, word: str) -> bool:
    """
    将敏感词写入字典树

    可忽略字符不会成为节点，"敏 感" 与 "敏感" 写入同一路径。
    空词或全部由可忽略字符组成的词会被拒绝，否则根节点会被标记为结尾，
    导致任意位置都匹配空串。

    Args:
        root: 字典树根节点
        word: 敏感词

    Returns:
        bool: 成功写入返回 True，被拒绝返回 False
    """
    node = root
    for ch in word:
        if is_ignorable(ch):
            continue
        node = ensure_child(node, ch)

    if node is root:
        logger.warning(f"忽略无效敏感词: {word!r}")
        return False

    node.is_terminal = True
    return True


def count_words(root: Node) -> int:
    """统计字典树中的敏感词数量。"""
    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_terminal:
            total += 1
        if node.children:
            stack.extend(node.children.values())
    return total
