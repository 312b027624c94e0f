"""
敏感词检测与替换

- 字典树保存全部敏感词，查询时对文本逐位置扫描
- 扫描时跳过可忽略字符，识别 "敏 感 词"、"b-a-d" 等规避写法
- 重构字典在旁路构建完成后整体替换，读者不会看到构建一半的字典
"""
from __future__ import annotations

import threading
from enum import Enum
from typing import Iterable, List, Optional, Union

from loguru import logger

from .chars import is_ignorable, strip_ignorable
from .pinyin import convert_to_pinyin
from .trie import Node, count_words, insert, lookup


class MatchPolicy(str, Enum):
    """
    匹配策略

    如词典中有敏感词 [敏感, 敏感词]：
    - GREEDY: 匹配到 [敏感词] 才结束，替换时能覆盖更多字符
    - SIMPLE: 匹配到 [敏感] 即结束，较省时，适合只做是否命中的判断
    """

    GREEDY = "greedy"
    SIMPLE = "simple"

    @classmethod
    def parse(cls, value: Union[str, "MatchPolicy"]) -> "MatchPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(f"未知的匹配策略: {value}（可选: {allowed}）") from None


def _build(words: Iterable[str]) -> Node:
    root = Node()
    for word in words:
        insert(root, word)
    return root


def _sort_key(word: str):
    return -len(word), word


class SensitiveWordFilter:
    """
    敏感词过滤器

    持有当前字典（字典树根节点）。查询方法在调用开始时取一次根节点引用，
    整个调用期间都使用这一份快照。

    Args:
        words: 初始敏感词列表，None 表示空字典
        policy: 匹配策略，默认贪婪匹配
    """

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        policy: Union[str, MatchPolicy] = MatchPolicy.GREEDY,
    ) -> None:
        self.policy = MatchPolicy.parse(policy)
        self._lock = threading.Lock()
        self._root = Node()
        if words is not None:
            self.set_dictionary(words)

    @property
    def root(self) -> Node:
        return self._root

    # ------------------------------------------------------------------
    # 字典维护
    # ------------------------------------------------------------------

    def set_dictionary(self, words: Iterable[str]) -> None:
        """
        重构字典

        新字典在锁外构建，只有最后的引用替换在锁内完成，
        构建期间的查询继续使用旧字典。
        """
        if words is None:
            raise ValueError("敏感词列表不能为 None")
        if isinstance(words, str):
            raise ValueError("敏感词列表应为字符串集合，而不是单个字符串")
        new_root = _build(words)
        with self._lock:
            self._root = new_root
        logger.info(f"敏感词字典已重构，词数: {count_words(new_root)}")

    def add_words(self, words: Iterable[str]) -> int:
        """
        往当前字典中加敏感词

        直接修改正在使用的字典。并发查询可能看到只加入了一部分的新词，
        需要一致快照时请使用 set_dictionary。

        Returns:
            int: 实际写入的词数
        """
        if words is None:
            raise ValueError("敏感词列表不能为 None")
        if isinstance(words, str):
            raise ValueError("敏感词列表应为字符串集合，而不是单个字符串")
        added = 0
        with self._lock:
            for word in words:
                if insert(self._root, word):
                    added += 1
        logger.debug(f"已追加敏感词: {added}")
        return added

    def add_word(self, word: str) -> bool:
        """往当前字典中加一个敏感词。"""
        if word is None:
            raise ValueError("敏感词不能为 None")
        return self.add_words([word]) == 1

    def word_count(self) -> int:
        return count_words(self._root)

    # ------------------------------------------------------------------
    # 匹配
    # ------------------------------------------------------------------

    def scan_from(self, text: str, start: int, root: Optional[Node] = None) -> Optional[int]:
        """
        从 start 开始匹配敏感词

        Args:
            text: 文本
            start: 起始位置
            root: 字典快照，默认使用当前字典

        Returns:
            Optional[int]: 匹配到的敏感词结束位置（包含），未匹配返回 None
        """
        if start < 0 or start >= len(text) or is_ignorable(text[start]):
            return None

        node = self._root if root is None else root
        simple = self.policy is MatchPolicy.SIMPLE
        end: Optional[int] = None
        for i in range(start, len(text)):
            ch = text[i]
            if is_ignorable(ch):
                continue

            node = lookup(node, ch)
            if node is None:
                break

            if node.is_terminal:
                end = i
                if simple:
                    break
        return end

    def contains(self, text: Optional[str]) -> bool:
        """文本中含有敏感词时返回 True。"""
        if not text:
            return False
        root = self._root
        return any(self.scan_from(text, i, root) is not None for i in range(len(text)))

    def find_all(self, text: Optional[str]) -> List[str]:
        """
        找出文本中的全部敏感词

        结果去重，按长度降序、同长度按字典序排列。
        匹配片段包含其中的可忽略字符，例如 "b-a-d"。
        """
        if not text:
            return []
        root = self._root
        found = set()
        for i in range(len(text)):
            end = self.scan_from(text, i, root)
            if end is not None:
                found.add(text[i:end + 1])
        return sorted(found, key=_sort_key)

    def replace(self, text: Optional[str], mask: str = "*") -> str:
        """
        替换文本中的敏感词，每个字符换一个替换符

        长词先替换，避免其中的短词被重复处理。

        Args:
            text: 文本
            mask: 替换符

        Returns:
            str: 替换后的文本
        """
        if not text:
            return ""
        words = self.find_all(text)
        if not words:
            return text

        replaced = text
        for word in words:
            replaced = replaced.replace(word, mask * len(word))
        logger.debug(f"已替换敏感词 {len(words)} 个")
        return replaced

    def replace_with_pinyin(self, text: Optional[str], style: str = "default") -> str:
        """将文本中的敏感词替换为指定风格的拼音。"""
        if not text:
            return ""
        words = self.find_all(text)
        if not words:
            return text

        replaced = text
        for word in words:
            replaced = replaced.replace(word, convert_to_pinyin(strip_ignorable(word), style))
        return replaced

    def __contains__(self, text: str) -> bool:
        return self.contains(text)
