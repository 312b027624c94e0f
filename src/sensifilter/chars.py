"""
可忽略字符判断

词典构建与文本扫描时都会跳过这些字符，
因此 "敏 感 词"、"b-a-d" 这类插入分隔符的写法同样能被识别。
"""
from __future__ import annotations

import unicodedata

IGNORE_CHARS = frozenset("|-")

# Unicode 空白分隔符类别：空格、行分隔符、段落分隔符
_SPACE_CATEGORIES = frozenset(("Zs", "Zl", "Zp"))


def is_ignorable(ch: str) -> bool:
    """判断单个字符是否为可忽略字符。"""
    if ch in IGNORE_CHARS or ch.isspace():
        return True
    return unicodedata.category(ch) in _SPACE_CATEGORIES


def strip_ignorable(text: str) -> str:
    """去掉文本中所有可忽略字符。"""
    return "".join(ch for ch in text if not is_ignorable(ch))
