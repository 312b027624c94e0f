"""
敏感词检测与屏蔽工具包。
基于字典树一次扫描文本，支持跳过分隔符、贪婪/简单两种匹配策略。
"""

from .chars import is_ignorable
from .config import ConfigError, FilterConfig, load_config
from .lexicon import LexiconError, load_lexicon, load_lexicons
from .processor import MatchPolicy, SensitiveWordFilter
from .trie import Node

__all__ = [
    "ConfigError",
    "FilterConfig",
    "LexiconError",
    "MatchPolicy",
    "Node",
    "SensitiveWordFilter",
    "is_ignorable",
    "load_config",
    "load_lexicon",
    "load_lexicons",
]
