"""敏感词转拼音"""
from __future__ import annotations

import pypinyin

PINYIN_STYLES = {
    "default": pypinyin.NORMAL,
    "tone": pypinyin.TONE,
    "first_letter": pypinyin.FIRST_LETTER,
    "initials": pypinyin.INITIALS,
    "finals": pypinyin.FINALS,
}


def convert_to_pinyin(text: str, style: str = "default") -> str:
    """
    将文本转换为拼音

    Args:
        text: 待转换的文本
        style: 拼音风格，可选值：
              'default': 普通风格，不带声调
              'tone': 带声调
              'first_letter': 首字母
              'initials': 声母
              'finals': 韵母

    Returns:
        str: 转换后的拼音文本，未知风格按 default 处理
    """
    style_code = PINYIN_STYLES.get(style, pypinyin.NORMAL)
    return "".join(pypinyin.lazy_pinyin(text, style=style_code))
