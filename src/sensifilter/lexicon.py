"""
敏感词库加载

支持三种来源：
- JSON 词库：{"words": [...]}（TrChat SensitiveLexicon 格式）
- TXT 词库：每行一个词，空行与 # 开头的注释行会被跳过
- 目录：目录下所有 .txt / .json 词库
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from charset_normalizer import from_bytes
from loguru import logger

LEXICON_SUFFIXES = (".txt", ".json")


class LexiconError(ValueError):
    """词库内容格式错误"""


def read_text_file(path: Path, encoding: Optional[str] = None) -> Tuple[str, str]:
    """
    读取文本，返回 (文本内容, 使用的编码)
    若 encoding 未提供，自动探测。
    """
    if encoding:
        text = path.read_text(encoding=encoding, errors="ignore")
        return text, encoding
    data = path.read_bytes()
    if not data:
        return "", "utf-8"
    best = from_bytes(data).best()
    if best is None:
        # 回退 utf-8
        return data.decode("utf-8", errors="ignore"), "utf-8"
    return str(best), best.encoding or "utf-8"


def _load_json(path: Path) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LexiconError(f"词库 JSON 解析失败（{path}）: {e}") from e

    words = data.get("words") if isinstance(data, dict) else None
    if not isinstance(words, list):
        raise LexiconError(f"敏感词库格式不正确，缺少 words 列表: {path}")
    return [w.strip() for w in words if isinstance(w, str) and w.strip()]


def _load_txt(path: Path, encoding: Optional[str] = None) -> List[str]:
    text, _ = read_text_file(path, encoding)
    words = []
    for line in text.splitlines():
        word = line.strip()
        if word and not word.startswith("#"):
            words.append(word)
    return words


def load_lexicon(
    path: Union[str, Path],
    encoding: Optional[str] = None,
    recursive: bool = False,
) -> List[str]:
    """
    从文件或目录加载敏感词

    Args:
        path: 词库文件或目录
        encoding: TXT 词库编码，默认自动探测
        recursive: 目录加载时是否递归

    Returns:
        List[str]: 敏感词列表（保持文件中的顺序，可能含重复）

    Raises:
        FileNotFoundError: 路径不存在
        LexiconError: 词库格式不正确
    """
    target = Path(path).expanduser()
    if not target.exists():
        raise FileNotFoundError(f"词库路径不存在: {target}")

    if target.is_dir():
        globber = target.rglob if recursive else target.glob
        files = sorted(p for p in globber("*") if p.is_file() and p.suffix.lower() in LEXICON_SUFFIXES)
        if not files:
            logger.warning(f"目录中未找到词库文件: {target}")
        words: List[str] = []
        for f in files:
            words.extend(load_lexicon(f, encoding))
        return words

    suffix = target.suffix.lower()
    if suffix == ".json":
        words = _load_json(target)
    else:
        words = _load_txt(target, encoding)
    logger.info(f"已加载敏感词库: {target}（{len(words)} 个词）")
    return words


def load_lexicons(paths: Iterable[Union[str, Path]], encoding: Optional[str] = None) -> List[str]:
    """加载多个词库并去重（保持首次出现的顺序）。"""
    seen = set()
    merged: List[str] = []
    for path in paths:
        for word in load_lexicon(path, encoding):
            if word not in seen:
                seen.add(word)
                merged.append(word)
    return merged
