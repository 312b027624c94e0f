# src/sensifilter/config.py

"""
过滤器配置

配置文件为 TOML 格式，例如：

    [filter]
    match_policy = "greedy"
    mask = "*"
    pinyin_style = "default"
    lexicons = ["words/sensitive.txt"]

    [log]
    to_file = false
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import toml
from loguru import logger

from .pinyin import PINYIN_STYLES
from .processor import MatchPolicy

DEFAULT_CONFIG_NAME = "sensifilter.toml"


class ConfigError(ValueError):
    """配置内容不合法"""


@dataclass
class FilterConfig:
    match_policy: MatchPolicy = MatchPolicy.GREEDY
    mask: str = "*"
    pinyin_style: str = "default"
    lexicons: List[str] = field(default_factory=list)
    log_to_file: bool = False

    @classmethod
    def from_dict(cls, data: dict, base_dir: Optional[Path] = None) -> "FilterConfig":
        filter_cfg = data.get("filter", {})
        log_cfg = data.get("log", {})
        if not isinstance(filter_cfg, dict) or not isinstance(log_cfg, dict):
            raise ConfigError("[filter] 与 [log] 必须是表")

        try:
            policy = MatchPolicy.parse(filter_cfg.get("match_policy", MatchPolicy.GREEDY))
        except ValueError as e:
            raise ConfigError(str(e)) from e

        mask = filter_cfg.get("mask", "*")
        if not isinstance(mask, str) or not mask:
            raise ConfigError("mask 必须是非空字符串")

        style = filter_cfg.get("pinyin_style", "default")
        if style not in PINYIN_STYLES:
            raise ConfigError(f"未知的拼音风格: {style}")

        lexicons = filter_cfg.get("lexicons", [])
        if isinstance(lexicons, str):
            lexicons = [lexicons]
        if not isinstance(lexicons, list):
            raise ConfigError("lexicons 必须是路径列表")
        # 相对路径相对于配置文件所在目录
        if base_dir is not None:
            lexicons = [str(p) if Path(p).is_absolute() else str(base_dir / p) for p in lexicons]

        return cls(
            match_policy=policy,
            mask=mask,
            pinyin_style=style,
            lexicons=[str(p) for p in lexicons],
            log_to_file=bool(log_cfg.get("to_file", False)),
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> FilterConfig:
    """
    加载 TOML 配置文件

    Args:
        config_path: 配置文件路径，默认查找当前目录下的 sensifilter.toml

    Returns:
        FilterConfig: 配置，文件不存在时返回默认配置
    """
    path = Path(config_path) if config_path else Path.cwd() / DEFAULT_CONFIG_NAME
    if not path.exists():
        if config_path:
            logger.warning(f"配置文件不存在: {path}，使用默认配置")
        return FilterConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)
    except toml.TomlDecodeError as e:
        raise ConfigError(f"配置文件解析失败（{path}）: {e}") from e

    logger.info(f"已加载配置文件: {path}")
    return FilterConfig.from_dict(data, base_dir=path.parent.resolve())
