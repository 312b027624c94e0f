"""sensifilter 命令行：
- check: 判断文本是否含敏感词（命中时退出码为 1）
- find: 列出文本中的敏感词
- mask: 对 .txt 文件内容进行敏感词屏蔽（或替换为拼音），未提供路径时交互输入
"""
from __future__ import annotations

import codecs
from pathlib import Path
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ConfigError, FilterConfig, load_config
from .lexicon import LexiconError, load_lexicons, read_text_file
from .logger_config import setup_logger
from .processor import MatchPolicy, SensitiveWordFilter

app = typer.Typer(add_completion=False, help="敏感词检测与屏蔽")
console = Console()

LexiconOption = typer.Option(None, "--lexicon", "-l", help="敏感词库文件或目录，可重复指定")
PolicyOption = typer.Option(None, "--policy", help="匹配策略: greedy|simple")
ConfigOption = typer.Option(None, "--config", "-c", help="TOML 配置文件路径")


def _prepare(
    config_path: Optional[str],
    lexicons: Optional[List[str]],
    policy: Optional[str],
) -> tuple[SensitiveWordFilter, FilterConfig]:
    """加载配置与词库，命令行参数优先于配置文件。"""
    try:
        config = load_config(config_path)
        setup_logger(log_to_file=config.log_to_file)
        paths = list(lexicons) if lexicons else config.lexicons
        if not paths:
            logger.error("未指定敏感词库，请使用 --lexicon 或在配置文件中设置 lexicons")
            raise typer.Exit(code=2)
        words = load_lexicons(paths)
        match_policy = MatchPolicy.parse(policy) if policy else config.match_policy
    except (ConfigError, LexiconError, FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        raise typer.Exit(code=2)

    return SensitiveWordFilter(words, policy=match_policy), config


@app.command()
def check(
    text: str = typer.Argument(..., help="待检测的文本"),
    lexicon: Optional[List[str]] = LexiconOption,
    policy: Optional[str] = PolicyOption,
    config: Optional[str] = ConfigOption,
) -> None:
    """检测文本是否含有敏感词。"""
    word_filter, _ = _prepare(config, lexicon, policy)
    if word_filter.contains(text):
        console.print("[red]命中敏感词[/]")
        raise typer.Exit(code=1)
    console.print("[green]未命中[/]")


@app.command()
def find(
    text: str = typer.Argument(..., help="待检测的文本"),
    lexicon: Optional[List[str]] = LexiconOption,
    policy: Optional[str] = PolicyOption,
    config: Optional[str] = ConfigOption,
) -> None:
    """列出文本中的全部敏感词。"""
    word_filter, _ = _prepare(config, lexicon, policy)
    words = word_filter.find_all(text)
    if not words:
        console.print("[green]未命中[/]")
        return

    table = Table(title="敏感词", show_lines=False)
    table.add_column("片段", style="magenta")
    table.add_column("长度", style="cyan", justify="right")
    for word in words:
        table.add_row(escape(word), str(len(word)))
    console.print(table)


@app.command()
def mask(
    path: Optional[str] = typer.Argument(None, help="要处理的文件或目录（留空则进入交互输入）"),
    lexicon: Optional[List[str]] = LexiconOption,
    policy: Optional[str] = PolicyOption,
    config: Optional[str] = ConfigOption,
    mask_char: Optional[str] = typer.Option(None, "--mask", help="替换符，默认取配置文件（*）"),
    to_pinyin: bool = typer.Option(False, "--to-pinyin", help="将敏感词替换为拼音而不是替换符"),
    style: Optional[str] = typer.Option(None, help="拼音风格: default|tone|first_letter|initials|finals，默认取配置文件"),
    recursive: bool = typer.Option(True, help="目录处理时是否递归"),
    inplace: bool = typer.Option(True, help="是否原地覆盖写回文件"),
    suffix: str = typer.Option(".masked", help="非覆盖写入时输出文件名后缀"),
    encoding: Optional[str] = typer.Option(None, help="指定读取/写入编码（默认自动探测并沿用）"),
    dry_run: bool = typer.Option(False, help="仅预览替换结果，不写入文件"),
) -> None:
    """屏蔽 .txt 文件中的敏感词。"""
    word_filter, cfg = _prepare(config, lexicon, policy)
    unit = mask_char or cfg.mask
    if encoding:
        try:
            codecs.lookup(encoding)
        except LookupError:
            logger.error(f"未知的编码: {encoding}")
            raise typer.Exit(code=2)

    # 交互输入路径
    if not path:
        path = typer.prompt("请输入要处理的文件或文件夹路径")
    target = Path(path).expanduser().resolve()

    if not target.exists():
        logger.error(f"路径不存在: {target}")
        raise typer.Exit(code=2)

    files: list[Path] = []
    if target.is_file():
        if target.suffix.lower() == ".txt":
            files = [target]
        else:
            logger.error("仅支持处理 .txt 文本文件。")
            raise typer.Exit(code=2)
    else:
        globber = target.rglob if recursive else target.glob
        files = [p for p in globber("*.txt") if p.is_file()]

    if not files:
        logger.warning("未找到任何 .txt 文件。")
        raise typer.Exit(code=0)

    changed = 0
    for f in files:
        try:
            original, used_enc = read_text_file(f, encoding)
            if to_pinyin:
                replaced = word_filter.replace_with_pinyin(original, style=style or cfg.pinyin_style)
            else:
                replaced = word_filter.replace(original, unit)
            if replaced != original:
                changed += 1
                logger.info(f"命中: {f}")
                if dry_run:
                    console.print(replaced, markup=False, highlight=False)
                elif inplace:
                    f.write_text(replaced, encoding=encoding or used_enc, errors="ignore")
                else:
                    out = f.with_suffix(f.suffix + suffix)
                    out.write_text(replaced, encoding=encoding or used_enc, errors="ignore")
            else:
                logger.debug(f"未检测到敏感词: {f}")
        except (OSError, UnicodeError) as e:
            logger.error(f"处理失败: {f} -> {e}")

    logger.success(f"处理完成，共扫描 {len(files)} 个文件，修改 {changed} 个。")


def main() -> None:  # 兼容 pyproject scripts 与 python -m 运行
    app()


if __name__ == "__main__":
    main()
