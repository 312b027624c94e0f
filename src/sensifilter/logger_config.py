"""
基于loguru的日志配置模块
"""
import os
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

_LEVEL_STYLES = {
    "SUCCESS": ("green", "✅"),
    "INFO": ("green", "✅"),
    "WARNING": ("yellow", "⚠️"),
    "ERROR": ("red", "❌"),
}


def _escape(text):
    """转义花括号与尖括号，防止被当作格式化占位符或颜色标签处理"""
    return text.replace("{", "{{").replace("}", "}}").replace("<", r"\<")


def formatter(record):
    """控制台日志格式：按级别着色并加图标"""
    message = _escape(str(record["message"]))
    if message.startswith("命中:"):
        formatted = f"<magenta>🚫 {message}</magenta>"
    else:
        color, icon = _LEVEL_STYLES.get(record["level"].name, ("white", "ℹ️"))
        formatted = f"<{color}>{icon} {message}</{color}>"
    return formatted + "\n"


def setup_logger(app_name="sensifilter", project_root=None, console_output=True, log_to_file=True, level="INFO"):
    """配置 Loguru 日志系统

    Args:
        app_name: 应用名称，用于日志目录
        project_root: 日志根目录，默认为当前工作目录
        console_output: 是否输出到控制台，默认为True
        log_to_file: 是否写入日志文件
        level: 控制台日志级别

    Returns:
        tuple: (logger, config_info)
            - logger: 配置好的 logger 实例
            - config_info: 包含日志配置信息的字典
    """
    if project_root is None:
        project_root = Path.cwd()

    # 清除默认处理器
    logger.remove()

    if console_output:
        logger.add(sys.stderr, level=level, format=formatter)

    config_info = {"log_file": None}
    if log_to_file:
        current_time = datetime.now()
        date_str = current_time.strftime("%Y-%m-%d")
        hour_str = current_time.strftime("%H")
        minute_str = current_time.strftime("%M%S")

        log_dir = os.path.join(project_root, "logs", app_name, date_str, hour_str)
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"{minute_str}.log")

        # 文件处理器不使用自定义格式，保持原始消息
        logger.add(
            log_file,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} | {elapsed} | {level.icon} {level: <8} | {name}:{function}:{line} - {message}",
            enqueue=True,
        )
        config_info["log_file"] = log_file

    logger.debug(f"日志系统已初始化，应用名称: {app_name}")
    return logger, config_info
