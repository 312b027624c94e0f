import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """CLI 测试会把日志输出绑定到 CliRunner 的临时流，每个测试后恢复默认输出"""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
