import logging
import sys
import pytest
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from utils.log import LoanJsonFormatter


@pytest.fixture(autouse=True)
def reset_json_logging():
    """CLI 会把 JSON handler 挂到根 logger，测试结束后移除"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, LoanJsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
