"""日志配置测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import json
import logging

from utils.log import setup_logging


def test_json_records(capsys):
    setup_logging("DEBUG")
    logging.getLogger("core.calculator").info("Computed loan", extra={"tenor_months": 12})
    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "Computed loan"
    assert record["level"] == "INFO"
    assert record["service"] == "loan-calculator"
    assert record["tenor_months"] == 12


def test_setup_is_idempotent():
    setup_logging("INFO")
    setup_logging("WARNING")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
