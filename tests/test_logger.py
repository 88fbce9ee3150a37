import io
import json
import logging
import pytest
from assertion_core.errors import InvalidSyntaxError
from assertion_core.logger import JsonFormatter, get_logger
from assertion_core.parser import parse_key_value


def test_file_logging_is_json(tmp_path):
    path = tmp_path / "logs" / "assert.log"
    log = get_logger("assertion_core.test_file", to_file=str(path))
    log.info("hello")
    for h in log.handlers:
        h.flush()

    line = path.read_text().strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["msg"] == "hello"
    assert rec["level"] == "INFO"
    assert rec["ts"].endswith("Z")


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("ASSERTION_LOG_LEVEL", "debug")
    assert get_logger("assertion_core.test_env").level == logging.DEBUG
    assert get_logger("assertion_core.test_explicit", level=logging.WARNING).level == logging.WARNING


def test_quoted_message_stays_one_record():
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setFormatter(JsonFormatter())
    log = logging.getLogger("assertion_core.parser")
    old_level = log.level
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    try:
        with pytest.raises(InvalidSyntaxError):
            parse_key_value('!", "level": "CRITICAL')
    finally:
        log.removeHandler(handler)
        log.setLevel(old_level)

    lines = buf.getvalue().strip().splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[0])
    assert rec["level"] == "DEBUG"
    assert set(rec) == {"ts", "level", "name", "msg"}
    assert '"level": "CRITICAL' in rec["msg"]


def test_formatter_escapes_control_characters():
    record = logging.LogRecord("assertion_core.x", logging.INFO, __file__, 1,
                               "bad part=%s", ("a\nb\"}",), None)
    out = JsonFormatter().format(record)
    assert "\n" not in out
    assert json.loads(out)["msg"] == "bad part=a\nb\"}"
