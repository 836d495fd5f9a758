from __future__ import annotations

import logging

import pytest

from oceanabove.__main__ import build_parser, main
from oceanabove.camera import MoveIntent


def test_parser_collects_held_intents() -> None:
    args = build_parser().parse_args(["--headless", "--hold", "forward", "--hold", "LEFT"])
    assert args.hold == [MoveIntent.FORWARD, MoveIntent.LEFT]


def test_parser_rejects_unknown_intent() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--hold", "up"])


def test_headless_run_logs_camera_trace(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="oceanabove"):
        code = main(["--headless", "--frames", "3", "--dt", "0.1", "--hold", "forward"])
    assert code == 0
    frames = [r.getMessage() for r in caplog.records if r.getMessage().startswith("frame ")]
    assert len(frames) == 3
    assert "pos=(0.0000, 1.5000, 4.9950)" in frames[0]


def test_log_file_receives_the_trace(tmp_path) -> None:
    log_path = tmp_path / "run.log"
    code = main(["--headless", "--frames", "2", "--log-file", str(log_path), "--hold", "left"])
    assert code == 0
    logger = logging.getLogger("oceanabove")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    text = log_path.read_text(encoding="utf-8")
    assert "frame 0" in text
    assert "frame 1" in text
