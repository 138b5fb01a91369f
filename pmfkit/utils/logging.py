"""Run logging utilities."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, TextIO

_FORMAT = "[%(asctime)s] %(levelname)-7s %(message)s"


def setup_logger(name: str, log_path: str | Path | None = None, stream: bool = True) -> logging.Logger:
    """Configure a named logger writing to stdout and, optionally, a file."""

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    formatter = logging.Formatter(_FORMAT)
    if stream:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    if log_path is not None:
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger


class ExperimentLogger:
    """Writes ``log.txt`` and ``metrics.jsonl`` under ``output_dir/name``."""

    def __init__(self, experiment_name: str, output_dir: str | Path = "runs", stream: bool = False) -> None:
        sanitized = experiment_name.replace(" ", "_") or "experiment"
        self.run_dir = Path(output_dir) / sanitized
        self.run_dir.mkdir(parents=True, exist_ok=True)
        self._logger = setup_logger(
            f"pmfkit.run.{sanitized}", self.run_dir / "log.txt", stream=stream
        )
        self._metrics_handle: TextIO = (self.run_dir / "metrics.jsonl").open(
            "a", encoding="utf-8"
        )

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def log(self, metrics: Mapping[str, Any]) -> None:
        entry = dict(metrics)
        entry.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
        self._metrics_handle.write(json.dumps(entry, sort_keys=True, default=str) + "\n")
        self._metrics_handle.flush()

    def close(self) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        if not self._metrics_handle.closed:
            self._metrics_handle.close()


__all__ = ["ExperimentLogger", "setup_logger"]
