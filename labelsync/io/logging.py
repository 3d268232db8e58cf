"""Logging utilities for LabelSync.

Provides a file logger for CLI runs and structured records (JSON lines or
YAML documents) for resolution reports.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_timestamped_log_path(log_path: PathLike) -> Path:
    """Insert a timestamp before the suffix: run.log -> run_20261017_080530.log."""
    log_path = Path(log_path)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_path.parent / f"{log_path.stem}_{timestamp}{log_path.suffix or '.log'}"


def attach_file_handler(
    log_path: PathLike,
    name: str = "labelsync",
    level: int = logging.INFO,
    timestamped: bool = False,
) -> Path:
    """Send records of logger ``name`` (and its children) to a file.

    The logger level is left as configured, so the file receives what the
    console would receive, filtered by ``level``.

    Parameters
    ----------
    log_path : PathLike
        Log file path. Parent directories are created.
    name : str
        Logger name. Package modules log under ``labelsync.*``.
    level : int
        Level for the file handler.
    timestamped : bool
        Add a timestamp to the file name to keep earlier logs.

    Returns
    -------
    Path
        Path actually written to.
    """
    path = get_timestamped_log_path(log_path) if timestamped else Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return path


def write_record(path: PathLike, record: dict[str, Any], fmt: str = "json") -> Path:
    """Append ``record`` to ``path`` as a JSON line or a YAML document.

    Parameters
    ----------
    path : PathLike
        Output file. Parent directories are created.
    record : dict
        Record to serialize.
    fmt : str
        ``json`` or ``yaml``.
    """
    if fmt not in ("json", "yaml"):
        raise ValueError(f"Unknown record format: '{fmt}'")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        if fmt == "json":
            handle.write(json.dumps(record, default=str))
            handle.write("\n")
        else:
            handle.write(yaml.safe_dump(record, sort_keys=False))
            handle.write("---\n")
    return path
