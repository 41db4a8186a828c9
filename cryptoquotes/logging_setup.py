from __future__ import annotations

import logging
import logging.config
from pathlib import Path

import yaml


def configure_logging(config_path: str | Path = "logging.yaml") -> None:
    """Apply a dictConfig-style YAML file, or fall back to basicConfig at INFO."""
    path = Path(config_path)
    if not path.exists():
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        return

    with open(path, "r", encoding="utf-8") as handle:
        config = yaml.safe_load(handle)
    logging.config.dictConfig(config)
