# src/changelog_kit/extraction/config.py

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

OutputFormat = Literal["text", "html", "json"]


class ExtractionConfig(BaseModel):
    """What to extract from which changelog, and how to print it.

    ``select`` is one of ``all``, ``latest``, ``latest-released``,
    ``unreleased`` or a semantic version such as ``1.2.3``.
    """

    path: Path = Path("CHANGELOG.md")
    select: str = "all"
    output_format: OutputFormat = "text"
    plugins: list[str] = []

    class Config:
        extra = "forbid"


def load_config(path: str | Path) -> ExtractionConfig:
    """Load an ``ExtractionConfig`` from a YAML file.

    Relative changelog paths are resolved against the config file's directory.
    """
    file_path = Path(path)
    logger.info("Loading extraction config from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}

    config = ExtractionConfig(**data)
    if not config.path.is_absolute():
        config = config.model_copy(update={"path": file_path.parent / config.path})
    logger.debug("Loaded config: %s", config)
    return config
