# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License.

import logging
import os
from dataclasses import dataclass, fields

import yaml
from dotenv import find_dotenv, load_dotenv

from policy import DEFAULT_THRESHOLDS, PolicyThresholds
from urgency import DEFAULT_BANDS, UrgencyBands

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    vision_model: str = "gpt-4o-mini"
    model_provider: str = "openai"
    vision_client: str = "chat"
    prompt_variant: str = "intensity"
    result_log_path: str = "data/results.csv"
    upload_dir: str = "uploads"
    host: str = "0.0.0.0"
    port: int = 10000
    thresholds_file: str | None = None


def configure_logging(log_file="labeling.log"):
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers, force=True)


def load_environment():
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        logging.warning(
            "No .env file found. Make sure to set environment variables manually."
        )


def load_settings() -> Settings:
    """Reads settings from the environment, after loading a .env file if present."""
    load_environment()
    return Settings(
        vision_model=os.environ.get("VISION_MODEL", "gpt-4o-mini"),
        model_provider=os.environ.get("VISION_MODEL_PROVIDER", "openai"),
        vision_client=os.environ.get("VISION_CLIENT", "chat"),
        prompt_variant=os.environ.get("OBSERVATION_PROMPT_VARIANT", "intensity"),
        result_log_path=os.environ.get("RESULT_LOG_PATH", "data/results.csv"),
        upload_dir=os.environ.get("UPLOAD_DIR", "uploads"),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "10000")),
        thresholds_file=os.environ.get("THRESHOLDS_FILE") or None,
    )


def _override(defaults, section, values):
    if values is None:
        return defaults
    if not isinstance(values, dict):
        raise ValueError(f"Section '{section}' must be a mapping.")
    known = {f.name for f in fields(defaults)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(
            f"Unknown keys in section '{section}': {', '.join(sorted(unknown))}."
        )
    merged = {name: getattr(defaults, name) for name in known}
    merged.update({name: float(value) for name, value in values.items()})
    return type(defaults)(**merged)


def load_thresholds(path=None) -> tuple[UrgencyBands, PolicyThresholds]:
    """
    Loads urgency bands and verdict thresholds from a YAML file.

    The file may hold an 'urgency' and a 'policy' section; keys left out keep
    their default value. Without a path the defaults are returned.
    """
    if not path:
        return DEFAULT_BANDS, DEFAULT_THRESHOLDS
    if not os.path.exists(path):
        raise FileNotFoundError(f"Thresholds file {path} not found.")

    with open(path, "r") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Thresholds file {path} must contain a mapping.")

    unknown = set(config) - {"urgency", "policy"}
    if unknown:
        raise ValueError(f"Unknown sections in {path}: {', '.join(sorted(unknown))}.")

    bands = _override(DEFAULT_BANDS, "urgency", config.get("urgency"))
    thresholds = _override(DEFAULT_THRESHOLDS, "policy", config.get("policy"))
    logging.info(f"Loaded thresholds from {path}.")
    return bands, thresholds
