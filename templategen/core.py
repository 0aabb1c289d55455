import json
import logging
import logging.handlers
import os
import re
import sys
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CONFIG_ENV_VAR = "TEMPLATEGEN_CONFIG"

# ---------------- Logging ----------------

ROOT_LOGGER = "templategen"


def _file_handler(log_file, fmt):
    os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
    fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
    fh.setFormatter(fmt)
    return fh


def get_logger(name=ROOT_LOGGER, log_file=None):
    """
    Module loggers live under the package logger (``templategen.<name>``) and
    carry no handlers of their own, so level and file set on the package
    logger apply to every line.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(os.environ.get("TEMPLATEGEN_LOG_LEVEL", "INFO").upper())
        fmt = logging.Formatter(
            '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
        )
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        root.addHandler(sh)
    if log_file and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers
    ):
        root.addHandler(_file_handler(log_file, root.handlers[0].formatter))
    return logging.getLogger(name)


log = get_logger()

# ---------------- Config Models ----------------


class LayoutCfg(BaseModel):
    variation_factor: float = Field(0.1, ge=0.0, le=1.0)
    max_overlap_iterations: int = Field(10, ge=0, le=100)


class GraphicsCfg(BaseModel):
    # style name -> shape kinds, replaces the built-in set for that style
    style_shapes: Dict[str, List[str]] = Field(default_factory=dict)


class DefaultsCfg(BaseModel):
    style: str = "minimal"
    base_hue: int = 210
    color_scheme: str = "monochromatic"
    typography: str = "Modern Sans"
    layout: str = "classic-document"
    seed: float = 0.5


class LoggingCfg(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None


class GeneratorCfg(BaseModel):
    layout: LayoutCfg = Field(default_factory=LayoutCfg)
    graphics: GraphicsCfg = Field(default_factory=GraphicsCfg)
    defaults: DefaultsCfg = Field(default_factory=DefaultsCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def config_path() -> str:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return override
    return os.path.join(BASE, "conf", "templategen.yaml")


def load_config(path: Optional[str] = None) -> GeneratorCfg:
    path = path or config_path()
    if not os.path.exists(path):
        log.debug(f"Config file {path} not found, using defaults")
        return GeneratorCfg()
    raw = load_yaml(path)
    if not isinstance(raw, dict):
        raise ValueError(f"YAML at {path} must be a mapping/object.")
    try:
        cfg = GeneratorCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


def configure_logging(cfg: GeneratorCfg) -> logging.Logger:
    """
    Apply the configured level and log file to the package logger.

    The file handler follows the config: a new path replaces the previous
    file handler and no path removes it.
    """
    logger = get_logger()
    logger.setLevel(cfg.logging.level.upper())

    log_file = cfg.logging.file
    if log_file and not os.path.isabs(log_file):
        log_file = os.path.join(BASE, log_file)
    wanted = os.path.abspath(log_file) if log_file else None

    for h in list(logger.handlers):
        if isinstance(h, logging.handlers.RotatingFileHandler) and h.baseFilename != wanted:
            logger.removeHandler(h)
            h.close()
    if wanted and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        logger.addHandler(_file_handler(wanted, logger.handlers[0].formatter))
    return logger


# ---------------- Env ----------------


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    env = {k: v for k, v in os.environ.items()}
    return env


# ---------------- JSON ----------------


def parse_llm_json(text: str) -> dict:
    # Remove code fences and leading/trailing junk
    text = text.strip()
    text = re.sub(r"^```(?:json)?\s*|\s*```$", "", text, flags=re.DOTALL)
    text = text.strip()
    # Attempt direct parse; fallback extract first {...}
    try:
        data = json.loads(text)
    except Exception:
        m = re.search(r"\{.*\}", text, flags=re.DOTALL)
        if not m:
            raise ValueError("No JSON object found in LLM output.")
        try:
            data = json.loads(m.group(0))
        except Exception as e:
            raise ValueError(f"Failed to parse LLM JSON: {e}")
    if not isinstance(data, dict):
        raise ValueError("LLM output is not a JSON object.")
    return data


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
