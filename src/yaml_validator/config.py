# src/yaml_validator/config.py
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError
from .models import ValidationConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".yamlvalidator.yaml"


def load_config(config_path: Path) -> ValidationConfig:
    """
    YAML 설정 파일을 읽어 ValidationConfig 로 변환합니다.
    빈 파일이면 기본값을 사용합니다.
    """
    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "rt", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse configuration file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read configuration file {config_path}: {e}") from e

    if raw is None:
        logger.debug(f"Configuration file {config_path} is empty. Using defaults.")
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a mapping, got {type(raw).__name__}.")

    try:
        config = ValidationConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e

    logger.debug(f"Loaded configuration from {config_path}: {config}")
    return config


def find_default_config(project_dir: Path) -> Optional[Path]:
    """프로젝트 디렉토리에 기본 설정 파일이 있으면 그 경로를, 없으면 None"""
    candidate = project_dir / DEFAULT_CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def build_config(base: Optional[ValidationConfig] = None, **overrides: Any) -> ValidationConfig:
    """
    설정 파일에서 읽은 값(base) 위에 명령줄에서 명시적으로 준 값만 덮어씁니다.
    값이 None 인 항목은 '지정되지 않음' 으로 보고 무시합니다.
    """
    values: Dict[str, Any] = base.model_dump() if base is not None else {}
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ValidationConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e
