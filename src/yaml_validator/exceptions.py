# src/yaml_validator/exceptions.py
from pathlib import Path
from typing import Optional


class YamlValidatorError(Exception):
    """yaml_validator 에서 발생하는 모든 오류의 기본 클래스"""


class ConfigError(YamlValidatorError):
    """설정 파일이 없거나, YAML 이 깨졌거나, 값이 유효하지 않은 경우"""


class PathResolutionError(YamlValidatorError):
    """설정된 검색 경로가 존재하지 않거나 정규화(canonicalize)할 수 없는 경우"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not resolve search path '{path}': {reason}")


class ClassificationError(YamlValidatorError):
    """해석된 경로가 일반 파일도 디렉토리도 아닌 경우 (예: 중간에 사라짐)"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File at path {path} is neither a file nor a directory.")


class ParseError(YamlValidatorError):
    """
    YAML 문서 하나가 문법적으로 잘못된 경우.
    파서의 진단 메시지와 파일 경로, 그리고 파서가 제공하면 1-based 줄/열 번호를 가집니다.
    """

    def __init__(self, diagnostic: str, path: Path,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.diagnostic = diagnostic
        self.path = path
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Malformed YAML in {path}{location}: {diagnostic}")


class FileReadError(YamlValidatorError):
    """YAML 파일이나 디렉토리 목록을 읽을 수 없는 경우 (IOError 계열)"""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class ValidationFailedError(YamlValidatorError):
    """
    파일 하나의 검증 실패로 전체 실행이 중단될 때 던져지는 오류.
    메시지는 "Validation of YAML file '...' failed." 이고, 원인은 __cause__ 로 연결됩니다.
    """

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)
