# src/yaml_validator/models.py
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import YamlValidatorError

DEFAULT_SEARCH_PATH = "src/main/resources/"


class ValidationConfig(BaseModel):
    """검증 설정. YAML 설정 파일의 구조를 정의하고 유효성을 검사하는 모델"""

    # 한 번의 실행 동안 바뀌지 않도록 frozen, 알 수 없는 키는 거부
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    search_paths: List[str] = Field(default_factory=lambda: [DEFAULT_SEARCH_PATH], alias="searchPaths")
    search_recursive: bool = Field(default=False, alias="searchRecursive")
    allow_duplicates: bool = Field(default=False, alias="allowDuplicates")
    parser: Literal["pyyaml", "ruamel"] = "pyyaml"


class ValidationOutcome(BaseModel):
    """파일 하나의 검증 결과. 첫 오류 또는 스트림 끝에서 한 번 결정되고 바뀌지 않음"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file: Path
    documents: int = 0
    error: Optional[YamlValidatorError] = None

    @property
    def success(self) -> bool:
        return self.error is None
