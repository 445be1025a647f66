# src/yaml_validator/logic.py
from pathlib import Path
from typing import Iterator, List, Optional

from .exceptions import (
    ClassificationError,
    FileReadError,
    ParseError,
    PathResolutionError,
    ValidationFailedError,
)
from .models import ValidationConfig, ValidationOutcome
from .parsing import YamlParser, get_parser
from .reporter import Reporter

YAML_EXTENSIONS = (".yaml", ".yml")


# --- 검색 경로 해석 ---
def resolve_search_path(path: str, base_dir: Path) -> Path:
    """
    설정된 검색 경로 문자열을 심볼릭 링크까지 모두 풀린 절대 경로로 변환합니다.
    상대 경로는 base_dir(프로젝트 디렉토리) 기준으로 해석합니다.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    try:
        # strict=True: 존재하지 않거나 깨진 링크면 예외
        return candidate.resolve(strict=True)
    except FileNotFoundError:
        raise PathResolutionError(path, f"{candidate} does not exist") from None
    except (OSError, RuntimeError) as e:
        # RuntimeError: 일부 Python 버전에서 심볼릭 링크 순환 시 발생
        raise PathResolutionError(path, str(e)) from e


# --- YAML 파일 판별 및 탐색 ---
def is_yaml_file(path: Path) -> bool:
    """확장자(.yaml/.yml, 대소문자 구분)만으로 판별. 내용은 보지 않습니다."""
    return not path.is_dir() and path.name.endswith(YAML_EXTENSIONS)


def _raise_listing_error(error: OSError, directory: Path) -> None:
    path = Path(error.filename) if error.filename is not None else directory
    raise FileReadError(path, error.strerror or str(error)) from error


def _list_children(directory: Path) -> List[Path]:
    try:
        return list(directory.iterdir())
    except OSError as e:
        _raise_listing_error(e, directory)


def _walk_subtree(directory: Path) -> List[Path]:
    # rglob 과 달리 읽을 수 없는 하위 디렉토리를 건너뛰지 않고 바로 실패
    found = []
    for current, dirnames, filenames in directory.walk(on_error=lambda e: _raise_listing_error(e, directory)):
        found.extend(current / name for name in dirnames + filenames)
    return found


def discover_yaml_files(directory: Path, recursive: bool) -> Iterator[Path]:
    """
    directory 안의 YAML 파일을 경로 사전순으로 하나씩 돌려줍니다.
    recursive=False 이면 바로 아래 항목만, True 이면 하위 트리 전체를 봅니다.
    """
    candidates = _walk_subtree(directory) if recursive else _list_children(directory)
    # OS 디렉토리 목록 순서에 의존하지 않도록 정렬
    for path in sorted(candidates):
        if is_yaml_file(path):
            yield path


# --- 파일 하나의 모든 문서 검증 ---
class DocumentValidator:
    """파일 하나를 열어 모든 문서를 순서대로 파싱시키고, 문서마다 성공 로그를 남깁니다."""

    def __init__(self, parser: YamlParser, reporter: Reporter):
        self.parser = parser
        self.reporter = reporter

    def validate(self, file: Path, allow_duplicate_keys: bool) -> ValidationOutcome:
        document_index = 0
        try:
            with open(file, "rb") as stream:
                for _document in self.parser.load_all(stream, allow_duplicate_keys, source=file):
                    document_index += 1
                    self.reporter.document_success(document_index, file)
        except ParseError as e:
            return ValidationOutcome(file=file, documents=document_index, error=e)
        except OSError as e:
            error = FileReadError(file, e.strerror or str(e))
            error.__cause__ = e
            return ValidationOutcome(file=file, documents=document_index, error=error)

        return ValidationOutcome(file=file, documents=document_index)


# --- 전체 실행 ---
class ValidationOrchestrator:
    """
    설정된 검색 경로를 순서대로 돌면서 파일/디렉토리를 구분하고 검증을 위임합니다.
    첫 번째 실패에서 바로 중단합니다 (여러 실패를 모으지 않음).
    """

    def __init__(self, config: ValidationConfig, project_dir: Path,
                 parser: Optional[YamlParser] = None, reporter: Optional[Reporter] = None):
        self.config = config
        self.project_dir = project_dir
        self.reporter = reporter or Reporter()
        self.validator = DocumentValidator(parser or get_parser(config.parser), self.reporter)

    def run(self) -> None:
        """성공하면 None, 실패하면 YamlValidatorError 계열 예외를 던집니다."""
        for search_path in self.config.search_paths:
            file_or_directory = resolve_search_path(search_path, self.project_dir)
            self._check_file_or_directory(file_or_directory)

    def _check_file_or_directory(self, path: Path) -> None:
        if path.is_dir():
            self._validate_directory(path)
        elif path.is_file():
            # 확장자가 맞지 않는 단일 파일은 조용히 건너뜀
            if is_yaml_file(path):
                self._validate_yaml_file(path)
        else:
            raise ClassificationError(path)

    def _validate_directory(self, directory: Path) -> None:
        recursive = self.config.search_recursive
        self.reporter.starting_directory(directory, recursive)
        for yaml_file in discover_yaml_files(directory, recursive):
            self._validate_yaml_file(yaml_file)

    def _validate_yaml_file(self, file: Path) -> None:
        self.reporter.starting_file(file)
        outcome = self.validator.validate(file, self.config.allow_duplicates)
        if not outcome.success:
            raise ValidationFailedError(self.reporter.file_failure_message(file), file) from outcome.error
        self.reporter.file_success(file)
