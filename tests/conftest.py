import logging
from pathlib import Path
from typing import Callable, List

import pytest

REPORTER_LOGGER = "yaml_validator.reporter"


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """tmp_path 아래에 (필요하면 하위 디렉토리까지 만들어) 파일을 씁니다."""

    def _write(relative_path: str, content: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def report_messages(caplog) -> Callable[[], List[str]]:
    """Reporter 가 남긴 로그 메시지만 순서대로 돌려주는 함수"""
    caplog.set_level(logging.INFO, logger="yaml_validator")

    def _messages() -> List[str]:
        return [record.getMessage() for record in caplog.records if record.name == REPORTER_LOGGER]

    return _messages
