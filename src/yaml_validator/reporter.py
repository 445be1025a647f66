# src/yaml_validator/reporter.py
import logging
from pathlib import Path

# 기존 도구/테스트와의 호환을 위해 문구는 글자 그대로 유지해야 함
STARTING_DIRECTORY_MESSAGE = "Starting validation of YAML files in directory '%s'."
STARTING_DIRECTORY_RECURSIVE_MESSAGE = "Starting validation of YAML files in directory '%s' recursively."
STARTING_FILE_MESSAGE = "Starting validation of YAML file '%s'."
DOCUMENT_SUCCESS_MESSAGE = "Validation of document #%s in file %s successful."
FILE_SUCCESS_MESSAGE = "Validation of YAML file '%s' successful."
FILE_FAILURE_MESSAGE = "Validation of YAML file '%s' failed."

logger = logging.getLogger(__name__)


class Reporter:
    """진행/성공/실패 메시지를 INFO 레벨 로그로 남깁니다. 상태는 없습니다."""

    def starting_directory(self, directory: Path, recursive: bool) -> None:
        template = STARTING_DIRECTORY_RECURSIVE_MESSAGE if recursive else STARTING_DIRECTORY_MESSAGE
        logger.info(template % directory)

    def starting_file(self, file: Path) -> None:
        logger.info(STARTING_FILE_MESSAGE % file)

    def document_success(self, index: int, file: Path) -> None:
        logger.info(DOCUMENT_SUCCESS_MESSAGE % (index, file))

    def file_success(self, file: Path) -> None:
        logger.info(FILE_SUCCESS_MESSAGE % file)

    @staticmethod
    def file_failure_message(file: Path) -> str:
        # 실패 원인은 문자열에 넣지 않고 예외 체인(__cause__)으로 전달
        return FILE_FAILURE_MESSAGE % file
