# src/yaml_validator/parsing.py
"""
YAML 파싱 기능을 하나의 인터페이스 뒤로 감춥니다.

검증 로직은 "바이트 스트림 -> 지연(lazy) 문서 시퀀스" 라는 기능만 알면 되므로,
PyYAML 과 ruamel.yaml 중 어느 쪽을 써도 탐색/검증 코드는 바뀌지 않습니다.
두 백엔드 모두 중복 키 정책(allow_duplicate_keys)을 인자로 받습니다.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterator, Optional, Tuple, Type

import yaml
from yaml.constructor import ConstructorError

from .exceptions import ParseError

logger = logging.getLogger(__name__)

MERGE_TAG = "tag:yaml.org,2002:merge"


class UniqueKeySafeLoader(yaml.SafeLoader):
    """같은 매핑 안에서 키가 반복되면 ConstructorError 를 던지는 SafeLoader"""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                # 병합 키(<<)는 flatten_mapping 이 처리하므로 중복 검사 대상이 아님
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    hash(key)
                except TypeError:
                    # 해시 불가능한 키는 PyYAML 자체 오류("found unhashable key")에 맡김
                    continue
                # 1, 1.0, true 처럼 값이 같아도 타입이 다르면 서로 다른 키 (타입까지 비교)
                marker = (type(key), key)
                if marker in seen:
                    raise ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"found duplicate key {key!r}", key_node.start_mark,
                    )
                seen.add(marker)
        return super().construct_mapping(node, deep=deep)


def _mark_position(mark: Any) -> Tuple[Optional[int], Optional[int]]:
    """라이브러리의 0-based mark 를 1-based (line, column) 으로 변환합니다."""
    if mark is None:
        return None, None
    return mark.line + 1, mark.column + 1


class YamlParser(ABC):
    """파싱 기능의 공통 인터페이스"""

    name: str = ""

    @abstractmethod
    def load_all(self, stream: BinaryIO, allow_duplicate_keys: bool, source: Path) -> Iterator[Any]:
        """
        stream 안의 모든 문서를 순서대로, 하나씩 파싱하여 yield 합니다.
        잘못된 문서를 만나면 즉시 ParseError 를 던지고 더 이상 진행하지 않습니다.
        """


class PyYamlParser(YamlParser):
    name = "pyyaml"

    def load_all(self, stream: BinaryIO, allow_duplicate_keys: bool, source: Path) -> Iterator[Any]:
        loader_class = yaml.SafeLoader if allow_duplicate_keys else UniqueKeySafeLoader
        try:
            yield from yaml.load_all(stream, Loader=loader_class)
        except yaml.MarkedYAMLError as e:
            line, column = _mark_position(e.problem_mark)
            raise ParseError(str(e), source, line, column) from e
        except yaml.YAMLError as e:
            raise ParseError(str(e), source) from e
        except (ValueError, TypeError) as e:
            # 값 생성 단계의 오류 (예: 2020-02-30 같은 존재하지 않는 날짜)
            raise ParseError(str(e), source) from e


class RuamelParser(YamlParser):
    name = "ruamel"

    def __init__(self):
        # ruamel.yaml 은 이 백엔드를 고를 때만 필요하므로 지연 임포트
        from ruamel.yaml import YAML
        self._yaml_class = YAML

    def _new_loader(self, allow_duplicate_keys: bool):
        loader = self._yaml_class(typ="safe", pure=True)
        loader.allow_duplicate_keys = allow_duplicate_keys
        return loader

    def load_all(self, stream: BinaryIO, allow_duplicate_keys: bool, source: Path) -> Iterator[Any]:
        from ruamel.yaml.error import MarkedYAMLError, YAMLError

        loader = self._new_loader(allow_duplicate_keys)
        try:
            yield from loader.load_all(stream)
        # DuplicateKeyError 도 MarkedYAMLError 계열
        except MarkedYAMLError as e:
            line, column = _mark_position(e.problem_mark)
            raise ParseError(str(e), source, line, column) from e
        except YAMLError as e:
            raise ParseError(str(e), source) from e
        except (ValueError, TypeError) as e:
            raise ParseError(str(e), source) from e


PARSERS: Dict[str, Type[YamlParser]] = {
    PyYamlParser.name: PyYamlParser,
    RuamelParser.name: RuamelParser,
}


def get_parser(name: str) -> YamlParser:
    """이름으로 파서 백엔드를 생성합니다."""
    try:
        parser_class = PARSERS[name]
    except KeyError:
        raise ValueError(f"Unknown YAML parser '{name}'. Choose one of: {', '.join(sorted(PARSERS))}") from None
    logger.debug(f"Using '{name}' YAML parser backend.")
    return parser_class()
