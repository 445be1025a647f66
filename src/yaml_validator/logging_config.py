# src/yaml_validator/logging_config.py
import logging
import logging.config
import yaml
from pathlib import Path
import coloredlogs # dictConfig 가 coloredlogs.ColoredFormatter 를 찾을 수 있도록 임포트
import sys

# 설정 과정 자체를 기록하는 로거 (설정 완료 전에는 기본 설정이 적용될 수 있음)
config_logger = logging.getLogger(__name__)

LOGGING_CONFIG_PATH = Path(__file__).parent / 'logging_config.yaml' # 패키지 안에 함께 배포됨
FALLBACK_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def setup_logging(verbose: bool = False, config_path: Path = LOGGING_CONFIG_PATH):
    """YAML 설정 파일을 로드하여 로깅 시스템을 설정합니다."""

    # dictConfig 전에 coloredlogs.install() 을 먼저 호출해 컬러 출력 환경을 초기화
    # (root 핸들러는 아래 dictConfig 가 교체하므로 중복 출력은 없음)
    try:
        coloredlogs.install()
        config_logger.debug("Called coloredlogs.install() for initial setup.")
    except Exception as install_e:
        print(f"Warning: coloredlogs.install() failed during initial setup: {install_e}", file=sys.stderr)

    try:
        if config_path.is_file():
            with open(config_path, 'rt', encoding='utf-8') as f:
                config = yaml.safe_load(f.read())

            if config:
                logging.config.dictConfig(config)
                config_logger.debug(f"Logging setup complete from {config_path}.")
            else:
                # 파일은 있지만 내용이 비어있는 경우
                print(f"Warning: Logging configuration file {config_path} is empty. Using basicConfig.", file=sys.stderr)
                logging.basicConfig(level=logging.INFO, format=FALLBACK_FORMAT, force=True)
        else:
            print(f"Warning: Logging configuration file not found at {config_path}. Using basicConfig.", file=sys.stderr)
            logging.basicConfig(level=logging.INFO, format=FALLBACK_FORMAT, force=True)

    except yaml.YAMLError as yaml_e:
        print(f"Error parsing logging configuration file {config_path}: {yaml_e}", file=sys.stderr)
        print("Using basicConfig as fallback.", file=sys.stderr)
        logging.basicConfig(level=logging.INFO, format=FALLBACK_FORMAT, force=True)
    except (OSError, ValueError, TypeError, AttributeError, ImportError) as e:
        # dictConfig 는 잘못된 설정에 ValueError 등을 던짐
        print(f"Error loading logging configuration from {config_path}: {e}", file=sys.stderr)
        print("Using basicConfig as fallback.", file=sys.stderr)
        logging.basicConfig(level=logging.INFO, format=FALLBACK_FORMAT, force=True)

    # --verbose: 패키지 로거만 DEBUG 로 낮춤
    logging.getLogger("yaml_validator").setLevel(logging.DEBUG if verbose else logging.INFO)
