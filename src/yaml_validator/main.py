# src/yaml_validator/main.py
import typer
from pathlib import Path
from typing_extensions import Annotated
from typing import List, Optional
from enum import Enum
from importlib.metadata import version, PackageNotFoundError

from .config import DEFAULT_CONFIG_FILENAME, build_config, find_default_config, load_config
from .exceptions import YamlValidatorError
from .logging_config import setup_logging
from .logic import ValidationOrchestrator
from .models import DEFAULT_SEARCH_PATH

# 버전 정보는 설치된 패키지 메타데이터에서 읽음
try:
    __version__ = version("yaml-validator")
except PackageNotFoundError:
    # 패키지가 설치되지 않은 상태로 실행될 때 대비
    __version__ = "0.1.0" # pyproject.toml과 일치시키세요


class ParserChoice(str, Enum):
    pyyaml = "pyyaml"
    ruamel = "ruamel"


# --- Typer 앱 생성 및 기본 설정 ---
app = typer.Typer(
    name="yamlv",
    help="Checks that configured files and directories contain only syntactically valid YAML.",
    add_completion=False,
    no_args_is_help=True,
)

# --- 버전 콜백 함수 ---
def version_callback(value: bool):
    if value:
        typer.echo(f"yamlv version: {__version__}")
        raise typer.Exit()

# --- 전역 옵션: 버전 ---
@app.callback()
def main_options(
    version: Annotated[Optional[bool], typer.Option(
        "--version", "-v",
        help="Show the application's version and exit.",
        callback=version_callback,
        is_eager=True
    )] = None,
):
    """
    yamlv: a build-time YAML syntax check.
    """
    pass


def report_failure(error: YamlValidatorError):
    """오류 메시지와 직접적인 원인(있다면)을 빨간색으로 stderr 에 출력"""
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    if error.__cause__ is not None:
        typer.secho(f"Caused by: {error.__cause__}", fg=typer.colors.RED, err=True)


# --- 'run' 하위 명령어 ---
@app.command()
def run(
    search_paths: Annotated[Optional[List[str]], typer.Argument(
        help=f"Files or directories to validate. Defaults to the configured searchPaths, or '{DEFAULT_SEARCH_PATH}'.",
        show_default=False,
    )] = None,

    recursive: Annotated[Optional[bool], typer.Option(
        "--recursive/--no-recursive", "-r",
        help="Search directories recursively. Overrides searchRecursive from the config file.",
        show_default=False,
    )] = None,

    allow_duplicates: Annotated[Optional[bool], typer.Option(
        "--allow-duplicates/--no-allow-duplicates",
        help="Tolerate repeated mapping keys. Overrides allowDuplicates from the config file.",
        show_default=False,
    )] = None,

    parser: Annotated[Optional[ParserChoice], typer.Option(
        "--parser",
        help="YAML parser backend to use.",
        show_default=False,
    )] = None,

    config_path: Annotated[Optional[Path], typer.Option(
        "--config", "-c",
        help=f"Path to a YAML configuration file. Defaults to '{DEFAULT_CONFIG_FILENAME}' in the project directory if present.",
        dir_okay=False,
        resolve_path=True,
    )] = None,

    project_dir: Annotated[Optional[Path], typer.Option(
        "--project-dir", "-d",
        help="Base directory for relative search paths. Defaults to the current directory.",
        exists=True,
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    )] = None,

    verbose: Annotated[bool, typer.Option(
        "--verbose",
        help="Show debug logging.",
    )] = False,
):
    """
    Validates every .yaml/.yml file found on the search paths and stops at the first failure.
    """
    setup_logging(verbose=verbose)

    # --- 1. 프로젝트 디렉토리 기본값 설정 ---
    if project_dir is None:
        project_dir = Path.cwd().resolve()

    try:
        # --- 2. 설정 파일 로드 (있으면) ---
        if config_path is None:
            config_path = find_default_config(project_dir)
        base_config = load_config(config_path) if config_path is not None else None

        # --- 3. 명령줄 옵션으로 덮어쓰기 ---
        config = build_config(
            base_config,
            search_paths=search_paths or None,
            search_recursive=recursive,
            allow_duplicates=allow_duplicates,
            parser=parser.value if parser is not None else None,
        )

        # --- 4. 검증 실행 ---
        ValidationOrchestrator(config, project_dir).run()

    except YamlValidatorError as e:
        report_failure(e)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.secho(f"An unexpected error occurred during run: {e}", fg=typer.colors.RED, err=True)
        import traceback
        traceback.print_exc()
        raise typer.Exit(code=3)

    typer.secho("All YAML files are valid.", fg=typer.colors.GREEN)


# --- 'init' 하위 명령어 ---
@app.command()
def init():
    """
    Writes a default configuration file into the current directory.
    Leaves an existing file untouched.
    """
    config_file_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

    if config_file_path.exists():
        typer.secho(f"'{config_file_path.name}' already exists. Nothing to do.", fg=typer.colors.YELLOW)
        return

    default_config = (
        "# yamlv configuration\n"
        "searchPaths:\n"
        f"  - {DEFAULT_SEARCH_PATH}\n"
        "searchRecursive: false\n"
        "allowDuplicates: false\n"
    )
    try:
        config_file_path.write_text(default_config, encoding="utf-8")
    except OSError as e:
        typer.secho(f"Error writing {config_file_path}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    typer.secho(f"Created '{config_file_path.name}'.", fg=typer.colors.GREEN)


# --- 스크립트로 직접 실행될 때 app 실행 ---
if __name__ == "__main__":
    app()
