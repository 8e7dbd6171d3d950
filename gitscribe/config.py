"""Configuration loading for gitscribe (.gitscribe.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .logging import DEFAULT_DEBUG_LOG

CONFIG_FILENAME = ".gitscribe.yml"

ENV_EXECUTABLE = "GITSCRIBE_CLAUDE_EXECUTABLE"
ENV_TIMEOUT = "GITSCRIBE_TIMEOUT"
ENV_DEBUG = "GITSCRIBE_DEBUG"
ENV_DEBUG_LOG = "GITSCRIBE_DEBUG_LOG"

DEFAULT_TIMEOUT = 120.0


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ClaudeConfig:
    """Claude CLI invocation settings."""

    executable: str = "claude"
    output_format: str = "json"
    timeout: Optional[float] = DEFAULT_TIMEOUT


@dataclass
class PromptConfig:
    """Custom prompt templates; empty strings select the built-in defaults."""

    commit: str = ""
    branch: str = ""
    pr: str = ""


@dataclass
class DebugConfig:
    """Raw CLI traffic logging."""

    enabled: bool = False
    log_file: Path = DEFAULT_DEBUG_LOG


@dataclass
class GitScribeConfig:
    """Represents the settings defined in .gitscribe.yml."""

    root: Path
    claude: ClaudeConfig = field(default_factory=ClaudeConfig)
    prompts: PromptConfig = field(default_factory=PromptConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


def load_config(
    config_path: Path, *, environ: Mapping[str, str] | None = None
) -> GitScribeConfig:
    """Load configuration from disk and apply environment overrides."""
    env = os.environ if environ is None else environ
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    config = GitScribeConfig(root=root)
    if config_file.exists():
        data = _read_config(config_file)
        if not isinstance(data, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
        _apply_file_settings(config, data)

    _apply_env_overrides(config, env)
    return config


def _apply_file_settings(config: GitScribeConfig, data: Dict[str, Any]) -> None:
    claude_data = _as_dict(data.get("claude"))
    if claude_data:
        executable = _as_str(claude_data.get("executable"))
        if executable:
            config.claude.executable = executable
        output_format = _as_str(claude_data.get("output_format"))
        if output_format:
            config.claude.output_format = output_format
        if "timeout" in claude_data:
            config.claude.timeout = _as_timeout(claude_data.get("timeout"))

    prompt_data = _as_dict(data.get("prompts"))
    if prompt_data:
        config.prompts.commit = _as_str(prompt_data.get("commit")) or ""
        config.prompts.branch = _as_str(prompt_data.get("branch")) or ""
        config.prompts.pr = _as_str(prompt_data.get("pr")) or ""

    debug_data = _as_dict(data.get("debug"))
    if debug_data:
        config.debug.enabled = _as_bool(debug_data.get("enabled")) or False
        log_file = _as_str(debug_data.get("log_file"))
        if log_file:
            config.debug.log_file = Path(log_file).expanduser()


def _apply_env_overrides(config: GitScribeConfig, env: Mapping[str, str]) -> None:
    executable = env.get(ENV_EXECUTABLE)
    if executable:
        config.claude.executable = executable
    timeout = env.get(ENV_TIMEOUT)
    if timeout:
        config.claude.timeout = _as_timeout(timeout)
    debug = _as_bool(env.get(ENV_DEBUG))
    if debug is not None:
        config.debug.enabled = debug
    log_file = env.get(ENV_DEBUG_LOG)
    if log_file:
        config.debug.log_file = Path(log_file).expanduser()


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_timeout(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid timeout value: {value!r}") from exc
    return seconds if seconds > 0 else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1", "on"}:
            return True
        if lowered in {"false", "no", "0", "off"}:
            return False
    return None
