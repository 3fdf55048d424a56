"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from edgepath_core.config import EdgepathConfig

CONFIG_FILENAME = "edgepath.yaml"


def load_config(cli_path: str | None = None) -> EdgepathConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    cli_file = Path(cli_path).expanduser() if cli_path else None
    config_paths = [
        cli_file,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".edgepath" / "config.yaml",
    ]

    if cli_file is not None and not cli_file.is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return EdgepathConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return EdgepathConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `edgepath config init`
DEFAULT_CONFIG_TEMPLATE = """\
# edgepath.yaml

# Edge file parsing
input:
  comment_prefix: "#"          # lines starting with this are ignored
  skip_malformed: false        # true: warn and skip lines without 3 tokens
  encoding: "utf-8"

# Path search
search:
  shortest_strategy: "dfs"     # dfs (exhaustive) | bfs (level-order)
  neighbor_order: "insertion"  # insertion | sorted

# Output
output:
  format: "text"               # text | json

# Logging
log_level: "warn"              # debug | info | warn | error
log_format: "text"             # text | json
"""
