import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from fluid_tokens.rules.models import Rules

DEFAULT_RULES_PATH = Path(__file__).with_name("rules.yaml")
RULES_ENV_VAR = "FLUID_TOKENS_RULES"


def resolve_rules_path(path: Path | None = None) -> Path:
    """Explicit path, then $FLUID_TOKENS_RULES, then the packaged rules file."""
    if path is not None:
        return path
    env_path = os.environ.get(RULES_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_RULES_PATH


def _extract_yaml(content: str) -> str:
    # Accept a ```yaml fenced block inside a markdown document
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    path = resolve_rules_path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
