"""Severance rule set loading.

Rule sets are YAML files validated against SeveranceRules. Resolution order
for load_rules():
1. Explicit path argument
2. settings.json "rules" key
3. Packaged default (rescisao/rules/clt.yaml)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from .config import get_setting
from .schemas import SeveranceRules

logger = logging.getLogger(__name__)


class RulesNotFoundError(Exception):
    """Raised when a rules file does not exist."""
    pass


class RulesValidationError(Exception):
    """Raised when a rules file does not match the SeveranceRules schema."""
    pass


def get_default_rules_path() -> Path:
    """Path to the packaged CLT rule set."""
    package_root = Path(__file__).parent.parent  # sdk -> rescisao
    return package_root / "rules" / "clt.yaml"


def read_rules_file(path: Union[str, Path]) -> SeveranceRules:
    """Read and validate a rules YAML file.

    Raises:
        RulesNotFoundError: If the file doesn't exist
        RulesValidationError: If the content is not a valid rule set
    """
    rules_file = Path(path).expanduser()
    if not rules_file.exists():
        raise RulesNotFoundError(f"Rules file not found: {rules_file}")

    with open(rules_file, "r") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise RulesValidationError(f"Invalid YAML in {rules_file}: {e}")

    if not isinstance(data, dict):
        raise RulesValidationError(f"Rules file must contain a mapping: {rules_file}")

    try:
        return SeveranceRules.model_validate(data)
    except ValidationError as e:
        raise RulesValidationError(f"Invalid rules in {rules_file}:\n{e}")


@lru_cache(maxsize=1)
def default_rules() -> SeveranceRules:
    """Packaged default rule set (cached)."""
    return read_rules_file(get_default_rules_path())


def resolve_rules_path(path: Optional[Union[str, Path]] = None) -> Tuple[Path, str]:
    """Find the rules file to use and where the choice came from.

    Returns:
        Tuple of (path, source) where source is "argument", "settings" or "default"
    """
    if path:
        return Path(path).expanduser(), "argument"

    configured = get_setting("rules")
    if configured:
        return Path(configured).expanduser(), "settings"

    return get_default_rules_path(), "default"


def load_rules(path: Optional[Union[str, Path]] = None) -> SeveranceRules:
    """Load the effective rule set (see module docstring for resolution)."""
    rules_path, source = resolve_rules_path(path)
    if source == "default":
        return default_rules()

    logger.debug(f"Loading rules from {rules_path} ({source})")
    return read_rules_file(rules_path)
