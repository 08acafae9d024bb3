"""Rule table loading from the JSON rule file."""

import json
import logging
from pathlib import Path
from typing import Any, Union

from energiepilot.models.domain.rules import RuleTable

logger = logging.getLogger(__name__)


def parse_rule_table(data: Any) -> RuleTable:
    """
    Build the immutable rule table from already parsed JSON data.

    Args:
        data: Parsed rule document

    Returns:
        Validated RuleTable

    Raises:
        pydantic.ValidationError: If the document is structurally invalid or
            program keys are not unique
    """
    return RuleTable.model_validate(data)


def load_rule_table(path: Union[str, Path]) -> RuleTable:
    """
    Load and validate the rule table from a JSON file.

    Args:
        path: Path to the rule file

    Returns:
        Validated RuleTable

    Raises:
        FileNotFoundError: If the rule file does not exist
        json.JSONDecodeError: If the rule file is not valid JSON
        pydantic.ValidationError: If the rule document is structurally invalid
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    rule_table = parse_rule_table(data)
    logger.info(f"Loaded {len(rule_table.programs)} programs from rule file: {path.name}")
    return rule_table
