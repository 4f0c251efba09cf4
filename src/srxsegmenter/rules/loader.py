"""Rule table loading and validation from YAML or SRX files."""

import yaml
from pathlib import Path
from typing import Union
from .schema import RuleTable
from .srx import SrxFormatError, srx_to_dict

SRX_SUFFIXES = (".srx", ".xml")

class RuleTableLoadError(Exception):
    """Exception raised when rule table loading or validation fails."""
    pass

def _validate(data) -> RuleTable:
    if not isinstance(data, dict):
        raise RuleTableLoadError(f"Rule table must contain a mapping, got {type(data)}")
        
    try:
        return RuleTable.model_validate(data)
    except Exception as e:
        raise RuleTableLoadError(f"Rule table validation failed: {e}")

def load_rule_table(path: Union[str, Path]) -> RuleTable:
    """
    Load and validate a rule table from a YAML or SRX file.
    
    Files ending in .srx or .xml are read as SRX 2.0 XML, anything else
    as YAML.
    
    Args:
        path: Path to the rule file
        
    Returns:
        RuleTable: Validated rule table
        
    Raises:
        RuleTableLoadError: If file cannot be read or the table is invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise RuleTableLoadError(f"Rule file not found: {path}")
        
    try:
        content = path.read_bytes()
    except OSError as e:
        raise RuleTableLoadError(f"Cannot read rule file {path}: {e}")
        
    if path.suffix.lower() in SRX_SUFFIXES:
        return load_rule_table_from_string(content, format="srx")
    return load_rule_table_from_string(content, format="yaml")

def load_rule_table_from_string(content: Union[str, bytes], format: str = "yaml") -> RuleTable:
    """
    Load and validate a rule table from YAML or SRX content.
    
    Args:
        content: Document text (or bytes)
        format: "yaml" or "srx"
        
    Returns:
        RuleTable: Validated rule table
        
    Raises:
        RuleTableLoadError: If the content is invalid or validation fails
    """
    if format == "srx":
        try:
            data = srx_to_dict(content)
        except SrxFormatError as e:
            raise RuleTableLoadError(f"Invalid SRX content: {e}")
    elif format == "yaml":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise RuleTableLoadError(f"Invalid YAML content: {e}")
    else:
        raise RuleTableLoadError(f"Unknown rule table format: {format!r}")
        
    return _validate(data)
