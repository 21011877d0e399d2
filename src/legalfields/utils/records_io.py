"""
Record files

Reads records exported from the host platform (a YAML or JSON list of
field mappings) and writes them back out as YAML. JSON is a subset of
YAML, so both go through the same loader.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


def parse_records(content: str) -> Tuple[Optional[List[Dict[str, Any]]], Optional[str]]:
    """
    Parse a YAML/JSON list of records

    A single mapping is accepted as a one-record list. ``records:`` at the
    top level is accepted as well, the shape some exports use.

    Args:
        content: file content

    Returns:
        (records, error message); records is None when parsing fails

    Examples:
        >>> records, error = parse_records('- {Text: "The employer shall"}')
        >>> records[0]['Text']
        'The employer shall'
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        return None, f"Not valid YAML/JSON: {exc}"

    if data is None:
        return [], None
    if isinstance(data, dict) and isinstance(data.get("records"), list):
        data = data["records"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        return None, "Expected a list of records"

    for i, record in enumerate(data):
        if not isinstance(record, dict):
            return None, f"Record {i} is not a mapping"
    return data, None


def read_records(file_path: Path) -> Tuple[Optional[List[Dict[str, Any]]], Optional[str]]:
    """
    Read and parse a record file

    Returns:
        (records, error message)
    """
    try:
        content = file_path.read_text(encoding='utf-8')
    except (IOError, OSError) as exc:
        return None, f"Failed to read {file_path}: {exc}"
    return parse_records(content)


def dump_records(records: List[Dict[str, Any]]) -> str:
    """Records as block-style YAML, field order and unicode preserved"""
    return yaml.dump(
        records,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
