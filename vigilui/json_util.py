"""Loading JSON files and splitting comma-separated fields."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union


def parse_json(path: Union[str, Path]) -> Any:
    """Read the JSON document at ``path``.

    Lines are joined without their line breaks before parsing.
    """
    try:
        with open(path, encoding="utf-8") as fin:
            content = "".join(line.rstrip("\r\n") for line in fin)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Json not found: {path}") from exc
    return json.loads(content)


def split_string(s: str, delimiter: str = ",") -> List[str]:
    """Split ``s`` on ``delimiter``, dropping empty tokens."""
    return [token for token in s.split(delimiter) if token]