from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def serialize_parameter_file(document: Mapping[str, Any], compact: bool = False) -> str:
    # Key order is part of the format: `$schema` leads and parameters keep template order.
    if compact:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(document, ensure_ascii=False, indent=2)
