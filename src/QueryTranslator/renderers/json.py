"""JSON output renderer for emitted query documents."""

from __future__ import annotations

import json
from typing import Any, Mapping


def render_document(document: Mapping[str, Any], *, compact: bool = False) -> str:
    """Serialize a query document.

    Key order is kept as emitted, so the same document always renders to the
    same bytes.

    Args:
        document: Emitted request body.
        compact: Single line without spaces instead of indented output.

    Returns:
        JSON text.
    """
    if compact:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(document, ensure_ascii=False, indent=2)
