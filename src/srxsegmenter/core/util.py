"""Small utility functions."""

import json
from typing import Any

def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling numpy types and tuples."""
    def serialize_item(item):
        if hasattr(item, 'tolist'):  # numpy scalar or array
            return item.tolist()
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {str(k): serialize_item(v) for k, v in item.items()}
        else:
            return item
    
    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except Exception as e:
        return f"<serialization error: {e}>"
