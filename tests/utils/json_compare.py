from typing import Dict, Set

# Fields generated per write; drop them before comparing two reads
VOLATILE_KEYS = {"id", "created_at", "invited_at", "joined_at"}


def exclude_keys(data: Dict, keys: Set[str] = VOLATILE_KEYS) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}
