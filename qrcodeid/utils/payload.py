from typing import Optional, Tuple

SEPARATOR = "/"


def split_payload(payload: str) -> Tuple[str, bool, Optional[str]]:
    """Split a scanned payload into (code candidate, is_compound, prefix).

    Everything after the last separator is the candidate; the prefix is kept
    as-is and never interpreted.
    """
    if SEPARATOR in payload:
        prefix, _, candidate = payload.rpartition(SEPARATOR)
        return candidate, True, prefix
    return payload.strip(), False, None


def join_payload(short_code: str, base_url: Optional[str] = None) -> str:
    return f"{base_url}/{short_code}" if base_url else short_code
