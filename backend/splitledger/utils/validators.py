"""Request body validation."""


def require_keys(payload, *keys):
    """
    Return the values for `keys` from a JSON body, in order.

    Raises ValueError naming every missing key.
    """
    payload = payload or {}
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    missing = [k for k in keys if payload.get(k) in (None, "")]
    if missing:
        raise ValueError(f"missing keys: {missing}")
    return tuple(payload[k] for k in keys)
