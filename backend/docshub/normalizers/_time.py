from docshub.utils.optimistic_lock import normalize_ts


def iso(value):
    # SQLite hands back naive datetimes; stored values are UTC
    return normalize_ts(value).isoformat() if value is not None else None
