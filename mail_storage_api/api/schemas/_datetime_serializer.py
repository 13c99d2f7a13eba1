from datetime import datetime, timezone


def serialize_dt(dt: datetime | None) -> str | None:
    """ISO-8601 em UTC com milissegundos e sufixo Z (ex.: 2024-05-01T12:00:00.000Z)."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
