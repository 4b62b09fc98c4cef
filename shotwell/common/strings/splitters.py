from typing import Iterable, List


def csv_to_list(v: str | List[str] | None) -> List[str]:
    """Split a comma separated string, trimming entries and dropping empty ones."""
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def list_to_csv(items: Iterable[str], *, trailing: bool = True) -> str:
    """
    Join entries with commas. With ``trailing`` every entry is followed by a
    separator ("a,b,"). Empty entries are skipped so the result never holds ",,".
    An empty input renders as "".
    """
    parts = [s.strip() for s in items if s and s.strip()]
    if not parts:
        return ""
    joined = ",".join(parts)
    return f"{joined}," if trailing else joined
