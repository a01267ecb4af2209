"""Path string helpers"""

from typing import Optional


def normalize_sub_path(sub_path: Optional[str]) -> Optional[str]:
    """Normalize a staging sub-path

    Blank values become None. Leading and trailing slashes are dropped, so
    ``"/res"``, ``"res/"`` and ``"res"`` all name the same directory under
    the working root.
    """
    if sub_path is None:
        return None
    value = sub_path.strip().strip("/")
    return value or None
