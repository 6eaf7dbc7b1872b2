from typing import List

from mediacat.common.iter import chunked


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def fixed_width_split(v: str | None, width: int) -> List[str]:
    """
    Split a run of fixed-width codes, e.g. "DEFRGB" -> ["DE", "FR", "GB"].
    Raises ValueError when the input length is not a multiple of `width`.
    """
    if not v:
        return []
    if len(v) % width:
        raise ValueError(f"{v!r} is not a run of {width}-character codes")
    return ["".join(part) for part in chunked(v, width)]
