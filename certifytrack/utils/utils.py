import re
from datetime import datetime, UTC
from typing import Any, Dict, Iterable

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def make_slug(title: str) -> str:
    """Lower-case ``title`` and collapse every run of non-alphanumerics into one hyphen.

    Leading and trailing runs are kept, so ``"Intro to Go!"`` becomes ``"intro-to-go-"``.
    """
    return _NON_ALNUM.sub("-", title.lower())


def normalize_list_fields(data: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    # list columns are never written as null
    for field in fields:
        data[field] = data.get(field) or []
    return data


def utc_now() -> datetime:
    return datetime.now(UTC)
