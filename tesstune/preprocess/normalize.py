import re

from tesstune.config import WHOLE_NUMBER_SUFFIX


_WS_RE = re.compile(r"\s+")
# ".0" ending the numeric part: end of string or only a non-numeric suffix after it
_WHOLE_NUMBER_RE = re.compile(re.escape(WHOLE_NUMBER_SUFFIX) + r"(?=[^0-9.]*$)")


def strip_whitespace(text):
    if text is None:
        return ""
    return _WS_RE.sub("", text)


def normalize_label(value):
    """Drop a trailing whole-number ``.0``: ``12.0`` -> ``12``, ``12.0BB`` -> ``12BB``."""
    if value is None:
        return None
    if value.endswith(WHOLE_NUMBER_SUFFIX):
        return value[: -len(WHOLE_NUMBER_SUFFIX)]
    return _WHOLE_NUMBER_RE.sub("", value, count=1)
