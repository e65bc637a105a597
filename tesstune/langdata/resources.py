from pathlib import Path

from tesstune.config import LANGDATA_NUMBERS, LANGDATA_PUNC, LANGDATA_WORDLIST


def _lines(items):
    return "".join(f"{item}\n" for item in items)


def render_langdata(char_set):
    """Map each resource's path (relative to the output base) to its content."""
    return {
        "langdata/unicharset": _lines(char_set.split()),
        "numbers": _lines([LANGDATA_NUMBERS]),
        "punc": _lines([LANGDATA_PUNC]),
        "wordlist": _lines(LANGDATA_WORDLIST),
    }


def write_langdata(output_base, char_set):
    output_base = Path(output_base)
    paths = []
    for rel, content in render_langdata(char_set).items():
        path = output_base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        paths.append(path)
    return paths
