import re
from pathlib import Path
from typing import NamedTuple, Optional

from tesstune.config import NO_VALUE_MARKER
from tesstune.logger import get_logger
from tesstune.preprocess.normalize import normalize_label

logger = get_logger(__name__)


class Sample(NamedTuple):
    image_path: Path
    label: str


def compile_label_pattern(regex):
    pattern = re.compile(regex, re.IGNORECASE)
    if pattern.groups < 1:
        raise ValueError(f"Label pattern needs a capturing group: {regex!r}")
    return pattern


def extract_label(filename, pattern) -> Optional[str]:
    """Return the normalized label encoded in ``filename``, or None to skip the file.

    Files marked ``NO_VALUE`` (any case) are always skipped. When the pattern
    matches more than once, the rightmost match wins.
    """
    if NO_VALUE_MARKER in filename.upper():
        return None
    match = None
    for match in pattern.finditer(filename):
        pass
    if match is None:
        return None
    return normalize_label(match.group(1))


def collect_samples(input_dir, pattern, glob="*.png"):
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    samples = []
    unmatched = 0
    for img_path in sorted(input_dir.glob(glob)):
        if not img_path.is_file():
            continue
        label = extract_label(img_path.name, pattern)
        if label is None:
            unmatched += 1
            logger.debug("No label in %s", img_path.name)
            continue
        samples.append(Sample(img_path, label))

    logger.info("Found %d labeled images in %s (%d skipped)", len(samples), input_dir, unmatched)
    return samples


def find_unknown_chars(samples, char_set):
    """Map each label to the characters it uses that are not in ``char_set``."""
    alphabet = set("".join(char_set.split()))
    unknown = {}
    for sample in samples:
        extra = sorted(set(sample.label) - alphabet)
        if extra:
            unknown[sample.label] = extra
    return unknown
