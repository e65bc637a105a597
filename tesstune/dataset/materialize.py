from pathlib import Path
from typing import NamedTuple

from PIL import Image

from tesstune.config import GT_EXT, IMAGE_EXT, INDEX_WIDTH
from tesstune.logger import get_logger

logger = get_logger(__name__)


class WriteStats(NamedTuple):
    written: int
    skipped: int


def record_basename(model_name, index):
    return f"{model_name}_{index:0{INDEX_WIDTH}d}"


def clean_image(img):
    """Return an opaque RGB copy of ``img`` with no palette or alpha carried over."""
    img = img.convert("RGB")
    img.load()
    clean = Image.new("RGB", img.size)
    clean.paste(img)
    return clean


def write_samples(samples, out_dir, start_idx, model_name):
    """Write each sample as ``<model>_<index>.png`` plus its ``.gt.txt`` label.

    A sample whose image or label cannot be written is logged and skipped,
    leaving no partial record behind; the rest of the batch is still written.
    """
    out_dir = Path(out_dir)
    written = 0
    skipped = 0
    for i, (img_path, label) in enumerate(samples, start_idx):
        base = record_basename(model_name, i)
        out_img = out_dir / f"{base}{IMAGE_EXT}"
        out_txt = out_dir / f"{base}{GT_EXT}"
        try:
            with Image.open(img_path) as im:
                clean = clean_image(im)
            clean.save(out_img, "PNG", optimize=False, compress_level=0)
            out_txt.write_text(label, encoding="utf-8")
        except Exception as exc:
            logger.warning("Skipping sample: %s (%s)", Path(img_path).name, exc)
            _discard(out_img, out_txt)
            skipped += 1
            continue
        written += 1

    logger.info("Written to %s: %d", out_dir, written)
    if skipped:
        logger.warning("Skipped samples: %d", skipped)
    return WriteStats(written, skipped)


def _discard(*paths):
    # only regular files; a record is either complete or absent
    for path in paths:
        if path.is_file():
            path.unlink()
