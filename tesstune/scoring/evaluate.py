from pathlib import Path

from tesstune.config import GT_EXT, IMAGE_EXT
from tesstune.logger import get_logger
from tesstune.scoring.accuracy import AccuracyReport

logger = get_logger(__name__)


def iter_test_pairs(test_dir):
    for img in sorted(Path(test_dir).glob(f"*{IMAGE_EXT}")):
        gt_file = img.with_name(img.name[: -len(IMAGE_EXT)] + GT_EXT)
        if gt_file.is_file():
            yield img, gt_file


def evaluate(test_dir, recognizer):
    """Run ``recognizer`` over every labeled test image and accumulate accuracy."""
    report = AccuracyReport()
    pairs = list(iter_test_pairs(test_dir))
    if not pairs:
        logger.warning("No test images found in %s, skipping evaluation", test_dir)
        return report

    for img, gt_file in pairs:
        prediction = recognizer.recognize(img)
        ground_truth = gt_file.read_text(encoding="utf-8")
        correct, length = report.add(prediction, ground_truth)
        logger.debug("%s: %d/%d chars", img.name, correct, length)
    return report
