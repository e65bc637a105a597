from pathlib import Path

from tesstune.config import (
    EVAL_LIST_NAME,
    GT_EXT,
    IMAGE_EXT,
    MIN_TEST_IMAGES,
    MIN_TRAIN_IMAGES,
)
from tesstune.errors import InsufficientDataError, ManifestWriteError
from tesstune.logger import get_logger

logger = get_logger(__name__)


def count_images(directory):
    directory = Path(directory)
    if not directory.is_dir():
        return 0
    return sum(1 for p in directory.glob(f"*{IMAGE_EXT}") if p.is_file())


def validate_split(train_dir, test_dir, min_train=MIN_TRAIN_IMAGES, min_test=MIN_TEST_IMAGES):
    train_count = count_images(train_dir)
    test_count = count_images(test_dir)

    if train_count < min_train:
        raise InsufficientDataError(
            f"Not enough training data (need at least {min_train} images, got {train_count})",
            code="INSUFFICIENT_TRAIN",
            count=train_count,
            minimum=min_train,
        )
    if test_count < min_test:
        raise InsufficientDataError(
            f"No test data found (need at least {min_test} images, got {test_count})",
            code="INSUFFICIENT_TEST",
            count=test_count,
            minimum=min_test,
        )

    logger.info("Data validated: %d training, %d test images", train_count, test_count)
    return train_count, test_count


def eval_base_paths(test_dir):
    bases = []
    for gt_path in sorted(Path(test_dir).glob(f"*{GT_EXT}")):
        bases.append(str(gt_path.resolve())[: -len(GT_EXT)])
    return bases


def check_eval_list(list_path):
    """Raise ``ManifestWriteError`` unless ``list_path`` is a non-empty file."""
    list_path = Path(list_path)
    if not list_path.is_file() or list_path.stat().st_size == 0:
        raise ManifestWriteError(f"Missing or empty evaluation list file {list_path}")
    return list_path


def write_eval_list(test_dir, list_name=EVAL_LIST_NAME):
    """Write the evaluation manifest: one extension-less sample path per line."""
    list_path = Path(test_dir) / list_name
    bases = eval_base_paths(test_dir)
    list_path.write_text("".join(f"{b}\n" for b in bases), encoding="utf-8")

    check_eval_list(list_path)
    logger.info("Created evaluation list with %d entries", len(bases))
    return list_path
