import random
from typing import List, NamedTuple

from tesstune.config import HOLDOUT_CAP, HOLDOUT_DIVISOR
from tesstune.dataset.labels import Sample
from tesstune.errors import EmptyDatasetError
from tesstune.logger import get_logger

logger = get_logger(__name__)


class Partition(NamedTuple):
    train: List[Sample]
    test: List[Sample]
    # False in 100%-train mode: test is then a subset of train
    holdout: bool = True


def holdout_size(total):
    return min(max(1, total // HOLDOUT_DIVISOR), HOLDOUT_CAP)


def split_samples(samples, train_percent, rng=None):
    """Shuffle ``samples`` and split them into train/test by ``train_percent``.

    At ``train_percent >= 100`` every sample trains and the first few shuffled
    samples are reused as a smoke-test set. Below that, at least one sample
    is always left for testing.
    """
    samples = list(samples)
    if not samples:
        raise EmptyDatasetError("No valid training samples found")

    rng = rng or random.Random()
    rng.shuffle(samples)
    total = len(samples)

    if train_percent >= 100:
        test_count = holdout_size(total)
        logger.info(
            "100%% training mode: using %d samples for testing (same as training)", test_count
        )
        return Partition(samples, samples[:test_count], holdout=False)

    split_idx = int(total * train_percent / 100)
    if split_idx >= total:
        split_idx = total - 1
    return Partition(samples[:split_idx], samples[split_idx:])
