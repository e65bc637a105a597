"""Stage composition: prepare corpus -> train -> evaluate.

Each stage takes its full input and returns a typed result. Fatal problems
are raised as ``tesstune.errors.PipelineError`` subclasses and stop the run.
"""

import random
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from tesstune.dataset.labels import collect_samples, compile_label_pattern, find_unknown_chars
from tesstune.dataset.materialize import WriteStats, write_samples
from tesstune.dataset.split import split_samples
from tesstune.errors import ArtifactMissingError
from tesstune.langdata.resources import write_langdata
from tesstune.logger import get_logger
from tesstune.ml.train import TesstrainTrainer
from tesstune.ocr.recognizer import TesseractRecognizer
from tesstune.rules.validation import validate_split, write_eval_list
from tesstune.scoring.accuracy import AccuracyReport
from tesstune.scoring.evaluate import evaluate

logger = get_logger(__name__)


@dataclass
class PrepareResult:
    train_dir: Path
    test_dir: Path
    eval_list: Path
    total_samples: int
    holdout: bool
    train_stats: WriteStats
    test_stats: WriteStats
    train_count: int
    test_count: int
    langdata_files: List[Path] = field(default_factory=list)


@dataclass
class PipelineResult:
    prepared: PrepareResult
    artifact: Path
    report: Optional[AccuracyReport] = None


def reset_output_dirs(config):
    """Wipe the previous corpus under ``output_base`` and recreate train/test."""
    if config.output_base.exists():
        shutil.rmtree(config.output_base)
    config.train_dir.mkdir(parents=True)
    config.test_dir.mkdir(parents=True)


def prepare_corpus(config, rng=None):
    if rng is None and config.seed is not None:
        rng = random.Random(config.seed)

    reset_output_dirs(config)
    pattern = compile_label_pattern(config.value_regex)
    samples = collect_samples(config.input_dir, pattern, glob=config.input_glob)
    for label, chars in find_unknown_chars(samples, config.char_set).items():
        logger.warning("Label %r uses characters outside the alphabet: %s", label, "".join(chars))

    partition = split_samples(samples, config.train_percent, rng=rng)

    train_stats = write_samples(partition.train, config.train_dir, 0, config.model_name)
    test_stats = write_samples(
        partition.test, config.test_dir, len(partition.train), config.model_name
    )
    logger.info(
        "Total samples: %d, training: %d, testing: %d",
        len(samples),
        len(partition.train),
        len(partition.test),
    )

    train_count, test_count = validate_split(
        config.train_dir,
        config.test_dir,
        min_train=config.min_train_images,
        min_test=config.min_test_images,
    )
    eval_list = write_eval_list(config.test_dir)
    langdata_files = write_langdata(config.output_base, config.char_set)

    return PrepareResult(
        train_dir=config.train_dir,
        test_dir=config.test_dir,
        eval_list=eval_list,
        total_samples=len(samples),
        holdout=partition.holdout,
        train_stats=train_stats,
        test_stats=test_stats,
        train_count=train_count,
        test_count=test_count,
        langdata_files=langdata_files,
    )


def run_pipeline(config, trainer=None, recognizer=None, rng=None):
    prepared = prepare_corpus(config, rng=rng)

    trainer = trainer or TesstrainTrainer(config)
    artifact = Path(trainer.train(prepared.train_dir, prepared.eval_list))
    if not artifact.is_file():
        raise ArtifactMissingError(f"Trained model not found at: {artifact}")

    recognizer = recognizer or TesseractRecognizer.for_artifact(artifact, config)
    logger.info("Running automatic evaluation on test set...")
    report = evaluate(prepared.test_dir, recognizer)
    return PipelineResult(prepared=prepared, artifact=artifact, report=report)
