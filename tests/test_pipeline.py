import random

import pytest
from PIL import Image

from tesstune.config import PipelineConfig
from tesstune.errors import ArtifactMissingError, EmptyDatasetError, InsufficientDataError
from tesstune.pipeline import prepare_corpus, run_pipeline


class FakeTrainer:
    def __init__(self, artifact, create=True):
        self.artifact = artifact
        self.create = create
        self.calls = []

    def train(self, ground_truth_dir, eval_list):
        self.calls.append((ground_truth_dir, eval_list))
        if self.create:
            self.artifact.parent.mkdir(parents=True, exist_ok=True)
            self.artifact.write_bytes(b"model")
        return self.artifact


class EchoRecognizer:
    """Predicts the ground truth, with one wrong character on a chosen label."""

    def __init__(self, wrong_label=None):
        self.wrong_label = wrong_label

    def recognize(self, image_path):
        gt = image_path.with_name(image_path.name.replace(".png", ".gt.txt"))
        label = gt.read_text(encoding="utf-8")
        if label == self.wrong_label:
            return "X" + label[1:] + "\n"
        return label + "\n"


def make_input_dir(tmp_path, count):
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    for i in range(count):
        Image.new("RGB", (40, 12), "white").save(input_dir / f"shot{i:03d}-{i}.0BB.png")
    Image.new("RGB", (40, 12), "white").save(input_dir / "shot999_NO_VALUE-5BB.png")
    Image.new("RGB", (40, 12), "white").save(input_dir / "unlabeled.png")
    return input_dir


def make_config(tmp_path, count=12, **kw):
    return PipelineConfig(
        input_dir=make_input_dir(tmp_path, count),
        output_base=tmp_path / "out",
        model_name="m",
        **kw,
    )


def test_prepare_end_to_end(tmp_path):
    cfg = make_config(tmp_path, train_percent=84)
    prepared = prepare_corpus(cfg, rng=random.Random(0))

    assert prepared.total_samples == 12
    assert (prepared.train_count, prepared.test_count) == (10, 2)
    assert len(list(cfg.train_dir.glob("*.gt.txt"))) == 10
    assert sorted(p.name for p in cfg.test_dir.glob("*.png")) == ["m_000010.png", "m_000011.png"]
    assert len(prepared.eval_list.read_text(encoding="utf-8").splitlines()) == 2

    unicharset = cfg.output_base / "langdata" / "unicharset"
    assert unicharset.stat().st_size > 0
    assert unicharset.read_text(encoding="utf-8").splitlines() == cfg.char_set.split()

    labels = {p.read_text(encoding="utf-8") for p in cfg.output_base.rglob("*.gt.txt")}
    assert labels == {f"{i}BB" for i in range(12)}


def test_prepare_wipes_previous_run(tmp_path):
    cfg = make_config(tmp_path, train_percent=84)
    stale = cfg.train_dir / "stale.png"
    stale.parent.mkdir(parents=True)
    stale.write_bytes(b"old")

    prepare_corpus(cfg, rng=random.Random(0))

    assert not stale.exists()


def test_full_train_mode(tmp_path):
    cfg = make_config(tmp_path, train_percent=100)
    prepared = prepare_corpus(cfg, rng=random.Random(0))

    assert not prepared.holdout
    assert (prepared.train_count, prepared.test_count) == (12, 1)
    test_label = next(cfg.test_dir.glob("*.gt.txt")).read_text(encoding="utf-8")
    train_labels = {p.read_text(encoding="utf-8") for p in cfg.train_dir.glob("*.gt.txt")}
    assert test_label in train_labels


def test_seed_from_config_is_reproducible(tmp_path):
    cfg = make_config(tmp_path, train_percent=84, seed=11)
    prepare_corpus(cfg)
    first = sorted(p.read_text(encoding="utf-8") for p in cfg.test_dir.glob("*.gt.txt"))
    prepare_corpus(cfg)
    second = sorted(p.read_text(encoding="utf-8") for p in cfg.test_dir.glob("*.gt.txt"))
    assert first == second


def test_too_few_training_images(tmp_path):
    cfg = make_config(tmp_path, count=10, train_percent=90)
    with pytest.raises(InsufficientDataError) as info:
        prepare_corpus(cfg, rng=random.Random(0))
    assert info.value.code == "INSUFFICIENT_TRAIN"


def test_no_labeled_images(tmp_path):
    cfg = make_config(tmp_path, count=0)
    with pytest.raises(EmptyDatasetError):
        prepare_corpus(cfg)


def test_run_pipeline(tmp_path):
    cfg = make_config(tmp_path, train_percent=84)
    trainer = FakeTrainer(tmp_path / "tesstrain" / "data" / "m.traineddata")

    result = run_pipeline(cfg, trainer=trainer, recognizer=EchoRecognizer(), rng=random.Random(0))

    assert trainer.calls == [(cfg.train_dir, cfg.eval_list_path)]
    assert result.artifact == trainer.artifact
    assert result.report.string_accuracy == 1.0
    assert result.report.char_accuracy == 1.0
    assert result.report.total_strings == 2


def test_run_pipeline_scores_mistakes(tmp_path):
    cfg = make_config(tmp_path, train_percent=100)
    trainer = FakeTrainer(tmp_path / "m.traineddata")
    prepare_corpus(cfg, rng=random.Random(0))
    prepared_label = next(cfg.test_dir.glob("*.gt.txt")).read_text(encoding="utf-8")

    result = run_pipeline(
        cfg,
        trainer=trainer,
        recognizer=EchoRecognizer(wrong_label=prepared_label),
        rng=random.Random(0),
    )
    assert result.report.correct_strings == 0
    assert result.report.total_chars == len(prepared_label)
    assert result.report.correct_chars == len(prepared_label) - 1


def test_missing_artifact_stops_run(tmp_path):
    cfg = make_config(tmp_path, train_percent=84)
    trainer = FakeTrainer(tmp_path / "never.traineddata", create=False)
    with pytest.raises(ArtifactMissingError):
        run_pipeline(cfg, trainer=trainer, recognizer=EchoRecognizer(), rng=random.Random(0))
