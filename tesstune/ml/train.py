import os
import subprocess
from pathlib import Path

from tesstune.errors import ArtifactMissingError, TrainingError
from tesstune.logger import get_logger

logger = get_logger(__name__)


def resolve_start_model(config):
    """Return ``(start_model, tessdata_dir)`` for the trainer; empty strings train from scratch."""
    if config.train_from_scratch:
        return "", ""
    if config.custom_start_model_file:
        start_file = Path(config.custom_start_model_file)
        return str(start_file), str(start_file.parent)

    base_model = config.tessdata_best_dir / f"{config.base_lang}.traineddata"
    if not base_model.is_file():
        raise TrainingError(f"Base model not found: {base_model}")
    return config.base_lang, str(config.tessdata_best_dir)


def build_training_command(config, ground_truth_dir, eval_list, start=None):
    start_model, tessdata_dir = start if start is not None else resolve_start_model(config)
    return [
        "make",
        "training",
        f"MODEL_NAME={config.model_name}",
        f"START_MODEL={start_model}",
        f"TESSDATA={tessdata_dir}",
        f"MAX_ITERATIONS={config.max_iterations}",
        f"LEARNING_RATE={config.learning_rate}",
        f"GROUND_TRUTH_DIR={Path(ground_truth_dir).resolve()}",
        f"EVAL_LISTFILE={Path(eval_list).resolve()}",
    ]


def artifact_path(tesstrain_dir, model_name):
    return Path(tesstrain_dir) / "data" / f"{model_name}.traineddata"


def locate_artifact(tesstrain_dir, model_name):
    path = artifact_path(tesstrain_dir, model_name)
    if not path.is_file():
        raise ArtifactMissingError(f"Trained model not found at: {path}")
    return path


class TesstrainTrainer:
    """Runs ``make training`` inside a tesstrain checkout."""

    def __init__(self, config):
        self.config = config

    def train(self, ground_truth_dir, eval_list):
        cfg = self.config
        start_model, tessdata_dir = resolve_start_model(cfg)
        cmd = build_training_command(
            cfg, ground_truth_dir, eval_list, start=(start_model, tessdata_dir)
        )
        logger.info("Starting training with:")
        logger.info("  Model: %s", cfg.model_name)
        logger.info("  Start model: %s", start_model or "from scratch")
        logger.info("  Max iterations: %d", cfg.max_iterations)
        logger.info("  Learning rate: %s", cfg.learning_rate)

        if not Path(cfg.tesstrain_dir).is_dir():
            raise TrainingError(f"tesstrain directory not found: {cfg.tesstrain_dir}")
        env = os.environ.copy()
        if cfg.tesseract_cmd:
            env["PATH"] = os.pathsep.join([str(Path(cfg.tesseract_cmd).parent), env.get("PATH", "")])
        try:
            subprocess.run(cmd, check=True, cwd=str(cfg.tesstrain_dir), env=env)
        except subprocess.CalledProcessError as exc:
            raise TrainingError(f"Training failed with exit status {exc.returncode}") from exc
        except FileNotFoundError as exc:
            raise TrainingError(f"Cannot run trainer: {exc}") from exc

        path = locate_artifact(cfg.tesstrain_dir, cfg.model_name)
        logger.info("Training complete: %s", path)
        return path
