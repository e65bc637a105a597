from pathlib import Path
import argparse
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from tesstune.errors import PipelineError
from tesstune.io.loader import load_config
from tesstune.ml.train import TesstrainTrainer
from tesstune.rules.validation import check_eval_list, validate_split


def main(config_path=None):
    try:
        config = load_config(config_path)
        validate_split(
            config.train_dir,
            config.test_dir,
            min_train=config.min_train_images,
            min_test=config.min_test_images,
        )
        check_eval_list(config.eval_list_path)
        artifact = TesstrainTrainer(config).train(config.train_dir, config.eval_list_path)
    except (PipelineError, FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)
    print(f"[done] {artifact}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Train on a corpus built by prepare_data.py.")
    parser.add_argument("--config", "-c", type=str, default=None, help="JSON config file")
    args = parser.parse_args()
    main(args.config)
