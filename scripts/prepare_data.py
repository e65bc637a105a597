from pathlib import Path
import argparse
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from tesstune.errors import PipelineError
from tesstune.io.loader import load_config
from tesstune.output.report import format_summary
from tesstune.pipeline import prepare_corpus


def main(config_path=None):
    try:
        config = load_config(config_path)
        prepared = prepare_corpus(config)
    except (PipelineError, FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)

    for line in format_summary(prepared):
        print(line)
    print(f"[done] {prepared.eval_list}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Build the train/test corpus from labeled images.")
    parser.add_argument("--config", "-c", type=str, default=None, help="JSON config file")
    args = parser.parse_args()
    main(args.config)
