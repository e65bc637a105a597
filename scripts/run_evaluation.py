from pathlib import Path
import argparse
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8")

from tesstune.errors import PipelineError
from tesstune.io.loader import load_config
from tesstune.ml.train import locate_artifact
from tesstune.ocr.recognizer import TesseractRecognizer
from tesstune.output.report import format_report
from tesstune.scoring.evaluate import evaluate


def main(config_path=None, tessdata_dir=None):
    try:
        config = load_config(config_path)
        if tessdata_dir:
            recognizer = TesseractRecognizer(
                config.model_name,
                tessdata_dir=tessdata_dir,
                psm=config.psm,
                tesseract_cmd=config.tesseract_cmd,
            )
        else:
            artifact = locate_artifact(config.tesstrain_dir, config.model_name)
            recognizer = TesseractRecognizer.for_artifact(artifact, config)
        report = evaluate(config.test_dir, recognizer)
    except (PipelineError, FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)

    for line in format_report(report):
        print(line)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Score a trained model on the test split.")
    parser.add_argument("--config", "-c", type=str, default=None, help="JSON config file")
    parser.add_argument(
        "--tessdata-dir",
        type=str,
        default=None,
        help="Directory holding <model>.traineddata (defaults to tesstrain/data)",
    )
    args = parser.parse_args()
    main(args.config, args.tessdata_dir)
