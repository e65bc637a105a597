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
from tesstune.output.report import format_report, format_summary
from tesstune.pipeline import run_pipeline


def main(config_path=None):
    try:
        config = load_config(config_path)
        result = run_pipeline(config)
    except (PipelineError, FileNotFoundError, ValueError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)

    print("=" * 60)
    for line in format_report(result.report):
        print(line)
    print("=" * 60)
    for line in format_summary(result.prepared, result.artifact):
        print(line)
    print()
    print("Test manually with:")
    print(
        f"tesseract image.png stdout -l {config.model_name} --psm {config.psm} "
        f"--tessdata-dir {result.artifact.parent}"
    )
    print("With character whitelist:")
    print(
        f"tesseract image.png stdout -l {config.model_name} --psm {config.psm} "
        f'--tessdata-dir {result.artifact.parent} -c tessedit_char_whitelist="{config.char_set.replace(" ", "")}"'
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Prepare data, train with tesstrain and evaluate.")
    parser.add_argument("--config", "-c", type=str, default=None, help="JSON config file")
    args = parser.parse_args()
    main(args.config)
