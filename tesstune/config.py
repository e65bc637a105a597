from dataclasses import dataclass, fields, replace as _replace
from pathlib import Path
from typing import Optional

INPUT_DIR = "input_data"
OUTPUT_BASE = "tesstrain/data/train_data"
VALUE_REGEX = r"-([0-9]+(?:\.[0-9]+)?BB)\.png$"
INPUT_GLOB = "*.png"

TRAIN_PERCENT = 90
MAX_ITERATIONS = 10000
LEARNING_RATE = 0.001

MODEL_NAME = "custom_model"
CUSTOM_START_MODEL_FILE = ""
TRAIN_FROM_SCRATCH = False
BASE_LANG = "eng"

CHAR_SET = "0 1 2 3 4 5 6 7 8 9 . B"

TESSTRAIN_DIR = "tesstrain"
TESSDATA_BEST_DIR = "/usr/share/tesseract/tessdata_best"
TESSERACT_CMD = None

MIN_TRAIN_IMAGES = 10
MIN_TEST_IMAGES = 1

# 100%-train mode: smoke-test sample size, n // HOLDOUT_DIVISOR capped at HOLDOUT_CAP
HOLDOUT_DIVISOR = 20
HOLDOUT_CAP = 10

NO_VALUE_MARKER = "NO_VALUE"
WHOLE_NUMBER_SUFFIX = ".0"

PSM_SINGLE_LINE = 7

IMAGE_EXT = ".png"
GT_EXT = ".gt.txt"
EVAL_LIST_NAME = "list.txt"
INDEX_WIDTH = 6

LANGDATA_NUMBERS = "0123456789"
LANGDATA_PUNC = "."
LANGDATA_WORDLIST = ("BB",)

NUMERIC_FIELDS = {
    "train_percent": float,
    "max_iterations": int,
    "learning_rate": float,
    "min_train_images": int,
    "min_test_images": int,
    "psm": int,
}


def _as_number(name, value, kind):
    """Accept numbers and numeric strings (JSON configs); reject anything else."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        if kind is int:
            if not float(value).is_integer():
                raise ValueError(f"{name} must be a whole number, got {value!r}")
            return int(value)
        return value
    if isinstance(value, str):
        try:
            return kind(value.strip())
        except ValueError:
            pass
    raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass(frozen=True)
class PipelineConfig:
    """Everything a run needs; built once and passed to each stage."""

    input_dir: Path = Path(INPUT_DIR)
    output_base: Path = Path(OUTPUT_BASE)
    value_regex: str = VALUE_REGEX
    input_glob: str = INPUT_GLOB
    train_percent: float = TRAIN_PERCENT
    max_iterations: int = MAX_ITERATIONS
    learning_rate: float = LEARNING_RATE
    model_name: str = MODEL_NAME
    custom_start_model_file: str = CUSTOM_START_MODEL_FILE
    train_from_scratch: bool = TRAIN_FROM_SCRATCH
    base_lang: str = BASE_LANG
    char_set: str = CHAR_SET
    tesstrain_dir: Path = Path(TESSTRAIN_DIR)
    tessdata_best_dir: Path = Path(TESSDATA_BEST_DIR)
    tesseract_cmd: Optional[str] = TESSERACT_CMD
    min_train_images: int = MIN_TRAIN_IMAGES
    min_test_images: int = MIN_TEST_IMAGES
    psm: int = PSM_SINGLE_LINE
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("input_dir", "output_base", "tesstrain_dir", "tessdata_best_dir"):
            value = getattr(self, name)
            if not isinstance(value, Path):
                object.__setattr__(self, name, Path(value))
        for name, kind in NUMERIC_FIELDS.items():
            object.__setattr__(self, name, _as_number(name, getattr(self, name), kind))
        for name in ("model_name", "char_set", "value_regex", "base_lang"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if not 0 < self.train_percent <= 100:
            raise ValueError(f"train_percent must be in (0, 100], got {self.train_percent}")
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive")
        if not self.model_name.strip():
            raise ValueError("model_name must not be empty")
        if not self.char_set.split():
            raise ValueError("char_set must contain at least one token")

    @property
    def train_dir(self):
        return self.output_base / "train"

    @property
    def test_dir(self):
        return self.output_base / "test"

    @property
    def eval_list_path(self):
        return self.test_dir / EVAL_LIST_NAME

    def replace(self, **changes):
        return _replace(self, **changes)


CONFIG_KEYS = frozenset(f.name for f in fields(PipelineConfig))
