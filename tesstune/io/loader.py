import json
from pathlib import Path

from tesstune.config import CONFIG_KEYS, PipelineConfig


def load_json(path):
    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_config(path=None, **overrides):
    """Build a ``PipelineConfig`` from an optional JSON file plus keyword overrides."""
    data = {}
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Missing config file {path}")
        data = load_json(path)
        _validate_min_schema(data, path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return PipelineConfig(**data)


def _validate_min_schema(data, path):
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must be a JSON object")
    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ValueError(f"{path.name} has unknown keys: {', '.join(unknown)}")
