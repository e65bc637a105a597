from pathlib import Path

import pytesseract

from tesstune.config import PSM_SINGLE_LINE
from tesstune.errors import RecognizerError


def configure_tesseract(tesseract_cmd=None):
    if tesseract_cmd and Path(tesseract_cmd).exists():
        pytesseract.pytesseract.tesseract_cmd = str(tesseract_cmd)


def tess_config(psm=PSM_SINGLE_LINE, tessdata_dir=None):
    config = f"--psm {psm}"
    if tessdata_dir:
        config += f' --tessdata-dir "{Path(tessdata_dir).resolve()}"'
    return config


class TesseractRecognizer:
    """Reads one text line per image with a trained Tesseract model."""

    def __init__(self, model_name, tessdata_dir=None, psm=PSM_SINGLE_LINE, tesseract_cmd=None):
        self.model_name = model_name
        self.tessdata_dir = tessdata_dir
        self.psm = psm
        configure_tesseract(tesseract_cmd)

    @classmethod
    def for_artifact(cls, artifact, config):
        """Recognizer for a freshly trained ``<model>.traineddata`` file."""
        artifact = Path(artifact)
        return cls(
            artifact.stem,
            tessdata_dir=artifact.parent,
            psm=config.psm,
            tesseract_cmd=config.tesseract_cmd,
        )

    def recognize(self, image_path):
        try:
            return pytesseract.image_to_string(
                str(image_path),
                lang=self.model_name,
                config=tess_config(self.psm, self.tessdata_dir),
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise RecognizerError(f"Recognizer failed on {Path(image_path).name}: {exc}") from exc
