class PipelineError(Exception):
    """Fatal error that stops a run. ``code`` identifies the failed check."""

    code = "PIPELINE_ERROR"

    def __init__(self, message, code=None):
        super().__init__(message)
        if code is not None:
            self.code = code


class EmptyDatasetError(PipelineError):
    code = "EMPTY_DATASET"


class InsufficientDataError(PipelineError):
    code = "INSUFFICIENT_DATA"

    def __init__(self, message, code=None, count=0, minimum=0):
        super().__init__(message, code)
        self.count = count
        self.minimum = minimum


class ManifestWriteError(PipelineError):
    code = "MANIFEST_WRITE_FAILED"


class TrainingError(PipelineError):
    code = "TRAINING_FAILED"


class ArtifactMissingError(TrainingError):
    code = "ARTIFACT_MISSING"


class RecognizerError(PipelineError):
    code = "RECOGNIZER_FAILED"
