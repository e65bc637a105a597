from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from tesstune.preprocess.normalize import strip_whitespace


def clean_text(text):
    return strip_whitespace(text)


def score_pair(prediction, ground_truth):
    """Positional character score: ``(matching positions, max length)``.

    Positions past the end of the shorter string never match. There is no
    alignment, so one inserted character shifts every later position.
    """
    length = max(len(prediction), len(ground_truth))
    correct = sum(
        1
        for i in range(min(len(prediction), len(ground_truth)))
        if prediction[i] == ground_truth[i]
    )
    return correct, length


@dataclass
class AccuracyReport:
    total_chars: int = 0
    correct_chars: int = 0
    total_strings: int = 0
    correct_strings: int = 0
    # Levenshtein distance summed over samples, against reference_chars
    edit_errors: int = 0
    reference_chars: int = 0

    def add(self, prediction, ground_truth):
        pred = clean_text(prediction)
        gt = clean_text(ground_truth)

        self.total_strings += 1
        if pred == gt:
            self.correct_strings += 1

        correct, length = score_pair(pred, gt)
        self.correct_chars += correct
        self.total_chars += length

        self.edit_errors += Levenshtein.distance(pred, gt)
        self.reference_chars += len(gt)
        return correct, length

    @property
    def char_accuracy(self):
        if self.total_chars == 0:
            return None
        return self.correct_chars / self.total_chars

    @property
    def string_accuracy(self):
        if self.total_strings == 0:
            return None
        return self.correct_strings / self.total_strings

    @property
    def char_error_rate(self):
        if self.reference_chars == 0:
            return None
        return self.edit_errors / self.reference_chars
