def _pct(value):
    return f"{value * 100:.2f}%"


def format_report(report):
    if report.total_chars == 0:
        return ["No characters evaluated"]
    lines = [
        "Evaluation Results:",
        f"  Character-level accuracy: {_pct(report.char_accuracy)} "
        f"({report.correct_chars}/{report.total_chars})",
        f"  String-level accuracy:    {_pct(report.string_accuracy)} "
        f"({report.correct_strings}/{report.total_strings})",
    ]
    if report.char_error_rate is not None:
        lines.append(
            f"  Character error rate:     {_pct(report.char_error_rate)} "
            f"({report.edit_errors} edits / {report.reference_chars} chars)"
        )
    return lines


def format_summary(prepared, artifact=None):
    lines = [
        f"Training data: {prepared.train_dir} ({prepared.train_count} images)",
        f"Test data:     {prepared.test_dir} ({prepared.test_count} images)",
    ]
    if artifact is not None:
        lines.append(f"Model:         {artifact}")
    return lines
