import re

import pytest

from rokit.progress import CliProgressTracker


def test_starts_at_zero_tasks():
    with CliProgressTracker("Fetching", 3) as pt:
        assert pt.current_task == 0


@pytest.mark.parametrize("count", [1, 2, 4])
def test_task_completed_counts_tasks(count):
    with CliProgressTracker("Fetching", 4) as pt:
        for _ in range(count):
            pt.task_completed()
        assert pt.current_task == count


@pytest.mark.parametrize("count", [1, 3])
def test_task_completed_with_subtasks_counts_whole_tasks(count):
    with CliProgressTracker("Installing", 3, 5) as pt:
        for _ in range(count):
            pt.task_completed()
        assert pt.current_task == count


def test_subtasks_add_up_to_a_task():
    subtasks = 5
    with CliProgressTracker("Installing", 2, subtasks) as pt:
        for _ in range(subtasks - 1):
            pt.subtask_completed()
        assert pt.current_task == 0
        pt.subtask_completed()
        assert pt.current_task == 1


def test_subtask_without_subtasks_raises():
    with CliProgressTracker("Linking", 2) as pt:
        with pytest.raises(RuntimeError, match="without subtasks"):
            pt.subtask_completed()


def test_invalid_subtask_count_raises():
    with pytest.raises(ValueError):
        CliProgressTracker("Linking", 2, 0)


def test_negative_task_count_raises():
    with pytest.raises(ValueError):
        CliProgressTracker("Linking", -1)


def test_formatted_elapsed_format():
    with CliProgressTracker("Loading", 1) as pt:
        elapsed = pt.formatted_elapsed()
    assert elapsed.startswith("(took ")
    assert elapsed.endswith(")")
    assert bool(re.fullmatch(r"\(took \d+\.\d{2}(s|ms|µs|ns)\)", elapsed)) is True


def test_finish_with_message_uses_rocket(capsys):
    pt = CliProgressTracker("Fetching", 1)
    pt.update_message("Installing")
    pt.task_completed()
    pt.finish_with_message("Added tool a/b")
    err = capsys.readouterr().err
    assert "🚀 Added tool a/b" in err


def test_finish_with_custom_emoji(capsys):
    pt = CliProgressTracker("Authenticating", 3)
    pt.finish_with_emoji_and_message("✓", "Removed GitHub authentication")
    err = capsys.readouterr().err
    assert "✓ Removed GitHub authentication" in err


def test_finish_twice_prints_both(capsys):
    pt = CliProgressTracker("Installing", 1)
    pt.finish_with_message("first line")
    pt.finish_with_emoji_and_message("⚠️", "second line")
    err = capsys.readouterr().err
    assert "first line" in err
    assert "second line" in err
    assert err.index("first line") < err.index("second line")


def test_print_message(capsys):
    with CliProgressTracker("Fetching", 1) as pt:
        pt.print_message("a message [not markup]")
    err = capsys.readouterr().err
    assert "a message [not markup]" in err