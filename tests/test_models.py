"""Tests for core models."""

import re
from datetime import datetime

from todo.models import Task, parse_task_id, timestamp

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


class TestTimestamp:
    """Tests for timestamp formatting."""

    def test_timestamp_format(self):
        """Test that timestamps are zero-padded and 24-hour."""
        assert timestamp(datetime(2024, 3, 5, 7, 8, 9)) == "2024-03-05 07:08:09"
        assert timestamp(datetime(2024, 12, 31, 23, 59, 0)) == "2024-12-31 23:59:00"

    def test_timestamp_defaults_to_now(self):
        """Test that timestamp uses the current time when none is given."""
        assert TIMESTAMP_RE.match(timestamp())


class TestParseTaskId:
    """Tests for parse_task_id."""

    def test_parse_valid_id(self):
        assert parse_task_id("42") == 42

    def test_parse_negative_id(self):
        assert parse_task_id("-3") == -3

    def test_parse_rejects_lenient_int_forms(self):
        """Test that forms int() would accept are not task IDs."""
        for text in ("1_0", "+1", " 7 ", "\uff11"):
            assert parse_task_id(text) is None

    def test_parse_non_numeric(self):
        """Test that non-numeric input is reported as None, not raised."""
        assert parse_task_id("abc") is None
        assert parse_task_id("") is None
        assert parse_task_id("1.5") is None


class TestTask:
    """Tests for Task dataclass."""

    def test_task_creation(self):
        """Test creating a task with id and description."""
        task = Task(id=1, description="Test task")

        assert task.id == 1
        assert task.description == "Test task"
        assert task.completed is False
        assert TIMESTAMP_RE.match(task.created_at)
        assert task.completed_at == ""

    def test_mark_complete(self):
        """Test that mark_complete sets the flag and the timestamp."""
        task = Task(id=1, description="Test task")
        task.mark_complete()

        assert task.completed is True
        assert TIMESTAMP_RE.match(task.completed_at)

    def test_mark_complete_keeps_created_at(self):
        task = Task(id=1, description="Test task", created_at="2024-01-01 12:00:00")
        task.mark_complete()
        assert task.created_at == "2024-01-01 12:00:00"

    def test_encode_open_task(self):
        """Test encoding an open task."""
        task = Task(id=3, description="Buy milk", created_at="2024-01-01 12:00:00")
        assert task.encode() == "3|Buy milk|0|2024-01-01 12:00:00|"

    def test_encode_completed_task(self):
        """Test encoding a completed task."""
        task = Task(
            id=3,
            description="Buy milk",
            completed=True,
            created_at="2024-01-01 12:00:00",
            completed_at="2024-01-02 08:30:00",
        )
        assert task.encode() == "3|Buy milk|1|2024-01-01 12:00:00|2024-01-02 08:30:00"

    def test_decode_full_line(self):
        """Test decoding a line with all five fields."""
        task = Task.decode("2|Pay rent|1|2024-01-01 12:00:00|2024-01-02 08:30:00")

        assert task == Task(
            id=2,
            description="Pay rent",
            completed=True,
            created_at="2024-01-01 12:00:00",
            completed_at="2024-01-02 08:30:00",
        )

    def test_decode_without_completed_at(self):
        """Test that a missing fifth field is read as empty."""
        task = Task.decode("2|Pay rent|0|2024-01-01 12:00:00")

        assert task is not None
        assert task.completed is False
        assert task.completed_at == ""

    def test_decode_too_few_fields(self):
        assert Task.decode("2|Pay rent|0") is None
        assert Task.decode("garbage") is None

    def test_decode_non_integer_id(self):
        assert Task.decode("two|Pay rent|0|2024-01-01 12:00:00|") is None

    def test_decode_rejects_lenient_int_forms(self):
        """Test that IDs like "1_0" are malformed rather than read as 10."""
        for task_id in ("1_0", "+1", " 1", "1 "):
            assert Task.decode(f"{task_id}|x|0|2024-01-01 12:00:00|") is None

    def test_decode_ignores_extra_fields(self):
        task = Task.decode("2|Pay rent|0|2024-01-01 12:00:00||extra")
        assert task is not None
        assert task.description == "Pay rent"

    def test_encode_decoded_line(self):
        """Test that well-formed lines survive decode then encode."""
        lines = [
            "1|Buy milk|0|2024-01-01 12:00:00|",
            "12|Walk the dog|1|2024-01-01 12:00:00|2024-02-01 09:15:00",
        ]
        for line in lines:
            assert Task.decode(line).encode() == line

    def test_decode_encoded_task(self):
        """Test that decoding an encoded task reproduces its fields."""
        task = Task(id=5, description="Call mom")
        task.mark_complete()

        assert Task.decode(task.encode()) == task

    def test_pipe_in_description_is_not_escaped(self):
        """Test that a separator inside the description shifts the fields."""
        task = Task(id=1, description="a|b", created_at="2024-01-01 12:00:00")
        decoded = Task.decode(task.encode())

        assert decoded.description == "a"
        assert decoded != task
