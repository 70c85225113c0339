"""Shared pytest fixtures."""

import base64
import io
from collections.abc import Callable

import pytest
from dotenv import load_dotenv
from PIL import Image

# Load environment variables before importing app modules
load_dotenv()

from fastapi.testclient import TestClient  # noqa: E402

from note_insights.main import app  # noqa: E402
from note_insights.notes.models import Note, Reminder  # noqa: E402


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sample_notes() -> list[Note]:
    """A small note collection covering tags, reminders and missing fields."""
    return [
        Note(
            id="n1",
            title="Meeting with Alice",
            content="Discuss the Q4 roadmap",
            tags=["work", "meeting"],
            reminders=[
                Reminder(completed=True, updated_at="2023-10-27T10:00:00Z"),
                Reminder(completed=False, reminder_time="2023-10-28T09:00:00Z"),
            ],
        ),
        Note(
            id="n2",
            title="Groceries",
            content="milk, eggs",
            tags=["home"],
            reminders=[
                Reminder(completed=True, reminder_time="2023-10-27T18:30:00"),
            ],
        ),
        Note(
            id="n3",
            title="Alice birthday",
            content=None,
            tags=["Personal", "work"],
        ),
        Note(id="n4", title="Untitled"),
    ]


@pytest.fixture
def make_image() -> Callable[..., str]:
    """Factory for base64-encoded test images.

    Usage:
        make_image(3000, 2000)                       # PNG, RGB
        make_image(400, 300, mode="RGBA", fmt="PNG")
    """

    def _make(
        width: int,
        height: int,
        mode: str = "RGB",
        fmt: str = "PNG",
        color: int | tuple[int, ...] = (200, 30, 30),
    ) -> str:
        if mode == "RGBA" and isinstance(color, tuple) and len(color) == 3:
            color = (*color, 128)
        image = Image.new(mode, (width, height), color)
        buffer = io.BytesIO()
        image.save(buffer, format=fmt)
        return base64.b64encode(buffer.getvalue()).decode("ascii")

    return _make


@pytest.fixture
def open_image() -> Callable[[str], Image.Image]:
    """Open base64 image data (bare or data URL) for assertions."""

    def _open(data: str) -> Image.Image:
        if data.startswith("data:"):
            data = data.split(",", 1)[1]
        image = Image.open(io.BytesIO(base64.b64decode(data)))
        image.load()
        return image

    return _open
