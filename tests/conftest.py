"""Shared test fixtures for spanlight tests."""

import logging
import textwrap

import pytest


class RecordingRenderer:
    """Inner renderer that returns its input untouched and remembers it."""

    def __init__(self):
        self.seen = []

    def render(self, text):
        self.seen.append(text)
        return text


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture(autouse=True)
def reset_spanlight_logger():
    """CLI tests call setup_logging(); undo it so caplog keeps working."""
    yield
    logger = logging.getLogger("spanlight")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def cpp_file(tmp_path):
    """A small C++ source file on disk."""
    path = tmp_path / "main.cpp"
    path.write_text(textwrap.dedent("""\
        #include <vector>
        // entry point
        int main() {
            string s = "hi";
            return 0;
        }
    """))
    return path


@pytest.fixture
def python_file(tmp_path):
    path = tmp_path / "app.py"
    path.write_text(textwrap.dedent("""\
        def main():  # entry
            return "ok"
    """))
    return path
