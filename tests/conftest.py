import io
import logging
import pathlib
import sys

import pytest

# Ensure repository root is on sys.path so the logregistry package imports without install
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logregistry import LogRegistry, Settings


class RecordingHandler(logging.Handler):
    """Handler that keeps every record it receives."""

    def __init__(self, level=logging.NOTSET):
        super().__init__(level)
        self.records = []
        self.flushes = 0

    def emit(self, record):
        self.records.append(record)

    def flush(self):
        self.flushes += 1

    def named(self, name):
        return [record for record in self.records if record.name == name]


@pytest.fixture
def console_stream():
    return io.StringIO()


@pytest.fixture
def registry(console_stream):
    root = logging.getLogger()
    root_level, root_propagate = root.level, root.propagate

    reg = LogRegistry(
        settings=Settings(level="ALL", use_console_handler=True, console_level="ALL"),
        console_handler=logging.StreamHandler(console_stream),
    )
    yield reg

    reg.shutdown()
    for tag in reg.tags():
        logger = logging.getLogger(reg.get_logger_name(tag))
        if logger is root:
            continue
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
    root.setLevel(root_level)
    root.propagate = root_propagate


@pytest.fixture
def recording_handler():
    return RecordingHandler()
