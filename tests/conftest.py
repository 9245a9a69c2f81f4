"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from punctseg.symbols import resolve
from punctseg.segmenters.sentence import SentenceExtractor
from punctseg.config.loader import load_config_from_string


@pytest.fixture
def default_catalog():
    """Provide the default (English) catalog."""
    return resolve("en")


@pytest.fixture
def japanese_catalog():
    """Provide the default Japanese (zenkaku) catalog."""
    return resolve("ja")


@pytest.fixture
def extractor(default_catalog):
    """Provide an extractor for the default catalog."""
    return SentenceExtractor(default_catalog)


@pytest.fixture
def sample_config_yaml():
    """Provide a sample symbol configuration YAML for testing."""
    return """
lang: ja
variant: hankaku
symbols:
  - name: EXCLAMATION_MARK
    value: "！"
    invalid_chars: "!"
  - name: left_parenthesis
    value: "（"
    before_space: true
segmentation:
  track_pairs: true
  abbreviations: ["Fig."]
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded configuration object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary configuration file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def write_document(tmp_path):
    """Write bytes or text to a file under tmp_path and return its path."""
    def _write(name, content, encoding="utf-8"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode(encoding))
        return path
    return _write


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def events(self, msg: str):
        """Key-value payloads of all captured messages named msg."""
        return [kv for _, m, kv in self.messages if m == msg]

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()
