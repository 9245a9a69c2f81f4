"""Test document reading, file extraction and batch processing."""

import logging

import pytest

from punctseg.core.errors import DocumentLoadError, EncodingError
from punctseg.core.types import DocumentResult
from punctseg.providers import ConsoleLogger, StdlibLogger, create_stdlib_logger
from punctseg.runtime.batch import extract_documents
from punctseg.segmenters.reader import read_document
from punctseg.segmenters.sentence import SentenceExtractor


class TestReadDocument:
    """Test reading and decoding documents."""

    def test_read_utf8(self, write_document):
        """UTF-8 documents decode to text."""
        path = write_document("ja.txt", "今日は晴れ。\n")
        assert read_document(path) == "今日は晴れ。\n"

    def test_read_other_encoding(self, write_document):
        """Documents can use another encoding."""
        path = write_document("sjis.txt", "今日は晴れ。", encoding="shift_jis")
        assert read_document(path, encoding="shift_jis") == "今日は晴れ。"

    def test_invalid_bytes_are_encoding_error(self, write_document):
        """Undecodable bytes name the file and encoding."""
        path = write_document("bad.txt", b"Fine. \xff\xfe broken.")

        with pytest.raises(EncodingError, match="not valid utf-8") as exc_info:
            read_document(path)

        assert exc_info.value.file_name == str(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unknown_encoding(self, write_document):
        """An unknown encoding name is an encoding error."""
        path = write_document("doc.txt", "Text.")
        with pytest.raises(EncodingError, match="Unsupported encoding"):
            read_document(path, encoding="no-such-codec")

    def test_missing_file(self, tmp_path):
        """A missing file is a load error."""
        with pytest.raises(DocumentLoadError, match="not found"):
            read_document(tmp_path / "missing.txt")

    def test_no_path(self):
        """An empty path is a load error."""
        with pytest.raises(DocumentLoadError, match="not specified"):
            read_document("")


class TestExtractFile:
    """Test extraction straight from files."""

    def test_extract_file(self, extractor, write_document):
        """Spans carry the file name and line numbers."""
        path = write_document("doc.txt", "One. Two.\nThree.")

        spans = list(extractor.extract_file(path))

        assert [(s.content, s.line_number, s.file_name) for s in spans] == [
            ("One.", 1, str(path)), ("Two.", 1, str(path)), ("Three.", 2, str(path))]

    def test_encoding_error_before_iteration(self, extractor, write_document):
        """A bad file fails on the call, before any sentence is produced."""
        path = write_document("bad.txt", b"Good sentence. \xff")

        with pytest.raises(EncodingError):
            extractor.extract_file(path)


class TestBatch:
    """Test batch extraction with failure isolation."""

    def test_failures_do_not_stop_the_batch(self, extractor, write_document, tmp_path, test_logger):
        """Each document gets its own result; failures are logged."""
        good = write_document("good.txt", "Alpha. Beta.")
        bad = write_document("bad.txt", b"\xff\xfe\xfd")
        missing = tmp_path / "missing.txt"
        other = write_document("other.txt", "Gamma?")

        results = extract_documents(extractor, [good, bad, missing, other], logger=test_logger)

        assert [r.file_name for r in results] == [str(good), str(bad), str(missing), str(other)]
        assert [r.ok for r in results] == [True, False, False, True]
        assert [s.content for s in results[0].sentences] == ["Alpha.", "Beta."]
        assert results[1].sentences == []
        assert "not valid utf-8" in results[1].error
        assert "not found" in results[2].error
        assert [s.content for s in results[3].sentences] == ["Gamma?"]

        failed = test_logger.events("document_failed")
        assert [kv["file_name"] for kv in failed] == [str(bad), str(missing)]
        extracted = test_logger.events("document_extracted")
        assert [kv["sentences"] for kv in extracted] == [2, 1]

    def test_empty_batch(self, extractor):
        """No paths, no results."""
        assert extract_documents(extractor, []) == []

    def test_document_result_ok(self):
        """ok reflects whether an error was recorded."""
        assert DocumentResult(file_name="a.txt").ok
        assert not DocumentResult(file_name="a.txt", error="boom").ok


class TestLoggingAdapters:
    """Test Logger protocol adapters."""

    def test_stdlib_logger(self, default_catalog, caplog):
        """Events reach the standard logging module with their context."""
        with caplog.at_level(logging.INFO, logger="punctseg.test"):
            SentenceExtractor(default_catalog, logger=create_stdlib_logger("punctseg.test"))

        messages = [r.getMessage() for r in caplog.records]
        assert 'terminator_added char=U+002E "."' in messages

    def test_stdlib_logger_levels(self, caplog):
        """warn and error map to WARNING and ERROR."""
        log = StdlibLogger(logging.getLogger("punctseg.levels"))
        with caplog.at_level(logging.INFO, logger="punctseg.levels"):
            log.warn("careful", n=1)
            log.error("failed")

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("WARNING", "careful n=1"), ("ERROR", "failed")]

    def test_console_logger(self, capsys):
        """Console logger prints level-prefixed lines."""
        ConsoleLogger().info("document_extracted", file_name="a.txt", sentences=3)

        assert capsys.readouterr().out == "INFO: document_extracted file_name=a.txt sentences=3\n"
