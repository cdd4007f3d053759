"""Tests for settings validation, exception formatting and logging helpers."""

import logging

import numpy as np
import pytest
from pydantic import ValidationError as PydanticValidationError

from studybuddy.configs.base import BaseSettings
from studybuddy.configs.database import DatabaseSettings
from studybuddy.core.document_processing.configs import RAGSettings
from studybuddy.core.exceptions import DocumentNotFoundError, FetchError, StudyBuddyException
from studybuddy.observability.correlation import correlation_id_ctx, set_correlation_id
from studybuddy.observability.log_utils import log_exception_with_context, log_with_context, safe_log_value
from studybuddy.observability.logger import CorrelationIdFilter, configure_logging


class TestRAGSettings:
    def test_defaults(self) -> None:
        settings = RAGSettings(_env_file=None)

        assert settings.embedding_dimension == 768
        assert (settings.page_chunk_size, settings.page_chunk_overlap) == (800, 100)
        assert settings.min_chunk_length == 50
        assert settings.embedding_batch_size == 5
        assert settings.embedding_batch_delay_seconds == 1.0
        assert settings.default_top_k == 5

    def test_reads_prefixed_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("RAG_EMBEDDING_BATCH_SIZE", "3")

        assert RAGSettings(_env_file=None).embedding_batch_size == 3

    @pytest.mark.parametrize(
        "overrides",
        [
            {"page_chunk_overlap": 800},
            {"page_chunk_overlap": 0},
            {"embedding_batch_size": 0},
        ],
    )
    def test_rejects_invalid_windows(self, overrides) -> None:
        with pytest.raises(PydanticValidationError):
            RAGSettings(_env_file=None, **overrides)


class TestDatabaseSettings:
    def test_builds_asyncpg_url_from_parts(self) -> None:
        settings = DatabaseSettings(_env_file=None, host="db", port=5433, user="u", password="p", db="sb")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/sb"
        assert settings.is_sqlite is False

    def test_url_override_is_normalised(self) -> None:
        settings = DatabaseSettings(_env_file=None, url="postgres://u:p@db/sb")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db/sb"

    def test_sqlite_url_is_detected(self) -> None:
        settings = DatabaseSettings(_env_file=None, url="sqlite+aiosqlite:///./studybuddy.db")

        assert settings.is_sqlite is True


class TestExceptions:
    def test_str_includes_details(self) -> None:
        error = FetchError("File not found: /tmp/x.pdf", "/tmp/x.pdf")

        assert error.message == "File not found: /tmp/x.pdf"
        assert str(error) == "File not found: /tmp/x.pdf | Details: {'locator': '/tmp/x.pdf'}"

    def test_not_found_message(self) -> None:
        error = DocumentNotFoundError("abc")

        assert isinstance(error, StudyBuddyException)
        assert error.message == "Document not found: abc"
        assert error.details == {"document_id": "abc"}


class TestLogUtils:
    def test_safe_log_value_summarises_vectors(self) -> None:
        assert safe_log_value([0.1] * 768) == "list(768 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_safe_log_value_truncates(self) -> None:
        value = safe_log_value("x" * 600, max_length=10)

        assert value.startswith("x" * 10 + "... (truncated")

    def test_log_with_context_attaches_extra(self, caplog) -> None:
        logger = logging.getLogger("studybuddy.tests")

        with caplog.at_level(logging.INFO, logger="studybuddy.tests"):
            log_with_context(logger, logging.INFO, "indexed", chunk_count=3, embedding=[0.0] * 4)

        record = caplog.records[-1]
        assert record.message == "indexed"
        assert record.chunk_count == "3"
        assert record.embedding == "list(4 items)"

    def test_safe_log_value_summarises_payloads_and_arrays(self) -> None:
        assert safe_log_value(b"%PDF-1.7 ...") == "bytes(12 bytes)"
        assert safe_log_value(np.zeros((3, 768))) == "ndarray(shape=(3, 768))"

    def test_reserved_record_keys_are_renamed(self, caplog) -> None:
        logger = logging.getLogger("studybuddy.tests")

        with caplog.at_level(logging.INFO, logger="studybuddy.tests"):
            log_with_context(logger, logging.INFO, "stored", filename="notes.pdf")

        assert caplog.records[-1].ctx_filename == "notes.pdf"

    def test_domain_exception_logs_message_and_details_without_traceback(self, caplog) -> None:
        logger = logging.getLogger("studybuddy.tests")
        error = FetchError("Remote source returned HTTP 404", "https://x/b.pdf")

        with caplog.at_level(logging.ERROR, logger="studybuddy.tests"):
            log_exception_with_context(logger, "Indexing failed", error, document_id="doc-1")

        record = caplog.records[-1]
        assert record.error_type == "FetchError"
        assert record.error_msg == "Remote source returned HTTP 404"
        assert record.locator == "https://x/b.pdf"
        assert record.document_id == "doc-1"
        assert record.exc_info is None

    def test_unexpected_exception_keeps_traceback(self, caplog) -> None:
        logger = logging.getLogger("studybuddy.tests")

        with caplog.at_level(logging.ERROR, logger="studybuddy.tests"):
            log_exception_with_context(logger, "Could not record error", RuntimeError("database down"))

        record = caplog.records[-1]
        assert record.error_msg == "database down"
        assert record.exc_info is not None


class TestBaseSettings:
    def test_log_level_is_normalised(self) -> None:
        assert BaseSettings(_env_file=None, log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            BaseSettings(_env_file=None, log_level="LOUD")


class TestCorrelationIdLogging:
    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        correlation_id_ctx.set("")

    def test_filter_stamps_current_correlation_id(self) -> None:
        record = logging.LogRecord("studybuddy", logging.INFO, __file__, 1, "indexed", None, None)
        set_correlation_id("req-42")

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "req-42"

    def test_filter_uses_placeholder_outside_requests(self) -> None:
        record = logging.LogRecord("studybuddy", logging.INFO, __file__, 1, "startup", None, None)
        correlation_id_ctx.set("")

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"

    def test_configured_handler_writes_correlation_id(self, capsys) -> None:
        configure_logging("INFO", quiet_loggers=["httpx"])
        set_correlation_id("req-7f3a")

        logging.getLogger("studybuddy.core.document_processing.entrypoint").info("Indexing complete")

        out = capsys.readouterr().out
        assert "[req-7f3a] - Indexing complete" in out
        assert logging.getLogger("httpx").level == logging.WARNING
