"""
Text extraction task using LangChain PyPDFLoader.

Converts raw PDF bytes into whole-document text and a page count.

Dependencies: langchain_community.document_loaders
System role: First processing stage of document ingestion pipeline
"""

import asyncio
import os
import tempfile

from langchain_community.document_loaders import PyPDFLoader

from studybuddy.core.exceptions import ExtractionError

from ..models import ExtractedText

# Separator placed between page texts; the page apportionment works on the joined string.
PAGE_SEPARATOR = "\n"


class ParsingTask:
    """Extract plain text and page count from PDF bytes."""

    def parse_file(self, file_path: str) -> ExtractedText:
        """
        Extract text from a PDF on disk.

        Args:
            file_path: Path to PDF document

        Returns:
            ExtractedText: Joined page text and page count

        Raises:
            ExtractionError: When loading fails or no text can be extracted
        """
        try:
            pages = PyPDFLoader(file_path).load()
        except Exception as e:
            raise ExtractionError(
                f"Failed to parse PDF: {e}",
                details={"file_path": file_path},
            ) from e

        text = PAGE_SEPARATOR.join(page.page_content or "" for page in pages)
        if not text.strip():
            raise ExtractionError(
                "PDF contains no extractable text",
                details={"file_path": file_path, "page_count": len(pages)},
            )
        return ExtractedText(text=text, page_count=len(pages))

    def parse_bytes(self, data: bytes) -> ExtractedText:
        """
        Extract text from in-memory PDF bytes via a temporary file.

        Args:
            data: Raw PDF bytes

        Returns:
            ExtractedText: Joined page text and page count

        Raises:
            ExtractionError: When the payload is empty or not parseable
        """
        if not data:
            raise ExtractionError("PDF contains no extractable text", details={"size": 0})

        fd, tmp_path = tempfile.mkstemp(prefix="studybuddy_", suffix=".pdf")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            return self.parse_file(tmp_path)
        finally:
            os.unlink(tmp_path)

    async def extract(self, data: bytes) -> ExtractedText:
        """Run ``parse_bytes`` off the event loop."""
        return await asyncio.to_thread(self.parse_bytes, data)
