"""
Document parsing task for Markdown and PDF sources.

Turns a file on disk into an unsaved Document with extracted text and
typed metadata. ParsingTask dispatches to the first parser that
supports the file's extension.

Dependencies: pypdf, ragindex.models
System role: First stage of document ingestion pipeline
"""

import logging
import re
from pathlib import Path
from typing import Protocol

from pypdf import PdfReader

from ragindex.core.exceptions import ParseError
from ragindex.models import Document, DocumentKind, DocumentMetadata

logger = logging.getLogger(__name__)

_MARKDOWN_HEADER = re.compile(r"^#{1,6}\s+(.+)$", re.MULTILINE)


class DocumentParser(Protocol):
    """Parser collaborator: checks support, then parses a file."""

    def supports(self, file_path: str | Path) -> bool: ...

    def parse(self, file_path: str | Path) -> Document: ...


def _existing_file(file_path: str | Path) -> Path:
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise ParseError(f"File not found: {file_path}", file_path=str(file_path))
    return path.resolve()


class MarkdownParser:
    """Parse Markdown files as UTF-8 text."""

    extensions = (".md", ".markdown")

    def supports(self, file_path: str | Path) -> bool:
        return Path(file_path).suffix.lower() in self.extensions

    def parse(self, file_path: str | Path) -> Document:
        """
        Read a Markdown file and collect header metadata.

        Args:
            file_path: Path to a .md/.markdown file

        Returns:
            Document: Unsaved document with the raw Markdown as content

        Raises:
            ParseError: When the file is missing or not valid UTF-8
        """
        path = _existing_file(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(
                f"Failed to read Markdown: {e}",
                file_path=str(path),
                file_type=path.suffix,
            ) from e

        headers = _MARKDOWN_HEADER.findall(content)
        metadata = DocumentMetadata(
            filename=path.name,
            size=path.stat().st_size,
            headers_count=len(headers),
            first_header=headers[0].strip() if headers else None,
        )
        return Document(
            path=str(path),
            kind=DocumentKind.MARKDOWN,
            content=content,
            metadata=metadata,
        )


class PdfParser:
    """Parse PDF files with pypdf text extraction."""

    extensions = (".pdf",)

    def supports(self, file_path: str | Path) -> bool:
        return Path(file_path).suffix.lower() in self.extensions

    def parse(self, file_path: str | Path) -> Document:
        """
        Extract text and document info from a PDF.

        Args:
            file_path: Path to a .pdf file

        Returns:
            Document: Unsaved document with page texts joined by newlines

        Raises:
            ParseError: When the file is missing, encrypted or corrupt
        """
        path = _existing_file(file_path)
        try:
            reader = PdfReader(str(path))
            page_texts = [page.extract_text() or "" for page in reader.pages]
            info = reader.metadata
        except Exception as e:
            raise ParseError(
                f"Failed to parse PDF: {e}",
                file_path=str(path),
                file_type=path.suffix,
            ) from e

        metadata = DocumentMetadata(
            filename=path.name,
            size=path.stat().st_size,
            pages=len(page_texts),
            title=info.title if info else None,
            author=info.author if info else None,
            subject=info.subject if info else None,
        )
        return Document(
            path=str(path),
            kind=DocumentKind.PDF,
            content="\n".join(page_texts).strip(),
            metadata=metadata,
        )


class ParsingTask:
    """Dispatch files to the first parser that supports them."""

    def __init__(self, parsers: list[DocumentParser] | None = None) -> None:
        """
        Initialize parsing task.

        Args:
            parsers: Ordered parsers (defaults to Markdown then PDF)
        """
        self._parsers = parsers if parsers is not None else [MarkdownParser(), PdfParser()]

    def supports(self, file_path: str | Path) -> bool:
        return any(parser.supports(file_path) for parser in self._parsers)

    def parse(self, file_path: str | Path) -> Document:
        """
        Parse a file with the matching parser.

        Args:
            file_path: Path to the document

        Returns:
            Document: Unsaved document

        Raises:
            ParseError: When no parser supports the file or parsing fails
        """
        for parser in self._parsers:
            if parser.supports(file_path):
                document = parser.parse(file_path)
                logger.debug(f"Parsed {document.path} ({len(document.content)} chars)")
                return document

        raise ParseError(
            f"Unsupported file format: {Path(file_path).suffix or '<none>'}",
            file_path=str(file_path),
            file_type=Path(file_path).suffix,
        )
