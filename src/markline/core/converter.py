"""Markdown to HTML converter.

Splits source text into lines and renders each line independently through a
MatchChain. One fragment is produced per line, in input order.
"""

import logging
from pathlib import Path

from markline.core.document import DocumentBuilder
from markline.core.matching import DEFAULT_CHAIN, MatchChain

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


class MarkdownConverter:
    """Convert line-oriented markdown to HTML.

    Instances hold no per-call state and can be shared between threads and
    concurrent requests.
    """

    def __init__(self, chain: MatchChain | None = None) -> None:
        self._chain = chain or DEFAULT_CHAIN

    @property
    def chain(self) -> MatchChain:
        return self._chain

    def convert(self, markdown_text: str) -> str:
        """Convert markdown text to HTML.

        Lines are split on ``\\n`` only; a trailing newline produces a
        trailing empty paragraph and carriage returns stay in line content.

        Args:
            markdown_text: Markdown source text

        Returns:
            Concatenated HTML fragments, one per line
        """
        logger.debug(f"Converting {len(markdown_text)} characters of markdown")
        document = DocumentBuilder()
        for line in markdown_text.split(LINE_SEPARATOR):
            document.append(self._chain.render(line))
        html = document.collect()
        logger.debug(f"Converted {len(document)} lines to {len(html)} characters of HTML")
        return html

    def convert_file(self, file_path: str | Path) -> str:
        """Convert a markdown file to HTML.

        Args:
            file_path: Path to markdown file

        Returns:
            HTML string

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Markdown file not found: {file_path}")

        logger.info(f"Converting file: {file_path}")
        # No newline translation: "\r" stays in line content
        return self.convert(path.read_bytes().decode("utf-8"))


_default_converter = MarkdownConverter()


def convert(markdown_text: str) -> str:
    """Convert markdown text with the default rules."""
    return _default_converter.convert(markdown_text)
