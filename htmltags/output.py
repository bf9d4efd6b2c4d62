"""
output - default file writer and file opener for HtmlDocument
"""
from __future__ import annotations
import logging
import tempfile
import uuid
import webbrowser
from pathlib import Path

logger = logging.getLogger(__name__)


def writefile(path: str, content: str) -> None:
    """
    writefile - write content to path as utf-8, creating any missing parent
        directories
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    logger.debug("wrote %d characters to %s", len(content), p)


def openfile(path: str) -> None:
    """
    openfile - open a local file with the default web browser
    """
    uri = Path(path).resolve().as_uri()
    logger.debug("opening %s", uri)
    webbrowser.open(uri)


def temppath(suffix: str = ".htm") -> str:
    """
    temppath - a new unique path in the temp directory. The file is not
        created
    """
    return str(Path(tempfile.gettempdir()) / f"htmltags-{uuid.uuid4().hex}{suffix}")
