"""
document

HtmlDocument - a html/head/title/body skeleton with a cursor. Content is
added at the current tag; push moves the cursor into a new tag and pop
moves it back out again, so nested markup can be built without passing
parent tags around.

Writing to disk and opening a browser are done through two callables
(fileWriter, fileOpener) supplied by the caller. makedocument() wires in
the defaults from htmltags.output.
"""
from __future__ import annotations
import logging
from typing import Optional, List, Union, Callable

from .htmltags import HtmlTag, TagSource, UnsupportedOperationError
from . import output

logger = logging.getLogger(__name__)

DEFAULT_DOCTYPE = "<!DOCTYPE html>"
NEWLINE = "\n"

JAVASCRIPT = "text/javascript"

FileWriter = Callable[[str, str], None]
FileOpener = Callable[[str], None]


def makedocument(
    title: Optional[str] = None, docType: str = DEFAULT_DOCTYPE
) -> HtmlDocument:
    """
    makedocument - create a html document that writes files with
        output.writefile and opens them with output.openfile
    """
    document = HtmlDocument(
        docType=docType, fileWriter=output.writefile, fileOpener=output.openfile
    )
    if title:
        document.title = title
    return document


class HtmlDocument:
    """
    A html document. The root, head, title and body tags are created once
    and are never replaced
    """

    def __init__(
        self,
        docType: str = DEFAULT_DOCTYPE,
        fileWriter: Optional[FileWriter] = None,
        fileOpener: Optional[FileOpener] = None,
    ):
        """
        docType: full text of the doctype declaration emitted before <html>
        fileWriter: called with (path, content) by writeToFile and
            openInBrowser
        fileOpener: called with (path) by openInBrowser, after writing
        """
        self.docType = docType
        self.fileWriter = fileWriter
        self.fileOpener = fileOpener

        self._root = HtmlTag("html")
        self._head = self._root.appendChild(HtmlTag("head"))
        self._titletag = self._head.appendChild(HtmlTag("title"))
        self._body = self._root.appendChild(HtmlTag("body"))

        self._current = self._body
        self._last = self._body
        self._stack: List[HtmlTag] = []

    @property
    def rootTag(self) -> HtmlTag:
        return self._root

    @property
    def head(self) -> HtmlTag:
        return self._head

    @property
    def body(self) -> HtmlTag:
        return self._body

    @property
    def current(self) -> HtmlTag:
        """
        current - the tag new content is attached to
        """
        return self._current

    @property
    def last(self) -> HtmlTag:
        """
        last - the tag most recently added (or pushed). Not changed by the
            style and script helpers
        """
        return self._last

    @property
    def title(self) -> str:
        """
        title - the text of the <title> tag in head
        """
        return self._titletag.text

    @title.setter
    def title(self, title: str) -> None:
        self._titletag.setText(title)

    # cursor

    def add(self, content: Union[str, HtmlTag, TagSource]) -> HtmlTag:
        """
        add - attach content to the current tag. The current tag does not
            change

        content: a "/" separated path of new tag names ("table/tr/td"),
            a tag, or a TagSource whose tags are attached in order

        returns the added tag (the deepest one for a path, the final one
            for a TagSource) which also becomes last
        """
        if isinstance(content, (str, HtmlTag)):
            self._last = self._current.appendChild(content)
        elif isinstance(content, TagSource):
            tags = list(content.alltags())
            self._current.appendAll(tags)
            if tags:
                self._last = tags[-1]
        else:
            raise TypeError(
                f"Expected a tag path, HtmlTag or TagSource, got {type(content).__name__}"
            )
        return self._last

    def push(self, content: Union[str, HtmlTag]) -> HtmlTag:
        """
        push - attach content to the current tag (as add) then make the
            added tag current. Undo with pop
        """
        if not isinstance(content, (str, HtmlTag)):
            raise TypeError(
                f"Expected a tag path or HtmlTag, got {type(content).__name__}"
            )
        return self._pushcurrent(self.add(content))

    def pushWithoutAttaching(self, tag: HtmlTag) -> HtmlTag:
        """
        pushWithoutAttaching - make tag current (and last) without
            attaching it to the document. Content added afterwards goes
            into tag; attaching tag itself is left to the caller
        """
        self._last = tag
        return self._pushcurrent(tag)

    def _pushcurrent(self, tag: HtmlTag) -> HtmlTag:
        self._stack.append(self._current)
        self._current = tag
        logger.debug("push %r (depth %d)", tag, len(self._stack))
        return tag

    def pop(self) -> None:
        """
        pop - make the tag that was current before the matching push
            current again. With nothing pushed, the body stays current
        """
        if self._stack:
            self._current = self._stack.pop()
        else:
            self._current = self._body
        logger.debug("pop to %r (depth %d)", self._current, len(self._stack))

    def rewind(self) -> None:
        """
        rewind - forget all pushes, the body becomes current
        """
        self._stack.clear()
        self._current = self._body
        logger.debug("rewind to body")

    # head content. These never change current or last

    def _addtohead(self, tag: HtmlTag) -> HtmlTag:
        return self._head.appendChild(tag)

    def addStyle(self, css: str) -> HtmlTag:
        """
        addStyle - add a <style> tag holding css to head
        """
        return self._addtohead(HtmlTag("style", text=css))

    def referenceStyle(self, path: str) -> HtmlTag:
        """
        referenceStyle - add a <link> to an external stylesheet to head.
            The returned tag's attributes (eg media) may be overridden
        """
        return self._addtohead(
            HtmlTag(
                "link",
                attributes=[
                    ("media", "screen"),
                    ("href", path),
                    ("type", "text/css"),
                    ("rel", "stylesheet"),
                ],
            )
        )

    def addJavaScript(self, script: str) -> HtmlTag:
        return self.addScript(JAVASCRIPT, script)

    def addScript(self, scriptType: str, script: str) -> HtmlTag:
        """
        addScript - add an inline <script> of the given type to head. The
            script is placed on its own line(s) inside the tag
        """
        tag = HtmlTag("script", attributes=[("type", scriptType)])
        tag.setText(NEWLINE + script + NEWLINE)
        return self._addtohead(tag)

    def referenceJavaScriptFile(self, path: str) -> HtmlTag:
        return self.referenceScriptFile(JAVASCRIPT, path)

    def referenceScriptFile(self, scriptType: str, path: str) -> HtmlTag:
        """
        referenceScriptFile - add a <script> with a src attribute to head
        """
        return self._addtohead(
            HtmlTag("script", attributes=[("type", scriptType), ("src", path)])
        )

    # output

    def render(self) -> str:
        """
        render - the doctype, a newline, then the whole html tree
        """
        return self.docType + NEWLINE + self._root.render()

    def __str__(self) -> str:
        return self.render()

    def writeToFile(self, path: str) -> None:
        """
        writeToFile - pass the rendered document to fileWriter. Errors
            raised by fileWriter are not caught
        """
        if self.fileWriter is None:
            raise UnsupportedOperationError("No fileWriter set on document")
        logger.debug("writing document to %s", path)
        self.fileWriter(path, self.render())

    def openInBrowser(self) -> str:
        """
        openInBrowser - write the document to a new temporary path, then
            pass that path to fileOpener

        returns the temporary path
        """
        if self.fileOpener is None:
            raise UnsupportedOperationError("No fileOpener set on document")
        path = output.temppath()
        self.writeToFile(path)
        logger.debug("opening %s", path)
        self.fileOpener(path)
        return path


if __name__ == "__main__":
    d = makedocument("htmltags")
    d.push("div").setAttribute("id", "main")
    d.add("p").setText("Hello")
    d.pop()

    print(d.render())
