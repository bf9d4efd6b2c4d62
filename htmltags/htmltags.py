"""
htmltags

Tag tree model: HtmlTag elements holding attributes and children, verbatim
LiteralTag leaves and TagList collections for bulk insertion.

Does not enforce correct html structure.
Does not escape attribute values or text; everything is emitted verbatim.
A tag has at most one parent: attaching it elsewhere moves it, and
attaching a tag inside itself (or its own descendants) is refused.
"""
from __future__ import annotations
from typing import Optional, List, Tuple, Iterable, Iterator, Union
from typing import Protocol, runtime_checkable

# in html5 these elements can not have a closing tag (or content)
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}

PATH_SEPARATOR = "/"


class HtmlTagsError(Exception):
    """
    HtmlTagsError - base class for errors raised by this package
    """


class NotFoundError(HtmlTagsError, LookupError):
    """
    NotFoundError - a child or attribute that was asked for does not exist
    """


class InvalidPathError(HtmlTagsError, ValueError):
    """
    InvalidPathError - a "/" separated tag path could not be used
    """


class UnsupportedOperationError(HtmlTagsError, ValueError):
    """
    UnsupportedOperationError - the operation is not permitted on this kind
    of tag (eg. children on a void element or a literal)
    """


def splitpath(path: str) -> List[str]:
    """
    splitpath - split a "/" separated chain of tag names ("div/a") into the
    list of tag names. Whitespace around each name is ignored. Raises
    InvalidPathError for empty segments
    """
    names = [name.strip() for name in path.split(PATH_SEPARATOR)]
    for name in names:
        if not name:
            raise InvalidPathError(f"Empty tag name in path: {path!r}")
    return names


class LiteralTag:
    """
    A leaf holding pre-formed markup. Rendered exactly as given, never has
    children
    """

    def __init__(self, html: str):
        self.html = html
        self.parent: Optional[HtmlTag] = None

    def appendChild(self, child: object) -> None:
        raise UnsupportedOperationError("Children not permitted on a literal tag")

    def appendLiteral(self, html: str) -> None:
        raise UnsupportedOperationError("Children not permitted on a literal tag")

    def setText(self, text: str) -> None:
        raise UnsupportedOperationError("Text not permitted on a literal tag")

    def renderlist(self) -> List[str]:
        return [self.html]

    def render(self) -> str:
        return self.html

    def __str__(self) -> str:
        return self.html

    def __repr__(self) -> str:
        return f"LiteralTag({self.html!r})"


# a child entry: an element, a literal, or a text leaf (plain string)
Child = Union["HtmlTag", LiteralTag, str]


@runtime_checkable
class TagSource(Protocol):
    """
    TagSource - anything that can produce an ordered sequence of tags for
    bulk insertion (see HtmlTag.appendAll and HtmlDocument.add)
    """

    def alltags(self) -> Iterable[HtmlTag]:
        ...


class TagList:
    """
    An ordered, fixed list of tags. Holding a tag in a TagList does not
    attach it anywhere; that happens when the list is appended to a host
    """

    def __init__(self, tags: Iterable[HtmlTag] = ()):
        self._tags: Tuple[HtmlTag, ...] = tuple(tags)

    def alltags(self) -> Iterable[HtmlTag]:
        return self._tags

    def __iter__(self) -> Iterator[HtmlTag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def render(self) -> str:
        """
        render - render each tag in order, concatenated
        """
        return "".join(t.render() for t in self._tags)

    def __str__(self) -> str:
        return self.render()


class HtmlTag:
    """
    An HTML element. Has a tag name, optionally attributes, optionally
    children (other tags, literals or text)
    """

    def __init__(
        self,
        tagName: str,
        text: Optional[str] = None,
        attributes: Optional[Iterable[Tuple[str, str]]] = None,
        isvoid: bool = False,
    ):
        """
        tagName: type of this tag (eg "div"). Stored lower case
        text: initial text content (optional)
        attributes: an iterable of (name, value) pairs to be created as
            attributes. If source is a dict, pass d.items()
        isvoid: set this as a void element when true. Void elements are
            rendered without a closing tag and cannot have children. If
            false, this may still be a void element if the tag is one of
            the void element tags.
        """
        if tagName.split() != [tagName]:
            raise InvalidPathError(
                f"Tag name must be non-empty, without whitespace: {tagName!r}"
            )
        self._tagName = tagName.lower()
        self.isvoid = isvoid or (self._tagName in VOID_ELEMENTS)
        self.parent: Optional[HtmlTag] = None
        self.attributes: dict[str, str] = {}
        self._children: List[Child] = []

        if attributes:
            for name, value in attributes:
                self.setAttribute(name, value)
        if text is not None:
            self.setText(text)

    @property
    def tagName(self) -> str:
        return self._tagName

    def __repr__(self) -> str:
        return f"HtmlTag({self._tagName!r})"

    # attributes

    def setAttribute(self, name: str, value: str) -> HtmlTag:
        """
        setAttribute - set (create or overwrite) an attribute of this tag.
        An overwritten attribute keeps its original position
        name: name of attribute
        value: value of attribute

        returns self (for chaining)
        """
        self.attributes[name] = value
        return self

    def getAttribute(self, name: str) -> str:
        """
        getAttribute - return the value of an attribute. Raises
        NotFoundError if the attribute was never set
        """
        try:
            return self.attributes[name]
        except KeyError:
            raise NotFoundError(
                f"No attribute {name!r} on tag: {self._tagName}"
            ) from None

    def hasAttribute(self, name: str) -> bool:
        return name in self.attributes

    def removeAttribute(self, name: str) -> HtmlTag:
        """
        removeAttribute - remove an attribute from this tag if it exists
        """
        self.attributes.pop(name, None)
        return self

    @property
    def id(self) -> Optional[str]:
        """
        id - return the id of this tag or None if no id
        """
        return self.attributes.get("id")

    @id.setter
    def id(self, id: str) -> None:
        self.setAttribute("id", id)

    @property
    def classes(self) -> List[str]:
        value = self.attributes.get("class")
        return value.split() if value else []

    def addClass(self, classname: str) -> HtmlTag:
        """
        addClass - add one or more (space separated) classes to the class
        attribute. Classes already present are not repeated
        """
        classes = self.classes
        for c in classname.split():
            if c not in classes:
                classes.append(c)
        self.setAttribute("class", " ".join(classes))
        return self

    # text

    @property
    def text(self) -> str:
        """
        text - the text leaves of this tag, concatenated ("" if none)
        """
        return "".join(c for c in self._children if isinstance(c, str))

    @text.setter
    def text(self, text: str) -> None:
        self.setText(text)

    def setText(self, text: str) -> HtmlTag:
        """
        setText - set the text of this tag. When the tag holds exactly one
        text leaf it is overwritten in place, otherwise a new text leaf is
        appended

        returns self (for chaining)
        """
        if self.isvoid:
            raise UnsupportedOperationError(
                f"Content not permitted on Void elements. Tag: {self._tagName}"
            )
        positions = [i for i, c in enumerate(self._children) if isinstance(c, str)]
        if len(positions) == 1:
            self._children[positions[0]] = text
        else:
            self._children.append(text)
        return self

    # children

    @property
    def children(self) -> Tuple[Child, ...]:
        return tuple(self._children)

    @property
    def childCount(self) -> int:
        return len(self._children)

    def firstChild(self) -> Child:
        """
        firstChild - return the first child entry. Raises NotFoundError if
        this tag has no children
        """
        if not self._children:
            raise NotFoundError(f"Tag has no children. Tag: {self._tagName}")
        return self._children[0]

    def _attach(self, child: Union[HtmlTag, LiteralTag]) -> None:
        if self.isvoid:
            raise UnsupportedOperationError(
                f"Content not permitted on Void elements. Tag: {self._tagName}"
            )
        # no cycles: child may not be this tag or one of its ancestors
        ancestor: Optional[HtmlTag] = self
        while ancestor is not None:
            if ancestor is child:
                raise UnsupportedOperationError(
                    f"Cannot attach a tag inside itself. Tag: {child._tagName}"
                )
            ancestor = ancestor.parent
        if child.parent is not None:
            child.parent.removeChild(child)
        self._children.append(child)
        child.parent = self

    def removeChild(
        self, child: Union[HtmlTag, LiteralTag]
    ) -> Union[HtmlTag, LiteralTag]:
        """
        removeChild - remove the supplied child from this tag's list of
        children and clear its parent.
        child: tag to remove, must be a child of this tag or NotFoundError
            will be raised
        """
        for i, c in enumerate(self._children):
            if c is child:
                self._children.pop(i)
                child.parent = None
                return child

        raise NotFoundError(
            f"Child does not exist in this tag. Tag: {self._tagName}"
        )

    def appendChild(self, child: Union[HtmlTag, str]) -> HtmlTag:
        """
        appendChild - add a child to this tag.

        child: a tag, which is attached and returned, or a "/" separated
            path of tag names ("div/a"). For a path, a new chain of nested
            tags is created (<div><a></a></div>) and the deepest one is
            returned

        Raises InvalidPathError if the path contains an empty tag name
        """
        if isinstance(child, str):
            host = self
            for name in splitpath(child):
                tag = HtmlTag(name)
                host._attach(tag)
                host = tag
            return host

        self._attach(child)
        return child

    def appendLiteral(self, html: str) -> HtmlTag:
        """
        appendLiteral - add pre-formed markup as a child. It is rendered
        verbatim

        returns self (for chaining)
        """
        self._attach(LiteralTag(html))
        return self

    def appendAll(self, source: Union[TagSource, Iterable[HtmlTag]]) -> HtmlTag:
        """
        appendAll - attach every tag produced by source, in order

        returns self (for chaining)
        """
        tags = source.alltags() if isinstance(source, TagSource) else source
        for tag in tags:
            self._attach(tag)
        return self

    # searching

    def getElementsByTagName(self, tagName: str) -> List[HtmlTag]:
        """
        getElementsByTagName - return a list of tags from this (sub)tree
            with the supplied tagName. Exhaustive search, depth first
        """
        tagName = tagName.lower()
        result: List[HtmlTag] = []

        if self._tagName == tagName:
            result.append(self)

        for c in self._children:
            if isinstance(c, HtmlTag):
                result.extend(c.getElementsByTagName(tagName))

        return result

    def getElementById(self, id: str) -> Optional[HtmlTag]:
        """
        getElementById - return the first tag in this (sub)tree with the
            supplied id, depth first, or None
        """
        if self.id == id:
            return self

        for c in self._children:
            if isinstance(c, HtmlTag):
                e = c.getElementById(id)
                if e:
                    return e
        return None

    # rendering

    def renderlist(self) -> List[str]:
        """
        renderlist - render this tag and recursively, all child entries

        returns a list of strings that can be joined to create the rendered
        html (or can be appended to parent's html list)
        """
        dest: List[str] = ["<" + self._tagName]

        for k, v in self.attributes.items():
            dest.append(f' {k}="{v}"')

        dest.append(">")
        if self.isvoid:
            return dest

        for c in self._children:
            if isinstance(c, str):
                dest.append(c)
            else:
                dest.extend(c.renderlist())

        dest.append(f"</{self._tagName}>")
        return dest

    def render(self) -> str:
        """
        render - render this tag to a string of html
        """
        return "".join(self.renderlist())

    def __str__(self) -> str:
        return self.render()
