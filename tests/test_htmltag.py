import pytest

from htmltags import (
    HtmlTag,
    InvalidPathError,
    LiteralTag,
    NotFoundError,
    UnsupportedOperationError,
)


def test_empty_tag_renders_open_and_close():
    assert HtmlTag("div").render() == "<div></div>"


def test_tag_name_is_lower_cased():
    assert HtmlTag("DIV").tagName == "div"


def test_attributes_render_in_insertion_order():
    tag = HtmlTag("a").setAttribute("href", "x.html").setAttribute("class", "nav")
    assert tag.render() == '<a href="x.html" class="nav"></a>'


def test_overwriting_an_attribute_keeps_its_position():
    tag = HtmlTag("a", attributes=[("href", "x"), ("title", "t")])
    tag.setAttribute("href", "y")
    assert tag.render() == '<a href="y" title="t"></a>'
    assert tag.getAttribute("href") == "y"


def test_attribute_values_are_not_escaped():
    tag = HtmlTag("p").setAttribute("data-x", "a<b&c")
    assert tag.render() == '<p data-x="a<b&c"></p>'


def test_missing_attribute_raises_not_found():
    tag = HtmlTag("p")
    with pytest.raises(NotFoundError):
        tag.getAttribute("nope")
    assert not tag.hasAttribute("nope")


def test_remove_attribute():
    tag = HtmlTag("p").setAttribute("id", "x").removeAttribute("id")
    assert tag.render() == "<p></p>"
    assert tag.id is None


def test_id_and_classes():
    tag = HtmlTag("div")
    tag.id = "main"
    tag.addClass("a b").addClass("b c")
    assert tag.classes == ["a", "b", "c"]
    assert tag.render() == '<div id="main" class="a b c"></div>'


def test_set_text_overwrites_the_single_text_leaf():
    tag = HtmlTag("p").setText("one")
    tag.setText("two")
    assert tag.childCount == 1
    assert tag.text == "two"
    assert tag.render() == "<p>two</p>"


def test_set_text_overwrites_in_place_among_other_children():
    tag = HtmlTag("p").setText("one")
    tag.appendChild(HtmlTag("br"))
    tag.setText("two")
    assert tag.render() == "<p>two<br></p>"


def test_set_text_appends_after_existing_children():
    tag = HtmlTag("p")
    tag.appendChild("b")
    tag.setText("x")
    assert tag.render() == "<p><b></b>x</p>"
    assert tag.childCount == 2


def test_text_property_setter():
    tag = HtmlTag("p")
    tag.text = "hello"
    assert tag.render() == "<p>hello</p>"


def test_append_child_returns_the_child():
    parent = HtmlTag("ul")
    li = HtmlTag("li")
    assert parent.appendChild(li) is li
    assert li.parent is parent
    assert parent.firstChild() is li


def test_append_path_returns_the_deepest_tag():
    parent = HtmlTag("body")
    a = parent.appendChild("div/a")
    assert a.tagName == "a"
    assert a.parent.tagName == "div"
    assert parent.childCount == 1
    a.setText("hello")
    assert parent.render() == "<body><div><a>hello</a></div></body>"


@pytest.mark.parametrize("path", ["", "div//a", "/div", "div/", " "])
def test_append_path_with_empty_segment_raises(path):
    with pytest.raises(InvalidPathError):
        HtmlTag("body").appendChild(path)


def test_invalid_path_error_is_a_value_error():
    with pytest.raises(ValueError):
        HtmlTag("body").appendChild("a//b")


def test_first_child_of_empty_tag_raises_not_found():
    with pytest.raises(NotFoundError):
        HtmlTag("div").firstChild()


def test_children_view_is_read_only():
    tag = HtmlTag("div")
    tag.appendChild("p")
    children = tag.children
    assert isinstance(children, tuple)
    assert len(children) == tag.childCount == 1


def test_void_tag_renders_without_closing_tag():
    tag = HtmlTag("img", attributes=[("src", "a.png")])
    assert tag.render() == '<img src="a.png">'


def test_void_tag_rejects_children_and_text():
    tag = HtmlTag("br")
    with pytest.raises(UnsupportedOperationError):
        tag.appendChild("span")
    with pytest.raises(UnsupportedOperationError):
        tag.setText("x")


def test_forced_void_tag():
    assert HtmlTag("custom", isvoid=True).render() == "<custom>"


def test_append_literal():
    tag = HtmlTag("div").appendLiteral("<b>bold</b>")
    assert isinstance(tag.firstChild(), LiteralTag)
    assert tag.render() == "<div><b>bold</b></div>"


def test_nested_render():
    table = HtmlTag("table")
    table.appendChild("tr/td").setText("1")
    table.appendChild("tr/td").setText("2")
    assert table.render() == (
        "<table><tr><td>1</td></tr><tr><td>2</td></tr></table>"
    )


def test_render_is_repeatable():
    tag = HtmlTag("div").setAttribute("id", "x")
    tag.appendChild("p").setText("a")
    assert tag.render() == tag.render()
    assert str(tag) == tag.render()


def test_search_helpers():
    root = HtmlTag("div")
    root.appendChild("section/p").setAttribute("id", "first")
    root.appendChild("p")
    assert [t.tagName for t in root.getElementsByTagName("p")] == ["p", "p"]
    assert root.getElementById("first").tagName == "p"
    assert root.getElementById("nope") is None


def test_append_path_ignores_whitespace_around_names():
    parent = HtmlTag("body")
    parent.appendChild("div/ a ")
    assert parent.render() == "<body><div><a></a></div></body>"


@pytest.mark.parametrize("name", ["", " ", " a", "a b"])
def test_tag_name_with_whitespace_raises(name):
    with pytest.raises(InvalidPathError):
        HtmlTag(name)


def test_attaching_to_a_second_parent_moves_the_tag():
    first = HtmlTag("div")
    second = HtmlTag("section")
    p = first.appendChild(HtmlTag("p"))
    second.appendChild(p)
    assert p.parent is second
    assert first.childCount == 0
    assert first.render() == "<div></div>"
    assert second.render() == "<section><p></p></section>"


def test_attaching_a_tag_to_itself_raises():
    tag = HtmlTag("div")
    with pytest.raises(UnsupportedOperationError):
        tag.appendChild(tag)
    assert tag.childCount == 0


def test_attaching_an_ancestor_raises():
    outer = HtmlTag("div")
    inner = outer.appendChild("section/p")
    with pytest.raises(UnsupportedOperationError):
        inner.appendChild(outer)
    assert outer.parent is None
    assert outer.render() == "<div><section><p></p></section></div>"


def test_remove_child():
    parent = HtmlTag("ul")
    li = parent.appendChild(HtmlTag("li"))
    assert parent.removeChild(li) is li
    assert li.parent is None
    assert parent.childCount == 0
    with pytest.raises(NotFoundError):
        parent.removeChild(li)
