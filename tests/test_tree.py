"""Tests for building Node trees from scrape payloads and raw HTML."""

from pathlib import Path

import pytest

from footballtv.exceptions import PayloadError
from footballtv.tree import Node, node_from_dict, node_from_html, tree_from_payload

DATA_DIR = Path(__file__).resolve().parent / "data"


# ---------------------------------------------------------------------------
# node_from_dict / tree_from_payload
# ---------------------------------------------------------------------------


class TestNodeFromDict:
    """Tests for the scrape-service mapping format."""

    def test_text_and_element_children(self):
        node = node_from_dict({
            "tag": "div",
            "attrs": {"class": "m_title"},
            "children": ["Local", {"tag": "span", "children": ["Real Madrid"]}],
        })
        assert node.tag == "div"
        assert node.attrs == {"class": "m_title"}
        assert node.children[0] == "Local"
        assert node.children[1] == Node(tag="span", children=["Real Madrid"])

    def test_missing_children_is_leaf(self):
        node = node_from_dict({"tag": "img", "attrs": {"src": "a.png"}})
        assert node.children is None

    def test_missing_attrs_is_none(self):
        node = node_from_dict({"tag": "p", "children": []})
        assert node.attrs is None
        assert node.children == []

    def test_attribute_values_become_strings(self):
        node = node_from_dict({"tag": "td", "attrs": {"colspan": 2}})
        assert node.attrs == {"colspan": "2"}

    def test_non_node_children_dropped(self):
        node = node_from_dict({"tag": "div", "children": ["a", 3, None, "b"]})
        assert node.children == ["a", "b"]

    def test_missing_tag_raises(self):
        with pytest.raises(PayloadError):
            node_from_dict({"children": ["orphan"]})

    def test_nested_missing_tag_raises(self):
        with pytest.raises(PayloadError):
            node_from_dict({"tag": "div", "children": [{"attrs": {}}]})


class TestTreeFromPayload:
    """Tests for unwrapping the payload's ``html`` key."""

    def test_root_under_html_key(self):
        root = tree_from_payload({"html": {"tag": "html", "children": []}})
        assert root.tag == "html"

    def test_missing_html_key_raises(self):
        with pytest.raises(PayloadError, match="'html'"):
            tree_from_payload({"body": {"tag": "body"}})

    def test_non_mapping_payload_raises(self):
        with pytest.raises(PayloadError):
            tree_from_payload(["html"])


# ---------------------------------------------------------------------------
# node_from_html
# ---------------------------------------------------------------------------


class TestNodeFromHtml:
    """Tests for converting raw HTML with BeautifulSoup."""

    def test_root_is_html_element(self):
        root = node_from_html("<html><body><p>hola</p></body></html>")
        assert root.tag == "html"

    def test_multi_valued_class_rejoined_with_spaces(self):
        root = node_from_html('<div class="row  row-eq-height"></div>')
        div = root.children[0].children[0]
        assert div.attrs["class"] == "row row-eq-height"

    def test_whitespace_text_dropped_and_text_stripped(self):
        root = node_from_html("<div>\n  <h2>  Jornada 5 </h2>\n</div>")
        div = root.children[0].children[0]
        h2 = div.children[0]
        assert h2.tag == "h2"
        assert h2.children == ["Jornada 5"]

    def test_void_element_is_leaf(self):
        root = node_from_html('<div><img class="logo" src="a.png"></div>')
        img = root.children[0].children[0].children[0]
        assert img.tag == "img"
        assert img.attrs == {"class": "logo", "src": "a.png"}
        assert img.children is None

    def test_comments_dropped(self):
        root = node_from_html("<div><!-- note --><span>x</span></div>")
        div = root.children[0].children[0]
        assert len(div.children) == 1
        assert div.children[0].tag == "span"

    def test_element_without_attributes_has_none(self):
        root = node_from_html("<div><span>x</span></div>")
        span = root.children[0].children[0].children[0]
        assert span.attrs is None

    def test_empty_document_raises(self):
        with pytest.raises(PayloadError):
            node_from_html("")

    def test_sample_page_has_two_matchday_blocks(self):
        html = (DATA_DIR / "schedule.html").read_text(encoding="utf-8")
        root = node_from_html(html)
        body = next(c for c in root.children if isinstance(c, Node) and c.tag == "body")
        container = body.children[0]
        classes = [c.attrs["class"] for c in container.children]
        assert classes == ["matchday", "matchday"]
