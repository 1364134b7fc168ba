"""Tests for tree projection and display labels."""

from __future__ import annotations

import asyncio

import pytest

from triple_browser.browser.explorer import GraphBrowser
from triple_browser.browser.types import SpecializeRequest
from triple_browser.core.types import RDFS_LABEL, Direction, Term, Triple
from triple_browser.display.projector import (
    LOADING_LABEL,
    PLACEHOLDER_LABEL,
    TreeItem,
    project_browser_tree,
    project_specialized_tree,
    render_text,
)
from triple_browser.source.memory import InMemoryTripleSource
from triple_browser.specialized.traversal import SpecializedTraversal
from triple_browser.specialized.types import LoadState, SpecializedNode

from tests.fake_sources import KNOWS, NICK, SUBCLASS, EdgeGatedSource, GatedSource, ex


def find(items: list[TreeItem], label: str) -> TreeItem:
    for item in items:
        if item.label == label:
            return item
        try:
            return find(item.children, label)
        except LookupError:
            continue
    raise LookupError(label)


# ============================================================================
# General browser
# ============================================================================


class TestBrowserTree:
    def test_no_state_gives_empty_tree(self):
        assert project_browser_tree(None) == []

    @pytest.mark.asyncio
    async def test_root_with_unloaded_groups(self, source):
        browser = GraphBrowser(source)
        await browser.load_root(ex("alice"))

        [root] = browser.tree()
        assert root.id == browser.root.id.key()
        assert root.label == ex("alice")
        assert [c.label for c in root.children] == ["→ Out", "← In"]
        for group in root.children:
            assert group.expandable and not group.loaded
            assert len(group.children) == 1
            assert group.children[0].placeholder
            assert group.children[0].label == PLACEHOLDER_LABEL
            assert group.children[0].id == f"{group.id}/~placeholder"

    @pytest.mark.asyncio
    async def test_predicate_labels_and_collapse(self, source):
        browser = GraphBrowser(source)
        await browser.load_root(ex("alice"))
        out_id = browser.root.children[0]
        await browser.expand(out_id)
        for child in browser.children(out_id):
            await browser.expand(child.id)

        tree = browser.tree()
        label = find(tree, "rdfs:label: Alice")
        assert not label.expandable
        assert label.children == []
        assert label.is_literal

        nick = find(tree, NICK)
        assert nick.expandable
        assert [c.label for c in nick.children] == ["Al", "Ally"]
        assert all(c.is_literal and not c.expandable and c.children == [] for c in nick.children)

        knows = find(tree, KNOWS)
        assert knows.predicate == KNOWS
        assert knows.iri == ex("alice")
        assert knows.direction == "out"
        bob = knows.children[0]
        assert bob.label == ex("bob")
        assert bob.expandable
        assert bob.children[0].placeholder

    @pytest.mark.asyncio
    async def test_loaded_empty_group_has_no_placeholder(self, source):
        browser = GraphBrowser(source)
        await browser.load_root(ex("nobody"))
        await browser.expand(browser.root.children[0])

        [root] = browser.tree()
        out = root.children[0]
        assert out.loaded
        assert out.children == []

    @pytest.mark.asyncio
    async def test_placeholder_shows_loading_while_in_flight(self, sample_triples):
        source = GatedSource(sample_triples)
        browser = GraphBrowser(source)
        await browser.load_root(ex("alice"))

        pending = asyncio.create_task(browser.expand(browser.root.children[0]))
        while source.waiting < 1:
            await asyncio.sleep(0)

        [root] = browser.tree()
        assert root.children[0].children[0].label == LOADING_LABEL
        assert root.children[1].children[0].label == PLACEHOLDER_LABEL

        source.gate.set()
        await pending

    @pytest.mark.asyncio
    async def test_children_keep_stored_order(self):
        source = InMemoryTripleSource([
            Triple.of(ex("a"), ex("p"), ex("z")),
            Triple.of(ex("a"), ex("p"), ex("m")),
            Triple.of(ex("a"), ex("p"), ex("b")),
        ])
        browser = GraphBrowser(source)
        await browser.load_root(ex("a"))
        out_id = browser.root.children[0]
        await browser.expand(out_id)
        await browser.expand(browser.get(out_id).children[0])

        group = find(browser.tree(), ex("p"))
        assert [c.label for c in group.children] == [ex("z"), ex("m"), ex("b")]

    @pytest.mark.asyncio
    async def test_prefixed_and_truncated_labels(self):
        long_iri = "http://example.org/" + "segment/" * 12 + "end"
        source = InMemoryTripleSource([
            Triple.of(long_iri, RDFS_LABEL, Term.literal("x")),
        ])
        browser = GraphBrowser(source)
        await browser.load_root(long_iri)
        [root] = browser.tree()
        assert root.label == "..." + long_iri[-60:]

    def test_to_dict_omits_unset_flags(self):
        item = TreeItem(id="x", label="x", node_type="root", expandable=True)
        data = item.to_dict()
        assert data == {
            "id": "x",
            "label": "x",
            "node_type": "root",
            "expandable": True,
            "loaded": True,
            "children": [],
        }


# ============================================================================
# Specialized traversal
# ============================================================================


class TestSpecializedTree:
    def test_missing_root(self):
        assert project_specialized_tree({}, ex("root")) == []

    def test_labelled_but_unloaded_node_keeps_placeholder(self):
        nodes = {ex("a"): SpecializedNode(iri=ex("a"), label="A")}
        [item] = project_specialized_tree(nodes, ex("a"))
        assert item.label == f"{ex('a')} | A"
        assert len(item.children) == 1
        assert item.children[0].placeholder
        assert item.children[0].label == PLACEHOLDER_LABEL

    def test_loading_node_placeholder(self):
        nodes = {ex("a"): SpecializedNode(iri=ex("a"), state=LoadState.LOADING)}
        [item] = project_specialized_tree(nodes, ex("a"))
        assert item.children[0].label == LOADING_LABEL

    def test_loaded_leaf_has_no_children(self):
        nodes = {ex("a"): SpecializedNode(iri=ex("a"), state=LoadState.LOADED, children=())}
        [item] = project_specialized_tree(nodes, ex("a"))
        assert item.children == []
        assert item.loaded

    def test_cycle_is_cut_at_repeated_ancestor(self):
        nodes = {
            ex("c"): SpecializedNode(iri=ex("c"), state=LoadState.LOADED, children=(ex("d"),)),
            ex("d"): SpecializedNode(iri=ex("d"), state=LoadState.LOADED, children=(ex("c"),)),
        }
        [c] = project_specialized_tree(nodes, ex("c"))
        [d] = c.children
        [c_again] = d.children
        assert c_again.id == ex("c")
        assert c_again.repeated
        assert c_again.children == []

    def test_long_iri_uses_shorter_suffix(self):
        iri = "http://example.org/" + "x" * 80
        nodes = {iri: SpecializedNode(iri=iri)}
        [item] = project_specialized_tree(nodes, iri)
        assert item.label == "..." + iri[-50:]

    @pytest.mark.asyncio
    async def test_traversal_tree(self, hierarchy_source):
        request = SpecializeRequest(ex("root"), SUBCLASS, Direction.IN)
        traversal = SpecializedTraversal(hierarchy_source, request)
        await traversal.start()
        await traversal.wait_for_labels()

        [root] = traversal.tree()
        assert root.label == f"{ex('root')} | Root"
        assert [c.label for c in root.children] == [f"{ex('a')} | A", ex("b")]
        assert all(c.children[0].placeholder for c in root.children)
        await traversal.close()

    @pytest.mark.asyncio
    async def test_label_before_children_renders_loading(self, hierarchy_triples):
        source = EdgeGatedSource(hierarchy_triples)
        request = SpecializeRequest(ex("root"), SUBCLASS, Direction.IN)
        traversal = SpecializedTraversal(source, request)
        start = asyncio.create_task(traversal.start())
        while traversal.nodes.get(ex("root")) is None or traversal.get(ex("root")).label is None:
            await asyncio.sleep(0)

        [root] = traversal.tree()
        assert root.label.endswith("| Root")
        assert root.children[0].label == LOADING_LABEL

        source.gate.set()
        await start
        await traversal.close()


class TestRenderText:
    def test_indented_lines(self):
        items = [
            TreeItem(id="r", label="root", node_type="root", children=[
                TreeItem(id="a", label="a", node_type="value"),
                TreeItem(id="b", label="b", node_type="value", repeated=True),
            ]),
        ]
        assert render_text(items) == "root\n  a\n  ↻ b"

    def test_empty(self):
        assert render_text([]) == ""
