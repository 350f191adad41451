"""Tests for interactive edit operations."""

from __future__ import annotations

import pytest

from netinsight.editor import GraphEditor
from netinsight.errors import GraphInvariantError
from netinsight.graph_store import GraphStore


@pytest.fixture
def editor(store: GraphStore) -> GraphEditor:
    ed = GraphEditor(store)
    for i in range(4):
        ed.click_add_node(10.0 * i, 20.0)
    return ed


def test_click_add_node_always_adds(store: GraphStore) -> None:
    ed = GraphEditor(store)
    a = ed.click_add_node(5, 5)
    b = ed.click_add_node(5, 5)
    assert (a.id, b.id) == (1, 2)
    assert store.node_count == 2


def test_two_clicks_create_one_edge(editor: GraphEditor) -> None:
    assert editor.click_select_node(1) is None
    assert editor.pending_selection == (1,)
    edge = editor.click_select_node(3)
    assert edge is not None and edge.key == frozenset({1, 3})
    assert editor.store.edge_count == 1
    assert editor.pending_selection == ()


def test_third_click_starts_fresh_selection(editor: GraphEditor) -> None:
    editor.click_select_node(1)
    editor.click_select_node(2)
    assert editor.click_select_node(3) is None
    assert editor.pending_selection == (3,)
    assert editor.store.edge_count == 1


def test_same_node_twice_keeps_pending(editor: GraphEditor) -> None:
    editor.click_select_node(2)
    assert editor.click_select_node(2) is None
    assert editor.pending_selection == (2,)
    assert editor.store.edge_count == 0
    edge = editor.click_select_node(4)
    assert edge is not None and edge.key == frozenset({2, 4})


def test_existing_pair_not_duplicated(editor: GraphEditor) -> None:
    editor.click_select_node(1)
    editor.click_select_node(2)
    editor.click_select_node(2)
    assert editor.click_select_node(1) is None
    assert editor.store.edge_count == 1
    assert editor.pending_selection == ()


def test_unknown_node_click_fails_fast(editor: GraphEditor) -> None:
    with pytest.raises(GraphInvariantError):
        editor.click_select_node(42)


def test_cancel_selection(editor: GraphEditor) -> None:
    editor.click_select_node(1)
    editor.cancel_selection()
    assert editor.click_select_node(2) is None
    assert editor.store.edge_count == 0


def test_remove_node_clears_pending_and_cascades(editor: GraphEditor) -> None:
    editor.click_select_node(1)
    editor.click_select_node(2)
    editor.click_select_node(1)
    dropped = editor.remove_node(1)
    assert [e.key for e in dropped] == [frozenset({1, 2})]
    assert editor.pending_selection == ()
    assert editor.store.edge_count == 0


def test_removal_is_idempotent(editor: GraphEditor) -> None:
    editor.click_select_node(1)
    edge = editor.click_select_node(2)
    assert editor.remove_edge(edge.id) == edge
    assert editor.remove_edge(edge.id) is None
    assert editor.remove_node(99) == []
    editor.remove_node(3)
    assert editor.remove_node(3) == []
    assert editor.store.node_count == 3
