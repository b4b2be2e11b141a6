"""Shared test fixtures."""

import pytest

from layoutinspect.core import Bounds, LayoutTree
from layoutinspect.tooling import KeyedHelperIds


@pytest.fixture
def empty_tree():
    return LayoutTree(Bounds([0, 0, 1080, 1920]))


@pytest.fixture
def login_layout():
    """A small login form: title, two fields, a barrier and a button.

    Returns (tree, helper_ids).
    """
    tree = LayoutTree(Bounds([0, 0, 1080, 1920]))
    title = tree.add_widget("title", Bounds([10, 20, 30, 40]), layout_id="title")
    user = tree.add_widget("user", Bounds.from_rect(16, 100, 500, 60), layout_id="user")
    password = tree.add_widget("password", Bounds.from_rect(16, 176, 420, 60))
    barrier = tree.add_helper("barrier", Bounds([516, 100, 516, 236]), references=[user, password])
    button = tree.add_widget("button", Bounds.from_rect(532, 100, 200, 136), layout_id="login")

    tree.connect(title, "left", tree.root, "left", margin=16)
    tree.connect(title, "top", tree.root, "top", margin=16)
    tree.connect(user, "top", title, "bottom", margin=8)
    tree.connect(user, "left", tree.root, "left", margin=16)
    tree.connect(password, "top", user, "bottom", margin=16)
    tree.connect(password, "left", user, "left")
    tree.connect(button, "left", barrier, "right", margin=16)
    tree.connect(button, "top", user, "top")

    helper_ids = KeyedHelperIds()
    helper_ids.register(barrier, "endBarrier")
    return tree, helper_ids
