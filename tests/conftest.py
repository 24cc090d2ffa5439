"""
Shared fixtures for godot_dts tests.
"""

import pytest

from godot_dts.name_style import NameStyle


@pytest.fixture
def nameStyle():
    """NameStyle with an empty public-underscore allow-list."""
    return NameStyle()


@pytest.fixture
def nodeClass():
    """A trimmed-down Node entry from the Godot class reference."""
    return {
        "name": "Node",
        "inherits": "Object",
        "brief_description": "Base class for all scene objects.",
        "description": "Nodes are [b]building blocks[/b].",
        "members": [
            {"name": "process_mode", "type": "int", "description": "See [method can_process]."},
            {"name": "editor_description", "type": "String"},
            {"name": "_import_path", "type": "NodePath"},
        ],
        "methods": [
            {
                "name": "add_child",
                "return_type": "void",
                "params": [
                    {"name": "node", "type": "Node"},
                    {"name": "force_readable_name", "type": "bool", "default": "false"},
                ],
                "description": "Adds a child.",
            },
            {"name": "_ready", "return_type": "void"},
            {
                "name": "get_children",
                "return_type": "Node[]",
                "params": [{"name": "include_internal", "type": "bool", "default": "false"}],
            },
            {"name": "_internal_step", "return_type": "void"},
        ],
        "signals": [
            {"name": "ready"},
            {"name": "child_entered_tree", "params": [{"name": "node", "type": "Node"}]},
            {"name": "editor_description"},
        ],
        "constants": [
            {"name": "NOTIFICATION_READY", "value": "13", "description": "Ready."},
        ],
    }
