"""
Tests for Godot to TypeScript type mapping.
"""

import pytest

from godot_dts.type_map import mapGodotType, typeIdentifiers


class TestMapGodotType:
    @pytest.mark.parametrize(
        "godotType,expected",
        [
            ("String", "string"),
            ("bool", "boolean"),
            ("void", "void"),
            ("int", "int"),
            ("float", "float"),
            ("Variant", "Variant"),
            ("StringName", "StringName"),
            ("Array", "GodotArray<any>"),
            ("Dictionary", "GodotDictionary<any>"),
            ("Dictionary[String, int]", "GodotDictionary<any>"),
            ("Node[]", "Node[]"),
            ("String[]", "string[]"),
            ("Array[StringName]", "StringName[]"),
            ("", "any"),
        ],
    )
    def test_map(self, godotType, expected):
        assert mapGodotType(godotType) == expected


class TestTypeIdentifiers:
    def test_primitives_skipped(self):
        assert typeIdentifiers("string") == []
        assert typeIdentifiers("boolean[]") == []

    def test_generic(self):
        assert typeIdentifiers("GodotArray<any>") == ["GodotArray"]

    def test_deduplicated_in_order(self):
        assert typeIdentifiers("Node | Tween | Node[]") == ["Node", "Tween"]
