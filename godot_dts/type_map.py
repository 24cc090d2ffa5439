# Maps Godot type names from the class reference to TypeScript declaration types
import re
from typing import List

TYPE_INDEX = {
    "String": "string",
    "bool": "boolean",
    "Array": "GodotArray<any>",
    "Dictionary": "GodotDictionary<any>",
    "void": "void",
}

# Types that need no import from the generated index
PRIMITIVES = {
    "string",
    "number",
    "boolean",
    "void",
    "any",
    "unknown",
    "never",
    "object",
    "symbol",
    "bigint",
}

TYPED_ARRAY_RE = re.compile(r"^Array\[(.+)\]$")
TYPED_DICTIONARY_RE = re.compile(r"^Dictionary\[.+\]$")
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def mapGodotType(godotType: str) -> str:
    godotType = godotType.strip()
    if not godotType:
        return "any"
    if godotType.endswith("[]"):
        return mapGodotType(godotType[:-2]) + "[]"

    match = TYPED_ARRAY_RE.match(godotType)
    if match:
        return mapGodotType(match.group(1)) + "[]"
    if TYPED_DICTIONARY_RE.match(godotType):
        return TYPE_INDEX["Dictionary"]

    return TYPE_INDEX.get(godotType, godotType)


def typeIdentifiers(typeStr: str) -> List[str]:
    """Names a declaration type refers to, in order of appearance, without primitives"""
    found: List[str] = []
    for name in IDENTIFIER_RE.findall(typeStr):
        if name in PRIMITIVES or name in found:
            continue
        found.append(name)
    return found
