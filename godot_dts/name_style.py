# Naming rules for turning Godot's snake_case API names into TypeScript identifiers
import json
import os
import re
import sys
from typing import Iterable, NamedTuple, Optional

import requests

# Public names that begin with an underscore in the docs, kept public and unchanged.
# A JSON array of strings, overridable with the UNDERSCORE_WHITELIST environment variable.
DEFAULT_WHITELIST_PATH = "patches/underscore-public-whitelist.json"
WHITELIST_ENV = "UNDERSCORE_WHITELIST"
WHITELIST_TIMEOUT = 10

MAGIC_CALLBACK_RE = re.compile(
    r"^_(ready|process|physics_process|input|init|enter_tree|exit_tree|get_configuration_warnings"
    r"|shortcut_input|unhandled_input|unhandled_key_input)$"
)

# Reserved keywords and contextual keywords that cannot be used as identifiers in TS
TS_RESERVED = {
    # statements/keywords
    "break", "case", "catch", "class", "const", "continue", "debugger", "default", "delete",
    "do", "else", "enum", "export", "extends", "false", "finally", "for", "function", "if",
    "import", "in", "instanceof", "new", "null", "return", "super", "switch", "this", "throw",
    "true", "try", "typeof", "var", "void", "while", "with",
    # strict mode
    "as", "implements", "interface", "let", "package", "private", "protected", "public",
    "static", "yield", "await",
    # contextual
    "any", "boolean", "constructor", "declare", "get", "module", "namespace", "number",
    "require", "set", "string", "symbol", "type", "from", "of",
}

CAMEL_RE = re.compile(r"(?<=[A-Za-z0-9])_+([A-Za-z0-9])")
SEPARATOR_RE = re.compile(r"[/:.\s]+")
ILLEGAL_CHAR_RE = re.compile(r"[^A-Za-z0-9_]")


class PrivatizedName(NamedTuple):
    name: str
    isPrivate: bool


def toCamel(name: str) -> str:
    """snake_case to camelCase, leading underscores are left alone"""
    return CAMEL_RE.sub(lambda m: m.group(1).upper(), name)


def isMagicGodotCallback(name: str) -> bool:
    return MAGIC_CALLBACK_RE.match(name) is not None


def sanitizeIdentifier(raw: str, camel: bool = True) -> str:
    """Make a valid TypeScript identifier out of a raw name.

    Path-like settings keys such as "voice/1/cutoff_hz" are folded into one
    camelCase identifier ("voice1CutoffHz"). Casing happens before illegal
    characters are replaced, since the separators carry the word boundaries.
    Pass camel=False to keep the casing of SCREAMING_CASE constants.
    """
    name = raw
    if SEPARATOR_RE.search(name):
        parts = [part for part in SEPARATOR_RE.split(name) if part]
        name = ""
        for i, part in enumerate(parts):
            base = toCamel(part)
            name += base if i == 0 else base[:1].upper() + base[1:]
    elif camel and not name.startswith("_"):
        name = toCamel(name)

    name = ILLEGAL_CHAR_RE.sub("_", name)
    if name == "" or name[0].isdigit():
        name = "_" + name
    if name in TS_RESERVED:
        name = name + "_"
    return name


def loadUnderscoreWhitelist(source: Optional[str] = None) -> frozenset[str]:
    """Load the public-underscore allow-list from a JSON file or URL.

    A missing artifact means an empty list. Anything unreadable is reported on
    stderr and also treated as empty.
    """
    if source is None:
        source = os.environ.get(WHITELIST_ENV) or DEFAULT_WHITELIST_PATH

    if source.startswith(("http://", "https://")):
        try:
            response = requests.get(source, timeout=WHITELIST_TIMEOUT)
            if response.status_code == 404:
                return frozenset()
            response.raise_for_status()
            names = response.json()
        except (requests.RequestException, ValueError) as e:
            print(f"Ignoring underscore whitelist {source}: {e}", file=sys.stderr)
            return frozenset()
    else:
        try:
            with open(source, "r", encoding="utf-8") as file:
                names = json.load(file)
        except FileNotFoundError:
            return frozenset()
        except (OSError, ValueError) as e:
            print(f"Ignoring underscore whitelist {source}: {e}", file=sys.stderr)
            return frozenset()

    if not isinstance(names, list):
        print(f"Ignoring underscore whitelist {source}: expected a JSON array", file=sys.stderr)
        return frozenset()
    return frozenset(name for name in names if isinstance(name, str))


class NameStyle:
    """Visibility and identifier rules, bound to one public-underscore allow-list"""

    def __init__(self, underscoreWhitelist: Iterable[str] = ()):
        self.underscoreWhitelist = frozenset(underscoreWhitelist)

    @classmethod
    def fromWhitelist(cls, source: Optional[str] = None) -> "NameStyle":
        return cls(loadUnderscoreWhitelist(source))

    def privatizeIfNeeded(self, name: str) -> PrivatizedName:
        if isMagicGodotCallback(name):
            return PrivatizedName(name, False)
        if name in self.underscoreWhitelist:
            return PrivatizedName(name, False)
        if name.startswith("_"):
            return PrivatizedName(name.lstrip("_"), True)
        return PrivatizedName(name, False)

    def normalize(self, raw: str, camel: bool = True) -> PrivatizedName:
        name, isPrivate = self.privatizeIfNeeded(raw)
        return PrivatizedName(sanitizeIdentifier(name, camel), isPrivate)
