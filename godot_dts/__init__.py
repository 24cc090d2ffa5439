from .declarations import ClassDeclaration, declareClass
from .jsdoc import DOC_LANGUAGE, DOCS_URL, escapeCommentTerminators, toJsDoc
from .name_style import (
    NameStyle,
    PrivatizedName,
    isMagicGodotCallback,
    loadUnderscoreWhitelist,
    sanitizeIdentifier,
    toCamel,
)
from .type_map import mapGodotType

__all__ = [
    "ClassDeclaration",
    "DOCS_URL",
    "DOC_LANGUAGE",
    "NameStyle",
    "PrivatizedName",
    "declareClass",
    "escapeCommentTerminators",
    "isMagicGodotCallback",
    "loadUnderscoreWhitelist",
    "mapGodotType",
    "sanitizeIdentifier",
    "toCamel",
    "toJsDoc",
]
