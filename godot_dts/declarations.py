# Renders one Godot class description into a TypeScript class declaration
from typing import List, NamedTuple, Optional, TypedDict

from .jsdoc import DOC_LANGUAGE, toJsDoc
from .name_style import NameStyle, sanitizeIdentifier, toCamel
from .type_map import mapGodotType, typeIdentifiers

# In-memory shape of a class from the Godot class reference, keyed like the XML attributes

GodotParameter = TypedDict(
    "GodotParameter",
    {
        "name": str,
        "type": str,
        "default": Optional[str],
    },
    total=False,
)

GodotMember = TypedDict(
    "GodotMember",
    {
        "name": str,
        "type": str,
        "description": str,
        "deprecated": Optional[str],
    },
    total=False,
)

GodotMethod = TypedDict(
    "GodotMethod",
    {
        "name": str,
        "return_type": str,
        "params": List[GodotParameter],
        "description": str,
        "deprecated": Optional[str],
    },
    total=False,
)

GodotSignal = TypedDict(
    "GodotSignal",
    {
        "name": str,
        "params": List[GodotParameter],
        "description": str,
        "deprecated": Optional[str],
    },
    total=False,
)

GodotConstant = TypedDict(
    "GodotConstant",
    {
        "name": str,
        "value": str,
        "description": str,
        "deprecated": Optional[str],
    },
    total=False,
)

GodotClass = TypedDict(
    "GodotClass",
    {
        "name": str,
        "inherits": Optional[str],
        "brief_description": str,
        "description": str,
        "deprecated": Optional[str],
        "members": List[GodotMember],
        "methods": List[GodotMethod],
        "signals": List[GodotSignal],
        "constants": List[GodotConstant],
    },
    total=False,
)

ApiMapMember = TypedDict("ApiMapMember", {"snake": str, "camel": str, "private": bool})

ApiMapSignal = TypedDict("ApiMapSignal", {"snake": str, "camel": str})

ApiMapClass = TypedDict(
    "ApiMapClass",
    {
        "members": List[ApiMapMember],
        "methods": List[ApiMapMember],
        "signals": List[ApiMapSignal],
    },
)


class ClassDeclaration(NamedTuple):
    text: str
    apiMap: ApiMapClass
    referencedTypes: List[str]

    def importHeader(self, indexPath: str = "../index.d.ts") -> str:
        """Type import line for the top of the class file, empty when nothing is referenced"""
        if not self.referencedTypes:
            return ""
        return f'import type {{ {", ".join(self.referencedTypes)} }} from "{indexPath}";'


def sortKey(name: str) -> str:
    # Hooks like _enter_tree sort among the public methods by their bare name
    return toCamel(name).replace("_", "").lower()


def docLines(text: Optional[str]) -> List[str]:
    text = (text or "").strip()
    if not text:
        return []
    return text.replace("\r\n", "\n").split("\n")


def resolveDeprecation(entry: dict) -> List[str]:
    deprecated = entry.get("deprecated")
    if not deprecated:
        return []
    return [f"@deprecated {deprecated}"]


def resolveParameterName(param: GodotParameter) -> str:
    return sanitizeIdentifier(toCamel(param["name"]))


class Declarer:
    def __init__(self, klass: GodotClass, nameStyle: NameStyle, language: str = DOC_LANGUAGE):
        assert klass.get("name"), "Class description is missing its name"
        self.klass = klass
        self.nameStyle = nameStyle
        self.language = language
        self.lines: List[str] = []
        self.neededTypes: List[str] = []
        self.apiMap: ApiMapClass = {"members": [], "methods": [], "signals": []}

    def resolveType(self, godotType: Optional[str], default: str = "any") -> str:
        resolved = mapGodotType(godotType or default)
        for name in typeIdentifiers(resolved):
            if name not in self.neededTypes:
                self.neededTypes.append(name)
        return resolved

    def addDoc(self, doc: List[str]):
        if doc:
            self.lines.append(toJsDoc(doc, self.language))

    def declareHeader(self):
        klass = self.klass
        brief = (klass.get("brief_description") or "").strip()
        description = (klass.get("description") or "").strip()
        separator = "\n\n" if brief and description else ""
        self.addDoc(docLines(f"{brief}{separator}{description}") + resolveDeprecation(klass))

        inherits = klass.get("inherits")
        if inherits:
            self.resolveType(inherits)
            self.lines.append(f"export class {klass['name']} extends {inherits} {{")
        else:
            self.lines.append(f"export class {klass['name']} {{")

    def declareMembers(self) -> List[str]:
        declared: List[str] = []
        members = sorted(self.klass.get("members") or [], key=lambda m: sortKey(m["name"]))
        for member in members:
            snake = member["name"]
            name, isPrivate = self.nameStyle.normalize(snake)
            memberType = self.resolveType(member.get("type"))
            self.addDoc(docLines(member.get("description")) + resolveDeprecation(member))
            declName = f"private {name}" if isPrivate else name
            self.lines.append(f"  {declName}: {memberType};")
            self.apiMap["members"].append({"snake": snake, "camel": name, "private": isPrivate})
            declared.append(name)
        return declared

    def declareMethods(self) -> List[str]:
        # Overloads share the visibility of the first declaration with the same name
        visibility: dict[str, bool] = {}
        methods = sorted(self.klass.get("methods") or [], key=lambda m: sortKey(m["name"]))
        for method in methods:
            snake = method["name"]
            name, isPrivate = self.nameStyle.normalize(snake)
            effectivePrivate = visibility.setdefault(name, isPrivate)
            returnType = self.resolveType(method.get("return_type"), "void")

            params: List[str] = []
            doc = docLines(method.get("description"))
            for param in method.get("params") or []:
                paramName = resolveParameterName(param)
                paramType = self.resolveType(param.get("type"))
                default = param.get("default")
                optional = default is not None
                params.append(f"{paramName}{'?' if optional else ''}: {paramType}")
                note = f" (optional, default: {default})" if optional else ""
                doc.append(f"@param {paramName} {paramType}{note}")
            if returnType != "void":
                doc.append(f"@returns {returnType}")
            self.addDoc(doc + resolveDeprecation(method))

            declName = f"private {name}" if effectivePrivate else name
            self.lines.append(f"  {declName}({', '.join(params)}): {returnType};")
            self.apiMap["methods"].append({"snake": snake, "camel": name, "private": isPrivate})
        return list(visibility)

    def declareSignals(self, takenNames: List[str]):
        signals = sorted(self.klass.get("signals") or [], key=lambda s: sortKey(s["name"]))
        for signal in signals:
            snake = signal["name"]
            name = sanitizeIdentifier(toCamel(snake))
            if name in takenNames:
                name = f"{name}Signal"

            params: List[str] = []
            for param in signal.get("params") or []:
                paramName = resolveParameterName(param)
                if param.get("type"):
                    params.append(f"{paramName}: {self.resolveType(param['type'])}")
                else:
                    params.append(paramName)

            self.addDoc(docLines(signal.get("description")) + resolveDeprecation(signal))
            self.resolveType("Signal")
            self.lines.append(f"  {name}: Signal<[{', '.join(params)}]>;")
            self.apiMap["signals"].append({"snake": snake, "camel": name})

    def declareConstants(self):
        for constant in self.klass.get("constants") or []:
            name = sanitizeIdentifier(constant["name"], camel=False)
            self.addDoc(docLines(constant.get("description")) + resolveDeprecation(constant))
            self.resolveType("int")
            self.lines.append(f"  static readonly {name}: int;")

    def declare(self) -> ClassDeclaration:
        self.declareHeader()
        takenNames = self.declareMembers() + self.declareMethods()
        self.declareSignals(takenNames)
        self.declareConstants()
        self.lines.append("}")

        referenced = sorted(name for name in self.neededTypes if name != self.klass["name"])
        return ClassDeclaration("\n".join(self.lines), self.apiMap, referenced)


def declareClass(
    klass: GodotClass, nameStyle: Optional[NameStyle] = None, language: str = DOC_LANGUAGE
) -> ClassDeclaration:
    return Declarer(klass, nameStyle or NameStyle(), language).declare()
