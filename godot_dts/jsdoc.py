# Converts Godot's BBCode-flavoured class reference markup into JSDoc comment blocks
import re
from typing import Iterable, List

DOCS_URL = "https://docs.godotengine.org/en/stable"
DOCS_URL_PLACEHOLDER = "$DOCS_URL"

# Language used for [codeblock] samples and the one retained from [codeblocks] containers
DOC_LANGUAGE = "gdscript"
CODE_LANGUAGES = ["gdscript", "csharp"]

# Admonition labels that start a new paragraph
SECTION_LABELS = ["Note:", "Warning:", "Important:"]

ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}
ENTITY_RE = re.compile(r"&(" + "|".join(ENTITIES) + r");")

# Line roles after fences are split out; only TEXT lines get inline rewrites and trimming
FENCE = "fence"
CODE = "code"
TEXT = "text"

CODEBLOCK_RE = re.compile(r"\[codeblock(?: lang=(\w+))?\]([\s\S]*?)\[/codeblock\]")
CODEBLOCKS_RE = re.compile(r"\[/?codeblocks\]")
LANGUAGE_BLOCK_RE = re.compile(
    r"\[(" + "|".join(CODE_LANGUAGES) + r")\]([\s\S]*?)\[/\1\]"
)

BOLD_RE = re.compile(r"\[b\]([\s\S]*?)\[/b\]")
ITALIC_RE = re.compile(r"\[i\]([\s\S]*?)\[/i\]")
CODE_RE = re.compile(r"\[code\]([\s\S]*?)\[/code\]")
KBD_RE = re.compile(r"\[kbd\]([\s\S]*?)\[/kbd\]")
URL_RE = re.compile(r"\[url=([^\]]+)\]([\s\S]*?)\[/url\]")
REFERENCE_RE = re.compile(r"\[(method|member|signal|constant|param|enum)\s+([^\]]+)\]")
TYPE_REFERENCE_RE = re.compile(r"\[([A-Z][A-Za-z0-9_]*(?:\.[A-Za-z0-9_]+)?)\]")

FENCE_RE = re.compile(r"^\s*```")
SECTION_RE = re.compile(
    r"^(\*\*.+\*\*:?|" + "|".join(re.escape(label) for label in SECTION_LABELS) + ")"
)
COMMENT_TERMINATOR = "*/"
ESCAPED_COMMENT_TERMINATOR = "*\\/"


def decodeEntities(text: str) -> str:
    # Single pass, so "&amp;quot;" decodes to "&quot;" and no further
    return ENTITY_RE.sub(lambda m: ENTITIES[m.group(1)], text)


def fence(language: str, code: str) -> str:
    return f"```{language}\n{code}\n```"


def convertCodeBlocks(text: str, language: str = DOC_LANGUAGE) -> str:
    """Turn [codeblock] and [codeblocks] samples into fenced blocks.

    Only the sub-block of a [codeblocks] container written in `language` is kept,
    samples in any other language are dropped together with their code.
    """
    text = CODEBLOCK_RE.sub(lambda m: fence(m.group(1) or DOC_LANGUAGE, m.group(2)), text)
    text = CODEBLOCKS_RE.sub("", text)

    def keepLanguage(match: re.Match) -> str:
        if match.group(1) != language:
            return ""
        return fence(match.group(1), match.group(2))

    return LANGUAGE_BLOCK_RE.sub(keepLanguage, text)


def convertInlineTags(text: str) -> str:
    # Emphasis and code first: references can sit inside [b]/[i] and must not be wrapped twice
    text = BOLD_RE.sub(r"**\1**", text)
    text = ITALIC_RE.sub(r"*\1*", text)
    text = CODE_RE.sub(lambda m: "`" + m.group(1).replace("`", "\\`") + "`", text)
    text = KBD_RE.sub(r"`\1`", text)
    text = URL_RE.sub(r"\2 (\1)", text)
    text = REFERENCE_RE.sub(r"`\2`", text)
    text = TYPE_REFERENCE_RE.sub(r"`\1`", text)
    return text


def splitFences(lines: List[str]) -> List[tuple[bool, List[str]]]:
    """Group lines into alternating prose and fenced runs, delimiters included in the fence"""
    runs: List[tuple[bool, List[str]]] = []
    inFence = False
    for line in lines:
        isFence = FENCE_RE.match(line) is not None
        # A closing delimiter still belongs to the fence it closes
        belongsToFence = inFence or isFence
        if not runs or runs[-1][0] != belongsToFence:
            runs.append((belongsToFence, []))
        runs[-1][1].append(line)
        if isFence:
            inFence = not inFence
            if not inFence:
                # Start a new run so back-to-back fences stay separate
                runs.append((False, []))
    return [(isFenced, run) for isFenced, run in runs if run]


def convertProse(text: str) -> List[tuple[str, str]]:
    """Apply inline rewrites outside fences and tag every line with its role.

    Fences are found once, on the source text, so a rewrite that happens to
    produce a line of backticks cannot open a fence.
    """
    lines = re.split(r"\r?\n", text)
    out: List[tuple[str, str]] = []
    for isFenced, run in splitFences(lines):
        if isFenced:
            out.extend((FENCE if FENCE_RE.match(line) else CODE, line) for line in run)
        else:
            out.extend((TEXT, line) for line in convertInlineTags("\n".join(run)).split("\n"))
    return out


def normalizeLines(lines: List[tuple[str, str]]) -> List[str]:
    out: List[str] = []
    inFence = False
    prevWasBlank = False
    for role, rawLine in lines:
        if role == FENCE:
            if not inFence and not prevWasBlank and out:
                out.append("")
            inFence = not inFence
            out.append(rawLine.strip())
            prevWasBlank = False
            continue

        if role == CODE:
            line = rawLine
        else:
            line = rawLine.lstrip().rstrip(" \t")

        isBlank = line == ""
        if role == TEXT and not isBlank:
            if SECTION_RE.match(line) and not prevWasBlank and out:
                out.append("")

        out.append(line)
        prevWasBlank = isBlank
    return out


def escapeCommentTerminators(text: str) -> str:
    """Keep content from closing the surrounding block comment early"""
    return text.replace(COMMENT_TERMINATOR, ESCAPED_COMMENT_TERMINATOR)


def toJsDoc(lines: Iterable[str], language: str = DOC_LANGUAGE) -> str:
    text = decodeEntities("\n".join(lines))
    text = text.replace(DOCS_URL_PLACEHOLDER, DOCS_URL)
    text = convertCodeBlocks(text, language)
    roles = convertProse(text)

    body = "\n".join(f" * {line}" for line in normalizeLines(roles))
    return f"/**\n{escapeCommentTerminators(body)}\n */"
