import json

from ..color import contrast_ratio, is_dark, parse_color
from .json_export import palette_data

# Syntax role -> TextMate scopes it colors
TOKEN_SCOPES = {
    "comment": ["comment", "punctuation.definition.comment", "string.quoted.docstring"],
    "keyword": ["keyword", "keyword.other"],
    "control": ["keyword.control"],
    "controlFlow": [
        "keyword.control.flow",
        "keyword.control.return",
        "keyword.control.conditional",
    ],
    "controlImport": [
        "keyword.control.import",
        "keyword.control.from",
        "keyword.control.export",
    ],
    "operator": ["keyword.operator"],
    "unit": ["keyword.other.unit"],
    "storage": ["storage", "storage.type"],
    "modifier": ["storage.modifier"],
    "function": ["entity.name.function", "meta.function entity.name.function"],
    "functionCall": ["meta.function-call entity.name.function", "support.function"],
    "variable": ["variable", "variable.other"],
    "variableDeclaration": [
        "variable.other.declaration",
        "meta.definition.variable variable",
    ],
    "variableProperty": ["variable.other.property", "variable.other.object.property"],
    "parameter": ["variable.parameter", "entity.name.variable.parameter"],
    "property": ["meta.property-name", "support.type.property-name"],
    "type": ["entity.name.type", "support.type"],
    "typeParameter": [
        "entity.name.type.type-parameter",
        "meta.type.parameters entity.name.type",
    ],
    "class": ["entity.name.class", "entity.name.type.class"],
    "constant": ["constant", "constant.numeric"],
    "language": ["constant.language", "variable.language"],
    "datetime": ["constant.other.date", "constant.other.timestamp"],
    "other": ["constant.other.color", "constant.character.escape"],
    "support": ["support"],
    "selector": ["meta.attribute-selector", "entity.other.attribute-name.class.css"],
    "tag": ["entity.name.tag"],
    "tagPunctuation": ["punctuation.definition.tag"],
    "attribute": ["entity.other.attribute-name"],
    "punctuation": ["punctuation"],
    "punctuationQuote": ["punctuation.definition.string"],
    "punctuationBrace": ["punctuation.section", "meta.brace"],
    "punctuationComma": ["punctuation.separator", "punctuation.terminator"],
}

# Semantic token -> syntax role
SEMANTIC_TOKENS = {
    "namespace": "class",
    "type": "type",
    "typeParameter": "typeParameter",
    "interface": "type",
    "class": "class",
    "enum": "class",
    "struct": "class",
    "property": "property",
    "parameter": "parameter",
    "function": "functionCall",
    "function.declaration": "function",
    "method": "functionCall",
    "method.declaration": "function",
    "variable": "variable",
    "variable.declaration": "variableDeclaration",
    "comment": "comment",
    "keyword": "keyword",
    "number": "constant",
    "operator": "operator",
}


def _contrasting_text(background, ui):
    """Whichever of FG1 and BG1 reads better on ``background``."""
    return max(
        (ui["FG1"], ui["BG1"]), key=lambda text: contrast_ratio(text, background)
    )


def workbench_colors(ui, syntax, ansi):
    """Workbench ``colors`` block from role -> hex dicts."""
    colors = {
        "focusBorder": ui["BORDER"],
        "foreground": ui["FG1"],
        "descriptionForeground": ui["FG2"],
        "disabledForeground": syntax["comment"],
        "errorForeground": ui["ERROR"],
        "widget.border": ui["BORDER"],
        "textLink.foreground": ui["AC2"],
        "textLink.activeForeground": ui["INFO"],
        "button.background": ui["AC2"],
        "button.foreground": _contrasting_text(ui["AC2"], ui),
        "button.secondaryBackground": ui["AC1"],
        "button.secondaryForeground": _contrasting_text(ui["AC1"], ui),
        "badge.background": ui["AC2"],
        "badge.foreground": _contrasting_text(ui["AC2"], ui),
        "input.background": ui["BG1"],
        "input.foreground": ui["FG1"],
        "input.border": ui["BORDER"],
        "input.placeholderForeground": syntax["comment"],
        "inputValidation.infoBorder": ui["INFO"],
        "inputValidation.warningBorder": ui["WARNING"],
        "inputValidation.errorBorder": ui["ERROR"],
        "dropdown.background": ui["BG3"],
        "dropdown.border": ui["BORDER"],
        "dropdown.foreground": ui["FG1"],
        "activityBar.background": ui["BG2"],
        "activityBar.foreground": ui["FG1"],
        "activityBarBadge.background": ui["AC1"],
        "sideBar.background": ui["BG1"],
        "sideBar.foreground": ui["FG2"],
        "sideBar.border": ui["BORDER"],
        "titleBar.activeBackground": ui["BG2"],
        "titleBar.activeForeground": ui["FG1"],
        "statusBar.background": ui["BG2"],
        "statusBar.foreground": ui["FG2"],
        "statusBar.border": ui["BORDER"],
        "tab.activeBackground": ui["BG1"],
        "tab.inactiveBackground": ui["BG2"],
        "tab.activeForeground": ui["FG1"],
        "tab.inactiveForeground": ui["FG2"],
        "editor.background": ui["BG1"],
        "editor.foreground": ui["FG1"],
        "editor.lineHighlightBackground": ui["lineHighlight"],
        "editor.selectionBackground": ui["selection"],
        "editor.findMatchBackground": ui["findMatch"],
        "editorLineNumber.foreground": syntax["comment"],
        "editorLineNumber.activeForeground": ui["AC1"],
        "editorCursor.foreground": ui["AC1"],
        "editorError.foreground": ui["ERROR"],
        "editorWarning.foreground": ui["WARNING"],
        "editorInfo.foreground": ui["INFO"],
        "gitDecoration.addedResourceForeground": ui["SUCCESS"],
        "gitDecoration.modifiedResourceForeground": ui["INFO"],
        "gitDecoration.deletedResourceForeground": ui["ERROR"],
        "terminal.background": ui["BG1"],
        "terminal.foreground": ui["FG1"],
        "terminal.border": ui["BORDER"],
        "terminal.selectionBackground": ui["selection"],
    }
    for role, value in ansi.items():
        colors[f"terminal.ansi{role}"] = value
    return colors


def generate_vscode_theme(snapshot, theme_name):
    """Build a VS Code color theme from a session snapshot.

    Args:
        snapshot: ThemeSession.snapshot() dict (or the session itself)
        theme_name: Theme display name

    Returns:
        JSON string of the theme
    """
    snapshot = palette_data(snapshot)
    ui, syntax, ansi = snapshot["ui"], snapshot["syntax"], snapshot["ansi"]

    token_colors = []
    for role, scopes in TOKEN_SCOPES.items():
        settings = {"foreground": syntax[role]}
        if role == "comment":
            settings["fontStyle"] = "italic"
        token_colors.append({"name": role, "scope": scopes, "settings": settings})

    theme = {
        "name": theme_name,
        "type": "dark" if is_dark(parse_color(ui["BG1"])) else "light",
        "semanticHighlighting": True,
        "colors": workbench_colors(ui, syntax, ansi),
        "tokenColors": token_colors,
        "semanticTokenColors": {
            token: syntax[role] for token, role in SEMANTIC_TOKENS.items()
        },
    }
    return json.dumps(theme, indent=2)
