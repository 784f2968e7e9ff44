# Ordered (character, AppleScript expression matching it, JSON escape).
# Backslash must stay first so later replacements are not escaped twice.
JSON_TEXT_ESCAPES = (
    ("\\", '"\\\\"', "\\\\"),
    ('"', '"\\""', '\\"'),
    ("\r", "return", "\\r"),
    ("\n", "linefeed", "\\n"),
    ("\t", "tab", "\\t"),
)


def escape_double_quotes(text: str | None) -> str:
    # Only quotes are escaped for single-note payloads; see DESIGN.md.
    return (text or "").replace('"', '\\"')


def applescript_string(text: str) -> str:
    """Quote `text` as a complete AppleScript string literal."""
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def escape_json_text(text: str) -> str:
    """Python mirror of the escaping done inside the bulk export script."""
    for char, _, escaped in JSON_TEXT_ESCAPES:
        text = text.replace(char, escaped)
    return text


def applescript_json_escape_lines(var: str) -> list[str]:
    """
    AppleScript statements escaping the text held in `var` for use as a JSON
    string value, in JSON_TEXT_ESCAPES order. Relies on a `replaceText`
    handler being defined in the same script.
    """
    return [
        f"set {var} to my replaceText({var}, {search}, {applescript_string(escaped)})"
        for _, search, escaped in JSON_TEXT_ESCAPES
    ]
