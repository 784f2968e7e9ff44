import json
from dataclasses import dataclass

import click

from notebridge.escaping import applescript_json_escape_lines
from notebridge.osascript import NotesScriptError, run_osascript


@dataclass(frozen=True, slots=True)
class NotePlainTextEntry:
    id: str
    plaintext: str


# Notes can only hand text back over osascript, so the JSON array is built
# inside the script. Entries are collected in a list and joined once, which
# also puts the comma before every entry but the first.
_EXPORT_SCRIPT = r"""
    set prevTIDs to AppleScript's text item delimiters
    set outEntries to {}

    tell application "Notes"
        repeat with acc in accounts
            repeat with theNote in notes of acc
                try
                    set noteId to (id of theNote) as text
                    set noteText to (plaintext of theNote) as text
                    __ESCAPE_ID__
                    __ESCAPE_TEXT__
                    set end of outEntries to "{\"id\":\"" & noteId & "\",\"plaintext\":\"" & noteText & "\"}"
                end try
            end repeat
        end repeat
    end tell

    set AppleScript's text item delimiters to ","
    set output to "[" & (outEntries as text) & "]"
    set AppleScript's text item delimiters to prevTIDs
    return output

    on replaceText(theText, searchStr, replaceStr)
        set prevTIDs to AppleScript's text item delimiters
        set AppleScript's text item delimiters to searchStr
        set theItems to text items of theText
        set AppleScript's text item delimiters to replaceStr
        set theText to theItems as text
        set AppleScript's text item delimiters to prevTIDs
        return theText
    end replaceText
    """


def build_export_script() -> str:
    indent = "\n" + " " * 20
    return _EXPORT_SCRIPT.replace(
        "__ESCAPE_ID__", indent.join(applescript_json_escape_lines("noteId"))
    ).replace(
        "__ESCAPE_TEXT__",
        indent.join(applescript_json_escape_lines("noteText")),
    )


def decode_notes_plaintext(raw: str) -> list[NotePlainTextEntry]:
    """
    Parse the export script's output.

    Anything other than a JSON array of {"id": str, "plaintext": str} objects
    is logged and yields an empty list; a single bad entry drops the batch.
    """
    try:
        items = json.loads(raw)
        if not isinstance(items, list):
            raise ValueError("expected a JSON array")
        entries = []
        for item in items:
            if not isinstance(item, dict):
                raise ValueError("expected a JSON object")
            note_id = item["id"]
            plaintext = item["plaintext"]
            if not isinstance(note_id, str) or not isinstance(plaintext, str):
                raise ValueError("id and plaintext must be strings")
            entries.append(NotePlainTextEntry(id=note_id, plaintext=plaintext))
    except (TypeError, ValueError, KeyError, RecursionError):
        click.echo(f"Failed to parse notes plaintext: {raw}", err=True)
        return []
    return entries


def get_all_notes_plaintext() -> list[NotePlainTextEntry]:
    """Fetch id and plaintext of every note in every account in one call."""
    try:
        raw = run_osascript(build_export_script(), "get_all_notes_plaintext/osascript")
    except NotesScriptError as e:
        click.echo(f"Notes export failed: {e.format_message()}", err=True)
        return []
    except UnicodeDecodeError as e:
        click.echo(f"Notes export failed: {e}", err=True)
        return []
    return decode_notes_plaintext(raw)
