from notebridge.escaping import escape_double_quotes
from notebridge.osascript import run_osascript


def set_note_body(note_id: str, body: str) -> str:
    # Newlines and backslashes in `body` go into the literal unescaped.
    script = f"""
    tell application "Notes"
        set theNote to note id "{escape_double_quotes(note_id)}"
        set body of theNote to "{escape_double_quotes(body)}"
    end tell
    """
    return run_osascript(script, "set_note_body/osascript")
