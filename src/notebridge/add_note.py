from notebridge.escaping import escape_double_quotes
from notebridge.osascript import run_osascript


def create_note(text: str | None = None) -> str:
    """Create a note, optionally with a body, and bring it to the front."""
    set_body = ""
    if text:
        set_body = f'set body of newNote to "{escape_double_quotes(text)}"'
    script = f"""
    tell application "Notes"
        activate
        set newNote to make new note
        {set_body}
        set selection to newNote
        show newNote
    end tell
    """
    return run_osascript(script, "create_note/osascript")
