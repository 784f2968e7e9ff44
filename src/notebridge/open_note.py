from notebridge.escaping import escape_double_quotes
from notebridge.osascript import run_osascript


def open_note_separately(note_id: str) -> str:
    script = f"""
    tell application "Notes"
        set theNote to note id "{escape_double_quotes(note_id)}"
        set theFolder to container of theNote
        show theFolder
        show theNote with separately
        activate
    end tell
    """
    return run_osascript(script, "open_note_separately/osascript")
