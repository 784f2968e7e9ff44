from notebridge.escaping import escape_double_quotes
from notebridge.osascript import run_osascript


def delete_note(note_id: str) -> str:
    script = f"""
    tell application "Notes"
        delete note id "{escape_double_quotes(note_id)}"
    end tell
    """
    return run_osascript(script, "delete_note/osascript")


def restore_note(note_id: str) -> str:
    """
    Undo a delete: Notes keeps deleted notes in its trash folder, so moving
    the note back to the first account's default folder restores it.
    """
    script = f"""
    tell application "Notes"
        set theNote to note id "{escape_double_quotes(note_id)}"
        set theFolder to default folder of account 1
        move theNote to theFolder
    end tell
    """
    return run_osascript(script, "restore_note/osascript")
