from notebridge.escaping import escape_double_quotes
from notebridge.osascript import run_osascript

NO_SELECTION_MESSAGE = "No note is currently selected"


def get_note_body(note_id: str) -> str:
    script = f"""
    tell application "Notes"
        set theNote to note id "{escape_double_quotes(note_id)}"
        return body of theNote
    end tell
    """
    return run_osascript(script, "get_note_body/osascript")


def get_note_plaintext(note_id: str) -> str:
    script = f"""
    tell application "Notes"
        set theNote to note id "{escape_double_quotes(note_id)}"
        return plaintext of theNote
    end tell
    """
    return run_osascript(script, "get_note_plaintext/osascript")


def get_selected_note() -> str:
    """
    Return the id of the note selected in Notes.

    With nothing selected the script raises its own error, which surfaces as
    a NotesScriptError mentioning NO_SELECTION_MESSAGE.
    """
    script = f"""
    tell application "Notes"
        set selectedNotes to selection
        if (count of selectedNotes) is 0 then
            error "{NO_SELECTION_MESSAGE}"
        else
            set theNote to item 1 of selectedNotes
            return id of theNote
        end if
    end tell
    """
    return run_osascript(script, "get_selected_note/osascript")
