from notebridge.escaping import escape_double_quotes
from notebridge.osascript import run_osascript


def move_note(note_id: str, folder_name: str) -> str:
    script = f"""
    tell application "Notes"
        set theNote to note id "{escape_double_quotes(note_id)}"
        set theFolder to first folder whose name is "{escape_double_quotes(folder_name)}"
        move theNote to theFolder
    end tell
    """
    return run_osascript(script, "move_note/osascript")
