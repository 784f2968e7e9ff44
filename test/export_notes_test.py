import dataclasses

import notebridge.export_notes as export_mod
from notebridge.escaping import escape_json_text
from notebridge.export_notes import (
    NotePlainTextEntry,
    build_export_script,
    decode_notes_plaintext,
    get_all_notes_plaintext,
)
from notebridge.osascript import NotesScriptError


def _as_script_output(notes):
    # Same shape the export script assembles inside Notes.
    entries = [
        '{"id":"%s","plaintext":"%s"}' % (escape_json_text(i), escape_json_text(t))
        for i, t in notes
    ]
    return "[" + ",".join(entries) + "]"


def test_decode_empty_array():
    assert decode_notes_plaintext("[]") == []


def test_decode_entries_in_order():
    raw = _as_script_output([("id-1", "First"), ("id-2", "Second")])
    assert decode_notes_plaintext(raw) == [
        NotePlainTextEntry(id="id-1", plaintext="First"),
        NotePlainTextEntry(id="id-2", plaintext="Second"),
    ]


def test_decode_round_trips_special_characters():
    text = 'He said "hi"\nNext line\tTabbed\\ and\r\nCRLF'
    raw = _as_script_output([("id-1", text)])
    assert decode_notes_plaintext(raw) == [NotePlainTextEntry(id="id-1", plaintext=text)]


def test_decode_malformed_logs_and_returns_empty(capsys):
    raw = '[{"id":"id-1","plaintext":"ok"},{"id":"id-2","plaintext":"broken"quote"}]'
    assert decode_notes_plaintext(raw) == []
    err = capsys.readouterr().err
    assert "Failed to parse notes plaintext:" in err
    assert raw in err


def test_decode_rejects_wrong_shapes(capsys):
    assert decode_notes_plaintext('{"id":"x","plaintext":"y"}') == []
    assert decode_notes_plaintext('[{"id":"x"}]') == []
    assert decode_notes_plaintext('[{"id":1,"plaintext":"y"}]') == []
    assert decode_notes_plaintext('["x"]') == []
    assert decode_notes_plaintext("execution error: Notes got an error") == []
    assert capsys.readouterr().err.count("Failed to parse notes plaintext:") == 5


def test_build_export_script():
    script = build_export_script()
    assert "__ESCAPE_" not in script
    assert "repeat with acc in accounts" in script
    assert "repeat with theNote in notes of acc" in script
    assert "on replaceText(theText, searchStr, replaceStr)" in script
    assert r'"{\"id\":\"" & noteId & "\",\"plaintext\":\"" & noteText & "\"}"' in script

    order = [
        r'set noteText to my replaceText(noteText, "\\", "\\\\")',
        r'set noteText to my replaceText(noteText, "\"", "\\\"")',
        r'set noteText to my replaceText(noteText, return, "\\r")',
        r'set noteText to my replaceText(noteText, linefeed, "\\n")',
        r'set noteText to my replaceText(noteText, tab, "\\t")',
    ]
    positions = [script.index(line) for line in order]
    assert positions == sorted(positions)

    # Each note is read and escaped inside its own try block.
    body = script[script.index("try") : script.index("end try")]
    assert "plaintext of theNote" in body
    assert "set end of outEntries" in body


def test_get_all_notes_plaintext(monkeypatch):
    notes = [("id-1", 'quote " and \\'), ("id-2", "multi\nline")]
    scripts = []

    def _run(script, label="osascript"):
        scripts.append(script)
        return _as_script_output(notes)

    monkeypatch.setattr(export_mod, "run_osascript", _run)
    result = get_all_notes_plaintext()
    assert [(e.id, e.plaintext) for e in result] == notes
    assert scripts == [build_export_script()]


def test_get_all_notes_plaintext_script_failure(monkeypatch, capsys):
    def _run(script, label="osascript"):
        raise NotesScriptError("execution error: Notes got an error (-600)", returncode=1)

    monkeypatch.setattr(export_mod, "run_osascript", _run)
    assert get_all_notes_plaintext() == []
    assert "Notes export failed: execution error" in capsys.readouterr().err


def test_entry_field_order():
    assert [f.name for f in dataclasses.fields(NotePlainTextEntry)] == ["id", "plaintext"]


def test_decode_deeply_nested_returns_empty(capsys):
    assert decode_notes_plaintext("[" * 100000) == []
    assert "Failed to parse notes plaintext:" in capsys.readouterr().err


def test_get_all_notes_plaintext_undecodable_output(monkeypatch, capsys):
    def _run(script, label="osascript"):
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    monkeypatch.setattr(export_mod, "run_osascript", _run)
    assert get_all_notes_plaintext() == []
    assert "Notes export failed:" in capsys.readouterr().err
