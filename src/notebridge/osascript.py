import os
import subprocess
import time

import click


class NotesScriptError(click.ClickException):
    """Raised when osascript exits non-zero; the message is Notes' stderr as-is."""

    def __init__(self, stderr: str = "", returncode: int | None = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(stderr or "AppleScript execution failed.")


def _osascript_bin() -> str:
    return (os.getenv("NOTEBRIDGE_OSASCRIPT") or "").strip() or "osascript"


def run_osascript(script: str, label: str = "osascript") -> str:
    """
    Run one AppleScript payload and return its result text.

    osascript terminates the result with a single newline; it is removed so
    note bodies come back exactly as Notes returned them.
    """
    t0 = time.perf_counter()
    try:
        result = subprocess.run(
            [_osascript_bin(), "-e", script],
            capture_output=True,
            encoding="utf-8",
        )
    except OSError as e:
        raise NotesScriptError(f"Could not run osascript: {e}") from e
    if os.getenv("NOTEBRIDGE_TIMING") == "1":
        ms = (time.perf_counter() - t0) * 1000.0
        click.echo(f"[timing] {label}: {ms:.1f}ms", err=True)
    if result.returncode != 0:
        raise NotesScriptError(
            (result.stderr or "").strip(), returncode=result.returncode
        )
    return (result.stdout or "").removesuffix("\n")
