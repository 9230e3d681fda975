"""Native file dialogs, well-known directories and opening files, folders and links."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import webbrowser
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence
from urllib.parse import quote

_log = logging.getLogger(__name__)

_SEPARATOR = "\n"


class DialogError(RuntimeError):
    """Raised when a file dialog cannot be shown or fails."""


@dataclass(frozen=True)
class DialogFilter:
    """A file type filter: a friendly name and comma separated extensions.

    ``DialogFilter("Audio Files", "wav,mp3")``
    """

    name: str
    spec: str

    @property
    def extensions(self) -> tuple:
        """The extensions of the filter, without dots."""
        return tuple(
            part.strip().lstrip(".") for part in self.spec.split(",") if part.strip()
        )

    def _glob(self) -> str:
        return " ".join(f"*.{ext}" for ext in self.extensions) or "*"


class SysDir(Enum):
    """Common system directories, named by the environment variable holding them."""

    USER_PROFILE = "USERPROFILE"
    APP_DATA_ROAMING = "APPDATA"
    APP_DATA_LOCAL = "LOCALAPPDATA"
    APP_DATA_TEMP = "TEMP"
    PROGRAM_DATA = "PROGRAMDATA"
    PROGRAM_FILES = "PROGRAMFILES"
    PROGRAM_FILES_X86 = "PROGRAMFILES(X86)"


# ---------------------------------------------------------------------------
# Dialog backends
# ---------------------------------------------------------------------------


def _normalise(path: str) -> str:
    return os.path.normpath(path) if path else ""


def _run_zenity(executable: str, args: Sequence[str]) -> Optional[str]:
    proc = subprocess.run(
        [executable, "--file-selection", *args],
        capture_output=True,
        text=True,
        check=False,
    )
    if proc.returncode == 0:
        return proc.stdout.rstrip("\n")
    if proc.returncode == 1:
        return None
    message = (proc.stderr or "").strip()
    raise DialogError(message or f"file dialog exited with status {proc.returncode}")


def _run_tk(select: Callable, **options):
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError as exc:
        raise DialogError("no file dialog backend is available") from exc
    try:
        root = tkinter.Tk()
        root.withdraw()
        try:
            result = select(filedialog)(parent=root, **options)
        finally:
            root.destroy()
    except tkinter.TclError as exc:
        raise DialogError(str(exc)) from exc
    return result or None


def _zenity() -> Optional[str]:
    return shutil.which("zenity")


def _zenity_filters(filters: Iterable[DialogFilter]) -> List[str]:
    return [f"--file-filter={f.name} | {f._glob()}" for f in filters]


def _tk_filters(filters: Iterable[DialogFilter]) -> List[tuple]:
    return [(f.name, f._glob()) for f in filters]


# ---------------------------------------------------------------------------
# Dialogs
# ---------------------------------------------------------------------------


def save_dialog(
    filters: Sequence[DialogFilter] = (),
    default_path: str = "",
    default_name: str = "",
) -> Optional[str]:
    """Show a save dialog; return the chosen path, or None if cancelled."""
    directory = _normalise(default_path)
    executable = _zenity()
    if executable:
        args = ["--save", "--confirm-overwrite"]
        if directory:
            target = (
                os.path.join(directory, default_name)
                if default_name
                else directory + os.sep
            )
            args.append(f"--filename={target}")
        elif default_name:
            args.append(f"--filename={default_name}")
        args.extend(_zenity_filters(filters))
        return _run_zenity(executable, args)
    options = {"initialfile": default_name}
    if directory:
        options["initialdir"] = directory
    if filters:
        options["filetypes"] = _tk_filters(filters)
    return _run_tk(lambda fd: fd.asksaveasfilename, **options)


def open_dialog(
    filters: Sequence[DialogFilter] = (), default_path: str = ""
) -> Optional[str]:
    """Show a single file open dialog; return the path, or None if cancelled."""
    directory = _normalise(default_path)
    executable = _zenity()
    if executable:
        args = []
        if directory:
            args.append(f"--filename={directory}{os.sep}")
        args.extend(_zenity_filters(filters))
        return _run_zenity(executable, args)
    options = {}
    if directory:
        options["initialdir"] = directory
    if filters:
        options["filetypes"] = _tk_filters(filters)
    return _run_tk(lambda fd: fd.askopenfilename, **options)


def open_dialog_multiple(
    filters: Sequence[DialogFilter] = (), default_path: str = ""
) -> Optional[List[str]]:
    """Show a multiple file open dialog; return the paths, or None if cancelled."""
    directory = _normalise(default_path)
    executable = _zenity()
    if executable:
        args = ["--multiple", f"--separator={_SEPARATOR}"]
        if directory:
            args.append(f"--filename={directory}{os.sep}")
        args.extend(_zenity_filters(filters))
        output = _run_zenity(executable, args)
        if output is None:
            return None
        return [line for line in output.split(_SEPARATOR) if line]
    options = {}
    if directory:
        options["initialdir"] = directory
    if filters:
        options["filetypes"] = _tk_filters(filters)
    chosen = _run_tk(lambda fd: fd.askopenfilenames, **options)
    return list(chosen) if chosen else None


def pick_dialog(default_path: str = "") -> Optional[str]:
    """Show a folder selection dialog; return the folder, or None if cancelled."""
    directory = _normalise(default_path)
    executable = _zenity()
    if executable:
        args = ["--directory"]
        if directory:
            args.append(f"--filename={directory}{os.sep}")
        return _run_zenity(executable, args)
    options = {}
    if directory:
        options["initialdir"] = directory
    return _run_tk(lambda fd: fd.askdirectory, **options)


# ---------------------------------------------------------------------------
# System directories
# ---------------------------------------------------------------------------


def _fallback(directory: SysDir) -> Path:
    home = Path.home()
    if directory is SysDir.USER_PROFILE:
        return home
    if directory is SysDir.APP_DATA_ROAMING:
        return Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    if directory is SysDir.APP_DATA_LOCAL:
        return Path(os.environ.get("XDG_DATA_HOME") or home / ".local" / "share")
    if directory is SysDir.APP_DATA_TEMP:
        import tempfile

        return Path(tempfile.gettempdir())
    if directory is SysDir.PROGRAM_DATA:
        return Path("/usr/local/share")
    return Path("/usr/local")


def sys_dir(directory: SysDir) -> str:
    """Return a common system directory with forward slashes."""
    value = os.environ.get(directory.value)
    path = Path(value) if value else _fallback(directory)
    return path.as_posix()


# ---------------------------------------------------------------------------
# Launching
# ---------------------------------------------------------------------------


def _launch(target: str, what: str) -> None:
    if sys.platform == "win32":
        os.startfile(target)  # type: ignore[attr-defined]
        return
    opener = "open" if sys.platform == "darwin" else "xdg-open"
    proc = subprocess.run([opener, target], check=False)
    if proc.returncode != 0:
        _log.warning("%s failed with status %d", what, proc.returncode)


def open_folder(path: str) -> bool:
    """Open a folder in the file explorer; return False if it is not a folder."""
    p = Path(path)
    if not p.is_dir():
        return False
    _launch(str(p), "open_folder()")
    return True


def open_file(path: str) -> bool:
    """Open a file with its default application; return False if it is not a file."""
    p = Path(path)
    if not p.is_file():
        return False
    _launch(str(p), "open_file()")
    return True


def open_url(url: str) -> None:
    """Open a link in the default browser."""
    webbrowser.open(url)


def open_email(address: str, subject: str = "") -> None:
    """Open a new e-mail to ``address`` in the default mail client."""
    link = "mailto:" + address
    if subject:
        link += "?subject=" + quote(subject)
    webbrowser.open(link)