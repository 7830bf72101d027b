"""Access to the player's account, environment and process."""

from __future__ import annotations

import os
import signal
import subprocess
from typing import Any, Optional

try:
    import pwd
except ImportError:  # not available on every platform
    pwd = None  # type: ignore[assignment]

_IS_WINDOWS = os.name == "nt"
_MAX_LOGIN = 79
_DEFAULT_SHELL = "C:\\WINDOWS\\SYSTEM32\\CMD.EXE" if _IS_WINDOWS else "/bin/sh"


def _passwd_entry() -> Optional[Any]:
    if pwd is None or not hasattr(os, "getuid"):
        return None
    try:
        return pwd.getpwuid(os.getuid())
    except KeyError:
        return None


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value is not None:
            return value
    return None


def get_username() -> str:
    """The login name of the player, at most 79 characters."""
    entry = _passwd_entry()
    name = entry.pw_name if entry is not None else None
    if not name:
        name = _first_env("USERNAME", "LOGNAME", "USER")
        if name is None:
            name = "nobody"
    return name[:_MAX_LOGIN]


def get_homedir() -> str:
    """The player's home directory, ending in a path separator (or '')."""
    home: Optional[str] = None
    entry = _passwd_entry()
    if entry is not None:
        home = entry.pw_dir
        if home == "/":
            home = None
    prefix = ""
    if not home:
        home = os.environ.get("HOME")
        if home is None:
            drive = os.environ.get("HOMEDRIVE")
            if drive is None:
                home = ""
            else:
                prefix = drive
                home = os.environ.get("HOMEPATH", "")
    result = prefix + home
    if result and not result.endswith(os.sep):
        result += os.sep
    return result


def get_shell() -> str:
    """The shell to start for a shell escape."""
    entry = _passwd_entry()
    shell = entry.pw_shell if entry is not None else None
    if not shell:
        shell = _first_env("COMSPEC", "SHELL", "SystemRoot")
        if shell is None:
            shell = _DEFAULT_SHELL
    return shell


def _normal_user() -> None:
    """Drop set-user and set-group privileges in a child process."""
    gid = os.getgid()
    uid = os.getuid()
    if hasattr(os, "setresgid"):
        os.setresgid(-1, gid, gid)
    elif hasattr(os, "setregid"):
        os.setregid(gid, gid)
    if hasattr(os, "setresuid"):
        os.setresuid(-1, uid, uid)
    elif hasattr(os, "setreuid"):
        os.setreuid(uid, uid)


def shell_escape() -> int:
    """Run an interactive shell and wait for it; return its exit status."""
    shell = get_shell()
    args = ["shell"] if _IS_WINDOWS else ["shell", "-i"]
    kwargs: dict[str, Any] = {"executable": shell}
    if not _IS_WINDOWS:
        kwargs["preexec_fn"] = _normal_user
    old_int = signal.signal(signal.SIGINT, signal.SIG_IGN)
    has_quit = hasattr(signal, "SIGQUIT")
    old_quit = signal.signal(signal.SIGQUIT, signal.SIG_IGN) if has_quit else None
    try:
        return subprocess.call(args, **kwargs)
    finally:
        signal.signal(signal.SIGINT, old_int)
        if has_quit:
            signal.signal(signal.SIGQUIT, old_quit)


def directory_exists(path: str) -> bool:
    """Whether ``path`` names an existing directory."""
    return os.path.isdir(path)


def get_realname(uid: int) -> str:
    """The account name for ``uid``, or the number itself if unknown."""
    if pwd is None:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def get_uid() -> int:
    """The real user id, or 42 where the platform has none."""
    getuid = getattr(os, "getuid", None)
    return getuid() if getuid is not None else 42


def get_pid() -> int:
    """The id of this process."""
    return os.getpid()


def load_average() -> tuple[float, float, float]:
    """The 1, 5 and 15 minute load averages, or zeros if unavailable."""
    try:
        one, five, fifteen = os.getloadavg()
    except (AttributeError, OSError):
        return (0.0, 0.0, 0.0)
    return (float(one), float(five), float(fifteen))


def unlink(path: str) -> None:
    """Remove a file, making it writable first where that is needed."""
    if _IS_WINDOWS:
        os.chmod(path, 0o600)
    os.unlink(path)


def chmod(path: str, mode: int) -> None:
    """Change the permission bits of ``path``."""
    os.chmod(path, mode)