"""Git helpers for resolving the working context and diffing a baseline."""

from __future__ import annotations

import pathlib
import subprocess
from typing import Sequence


def run_git(
    args: Sequence[str],
    cwd: pathlib.Path | str | None = None,
    check: bool = True,
    capture: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run ``git <args>`` in *cwd* and return the completed process.

    Output is decoded as UTF-8 with replacement characters, so a path git
    reports in another encoding (``core.quotepath=false``) degrades to an
    unmatchable name instead of raising ``UnicodeDecodeError``.

    Parameters
    ----------
    args:
        Subcommand and its arguments, e.g. ``["diff", "origin/canary", "--name-only"]``.
    cwd:
        Checkout to run in (default: the current directory).
    check:
        Raise ``CalledProcessError`` on a non-zero exit (default ``True``).
        Context queries rely on this to abort; best-effort callers catch it.
    capture:
        Capture stdout/stderr so callers can log them (default ``True``).

    Returns
    -------
    subprocess.CompletedProcess
        Decoded stdout and stderr plus the exit code.
    """
    cmd = ["git", *args]
    return subprocess.run(
        cmd,
        cwd=cwd,
        check=check,
        text=True,
        encoding="utf-8",
        errors="replace",
        capture_output=capture,
    )


def get_current_branch(cwd: pathlib.Path | str | None = None) -> str:
    """Return the abbreviated name of ``HEAD`` (``HEAD`` when detached).

    Raises ``subprocess.CalledProcessError`` if git fails.
    """
    return run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd).stdout.strip()


def get_remote_url(
    remote: str = "origin", cwd: pathlib.Path | str | None = None
) -> str:
    """Return the configured URL of *remote*.

    Raises ``subprocess.CalledProcessError`` if the remote does not exist.
    """
    return run_git(["remote", "get-url", remote], cwd=cwd).stdout.strip()


def get_head_sha(cwd: pathlib.Path | str | None = None) -> str:
    """Return the full commit SHA that ``HEAD`` points to."""
    return run_git(["rev-parse", "HEAD"], cwd=cwd).stdout.strip()


def track_remote_branch(
    branch: str,
    remote: str = "origin",
    cwd: pathlib.Path | str | None = None,
) -> None:
    """Add *branch* to the fetch refspecs of *remote*.

    Shallow single-branch clones (the CI default) only track the checked
    out branch, so the baseline has to be registered before it can be
    fetched into ``refs/remotes/<remote>/<branch>``.
    """
    run_git(["remote", "set-branches", "--add", remote, branch], cwd=cwd)


def fetch_branch(
    branch: str,
    remote: str = "origin",
    depth: int = 20,
    cwd: pathlib.Path | str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Fetch the last *depth* commits of *branch* from *remote*."""
    return run_git(["fetch", remote, branch, f"--depth={depth}"], cwd=cwd)


def diff_name_only(
    ref: str, cwd: pathlib.Path | str | None = None
) -> subprocess.CompletedProcess[str]:
    """List paths that differ between the working tree and *ref*.

    Returns the completed process so callers can log stderr alongside
    the file list.
    """
    return run_git(["diff", ref, "--name-only"], cwd=cwd)


def get_remotes_verbose(cwd: pathlib.Path | str | None = None) -> str:
    """Return ``git remote -v`` output, or an empty string on failure."""
    try:
        result = run_git(["remote", "-v"], cwd=cwd, check=False)
    except OSError:
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.strip()
