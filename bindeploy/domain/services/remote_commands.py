"""
Remote Command Builder

Architectural Intent:
- Builds the shell command strings run on the deployment host
- One function per discrete remote operation so each is testable alone
- Every path is quoted via shlex.quote() to prevent shell injection

A leading "~/" is kept outside the quotes so the remote shell still
expands it to the login user's home directory.
"""

import shlex


def quote_path(path: str) -> str:
    if path == "~":
        return "~"
    if path.startswith("~/"):
        rest = path[2:]
        return "~/" + shlex.quote(rest) if rest else "~/"
    return shlex.quote(path)


def make_dirs(path: str) -> str:
    return f"mkdir -p {quote_path(path)}"


def remove_link(link_path: str) -> str:
    return f"rm -f {quote_path(link_path)}"


def create_link(target_path: str, link_path: str) -> str:
    return f"ln -s {quote_path(target_path)} {quote_path(link_path)}"


def create_link_forced(target_path: str, link_path: str) -> str:
    """ln -sfn: never dereferences an existing link at link_path."""
    return f"ln -sfn {quote_path(target_path)} {quote_path(link_path)}"


def rename_over(source_path: str, dest_path: str) -> str:
    """mv -T renames onto dest itself; rename(2) keeps this atomic."""
    return f"mv -Tf {quote_path(source_path)} {quote_path(dest_path)}"


def make_executable(path: str) -> str:
    return f"chmod +x {quote_path(path)}"


def detached(command: str) -> str:
    """
    Runs command under nohup so it survives the SSH session being torn
    down, while still reporting its exit status when the session stays up.
    """
    return f"nohup sh -c {shlex.quote(command)} </dev/null"
