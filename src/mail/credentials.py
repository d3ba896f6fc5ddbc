"""Interactive credential prompt."""

from __future__ import annotations

from getpass import getpass

PASSWORD_PROMPT = "pass> "


class CredentialError(RuntimeError):
    """Raised when no password could be read from the terminal."""


def prompt_password(prompt: str = PASSWORD_PROMPT) -> str:
    """
    Read a password with terminal echo disabled.

    ``getpass`` switches the tty to no-echo mode and restores it on every exit path.
    """
    try:
        raw = getpass(prompt)
    except EOFError as exc:
        raise CredentialError("No password entered (end of input).") from exc
    password = raw.strip()
    if not password:
        raise CredentialError("Empty password.")
    return password
