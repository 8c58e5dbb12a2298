"""Domain exception hierarchy.

The CLI prints the message and exits with code 1.  The HTTP API routes
never touch the disk, so only the catch-all handler can see one of these.
Unrecognized prompt keywords are never errors: they resolve to the named
default presets instead.
"""

from __future__ import annotations


class SiteForgeError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class EmptyPromptError(SiteForgeError):
    """A CLI or API caller supplied a blank prompt."""


# ── Programmer errors ───────────────────────────────────────────────────────


class InvalidAppConfigError(SiteForgeError, TypeError):
    """The file emitter was handed something that is not a complete ``AppConfig``."""


# ── Filesystem collaborators ────────────────────────────────────────────────


class AuditTargetError(SiteForgeError):
    """The directory to audit does not exist or is not a directory."""


class OutputDirectoryError(SiteForgeError):
    """Generated files could not be written to the output directory."""
