"""Value objects — self-deriving domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_NON_LABEL_RE = re.compile(r"[^a-z0-9-]+")


@dataclass(frozen=True, slots=True)
class BusinessIdentity:
    """Name and domain of a generated business.

    When no domain is given one is derived from the name, e.g.
    ``"FitLife Studio"`` → ``fitlifestudio.com``.
    """

    name: str
    domain: str

    @classmethod
    def from_name(cls, name: str, domain: str | None = None) -> BusinessIdentity:
        name = name.strip()
        if not domain:
            label = _NON_LABEL_RE.sub("", name.lower()).strip("-") or "site"
            domain = f"{label}.com"
        return cls(name=name, domain=domain)

    @property
    def slug(self) -> str:
        """Directory-friendly name: ``"FitLife Studio"`` → ``fitlife-studio``.

        Only ``[a-z0-9-]`` survives, so the slug is always a single path
        segment.
        """
        return _NON_SLUG_RE.sub("-", self.name.lower()).strip("-") or "site"

    @property
    def base_url(self) -> str:
        return f"https://{self.domain}"
