from __future__ import annotations

from dataclasses import dataclass


HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


@dataclass(frozen=True, slots=True)
class NameFilter:
    prefix: str | None = None
    suffix: str | None = None

    def matches(self, name: str) -> bool:
        if self.prefix and not name.startswith(self.prefix):
            return False
        if self.suffix and not name.endswith(self.suffix):
            return False
        return True


def build_name_filter(prefix: str | None = None, suffix: str | None = None) -> NameFilter:
    # Empty strings behave like an unset filter.
    return NameFilter(prefix=prefix or None, suffix=suffix or None)
