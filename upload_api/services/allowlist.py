from typing import Iterable

DEFAULT_EXTENSIONS = frozenset({"txt", "adoc", "md", "yaml", "yml"})


def extension_of(filename: str) -> str:
    """Text after the last dot, case as supplied; empty when there is no dot."""
    _, dot, ext = filename.rpartition(".")
    return ext if dot else ""


class Allowlist:
    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        self._exts = frozenset(e.strip().lstrip(".").lower() for e in extensions if e.strip())

    def permits(self, ext: str) -> bool:
        return ext in self._exts

    def sorted(self) -> list[str]:
        return sorted(self._exts)

    def describe(self) -> str:
        return ", ".join(self.sorted())

    def __contains__(self, ext: str) -> bool:
        return self.permits(ext)

    def __len__(self) -> int:
        return len(self._exts)
