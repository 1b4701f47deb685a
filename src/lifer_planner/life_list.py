"""The user's life list: species codes already observed, anywhere, ever."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifer_planner.reference.life_lists import PRESETS

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path


class LifeList:
    """Mutable set of species codes.

    Mutations happen between scoring passes; pass ``codes`` (a frozen
    snapshot) to the recommendation engine.
    """

    def __init__(self, codes: Iterable[str] = ()) -> None:
        self._codes: set[str] = {c.strip() for c in codes if c.strip()}

    @classmethod
    def from_preset(cls, name: str) -> LifeList:
        """Build a life list from a named preset (see ``reference.PRESETS``)."""
        life_list = cls()
        life_list.replace_with_preset(name)
        return life_list

    @classmethod
    def from_file(cls, path: Path) -> LifeList:
        """Read one species code per line; blank lines and ``#`` comments are ignored."""
        codes = []
        with path.open(encoding="utf-8") as f:
            for line in f:
                code = line.split("#", 1)[0].strip()
                if code:
                    codes.append(code)
        return cls(codes)

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(self._codes)

    def add(self, code: str) -> None:
        code = code.strip()
        if code:
            self._codes.add(code)

    def remove(self, code: str) -> None:
        """Remove ``code``; a code that isn't on the list is ignored."""
        self._codes.discard(code.strip())

    def toggle(self, code: str) -> bool:
        """Flip membership of ``code``. Returns True if it is now on the list."""
        code = code.strip()
        if not code:
            return False
        if code in self._codes:
            self._codes.remove(code)
            return False
        self._codes.add(code)
        return True

    def replace_with_preset(self, name: str) -> None:
        """Replace the whole list with a named preset.

        Raises:
            KeyError: If ``name`` is not a known preset.
        """
        if name not in PRESETS:
            msg = f"Unknown life list preset {name!r}; choose from {', '.join(sorted(PRESETS))}"
            raise KeyError(msg)
        self._codes = set(PRESETS[name])

    def clear(self) -> None:
        self._codes.clear()

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"LifeList({sorted(self._codes)!r})"
