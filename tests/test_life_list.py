"""Tests for the life list and its presets."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from lifer_planner.life_list import LifeList
from lifer_planner.reference.life_lists import (
    COMMON_CHICAGO_BIRDS,
    DEMO_LIFE_LIST,
    PRESETS,
    search_catalog,
)


class TestLifeListMutations:
    """Test add/remove/toggle on a life list."""

    def test_starts_empty(self) -> None:
        life_list = LifeList()
        assert len(life_list) == 0
        assert life_list.codes == frozenset()

    def test_add_and_contains(self) -> None:
        life_list = LifeList()
        life_list.add("norcad")
        assert "norcad" in life_list
        assert len(life_list) == 1

    def test_add_is_idempotent(self) -> None:
        life_list = LifeList(["norcad"])
        life_list.add("norcad")
        assert len(life_list) == 1

    def test_remove(self) -> None:
        life_list = LifeList(["norcad", "blujay"])
        life_list.remove("norcad")
        assert life_list.codes == {"blujay"}

    def test_remove_missing_is_noop(self) -> None:
        life_list = LifeList(["blujay"])
        life_list.remove("norcad")
        assert life_list.codes == {"blujay"}

    def test_toggle(self) -> None:
        life_list = LifeList()
        assert life_list.toggle("amerob") is True
        assert "amerob" in life_list
        assert life_list.toggle("amerob") is False
        assert "amerob" not in life_list

    def test_clear(self) -> None:
        life_list = LifeList(["a", "b"])
        life_list.clear()
        assert len(life_list) == 0

    def test_codes_is_a_snapshot(self) -> None:
        life_list = LifeList(["a"])
        snapshot = life_list.codes
        life_list.add("b")
        assert snapshot == {"a"}

    def test_blank_codes_ignored(self) -> None:
        assert LifeList(["", "  ", " amerob "]).codes == {"amerob"}

    def test_edits_strip_whitespace(self) -> None:
        life_list = LifeList(["norcad"])
        life_list.add(" blujay ")
        assert life_list.codes == {"norcad", "blujay"}
        assert life_list.toggle(" norcad\t") is False
        life_list.remove("blujay ")
        assert len(life_list) == 0

    def test_blank_edits_ignored(self) -> None:
        life_list = LifeList()
        life_list.add("  ")
        assert life_list.toggle("") is False
        assert len(life_list) == 0


class TestPresets:
    """Test preset life lists."""

    def test_replace_with_demo(self) -> None:
        life_list = LifeList(["zzz"])
        life_list.replace_with_preset("demo")
        assert life_list.codes == DEMO_LIFE_LIST
        assert "zzz" not in life_list

    def test_demo_has_fifteen_birds(self) -> None:
        assert len(DEMO_LIFE_LIST) == 15
        assert "norcad" in DEMO_LIFE_LIST

    def test_from_preset(self) -> None:
        life_list = LifeList.from_preset("chicago-common")
        assert len(life_list) == len(COMMON_CHICAGO_BIRDS)

    def test_unknown_preset(self) -> None:
        with pytest.raises(KeyError, match="nope"):
            LifeList().replace_with_preset("nope")

    def test_preset_not_shared(self) -> None:
        life_list = LifeList.from_preset("demo")
        life_list.add("xyz")
        assert "xyz" not in PRESETS["demo"]


class TestFromFile:
    """Test reading a life list from a text file."""

    def test_reads_codes(self, tmp_path: Path) -> None:
        path = tmp_path / "life.txt"
        path.write_text("norcad\n\n# backyard\nblujay  # seen 2020\n  amerob\n")
        assert LifeList.from_file(path).codes == {"norcad", "blujay", "amerob"}

    def test_reads_utf8_regardless_of_locale(self, tmp_path: Path) -> None:
        path = tmp_path / "life.txt"
        path.write_bytes("# Zaunk\u00f6nig, \u00e9t\u00e9 2021\neurwre\n".encode())
        real_open = Path.open
        with patch.object(Path, "open", autospec=True, side_effect=real_open) as mock_open:
            assert LifeList.from_file(path).codes == {"eurwre"}
        assert mock_open.call_args.kwargs["encoding"] == "utf-8"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            LifeList.from_file(tmp_path / "missing.txt")


class TestCatalog:
    """Test the species catalog search."""

    def test_codes_unique(self) -> None:
        codes = [bird.code for bird in COMMON_CHICAGO_BIRDS]
        assert len(codes) == len(set(codes))

    def test_search_by_name(self) -> None:
        names = [bird.name for bird in search_catalog("woodpecker")]
        assert "Downy Woodpecker" in names
        assert all("woodpecker" in n.lower() for n in names)

    def test_search_by_code(self) -> None:
        assert [bird.name for bird in search_catalog("NORCAD")] == ["Northern Cardinal"]

    def test_empty_term_returns_all(self) -> None:
        assert len(search_catalog("")) == len(COMMON_CHICAGO_BIRDS)

    def test_no_match(self) -> None:
        assert search_catalog("penguin") == []
