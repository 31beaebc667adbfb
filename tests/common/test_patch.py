from __future__ import annotations

from dataclasses import dataclass

import pytest

from hr_records.common.patch import Patch


@dataclass(frozen=True)
class Row:
    id: int
    name: str
    note: str = ""


def test_empty_patch_is_falsy():
    assert not Patch()
    assert Patch({"name": "x"})


def test_patch_is_read_only():
    p = Patch({"name": "x"})
    with pytest.raises(TypeError):
        p.changes["name"] = "y"


def test_only_and_with_value_return_new_patches():
    p = Patch({"name": "x", "id": 3})

    assert dict(p.only(["name"]).items()) == {"name": "x"}
    assert p.with_value("note", "n").get("note") == "n"
    assert "note" not in p


def test_apply_replaces_only_patched_attributes():
    row = Row(id=1, name="old", note="keep")
    assert Patch({"name": "new"}).apply(row) == Row(id=1, name="new", note="keep")
