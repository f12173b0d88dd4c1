from __future__ import annotations

import pytest

from blockfall.__main__ import main, rotation_demo
from blockfall.rotation_systems import RotationSystem


def test_rotation_demo_lists_every_shape() -> None:
    text = rotation_demo(RotationSystem.SRS, 0)
    lines = text.splitlines()
    assert lines[0] == "Super Rotation System (rotation 0)"
    for name in "IJLOSTZ":
        assert any(line.startswith(f"{name} [") for line in lines)


def test_rotation_demo_shows_rotated_shapes() -> None:
    text = rotation_demo(RotationSystem.NES, 1)
    assert "S [restricted]\n.o.\n.oo\n..o" in text
    assert "O [fixed]\n....\n.oo.\n.oo.\n...." in text


def test_main_demo(capsys) -> None:
    assert main(["--demo", "--ruleset", "nes", "--rotation", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Nintendo Rotation System (rotation 2)")


def test_main_self_play(capsys) -> None:
    assert main(["--seed", "3", "--pieces", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    board, summary = lines[:-1], lines[-1]
    assert len(board) == 21
    assert all(len(line) == 12 for line in board)
    assert board[-1] == "#" * 12
    assert summary.startswith("pieces: ")
    assert "o" in "".join(board)


def test_main_rejects_bad_rotation() -> None:
    with pytest.raises(SystemExit):
        main(["--demo", "--rotation", "4"])
