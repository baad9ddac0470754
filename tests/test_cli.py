from __future__ import annotations

import json
from pathlib import Path

from box_packer.cli import main


def write_request(path: Path, payload: dict) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_writes_plan(tmp_path: Path, capsys) -> None:
    """The CLI writes the plan JSON and prints a per-box summary."""
    request = write_request(
        tmp_path / "request.json",
        {
            "items": [{"id": "cube", "w": 10, "h": 10, "d": 10, "quantity": 8}],
            "boxes": [{"id": "box", "w": 20, "h": 20, "d": 20}],
        },
    )
    output = tmp_path / "out" / "plan.json"

    code = main(["--input", str(request), "--output", str(output)])

    assert code == 0
    plan = json.loads(output.read_text(encoding="utf-8"))
    assert [b["box_id"] for b in plan["packed_boxes"]] == ["box"]
    assert len(plan["packed_boxes"][0]["contents"]) == 8
    assert plan["unpacked_items"] == []
    assert plan["utilization_percent"] == 100.0
    out = capsys.readouterr().out
    assert "#1 box: 8 items, fill 100.0%" in out
    assert "Plan written to" in out


def test_cli_rejects_invalid_input(tmp_path: Path) -> None:
    """Invalid input exits with code 2 and writes nothing."""
    request = write_request(
        tmp_path / "request.json",
        {
            "items": [{"id": "bad", "w": -1, "h": 10, "d": 10, "quantity": 1}],
            "boxes": [{"id": "box", "w": 20, "h": 20, "d": 20}],
        },
    )
    output = tmp_path / "plan.json"

    code = main(["--input", str(request), "--output", str(output), "--quiet"])

    assert code == 2
    assert not output.exists()
