"""Smoke test for the bundled example script."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

EXAMPLE = Path(__file__).resolve().parent.parent / "examples" / "estimate_demo.py"


def _load_demo():
    spec = importlib.util.spec_from_file_location("estimate_demo", EXAMPLE)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_prints_default_and_custom(capsys):
    demo = _load_demo()
    assert demo.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Estimated CO2 emissions: 23.75 grams",
        "Estimated CO2 emissions (custom config): 24.00 grams",
    ]


def test_demo_reports_invalid_input(capsys):
    demo = _load_demo()
    assert demo.main(["--cpu-seconds", "0"]) == 1
    assert "cpuSeconds must be greater than zero" in capsys.readouterr().err


def test_export_schema_script(tmp_path):
    script = EXAMPLE.parent.parent / "scripts" / "export_estimate_schema.py"
    spec = importlib.util.spec_from_file_location("export_estimate_schema", script)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    output = tmp_path / "schema.json"
    module.main(["--output", str(output)])
    schema = json.loads(output.read_text(encoding="utf-8"))
    assert "co2_grams" in schema["properties"]
