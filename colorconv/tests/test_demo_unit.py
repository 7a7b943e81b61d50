from __future__ import annotations

import json
from pathlib import Path

import colorconv.demo as demo
from colorconv.core.color import Color
from colorconv.core.config import DEFAULTS, DemoSettings


def _settings(**overrides) -> DemoSettings:
    data = dict(DEFAULTS)
    data.update(overrides)
    return DemoSettings.from_dict(data)


def test_convert_sample_runs_every_form() -> None:
    lines: list[str] = []
    colors = demo.convert_sample([183, 65, 14], lines.append)

    assert colors == [Color(183, 65, 14)] * 4
    assert [line.split()[0] for line in lines] == ["tuple", "array", "slice", "try_from"]
    assert all(line.endswith("Ok(Color(red=183, green=65, blue=14))") for line in lines)


def test_convert_sample_wrong_length_only_uses_slice_forms() -> None:
    lines: list[str] = []
    colors = demo.convert_sample([0, 0, 0, 0], lines.append)

    assert colors == []
    assert len(lines) == 2
    assert all(line.endswith("Err(BadLength)") for line in lines)


def test_convert_sample_out_of_range() -> None:
    lines: list[str] = []
    assert demo.convert_sample([-1, 255, 255], lines.append) == []
    assert all(line.endswith("Err(IntConversion)") for line in lines)


def test_run_demo_prints_average() -> None:
    lines: list[str] = []
    demo.run_demo(_settings(), emit=lines.append)
    assert lines[-1].endswith("-> 7.125")


def test_run_demo_writes_swatch_of_unique_colors(tmp_path: Path, monkeypatch) -> None:
    saved = {}

    def _save(colors, path, *, cell_size):
        saved.update(colors=list(colors), path=path, cell_size=cell_size)
        return path

    monkeypatch.setattr(demo, "save_swatch", _save)
    settings = _settings(samples=[[183, 65, 14], [1, 2, 3], [183, 65, 14]], swatch_cell_size=4)
    demo.run_demo(settings, swatch=tmp_path / "s.png", emit=lambda _line: None)

    assert saved == {
        "colors": [Color(183, 65, 14), Color(1, 2, 3)],
        "path": tmp_path / "s.png",
        "cell_size": 4,
    }


def test_main_prints_default_demo(capsys) -> None:
    demo.main([])
    out = capsys.readouterr().out.splitlines()

    assert len(out) == 5
    assert out[0].startswith("tuple")
    assert "Ok(Color(red=183, green=65, blue=14))" in out[0]
    assert out[-1].endswith("-> 7.125")


def test_main_merges_cli_samples_and_values(capsys) -> None:
    demo.main(["--color", "0", "0", "--color", "1000", "10000", "256", "--values", "1", "2"])
    out = capsys.readouterr().out

    assert "Err(BadLength)" in out
    assert "Err(IntConversion)" in out
    assert out.splitlines()[-1].endswith("-> 1.5")


def test_main_reads_config_file(capsys, tmp_path: Path) -> None:
    cfg = tmp_path / "demo.json"
    cfg.write_text(json.dumps({"samples": [[9, 9, 9]], "values": [2, 4]}), encoding="utf-8")

    demo.main(["--config", str(cfg)])
    out = capsys.readouterr().out

    assert "Color(red=9, green=9, blue=9)" in out
    assert "183" not in out
    assert out.splitlines()[-1].endswith("-> 3.0")


def test_main_writes_swatch(tmp_path: Path, capsys) -> None:
    path = tmp_path / "swatch.png"
    demo.main(["--swatch", str(path)])
    capsys.readouterr()
    assert path.is_file()


def test_main_keyboard_interrupt_exits_0(monkeypatch) -> None:
    codes = []

    def _raise(*_a, **_k):
        raise KeyboardInterrupt()

    monkeypatch.setattr(demo, "configure_logging", lambda: None)
    monkeypatch.setattr(demo, "load_settings", _raise)
    monkeypatch.setattr(demo.sys, "exit", lambda code: codes.append(code))

    demo.main([])
    assert codes == [0]


def test_main_unhandled_error_exits_1(monkeypatch) -> None:
    codes = []

    def _raise(*_a, **_k):
        raise RuntimeError("boom")

    monkeypatch.setattr(demo, "configure_logging", lambda: None)
    monkeypatch.setattr(demo, "run_demo", _raise)
    monkeypatch.setattr(demo.sys, "exit", lambda code: codes.append(code))

    demo.main([])
    assert codes == [1]


def test_configure_logging_respects_existing_handlers(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(demo.logging, "basicConfig", lambda **kw: calls.append(kw))

    root = demo.logging.getLogger()
    monkeypatch.setattr(root, "handlers", [object()])
    demo.configure_logging()
    assert calls == []

    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setenv("COLORCONV_DEBUG", "1")
    demo.configure_logging()
    assert calls and calls[0]["level"] == demo.logging.DEBUG
