import importlib
import json

import pipeline_config


def _reload(monkeypatch, tmp_path, override=None):
    monkeypatch.setenv("GAPMINDER_DIR", str(tmp_path))
    if override is None:
        monkeypatch.delenv("PIPELINE_CONFIG_OVERRIDE", raising=False)
    else:
        path = tmp_path / "override.json"
        path.write_text(json.dumps(override))
        monkeypatch.setenv("PIPELINE_CONFIG_OVERRIDE", str(path))
    return importlib.reload(pipeline_config)


def test_main_run_paths(monkeypatch, tmp_path):
    cfg = _reload(monkeypatch, tmp_path)

    assert cfg.RUN_NAME == "main"
    assert cfg.DATA_DIR == tmp_path / "data"
    assert cfg.FIG_DIR == tmp_path / "output" / "figures"
    assert cfg.CONFIG["nest_key"] == "continent"
    assert "group_key" not in cfg.CONFIG


def test_override_run(monkeypatch, tmp_path):
    cfg = _reload(monkeypatch, tmp_path, {"run_name": "by_country", "nest_key": "country"})

    assert cfg.RUN_NAME == "by_country"
    assert cfg.CONFIG["nest_key"] == "country"
    assert cfg.CONFIG["run_name"] == "by_country"
    assert cfg.DATA_DIR == tmp_path / "runs" / "by_country" / "data"

    cfg.save_config()
    saved = json.loads((tmp_path / "runs" / "by_country" / "config.json").read_text())
    assert saved["nest_key"] == "country"

    _reload(monkeypatch, tmp_path)
