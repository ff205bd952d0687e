from pathlib import Path

import yaml

from memokit.core.config import DEFAULT_CONFIG, ConfigError, deep_merge, dump_yaml, resolve_config


def test_defaults():
    cfg = resolve_config()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_file_and_overrides_merge(tmp_path: Path):
    path = tmp_path / "memokit.yaml"
    path.write_text("cache:\n  thread_safe: true\n", encoding="utf-8")

    cfg = resolve_config(path, overrides={"fibonacci": {"strategy": "recursive"}})

    assert cfg["cache"]["thread_safe"] is True
    assert cfg["fibonacci"]["strategy"] == "recursive"


def test_missing_file_raises(tmp_path: Path):
    try:
        resolve_config(tmp_path / "nope.yaml")
        assert False
    except ConfigError as exc:
        assert "not found" in str(exc)


def test_non_mapping_root_raises(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    try:
        resolve_config(path)
        assert False
    except ConfigError as exc:
        assert "mapping" in str(exc)


def test_invalid_values_raise():
    for overrides in (
        {"fibonacci": {"strategy": "binet"}},
        {"cache": {"thread_safe": "yes"}},
    ):
        try:
            resolve_config(overrides=overrides)
            assert False
        except ConfigError:
            pass


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}}
    out = deep_merge(base, {"a": {"b": 3}})
    assert out == {"a": {"b": 3, "c": 2}}
    assert base == {"a": {"b": 1, "c": 2}}


def test_dump_yaml_roundtrip(tmp_path: Path):
    out = tmp_path / "nested" / "cfg.yaml"
    dump_yaml(resolve_config(), out)
    with out.open("r", encoding="utf-8") as f:
        assert yaml.safe_load(f) == DEFAULT_CONFIG
