import logging

import pytest

from tablejson import Table, decode, encode
from tablejson.cli import main
from tablejson.config import CODEC_CONFIG
from tablejson.utils_profile import profile_section


def test_roundtrip(tmp_path, capsys):
    src = tmp_path / "in.json"
    dst = tmp_path / "out.json"
    src.write_text('{"a": [1, 2.0, "x"], "b": null}', encoding="utf-8")

    assert main(["roundtrip", "-i", str(src), "-o", str(dst), "--verify"]) == 0
    assert dst.read_text(encoding="utf-8") == '{"a":[1,2.0,"x"]}'
    out = capsys.readouterr().out
    assert "round-trip" in out
    assert "stable" in out

@pytest.mark.parametrize("body", ["[1, 2", "[1, null, 3]"])
def test_roundtrip_errors(tmp_path, capsys, body):
    src = tmp_path / "in.json"
    src.write_text(body, encoding="utf-8")
    assert main(["roundtrip", "-i", str(src), "-o", str(tmp_path / "out.json")]) == 1
    assert "❌" in capsys.readouterr().err
    assert not (tmp_path / "out.json").exists()

def test_roundtrip_max_depth(tmp_path, capsys):
    src = tmp_path / "in.json"
    src.write_text("[[[1]]]", encoding="utf-8")
    assert main(["roundtrip", "-i", str(src), "-o", str(tmp_path / "o.json"), "--max-depth", "2"]) == 1
    assert "depth" in capsys.readouterr().err

def test_bench(capsys):
    assert main(["bench", "--n", "10"]) == 0
    out = capsys.readouterr().out
    assert "n=10" in out
    assert "encode" in out and "(orjson)" in out
    assert "decode" in out and "(json)" in out

def test_bench_profile_logs_each_direction(caplog, capsys):
    caplog.set_level(logging.INFO, logger="tablejson.profile")
    assert main(["--profile", "bench", "--n", "5"]) == 0
    messages = [r.getMessage() for r in caplog.records if r.name == "tablejson.profile"]
    assert len(messages) == 2
    assert messages[0].startswith("encode")
    assert messages[1].startswith("decode")

# ----------------------------------------------------------------------
def test_profile_section_timing_only():
    with profile_section("encode", enabled=False) as timing:
        encode(Table.from_list([1, 2, 3]))
    assert timing.direction == "encode"
    assert timing.ms >= 0
    assert timing.stats is None

def test_profile_section_collects_stats(caplog):
    caplog.set_level(logging.INFO, logger="tablejson.profile")
    with profile_section("decode", enabled=True) as timing:
        decode("[1, 2, 3]")
    assert timing.stats is not None
    assert "decode" in timing.stats
    assert any(r.getMessage().startswith("decode") for r in caplog.records)

def test_profile_section_follows_config(monkeypatch):
    monkeypatch.setitem(CODEC_CONFIG, "profile", True)
    with profile_section("encode") as timing:
        encode(Table())
    assert timing.stats is not None
