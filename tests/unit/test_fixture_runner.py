import pytest

import fixture_runner as fr

@pytest.fixture
def fixture_dir(tmp_path):
    (tmp_path / "pass1.json").write_text('{"a": [1, 2]}', encoding="utf-8")
    (tmp_path / "pass2.json").write_text("[1,]", encoding="utf-8")   # mislabeled on purpose
    (tmp_path / "fail1.json").write_text("[1,]", encoding="utf-8")
    (tmp_path / "other.json").write_text("{}", encoding="utf-8")     # no pass prefix -> expect invalid
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path

@pytest.mark.parametrize("name, expected", [
    ("pass1.json", True),
    ("passing.json", True),
    ("fail1.json", False),
    ("valid.json", False),
    ("dir/pass3.json", True),
])
def test_expected_verdict(name, expected):
    assert fr.expected_verdict(name) is expected

def test_run_fixtures_tallies(fixture_dir):
    report = fr.run_fixtures(str(fixture_dir))
    assert [r.name for r in report.results] == ["fail1.json", "other.json", "pass1.json", "pass2.json"]
    assert report.total == 4
    assert report.passed == 2
    assert report.failed == 2
    assert report.pass_rate == 50.0

def test_empty_directory_has_zero_pass_rate(tmp_path):
    report = fr.run_fixtures(str(tmp_path))
    assert report.total == 0
    assert report.pass_rate == 0.0

def test_main_prints_summary(fixture_dir, capsys):
    assert fr.main([str(fixture_dir)]) == 1
    out = capsys.readouterr().out
    assert "PASS: fail1.json" in out
    assert "FAIL: pass2.json (expected True, got False)" in out
    assert "Total tests: 4" in out
    assert "Pass rate: 50.00%" in out

def test_main_missing_directory(tmp_path):
    assert fr.main([str(tmp_path / "missing")]) == 2

def test_undecodable_fixture_counts_as_invalid(tmp_path):
    (tmp_path / "fail1.json").write_bytes(b'["\xff"]')
    (tmp_path / "pass1.json").write_bytes(b'["\xff"]')
    (tmp_path / "pass2.json").write_text("[]", encoding="utf-8")
    report = fr.run_fixtures(str(tmp_path))
    assert [(r.name, r.actual) for r in report.results] == [
        ("fail1.json", False),
        ("pass1.json", False),
        ("pass2.json", True),
    ]
    assert report.passed == 2
    assert report.failed == 1

def test_main_keeps_going_past_undecodable_fixture(tmp_path, capsys):
    (tmp_path / "fail1.json").write_bytes(b'["\xff"]')
    (tmp_path / "pass1.json").write_text("{}", encoding="utf-8")
    assert fr.main([str(tmp_path)]) == 0
    assert "Pass rate: 100.00%" in capsys.readouterr().out
