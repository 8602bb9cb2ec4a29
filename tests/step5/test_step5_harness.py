import os
import sys
import subprocess
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
TEST_DIR = os.path.dirname(__file__)

from json_validator import JSON_CHECKER_DEPTH, validate

# JSON_checker suite: pass*.json must be accepted, fail*.json rejected
json_files = sorted(f for f in os.listdir(TEST_DIR) if f.endswith(".json"))

VALID_FILES = [f for f in json_files if f.startswith("pass")]
INVALID_FILES = [f for f in json_files if f.startswith("fail")]

# Hard fail if test files are missing
if not VALID_FILES:
    raise RuntimeError("No pass*.json files found in step5 directory")
if not INVALID_FILES:
    raise RuntimeError("No fail*.json files found in step5 directory")

def read(filename):
    with open(os.path.join(TEST_DIR, filename), "r", encoding="utf-8") as fh:
        return fh.read()

@pytest.mark.parametrize("filename", VALID_FILES)
def test_pass_fixture_is_valid(filename):
    assert validate(read(filename), max_depth=JSON_CHECKER_DEPTH) is True, f"Expected {filename} to be valid"

@pytest.mark.parametrize("filename", INVALID_FILES)
def test_fail_fixture_is_invalid(filename):
    assert validate(read(filename), max_depth=JSON_CHECKER_DEPTH) is False, f"Expected {filename} to be invalid"

def test_fixture_runner_cli_reports_full_pass_rate():
    result = subprocess.run(
        [sys.executable, "-m", "fixture_runner", TEST_DIR, "--max-depth", str(JSON_CHECKER_DEPTH)],
        cwd=REPO_ROOT, capture_output=True, text=True,
    )
    assert result.returncode == 0, result.stdout
    assert f"Total tests: {len(json_files)}" in result.stdout
    assert "Pass rate: 100.00%" in result.stdout
