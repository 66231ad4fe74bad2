"""Tests for result rendering."""

import click

from yamlci.config import OutputOptions
from yamlci.model import StepResult
from yamlci.ui.formatter import format_results

RESULTS = [
    StepResult(title=" build ", output="ok\n"),
    StepResult(title="test", output="  3 passed \n"),
]


def test_plain():
    assert format_results(RESULTS, OutputOptions()) == "ok\n3 passed"


def test_prefixed():
    assert format_results(RESULTS, OutputOptions(prefix="name")) == "build: ok\ntest: 3 passed"


def test_prefixed_colored():
    out = format_results(RESULTS, OutputOptions(prefix="name", colored=True))
    assert out.splitlines()[0] == click.style("build: ", fg="red") + "ok"


def test_pretty_header():
    out = format_results(RESULTS, OutputOptions(pretty=True, title="demo"))
    assert out == "demo\n----\nok\n3 passed"


def test_pretty_without_title():
    assert format_results(RESULTS, OutputOptions(pretty=True)) == "ok\n3 passed"


def test_table():
    out = format_results(RESULTS, OutputOptions(table=True, prefix="name", title="demo"))
    assert "demo" in out
    assert "Step" in out and "Output" in out
    assert "build" in out and "3 passed" in out
    assert "\x1b[" not in out


def test_empty():
    assert format_results([], OutputOptions()) == ""
