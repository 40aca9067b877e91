"""Behaviour tests for rendering literate pages from several sources.

These pytest-bdd scenarios drive :func:`lit_pages.build_documentation` end to
end. The feature file ``literate_pages.feature`` covers navigation between
pages of a multi-file run and the per-file isolation of an unsupported source.

Usage
-----
Run ``pytest tests/bdd/test_literate_pages.py -v`` after installing the test
extra (``pip install -e '.[test]'``). Sources are written to ``tmp_path`` so no
external files are required.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from lit_pages import build_documentation
from lit_pages.errors import UnknownLanguageError

if typ.TYPE_CHECKING:
    from lit_pages.generator import FileResult

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "literate_pages.feature"
)
scenarios(FEATURE_FILE)

GO_SOURCE = """// # {name}
// Entry point for {name}.
package {name}

// Adds two numbers.
func add(a, b int) int {{
\treturn a + b
}}
"""


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write_go(directory: Path, name: str) -> str:
    path = directory / "src" / f"{name}.go"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(GO_SOURCE.format(name=name), encoding="utf-8")
    return str(path)


@given("two annotated Go sources")
def given_two_sources(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write two Go sources into nested directories."""
    scenario_state["sources"] = [
        _write_go(tmp_path, "server"),
        _write_go(tmp_path, "client"),
    ]
    scenario_state["output_dir"] = tmp_path / "docs"


@given("an annotated Go source and an unsupported source")
def given_mixed_sources(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write one Go source and one source without a registered language."""
    unsupported = tmp_path / "src" / "notes.adoc"
    go_source = _write_go(tmp_path, "server")
    unsupported.write_text("= Notes\n", encoding="utf-8")
    scenario_state["sources"] = [go_source, str(unsupported)]
    scenario_state["output_dir"] = tmp_path / "docs"


@when("I render the sources")
def when_render(scenario_state: dict[str, object]) -> None:
    """Render every source in the scenario."""
    sources = typ.cast("list[str]", scenario_state["sources"])
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    scenario_state["results"] = build_documentation(sources, output_dir=output_dir)


def _soup(scenario_state: dict[str, object], name: str) -> BeautifulSoup:
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (output_dir / name).read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@then("every source has a page")
def then_every_page(scenario_state: dict[str, object]) -> None:
    """Verify both pages and the shared stylesheet were written."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    results = typ.cast("list[FileResult]", scenario_state["results"])
    assert all(result.ok for result in results)
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "client.html",
        "lit_pages.css",
        "server.html",
    ]


@then("each page links to both sources")
def then_pages_link(scenario_state: dict[str, object]) -> None:
    """Verify the Jump To menu lists both pages in sorted order."""
    for name in ("client.html", "server.html"):
        links = _soup(scenario_state, name).select("#jump_page a.source")
        assert [(a["href"], a.get_text(strip=True)) for a in links] == [
            ("client.html", "client.go"),
            ("server.html", "server.go"),
        ]


@then("each page anchors its first section as section-1")
def then_first_anchor(scenario_state: dict[str, object]) -> None:
    """Verify section rows are anchored from one in source order."""
    for name in ("client.html", "server.html"):
        rows = _soup(scenario_state, name).select("tbody tr")
        assert [row["id"] for row in rows] == ["section-1", "section-2"]
        assert "Adds two numbers." in rows[1].select_one("td.docs").get_text()


@then("the Go page is written")
def then_go_page(scenario_state: dict[str, object]) -> None:
    """Verify the Go page exists even though its sibling failed."""
    soup = _soup(scenario_state, "server.html")
    assert soup.select_one("h1").get_text(strip=True) == "server.go"
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not (output_dir / "notes.html").exists()


@then("the unsupported source is reported with its extension")
def then_unsupported_reported(scenario_state: dict[str, object]) -> None:
    """Verify the failed result names the unsupported extension."""
    results = typ.cast("list[FileResult]", scenario_state["results"])
    failures = [result for result in results if not result.ok]
    assert len(failures) == 1
    error = failures[0].error
    assert isinstance(error, UnknownLanguageError)
    assert error.extension == ".adoc"
    assert failures[0].source.endswith("notes.adoc")
