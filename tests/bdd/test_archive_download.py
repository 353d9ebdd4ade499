"""Behaviour tests for the ``boilerplate.zip`` download using pytest-bdd.

Scenarios cover a successful archive holding every artifact and the case
where deflate compression is unavailable, which must be reported without
writing a file or disturbing the displayed artifacts.
"""

from __future__ import annotations

import typing as typ
import zipfile
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from boilerplate_forge import export
from boilerplate_forge._constants import ARTIFACT_NAMES
from boilerplate_forge.config import FormDefaults
from boilerplate_forge.controller import BoilerplateController
from boilerplate_forge.export import ArchiveUnavailableError
from boilerplate_forge.form import FormState

from ..stubs import RecordingClipboard

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "archive_download.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a generated boilerplate in an output folder")
def given_generated(scenario_state: ScenarioState, tmp_path: Path) -> None:
    messages: list[str] = []
    controller = BoilerplateController(
        tmp_path / "out", clipboard=RecordingClipboard(), notify=messages.append
    )
    artifacts = controller.submit(FormState.from_defaults(FormDefaults()))
    assert artifacts is not None
    scenario_state.update(
        controller=controller,
        messages=messages,
        displayed={name: controller.text_of(name) for name in artifacts.names},
        output_dir=tmp_path / "out",
    )


@given("archive compression is unavailable")
def given_no_compression(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(export, "zlib", None)


@when("I download the archive")
def when_download(scenario_state: ScenarioState) -> None:
    controller = typ.cast("BoilerplateController", scenario_state["controller"])
    scenario_state["archive_path"] = controller.download_archive()


@then("boilerplate.zip holds index.html, styles.css, script.js and reset.css")
def then_archive_names(scenario_state: ScenarioState) -> None:
    path = typ.cast("Path", scenario_state["archive_path"])
    assert path.name == "boilerplate.zip"
    with zipfile.ZipFile(path) as archive:
        assert tuple(archive.namelist()) == ARTIFACT_NAMES


@then("every archive entry matches the displayed text")
def then_archive_contents(scenario_state: ScenarioState) -> None:
    path = typ.cast("Path", scenario_state["archive_path"])
    displayed = typ.cast("dict[str, str]", scenario_state["displayed"])
    with zipfile.ZipFile(path) as archive:
        for name, text in displayed.items():
            assert archive.read(name).decode("utf-8") == text


@then("the user is told compression is unavailable")
def then_told_unavailable(scenario_state: ScenarioState) -> None:
    controller = typ.cast("BoilerplateController", scenario_state["controller"])
    assert scenario_state["archive_path"] is None
    assert isinstance(controller.last_error, ArchiveUnavailableError)
    assert scenario_state["messages"] == [str(controller.last_error)]


@then("no archive file is written")
def then_no_file(scenario_state: ScenarioState) -> None:
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not (output_dir / "boilerplate.zip").exists()


@then("the displayed artifacts are unchanged")
def then_unchanged(scenario_state: ScenarioState) -> None:
    controller = typ.cast("BoilerplateController", scenario_state["controller"])
    displayed = typ.cast("dict[str, str]", scenario_state["displayed"])
    assert {name: controller.text_of(name) for name in displayed} == displayed
