"""CLI tests using typer's CliRunner with a scripted provider."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from fakes import FakeSearchProvider, FakeSession
from taiga_selector import __version__
from taiga_selector.main import app
from taiga_selector.services.session import Session
from taiga_selector.ui.presenters import ProjectSelectorPresenter

runner = CliRunner()

PRESENTER_FACTORY = "taiga_selector.commands.projects.create_presenter"


@pytest.fixture
def provider(projects):
    return FakeSearchProvider(
        pages={
            "": [projects[:2], projects[2:4], projects[4:]],
            "gamma": [[projects[2]]],
        },
    )


@pytest.fixture
def presenter_factory(provider):
    """Patch the commands to use the scripted provider and a real session."""
    with patch(
        PRESENTER_FACTORY,
        side_effect=lambda: ProjectSelectorPresenter(provider=provider, session=Session()),
    ) as factory:
        yield factory


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "projects" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_projects_help(self):
        result = runner.invoke(app, ["projects", "--help"])

        assert result.exit_code == 0
        for command in ("search", "select", "current", "clear"):
            assert command in result.stdout

    def test_verbose_and_quiet_conflict(self):
        result = runner.invoke(app, ["-v", "-q", "version"])

        assert result.exit_code == 1


class TestSearchCommand:
    """Tests for `projects search`."""

    def test_lists_first_page(self, presenter_factory, provider):
        result = runner.invoke(app, ["projects", "search"])

        assert result.exit_code == 0
        assert "Alpha" in result.stdout
        assert "Beta" in result.stdout
        assert "Gamma" not in result.stdout
        assert provider.calls == [("", 1)]

    def test_loads_several_pages(self, presenter_factory, provider):
        result = runner.invoke(app, ["projects", "search", "--pages", "2"])

        assert result.exit_code == 0
        assert "Delta" in result.stdout
        assert provider.calls == [("", 1), ("", 2)]

    def test_query_is_case_folded(self, presenter_factory, provider):
        result = runner.invoke(app, ["projects", "search", "GAMMA"])

        assert result.exit_code == 0
        assert "Gamma" in result.stdout
        assert provider.calls[-1] == ("gamma", 1)

    def test_stops_at_last_page(self, presenter_factory, provider):
        result = runner.invoke(app, ["projects", "search", "gamma", "--pages", "5"])

        assert result.exit_code == 0
        assert provider.calls[-2:] == [("gamma", 1), ("gamma", 2)]

    def test_json_output(self, presenter_factory):
        result = runner.invoke(app, ["projects", "search", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [p["name"] for p in data] == ["Alpha", "Beta"]
        assert data[0]["is_owner"] is True

    def test_no_results(self, presenter_factory):
        result = runner.invoke(app, ["projects", "search", "nothing"])

        assert result.exit_code == 0
        assert "No projects found" in result.stdout

    def test_provider_failure_exits_with_error(self, projects):
        failing = FakeSearchProvider(pages={"": [projects[:2]]}, fail_on=[("", 2)])
        with patch(
            PRESENTER_FACTORY,
            return_value=ProjectSelectorPresenter(provider=failing, session=FakeSession()),
        ):
            result = runner.invoke(app, ["projects", "search", "--pages", "3"])

        assert result.exit_code == 1
        assert failing.calls == [("", 1), ("", 2)]


class TestSelectCommand:
    """Tests for `projects select`."""

    def test_select_by_index(self, presenter_factory):
        result = runner.invoke(app, ["projects", "select", "--index", "2"])

        assert result.exit_code == 0
        assert "Beta" in result.stdout
        session = Session()
        assert session.current_project_id == 2
        assert session.current_project_name == "Beta"

    def test_index_beyond_first_page_loads_more(self, presenter_factory, provider):
        result = runner.invoke(app, ["projects", "select", "-i", "5"])

        assert result.exit_code == 0
        assert Session().current_project_name == "Epsilon"
        assert provider.calls == [("", 1), ("", 2), ("", 3)]

    def test_index_out_of_range(self, presenter_factory):
        result = runner.invoke(app, ["projects", "select", "gamma", "--index", "3"])

        assert result.exit_code == 2
        assert Session().has_project is False

    def test_interactive_choice(self, presenter_factory):
        result = runner.invoke(app, ["projects", "select"], input="1\n")

        assert result.exit_code == 0
        assert Session().current_project_name == "Alpha"

    def test_interactive_load_more(self, presenter_factory, provider):
        result = runner.invoke(app, ["projects", "select"], input="m\n4\n")

        assert result.exit_code == 0
        assert Session().current_project_name == "Delta"
        assert provider.calls == [("", 1), ("", 2)]

    def test_interactive_invalid_then_valid(self, presenter_factory):
        result = runner.invoke(app, ["projects", "select"], input="9\n2\n")

        assert result.exit_code == 0
        assert "Invalid choice" in result.stdout
        assert Session().current_project_name == "Beta"

    def test_interactive_quit(self, presenter_factory):
        result = runner.invoke(app, ["projects", "select"], input="q\n")

        assert result.exit_code == 0
        assert "No project selected" in result.stdout
        assert Session().has_project is False

    def test_selection_goes_through_session_sink(self, provider):
        sink = FakeSession()
        with patch(
            PRESENTER_FACTORY,
            return_value=ProjectSelectorPresenter(provider=provider, session=sink),
        ):
            result = runner.invoke(app, ["projects", "select", "gamma", "-i", "1"])

        assert result.exit_code == 0
        assert sink.calls == [(3, "Gamma")]


class TestSessionCommands:
    """Tests for `projects current` and `projects clear`."""

    def test_current_without_selection(self):
        result = runner.invoke(app, ["projects", "current"])

        assert result.exit_code == 0
        assert "No project selected" in result.stdout

    def test_current_shows_selection(self):
        Session().record_selection(12, "Website")

        result = runner.invoke(app, ["projects", "current"])

        assert result.exit_code == 0
        assert "Website" in result.stdout
        assert "#12" in result.stdout

    def test_current_json(self):
        Session().record_selection(12, "Website")

        result = runner.invoke(app, ["projects", "current", "--json"])

        assert json.loads(result.stdout) == {
            "current_project_id": 12,
            "current_project_name": "Website",
        }

    def test_clear(self):
        Session().record_selection(12, "Website")

        result = runner.invoke(app, ["projects", "clear"])

        assert result.exit_code == 0
        assert Session().has_project is False


class TestConfigCommand:
    """Tests for `config`."""

    def test_shows_settings(self):
        result = runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert "TAIGA_API_URL" in data["env"]

    def test_invalid_setting_fails(self, monkeypatch):
        monkeypatch.setenv("TAIGA_PAGE_SIZE", "lots")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "TAIGA_PAGE_SIZE" in result.stdout
