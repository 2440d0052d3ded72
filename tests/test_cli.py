from click.testing import CliRunner
import pytest

import main


class FakeServer:
    def __init__(self):
        self.ran = False

    def run(self):
        self.ran = True


@pytest.fixture
def captured(monkeypatch):
    """Replace the server factory so the command returns instead of serving."""
    calls = {}

    def fake_build_server(settings):
        calls["settings"] = settings
        calls["server"] = FakeServer()
        return calls["server"]

    monkeypatch.setattr(main, "build_server", fake_build_server)
    monkeypatch.setattr(main, "load_dotenv", lambda: None)
    for name in ("REGISTRY_BASE_URL", "BRUTALIST_UI_ENV", "BRUTALIST_DOCS_DIR"):
        monkeypatch.delenv(name, raising=False)
    return calls


def test_version():
    result = CliRunner().invoke(main.main, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == "brutalist-ui-mcp-server v1.0.0"


def test_help_lists_options_and_tools():
    result = CliRunner().invoke(main.main, ["-h"])

    assert result.exit_code == 0
    assert "--registry-url" in result.output
    assert "--dev" in result.output
    assert "list_components" in result.output
    assert "get_accessibility_info" in result.output


def test_default_run_uses_production_registry(captured):
    result = CliRunner().invoke(main.main, [])

    assert result.exit_code == 0
    assert captured["settings"].registry_base_url == "https://brutalist.precast.dev/registry/react"
    assert captured["server"].ran


def test_registry_url_override(captured):
    result = CliRunner().invoke(main.main, ["--registry-url", "https://mirror.test/registry/react/"])

    assert result.exit_code == 0
    assert captured["settings"].registry_base_url == "https://mirror.test/registry/react"


def test_dev_flag(captured):
    result = CliRunner().invoke(main.main, ["--dev"])

    assert result.exit_code == 0
    assert captured["settings"].registry_base_url == "http://localhost:3000/registry/react"
    assert captured["settings"].site_url == "http://localhost:3000"


def test_unknown_option_is_usage_error(captured):
    result = CliRunner().invoke(main.main, ["--bogus"])

    assert result.exit_code == 2
    assert "settings" not in captured
