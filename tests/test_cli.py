import pytest
from typer.testing import CliRunner

from cli.main import app

PASTE_URL = "https://www.pastery.net/abcdef/"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(clean_env, fake_pastery):
    return fake_pastery


def test_uploads_file(fake_pastery, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("some notes\n", encoding="utf-8")

    result = runner.invoke(app, ["--api-key", "secret", str(path)])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == PASTE_URL
    assert fake_pastery.last_params == {
        "api_key": "secret",
        "duration": "1440",
        "language": "text",
        "title": "notes.txt",
    }
    assert fake_pastery.requests[0].content == b"some notes\n"


def test_uploads_stdin_with_options(fake_pastery):
    result = runner.invoke(
        app,
        ["--api-key", "secret", "-l", "python", "-d", "2h", "--max-views", "3", "-t", "snippet"],
        input="print('hi')\n",
    )

    assert result.exit_code == 0, result.output
    assert fake_pastery.last_params == {
        "api_key": "secret",
        "duration": "120",
        "language": "python",
        "title": "snippet",
        "max_views": "3",
    }
    assert fake_pastery.requests[0].content == b"print('hi')\n"


def test_stdin_without_title_or_language(fake_pastery):
    result = runner.invoke(app, ["--api-key", "secret"], input="text")

    assert result.exit_code == 0, result.output
    assert fake_pastery.last_params == {"api_key": "secret", "duration": "1440", "language": "autodetect"}


def test_api_key_from_environment(fake_pastery, monkeypatch):
    monkeypatch.setenv("PASTERY_API_KEY", "from-env")

    result = runner.invoke(app, [], input="text")

    assert result.exit_code == 0, result.output
    assert fake_pastery.last_params["api_key"] == "from-env"


def test_command_line_key_beats_environment(fake_pastery, monkeypatch):
    monkeypatch.setenv("PASTERY_API_KEY", "from-env")

    result = runner.invoke(app, ["--api-key", "from-cli"], input="text")

    assert result.exit_code == 0, result.output
    assert fake_pastery.last_params["api_key"] == "from-cli"


def test_missing_api_key(fake_pastery):
    result = runner.invoke(app, [], input="text")

    assert result.exit_code == 1
    assert "PASTERY_API_KEY" in result.output
    assert fake_pastery.requests == []


def test_remote_error_is_reported(fake_pastery):
    fake_pastery.reply = {"error_msg": "Invalid API key."}

    result = runner.invoke(app, ["--api-key", "wrong"], input="text")

    assert result.exit_code == 1
    assert "Invalid API key." in result.output
    assert PASTE_URL not in result.output


def test_malformed_reply_is_reported(fake_pastery):
    fake_pastery.reply = {"foo": 1}

    result = runner.invoke(app, ["--api-key", "secret"], input="text")

    assert result.exit_code == 1
    assert "Could not parse JSON response" in result.output


def test_missing_file(fake_pastery, tmp_path):
    result = runner.invoke(app, ["--api-key", "secret", str(tmp_path / "nope.txt")])

    assert result.exit_code == 1
    assert "Could not open file" in result.output
    assert fake_pastery.requests == []


@pytest.mark.parametrize(
    "args",
    [
        ["-d", "5x"],
        ["-d", "101y"],
        ["-l", "bogus"],
        ["--max-views", "0"],
    ],
)
def test_invalid_options_are_usage_errors(fake_pastery, args):
    result = runner.invoke(app, ["--api-key", "secret", *args], input="text")

    assert result.exit_code == 2
    assert fake_pastery.requests == []


def test_list_languages(fake_pastery):
    result = runner.invoke(app, ["--list-languages"])

    assert result.exit_code == 0, result.output
    assert "autodetect" in result.stdout
    assert "rust" in result.stdout
    assert fake_pastery.requests == []


def test_help_does_not_leak_api_key(monkeypatch):
    monkeypatch.setenv("PASTERY_API_KEY", "super-secret-value")

    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "super-secret-value" not in result.output


def test_verbose_logs_without_api_key(fake_pastery):
    result = runner.invoke(app, ["-v", "--api-key", "super-secret-value"], input="text")

    assert result.exit_code == 0, result.output
    assert "Uploading 4 bytes" in result.output
    assert "super-secret-value" not in result.output


def test_file_body_is_sent_byte_for_byte(fake_pastery, tmp_path):
    raw = b"\xef\xbb\xbfa\r\nb\r\n"
    path = tmp_path / "win.txt"
    path.write_bytes(raw)

    result = runner.invoke(app, ["--api-key", "secret", str(path)])

    assert result.exit_code == 0, result.output
    assert fake_pastery.requests[0].content == raw


def test_stdin_body_is_sent_byte_for_byte(fake_pastery):
    raw = "naïve\r\nline\r\n".encode("utf-8")

    result = runner.invoke(app, ["--api-key", "secret"], input=raw)

    assert result.exit_code == 0, result.output
    assert fake_pastery.requests[0].content == raw
