"""
Unit tests for the lookup command line entry point.
"""

import json
import sys
import pytest
import httpx
from unittest.mock import AsyncMock, patch

from service_translations.app import cli


def _response(content: str) -> httpx.Response:
    return httpx.Response(
        status_code=200,
        content=content,
        request=httpx.Request("POST", "https://api.example.com/translate")
    )


class TestCli:
    """Test cases for the translations-lookup command."""

    def test_success_prints_result(self, capsys):
        with patch('httpx.AsyncClient') as mock_client:
            post = AsyncMock(return_value=_response(json.dumps({"translations": []})))
            mock_client.return_value.__aenter__.return_value.post = post

            exit_code = cli.main(["plugins", "5.0", "--slug", "akismet", "--locale", "fr_FR", "--no-cache"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == {"translations": []}
        assert post.await_args.kwargs["data"]["slug"] == "akismet"

    def test_logging_routed_to_stderr(self, capsys):
        with patch.object(cli, "configure_logging") as mock_configure, patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=_response(json.dumps([{"language": "fr_FR"}]))
            )

            exit_code = cli.main(["core", "6.4", "--no-cache"])

            mock_configure.assert_called_once()
            assert mock_configure.call_args.args[0] == "translations"
            assert mock_configure.call_args.kwargs["stream"] is sys.stderr

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == [{"language": "fr_FR"}]

    def test_missing_slug_is_invalid_request(self, capsys):
        with patch('httpx.AsyncClient') as mock_client:
            exit_code = cli.main(["themes", "1.2", "--no-cache"])

            mock_client.assert_not_called()

        assert exit_code == cli.EXIT_INVALID_REQUEST
        assert "invalid request" in capsys.readouterr().err

    def test_transport_failure(self, capsys):
        with patch('httpx.AsyncClient') as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("Connection refused")
            )

            exit_code = cli.main(["core", "6.4", "--no-cache", "--support-url", "https://support.example.com/"])

        assert exit_code == cli.EXIT_FETCH_FAILED
        err = capsys.readouterr().err
        assert "https://support.example.com/" in err
        assert "TRANSPORT_ERROR" in err

    def test_unknown_kind_rejected_by_parser(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["widgets", "1.0"])

        assert exc_info.value.code == 2
