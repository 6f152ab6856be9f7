"""End-to-end runs over spec files with a mocked HTTP server."""

import logging

import httpx
import pytest

from http_header_validator.constants import ErrorCode
from http_header_validator.coordinator import exit_status, run
from http_header_validator.settings import ValidatorConfig

FRAME_OPTIONS_SPEC = {
    "default": {"responseHeaders": {"X-Frame-Options": ["SAMEORIGIN"]}},
    "specs": [{"url": "https://example.com/"}],
}


@pytest.fixture
def client(make_client, headers_server):
    return make_client(headers_server)


def test_matching_header_exits_zero(client, headers_server, write_spec):
    headers_server.route("https://example.com/", [("X-Frame-Options", "SAMEORIGIN")])

    assert run([write_spec(FRAME_OPTIONS_SPEC)], client=client) == 0


def test_mismatching_value_exits_with_assert_code(client, headers_server, write_spec, caplog):
    headers_server.route("https://example.com/", [("X-Frame-Options", "DENY")])

    assert run([write_spec(FRAME_OPTIONS_SPEC)], client=client) == ErrorCode.FAIL_ASSERT_RESPONSE_HEADER_VALUE

    assert "FAIL X-Frame-Options[0]: expected 'SAMEORIGIN' instead of 'DENY'" in caplog.text


def test_unexpected_header_exits_with_missing_code(client, headers_server, write_spec):
    headers_server.route("https://example.com/", [("Set-Cookie", "session=abc")])
    path = write_spec({"specs": [{"url": "https://example.com/", "responseHeaders": {"Set-Cookie": [""]}}]})

    assert run([path], client=client) == ErrorCode.MISSING_RESPONSE_HEADER


def test_file_error_reported_first_but_later_files_run(client, headers_server, write_spec, tmp_path):
    headers_server.route("https://example.com/", [("X-Frame-Options", "SAMEORIGIN")])
    passing = write_spec(FRAME_OPTIONS_SPEC, name="passing.json")

    status = run([tmp_path / "missing.json", passing], client=client)

    assert status == ErrorCode.FILE_ERROR
    assert [str(r.url) for r in headers_server.requests] == ["https://example.com/"]


def test_empty_specs_exit_zero(client, headers_server, write_spec):
    assert run([write_spec({"default": {}, "specs": []})], client=client) == 0
    assert headers_server.requests == []


def test_first_error_wins_across_files(client, headers_server, write_spec):
    headers_server.route("https://example.com/", [("X-Frame-Options", "DENY")])
    mismatch = write_spec(FRAME_OPTIONS_SPEC, name="mismatch.json")
    invalid = write_spec({"specs": [{"url": "not-a-url"}]}, name="invalid.json")

    assert run([mismatch, invalid], client=client) == ErrorCode.FAIL_ASSERT_RESPONSE_HEADER_VALUE
    assert run([invalid, mismatch], client=client) == ErrorCode.INVALID_REQUEST


def test_parse_error_does_not_stop_later_files(client, headers_server, write_spec, tmp_path):
    headers_server.route("https://example.com/", [("X-Frame-Options", "SAMEORIGIN")])
    broken = tmp_path / "broken.json"
    broken.write_text("[1, 2")

    assert run([broken, write_spec(FRAME_OPTIONS_SPEC)], client=client) == ErrorCode.UNMARSHAL_ERROR
    assert len(headers_server.requests) == 1


def test_failed_request_exit_code(make_client, write_spec):
    def handler(request):
        raise httpx.ConnectError("connection refused")

    path = write_spec({"specs": [{"url": "https://unreachable.invalid/"}, {"url": "https://example.com/"}]})

    assert run([path], client=make_client(handler)) == ErrorCode.FAILED_REQUEST


def test_default_file_missing_prints_usage_without_logging_setup(tmp_path, capsys):
    assert run([], default_spec_file=tmp_path / "urls.json", usage="usage: test") == 0
    assert capsys.readouterr().out == "usage: test\n"


def test_summary_counts_files_urls_and_errors(client, headers_server, write_spec, tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="http_header_validator")
    headers_server.route("https://example.com/", [("X-Frame-Options", "DENY")])
    two_urls = write_spec(
        {
            "default": {"responseHeaders": {"X-Frame-Options": ["DENY"]}},
            "specs": [{"url": "https://example.com/"}, {"url": "https://example.com/"}],
        },
        name="two.json",
    )

    assert run([two_urls, tmp_path / "missing.json"], client=client) == ErrorCode.FILE_ERROR
    assert caplog.records[-1].getMessage() == "FAIL 2 file(s), 2 URL(s) checked, 1 error(s)"


def test_default_file_used_when_present(client, headers_server, write_spec):
    headers_server.route("https://example.com/", [("X-Frame-Options", "DENY")])
    path = write_spec(FRAME_OPTIONS_SPEC)

    assert run([], client=client, default_spec_file=path) == ErrorCode.FAIL_ASSERT_RESPONSE_HEADER_VALUE


def test_forced_headers_sent_on_every_request(make_client, headers_server, write_spec):
    headers_server.route("https://example.com/a", [])
    headers_server.route("https://example.com/b", [])
    config = ValidatorConfig(forced_request_headers={"X-Cache-Buster": ["1"]})
    path = write_spec({"specs": [{"url": "https://example.com/a"}, {"url": "https://example.com/b"}]})

    assert run([path], config=config, client=make_client(headers_server, config)) == 0
    assert [r.headers["X-Cache-Buster"] for r in headers_server.requests] == ["1", "1"]


@pytest.mark.parametrize(
    "errors,status",
    [
        ([], 0),
        ([ErrorCode.MISSING_RESPONSE_HEADER, ErrorCode.FILE_ERROR], 5),
        ([ErrorCode.FILE_ERROR], 1),
    ],
)
def test_exit_status(errors, status):
    assert exit_status(errors) == status
