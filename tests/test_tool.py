from datetime import datetime, timedelta, timezone

import pytest

from sfsclient.log import LogData, LogSeverity
from sfsclient.models import (
    AppContent,
    AppFile,
    AppPrerequisiteContent,
    ApplicabilityDetails,
    Architecture,
    Content,
    ContentId,
    File,
    HashType,
)
from sfsclient.result import Result, ResultCode
from sfsclient.tool import (
    ArgumentError,
    Settings,
    app_contents_to_json,
    app_file_to_json,
    are_equal_i,
    contents_to_json,
    format_log_line,
    format_result,
    help_text,
    parse_arguments,
    timestamp_to_string,
    usage_text,
)


@pytest.mark.parametrize("other", ["abc", "ABC", "Abc", "aBc", "abC", "AbC", "aBC"])
def test_are_equal_i_ascii(other):
    assert are_equal_i("abc", other)


@pytest.mark.parametrize("a,b", [("abc", "ab"), ("ab", "abc"), ("abc", "abd")])
def test_are_not_equal_i(a, b):
    assert not are_equal_i(a, b)


def test_no_arguments_displays_help():
    assert parse_arguments([]) == Settings(display_help=True)


def test_parse_full_arguments():
    settings = parse_arguments(
        [
            "--product", "prod",
            "--ACCOUNTID", "acct",
            "--instanceId", "inst",
            "--namespace", "ns",
            "--customUrl", "http://localhost",
            "--isapp",
        ]
    )
    assert settings == Settings(
        display_help=False,
        is_app=True,
        product="prod",
        account_id="acct",
        instance_id="inst",
        namespace="ns",
        custom_url="http://localhost",
    )


def test_help_switch_skips_required_check():
    settings = parse_arguments(["-H"])
    assert settings.display_help is True
    assert settings.product == ""


def test_version_alone_still_requires_product():
    with pytest.raises(ArgumentError, match="--product and --accountId are required"):
        parse_arguments(["-v"])


def test_version_with_required_options():
    settings = parse_arguments(["--version", "--product", "p", "--accountId", "a"])
    assert settings.display_version is True
    assert settings.display_help is False


def test_missing_argument_value():
    with pytest.raises(ArgumentError, match="^Missing argument of --product$"):
        parse_arguments(["--product"])


def test_repeated_option():
    with pytest.raises(ArgumentError, match="^--accountId can only be specified once$"):
        parse_arguments(["--accountId", "a", "--accountId", "b"])


def test_unknown_option():
    with pytest.raises(ArgumentError, match="^Unknown option --bogus$"):
        parse_arguments(["--bogus"])


def test_missing_account_id():
    with pytest.raises(ArgumentError):
        parse_arguments(["--product", "p"])


def _app_file(file_id="fileId"):
    return AppFile(
        file_id=file_id,
        url="url",
        size_in_bytes=123,
        hashes={HashType.SHA1: "sha1"},
        applicability_details=ApplicabilityDetails(
            (Architecture.AMD64, Architecture.X86), ("app",)
        ),
        file_moniker="moniker",
    )


def test_app_file_to_json():
    assert app_file_to_json(_app_file()) == {
        "FileId": "fileId",
        "Url": "url",
        "SizeInBytes": 123,
        "FileMoniker": "moniker",
        "Hashes": {"Sha1": "sha1"},
        "ApplicabilityDetails": {
            "Architectures": ["amd64", "x86"],
            "PlatformApplicabilityForPackage": ["app"],
        },
    }


def test_contents_to_json():
    content = Content(
        ContentId("ns", "name", "1.0.0.0"),
        (File("f", "u", 5, {HashType.SHA1: "a", HashType.SHA256: "b"}),),
    )
    assert contents_to_json([content]) == [
        {
            "ContentId": {"Namespace": "ns", "Name": "name", "Version": "1.0.0.0"},
            "Files": [
                {
                    "FileId": "f",
                    "Url": "u",
                    "SizeInBytes": 5,
                    "Hashes": {"Sha1": "a", "Sha256": "b"},
                }
            ],
        }
    ]
    assert contents_to_json([]) == []


def test_app_contents_to_json():
    prereq = AppPrerequisiteContent(ContentId("ns", "pre", "2"), (_app_file("p"),))
    content = AppContent(ContentId("ns", "app", "1"), "upd", (prereq,), (_app_file("a"),))
    (out,) = app_contents_to_json([content])
    assert out["UpdateId"] == "upd"
    assert out["ContentId"] == {"Namespace": "ns", "Name": "app", "Version": "1"}
    assert [f["FileId"] for f in out["Files"]] == ["a"]
    assert out["Prerequisites"][0]["ContentId"]["Name"] == "pre"
    assert out["Prerequisites"][0]["Files"][0]["FileId"] == "p"


def test_timestamp_to_string():
    time = datetime(2024, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)
    assert timestamp_to_string(time) == "2024-01-02 03:04:05.006"


def test_timestamp_converts_to_utc():
    tz = timezone(timedelta(hours=2))
    time = datetime(2024, 1, 2, 3, 4, 5, 123999, tzinfo=tz)
    assert timestamp_to_string(time) == "2024-01-02 01:04:05.123"


def test_format_log_line():
    data = LogData(
        severity=LogSeverity.WARNING,
        message="hello",
        file="/src/dir/Client.cpp",
        line=42,
        function="fn",
        time=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )
    assert format_log_line(data) == (
        "\033[0;90mLog: 2024-01-02 03:04:05.000 [Warning] Client.cpp:42 hello\033[0m"
    )


def test_format_result():
    assert format_result(Result(ResultCode.SUCCESS)) == "  Result code: Success"
    assert (
        format_result(Result(ResultCode.HTTP_NOT_FOUND, "gone"))
        == "  Result code: HttpNotFound. Message: gone"
    )


def test_help_text_contains_usage():
    assert help_text().startswith("SFSClient Tool\n")
    assert help_text().endswith(usage_text())
    assert usage_text().startswith("Usage: SFSClientTool --product <identifier>")