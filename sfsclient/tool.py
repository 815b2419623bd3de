"""Argument parsing and output formatting for the command-line client tool."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any, Iterable, Optional

from .log import LogData, severity_to_string
from .models import AppContent, AppFile, Content, ContentId, File
from .result import Result, code_to_string

BOLD_RED_START = "\033[1;31m"
CYAN_START = "\033[0;36m"
DARK_GREY_START = "\033[0;90m"
COLOR_END = "\033[0m"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

# Switches that take a value: (switch, name used in messages, Settings attribute)
_VALUE_OPTIONS = (
    ("--product", "product", "product"),
    ("--accountId", "accountId", "account_id"),
    ("--instanceId", "instanceId", "instance_id"),
    ("--namespace", "namespace", "namespace"),
    ("--customUrl", "customUrl", "custom_url"),
)


class ArgumentError(ValueError):
    """Raised when the command line cannot be parsed."""


@dataclass
class Settings:
    """Options collected from the command line."""

    display_help: bool = True
    display_version: bool = False
    is_app: bool = False
    product: str = ""
    account_id: str = ""
    instance_id: str = ""
    namespace: str = ""
    custom_url: str = ""


def are_equal_i(a: str, b: str) -> bool:
    """Compare two strings, ignoring the case of ASCII letters."""
    return len(a) == len(b) and a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def _matches(arg: str, short: Optional[str], long: str) -> bool:
    return (short is not None and are_equal_i(arg, short)) or are_equal_i(arg, long)


def parse_arguments(args: Iterable[str]) -> Settings:
    """Parse command-line arguments, not including the program name.

    Switch names are matched case-insensitively. Raises ArgumentError on an
    unknown option, a missing or repeated value, or missing required options.
    """
    arguments = list(args)
    settings = Settings(display_help=not arguments)
    it = iter(arguments)

    for arg in it:
        if _matches(arg, "-h", "--help"):
            settings.display_help = True
        elif _matches(arg, "-v", "--version"):
            settings.display_version = True
        elif _matches(arg, None, "--isApp"):
            settings.is_app = True
        else:
            option = next(
                (opt for opt in _VALUE_OPTIONS if are_equal_i(arg, opt[0])), None
            )
            if option is None:
                raise ArgumentError(f"Unknown option {arg}")
            _, label, attribute = option
            value = next(it, None)
            if value is None:
                raise ArgumentError(f"Missing argument of --{label}")
            if getattr(settings, attribute):
                raise ArgumentError(f"--{label} can only be specified once")
            setattr(settings, attribute, value)

    if not settings.display_help and (not settings.product or not settings.account_id):
        raise ArgumentError("--product and --accountId are required and cannot be empty")

    return settings


def _hashes_to_json(file: File) -> dict[str, str]:
    return {kind.value: digest for kind, digest in file.hashes.items()}


def _content_id_to_json(content_id: ContentId) -> dict[str, str]:
    return {
        "Namespace": content_id.namespace,
        "Name": content_id.name,
        "Version": content_id.version,
    }


def app_file_to_json(file: AppFile) -> dict[str, Any]:
    """Return the JSON-ready description of an app file."""
    details = file.applicability_details
    return {
        "FileId": file.file_id,
        "Url": file.url,
        "SizeInBytes": file.size_in_bytes,
        "FileMoniker": file.file_moniker,
        "Hashes": _hashes_to_json(file),
        "ApplicabilityDetails": {
            "Architectures": [arch.value for arch in details.architectures],
            "PlatformApplicabilityForPackage": list(
                details.platform_applicability_for_package
            ),
        },
    }


def contents_to_json(contents: Iterable[Content]) -> list[dict[str, Any]]:
    """Return the JSON-ready description of generic contents."""
    return [
        {
            "ContentId": _content_id_to_json(content.content_id),
            "Files": [
                {
                    "FileId": file.file_id,
                    "Url": file.url,
                    "SizeInBytes": file.size_in_bytes,
                    "Hashes": _hashes_to_json(file),
                }
                for file in content.files
            ],
        }
        for content in contents
    ]


def app_contents_to_json(contents: Iterable[AppContent]) -> list[dict[str, Any]]:
    """Return the JSON-ready description of app contents and their prerequisites."""
    return [
        {
            "ContentId": _content_id_to_json(content.content_id),
            "UpdateId": content.update_id,
            "Files": [app_file_to_json(file) for file in content.files],
            "Prerequisites": [
                {
                    "ContentId": _content_id_to_json(prereq.content_id),
                    "Files": [app_file_to_json(file) for file in prereq.files],
                }
                for prereq in content.prerequisites
            ],
        }
        for content in contents
    ]


def timestamp_to_string(time: datetime) -> str:
    """Format a time in UTC as "YYYY-MM-DD HH:MM:SS.mmm"; naive times are taken as UTC."""
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)
    utc = time.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%d %H:%M:%S}.{utc.microsecond // 1000:03d}"


def format_log_line(log_data: LogData) -> str:
    """Return the coloured console line for a log record."""
    return (
        f"{DARK_GREY_START}Log: {timestamp_to_string(log_data.time)} "
        f"[{severity_to_string(log_data.severity)}] "
        f"{PurePath(log_data.file).name}:{log_data.line} {log_data.message}{COLOR_END}"
    )


def format_result(result: Result) -> str:
    """Return the line describing a result code and its message."""
    text = f"  Result code: {code_to_string(result.code)}"
    if result.message:
        text += f". Message: {result.message}"
    return text


def usage_text() -> str:
    """Return the usage description of the tool."""
    return (
        "Usage: SFSClientTool --product <identifier> --accountId <id> [options]\n"
        "\n"
        "Required:\n"
        "  --product <identifier>\tName or GUID of the product to be retrieved\n"
        "  --accountId <id>\t\tAccount ID of the SFS service, used to identify the caller\n"
        "\n"
        "Options:\n"
        "  -h, --help\t\t\tDisplay this help message\n"
        "  -v, --version\t\t\tDisplay the library version\n"
        "  --isApp\t\tIndicates the specific product is an App\n"
        "  --instanceId <id>\t\tA custom SFS instance ID\n"
        "  --namespace <ns>\t\tA custom SFS namespace\n"
        "  --customUrl <url>\t\tA custom URL for the SFS service. "
        "Library must have been built with SFS_ENABLE_OVERRIDES\n"
        "\n"
        "Example:\n"
        "  SFSClientTool --product msedge-stable-win-x64 --accountId msedge\n"
    )


def help_text() -> str:
    """Return the full help text: a short description followed by the usage."""
    return (
        "SFSClient Tool\n"
        "\n"
        "Use to interact with the SFS service through the SFS Client library.\n"
        "\n"
        + usage_text()
    )