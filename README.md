# sfsclient

Building blocks for a client of a content delivery service that answers the
question "what is the latest version of this product, and where do I download
its files?".

## What is in the package

- **`sfsclient.result`**: `ResultCode`, an `IntEnum` of success and failure
  codes (generic, connection, HTTP and service errors); `Result`, which pairs
  a code with an optional message, is truthy only on success and offers
  `is_success()` and `is_failure()`; `SFSError`, an exception carrying a code
  and message, with a `result` property; and `code_to_string`, which gives
  names such as `"Success"` or `"NotSet"` and `"Unknown"` for unlisted values.
  A `Result` compares equal to a code (or plain integer); comparing two
  `Result` objects with `==` raises `TypeError`.
- **`sfsclient.log`**: `LogSeverity` (Info, Warning, Error, Verbose), the
  frozen `LogData` record (severity, message, file, line, function, time)
  and `severity_to_string`.
- **`sfsclient.models`**: frozen dataclasses `ContentId` (namespace, name,
  version), `File` (file id, URL, size in bytes, hashes keyed by `HashType`),
  `ApplicabilityDetails` (a tuple of `Architecture` values and platform
  applicability strings), `AppFile` (a `File` with applicability details and
  a file moniker), `Content`, `AppPrerequisiteContent` and `AppContent`
  (content id, update id, prerequisites and files). Objects compare equal
  when all their fields are equal. A `File` size outside the unsigned 64-bit
  range raises `ValueError`.
- **`sfsclient.config`**: `ClientConfig` (account id, optional instance id,
  namespace and logging callback), `ProductRequest` (product name or GUID
  and targeting attributes), `RequestParams` (product requests, optional base
  correlation vector, `retry_on_error`) and `MAX_RETRIES`.
- **`sfsclient.tool`**: helpers for a command-line front end —
  `parse_arguments` into `Settings` (raising `ArgumentError`),
  `are_equal_i`, `usage_text`, `help_text`, `contents_to_json`,
  `app_contents_to_json`, `app_file_to_json`, `timestamp_to_string`,
  `format_log_line` and `format_result`.

## Example

```python
import json

from sfsclient.models import Content, ContentId, File, HashType
from sfsclient.tool import are_equal_i, contents_to_json, parse_arguments

settings = parse_arguments(["--product", "msedge-stable-win-x64", "--accountId", "msedge"])
assert settings.product == "msedge-stable-win-x64"
assert are_equal_i("--ACCOUNTID", "--accountId")

content = Content(
    ContentId("myNameSpace", "myName", "1.0.0.0"),
    (File("fileId", "https://example.com/file", 123, {HashType.SHA256: "sha256"}),),
)
print(json.dumps(contents_to_json([content]), indent=2))
```

`parse_arguments` takes the arguments without the program name. Switch names
are matched ignoring ASCII case. `--product` and `--accountId` are required
unless help is requested (or no arguments are given); repeating a value
switch, leaving off its value or passing an unknown option raises
`ArgumentError`.

`contents_to_json` and `app_contents_to_json` return lists of plain
dictionaries ready for `json.dumps`. `format_log_line` renders a `LogData`
record as a coloured line with a UTC timestamp to the millisecond, and
`format_result` renders a result code and its message.

## What the package does not do

The package does not talk to the service: there is no HTTP client, no
request for download information and no way to build a client from a
`ClientConfig`. It installs no command; the `tool` module only parses
arguments and formats output for a front end you write yourself.

## Running the tests

Install the `test` extra and run `pytest`.