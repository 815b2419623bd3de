"""Content metadata returned by the service: ids, files and applicability data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

_MAX_SIZE = 2**64


class HashType(Enum):
    SHA1 = "Sha1"
    SHA256 = "Sha256"


class Architecture(Enum):
    NONE = "None"
    AMD64 = "amd64"
    ARM = "arm"
    ARM64 = "arm64"
    X86 = "x86"


@dataclass(frozen=True)
class ContentId:
    """Unique content identifier; version is a 4-part integer version string."""

    namespace: str
    name: str
    version: str


@dataclass(frozen=True)
class File:
    """A downloadable file; hashes map algorithm to a base64 encoded digest."""

    file_id: str
    url: str
    size_in_bytes: int
    hashes: Mapping[HashType, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0 <= self.size_in_bytes < _MAX_SIZE:
            raise ValueError(f"size_in_bytes out of range: {self.size_in_bytes}")
        object.__setattr__(
            self, "hashes", {HashType(kind): digest for kind, digest in self.hashes.items()}
        )


@dataclass(frozen=True)
class ApplicabilityDetails:
    """Architectures and platforms a file applies to."""

    architectures: tuple[Architecture, ...] = ()
    platform_applicability_for_package: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "architectures", tuple(Architecture(a) for a in self.architectures)
        )
        object.__setattr__(
            self,
            "platform_applicability_for_package",
            tuple(self.platform_applicability_for_package),
        )


@dataclass(frozen=True)
class AppFile(File):
    """A file of an app, with applicability details and a package moniker."""

    applicability_details: ApplicabilityDetails = field(default_factory=ApplicabilityDetails)
    file_moniker: str = ""


def _as_tuple(items: Iterable) -> tuple:
    return tuple(items)


@dataclass(frozen=True)
class Content:
    """A content version and its files."""

    content_id: ContentId
    files: tuple[File, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", _as_tuple(self.files))


@dataclass(frozen=True)
class AppPrerequisiteContent:
    """A prerequisite of an app; prerequisites have no further dependencies."""

    content_id: ContentId
    files: tuple[AppFile, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", _as_tuple(self.files))


@dataclass(frozen=True)
class AppContent:
    """An app version with its update id, prerequisites and files."""

    content_id: ContentId
    update_id: str
    prerequisites: tuple[AppPrerequisiteContent, ...] = ()
    files: tuple[AppFile, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prerequisites", _as_tuple(self.prerequisites))
        object.__setattr__(self, "files", _as_tuple(self.files))