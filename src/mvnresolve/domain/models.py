from pydantic import BaseModel, ConfigDict, Field, SecretStr
from typing import List, Optional

from .errors import InvalidFormatError, UnsupportedVersionedInputError

METADATA_FILE = "maven-metadata.xml"


class ArtifactIdentifier(BaseModel):
    """a maven artifact addressed by group and name, e.g. `de.kinch:my-artifact`."""
    model_config = ConfigDict(frozen=True)

    group: str
    name: str

    @classmethod
    def parse(cls, value: str) -> "ArtifactIdentifier":
        """
        parse a `<group>:<name>` string.

        segments are taken as-is; empty or whitespace-only segments are accepted.

        raises:
            UnsupportedVersionedInputError: if a third (version) segment is present
            InvalidFormatError: for any other segment count
        """
        segments = value.split(":")
        if len(segments) == 2:
            return cls(group=segments[0], name=segments[1])
        if len(segments) == 3:
            raise UnsupportedVersionedInputError(value)
        raise InvalidFormatError(value)

    @property
    def metadata_path(self) -> str:
        """repository-relative path of the artifact's metadata document."""
        return f"{self.group.replace('.', '/')}/{self.name}/{METADATA_FILE}"

    def __str__(self) -> str:
        return f"{self.group}:{self.name}"


def parse_identifier(value: str) -> ArtifactIdentifier:
    return ArtifactIdentifier.parse(value)


class ResolvedArtifact(BaseModel):
    """published versions of an artifact, in the order the repository lists them."""
    model_config = ConfigDict(frozen=True)

    group: str
    name: str
    versions: List[str] = Field(default_factory=list)
    latest: Optional[str] = None
    release: Optional[str] = None

    @property
    def identifier(self) -> ArtifactIdentifier:
        return ArtifactIdentifier(group=self.group, name=self.name)


class Credentials(BaseModel):
    """basic auth credentials for a repository."""
    model_config = ConfigDict(frozen=True)

    username: str
    password: SecretStr
