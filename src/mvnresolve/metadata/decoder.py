"""decoding of `maven-metadata.xml` documents."""
import xml.etree.ElementTree as ET
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..domain.errors import MetadataDecodeError
from ..domain.models import ResolvedArtifact


class _XmlModel(BaseModel):
    # element names are lower camel case: groupId -> group_id
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Versioning(_XmlModel):
    latest: str
    release: str
    versions: List[str]


class Metadata(_XmlModel):
    group_id: str
    artifact_id: str
    versioning: Versioning

    def to_resolved(self) -> ResolvedArtifact:
        return ResolvedArtifact(
            group=self.group_id,
            name=self.artifact_id,
            versions=list(self.versioning.versions),
            latest=self.versioning.latest,
            release=self.versioning.release,
        )


def _strip_namespaces(root: ET.Element) -> None:
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.split("}", 1)[1]


def _text(parent: Optional[ET.Element], tag: str) -> Optional[str]:
    if parent is None:
        return None
    value = parent.findtext(tag)
    return value.strip() if value is not None else None


def _to_document(root: ET.Element) -> dict:
    """map the element tree onto the camel-case field names of `Metadata`."""
    versioning = root.find("versioning")
    document = {
        "groupId": _text(root, "groupId"),
        "artifactId": _text(root, "artifactId"),
        "versioning": None,
    }
    if versioning is not None:
        versions = versioning.find("versions")
        document["versioning"] = {
            "latest": _text(versioning, "latest"),
            "release": _text(versioning, "release"),
            "versions": None if versions is None else [
                (v.text or "").strip() for v in versions.findall("version")
            ],
        }
    return document


def decode_metadata(body: bytes) -> Metadata:
    """
    decode a metadata document.

    args:
        body: raw response body

    returns:
        decoded metadata, with versions in document order

    raises:
        MetadataDecodeError: if the body is not well-formed xml or lacks a required element
    """
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise MetadataDecodeError(f"malformed xml ({e})") from e

    _strip_namespaces(root)
    if root.tag != "metadata":
        raise MetadataDecodeError(f"expected root element <metadata>, found <{root.tag}>")

    try:
        return Metadata.model_validate(_to_document(root))
    except ValidationError as e:
        missing = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        raise MetadataDecodeError(f"missing or invalid elements: {missing}") from e
