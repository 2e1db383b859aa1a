"""test suite for artifact identifier parsing."""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mvnresolve.domain.errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    MavenError,
    UnsupportedVersionedInputError,
)
from mvnresolve.domain.models import ArtifactIdentifier, parse_identifier


class TestParse:
    def test_group_and_name(self):
        identifier = ArtifactIdentifier.parse("de.kinch:my-artifact")
        assert identifier == ArtifactIdentifier(group="de.kinch", name="my-artifact")

    def test_module_level_parse(self):
        assert parse_identifier("org.slf4j:slf4j-api").name == "slf4j-api"

    @pytest.mark.parametrize("value", [
        "de.kinch:my-artifact",
        "a:b",
        ":",
        ":name",
        "group:",
        " : ",
        "com.example.deep.group:artifact_with.dots",
    ])
    def test_two_segments_round_trip(self, value):
        identifier = parse_identifier(value)
        assert f"{identifier.group}:{identifier.name}" == value
        assert str(identifier) == value

    def test_whitespace_segments_kept_as_is(self):
        identifier = parse_identifier(" de.kinch : my-artifact ")
        assert identifier.group == " de.kinch "
        assert identifier.name == " my-artifact "

    @pytest.mark.parametrize("value", [
        "de.kinch:my-artifact:1.2.3",
        "::",
        "a:b:",
    ])
    def test_version_segment_unsupported(self, value):
        with pytest.raises(UnsupportedVersionedInputError) as exc_info:
            parse_identifier(value)
        assert exc_info.value.value == value
        assert f"'{value}'" in str(exc_info.value)
        assert "not yet supported" in str(exc_info.value)

    @pytest.mark.parametrize("value", [
        "",
        "de.kinch",
        "de.kinch:my-artifact:jar:1.2.3",
        ":::",
        "a:b:c:d:e",
    ])
    def test_invalid_format(self, value):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_identifier(value)
        assert exc_info.value.value == value
        assert str(exc_info.value) == (
            f"Invalid maven artifact specified: '{value}'. Expected format <GROUP>:<NAME>"
        )

    def test_error_hierarchy(self):
        with pytest.raises(InvalidIdentifierError):
            parse_identifier("nope")
        with pytest.raises(MavenError):
            parse_identifier("a:b:c")
        # identifier errors are also value errors
        with pytest.raises(ValueError):
            parse_identifier("nope")


class TestMetadataPath:
    def test_dots_become_slashes(self):
        identifier = parse_identifier("de.kinch:my-artifact")
        assert identifier.metadata_path == "de/kinch/my-artifact/maven-metadata.xml"

    def test_name_dots_are_kept(self):
        identifier = parse_identifier("org.example:lib.core")
        assert identifier.metadata_path == "org/example/lib.core/maven-metadata.xml"

    def test_single_segment_group(self):
        identifier = parse_identifier("junit:junit")
        assert identifier.metadata_path == "junit/junit/maven-metadata.xml"


class TestImmutability:
    def test_identifier_is_frozen(self):
        identifier = parse_identifier("de.kinch:my-artifact")
        with pytest.raises(Exception):
            identifier.group = "other"

    def test_identifier_is_hashable(self):
        a = parse_identifier("de.kinch:my-artifact")
        b = parse_identifier("de.kinch:my-artifact")
        assert {a, b} == {a}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
