"""Tests for option and codec models."""

import pytest
from pydantic import ValidationError

from sample_models import Profile

from storable.models import (
    BaseDirectory,
    CodecOverrides,
    FileFormat,
    JsonDecoder,
    JsonEncoder,
    PlistDecoder,
    PlistEncoder,
    StoreOptions,
)


class TestFileFormat:
    """Tests for FileFormat enum."""

    @pytest.mark.parametrize(
        ("fmt", "extension"),
        [
            (FileFormat.JSON, "json"),
            (FileFormat.PLIST, "plist"),
            (FileFormat.ARCHIVE, "archive"),
        ],
    )
    def test_default_extension(self, fmt: FileFormat, extension: str) -> None:
        """Test each format's default extension."""
        assert fmt.default_extension == extension

    def test_from_value(self) -> None:
        """Test formats can be built from their string value."""
        assert FileFormat("plist") is FileFormat.PLIST


class TestStoreOptions:
    """Tests for StoreOptions model."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = StoreOptions()
        assert options.directory == BaseDirectory.USER_DATA
        assert options.sub_directory is None
        assert options.custom_filename is None
        assert options.custom_extension is None
        assert options.create_sub_dir is True

    def test_equality(self) -> None:
        """Test options with the same values compare equal."""
        assert StoreOptions() == StoreOptions(directory=BaseDirectory.USER_DATA)
        assert StoreOptions(sub_directory="a") != StoreOptions(sub_directory="b")

    def test_frozen(self) -> None:
        """Test options cannot be mutated after construction."""
        options = StoreOptions()
        with pytest.raises(ValidationError):
            options.sub_directory = "users"  # type: ignore[misc]

    def test_directory_from_string(self) -> None:
        """Test base directory is parsed from its value."""
        assert StoreOptions(directory="cache").directory is BaseDirectory.CACHE


class TestCodecModels:
    """Tests for codec configuration models."""

    def test_json_encoder_defaults(self) -> None:
        """Test default JSON encoder is pretty and uses field names."""
        encoder = JsonEncoder()
        assert encoder.indent == 2
        assert encoder.by_alias is False
        assert encoder.exclude_none is False

    def test_json_encoder_pretty_output(self) -> None:
        """Test default JSON output is indented."""
        data = JsonEncoder().encode({"a": 1, "b": [1, 2]})
        assert b"\n  " in data

    def test_json_encoder_compact_output(self) -> None:
        """Test indent=None produces single-line output."""
        data = JsonEncoder(indent=None).encode({"a": 1})
        assert b"\n" not in data

    def test_json_encoder_rejects_negative_indent(self) -> None:
        """Test indent must be non-negative."""
        with pytest.raises(ValidationError):
            JsonEncoder(indent=-1)

    def test_json_decoder_plain_values(self) -> None:
        """Test decoding into a plain container type."""
        assert JsonDecoder().decode(b'{"a": [1, 2]}', dict[str, list[int]]) == {"a": [1, 2]}

    def test_plist_encoder_binary_by_default(self) -> None:
        """Test default property list output is binary."""
        assert PlistEncoder().encode({"a": 1}).startswith(b"bplist00")

    def test_plist_encoder_xml(self) -> None:
        """Test XML property list output."""
        data = PlistEncoder(binary=False).encode({"a": 1})
        assert data.startswith(b"<?xml")

    def test_plist_decoder_reads_xml(self) -> None:
        """Test the decoder accepts XML property lists too."""
        data = PlistEncoder(binary=False).encode({"a": 1})
        assert PlistDecoder().decode(data, dict[str, int]) == {"a": 1}

    def test_plist_encoder_drops_none(self, profile: Profile) -> None:
        """Test None fields are left out of property lists."""
        assert profile.nickname is None
        data = PlistEncoder(binary=False).encode(profile)
        assert b"<key>name</key>" in data
        assert b"<key>nickname</key>" not in data

    def test_codec_overrides_empty(self) -> None:
        """Test overrides default to no replacements."""
        overrides = CodecOverrides()
        assert overrides.json_encoder is None
        assert overrides.json_decoder is None
        assert overrides.plist_encoder is None
        assert overrides.plist_decoder is None

    def test_codec_overrides_has_no_archive_slot(self) -> None:
        """Test the archive format cannot be given a coder."""
        assert "archive_encoder" not in CodecOverrides.model_fields
