from __future__ import annotations

import pytest

from tiffconvert import ClassifiedInput, InputKind, classify_locator, extract_folder_id


class TestClassifyLocal:
    @pytest.mark.parametrize(
        "value",
        [
            "scans",
            "./scans/a.tif",
            "/var/data/images",
            "C:\\images\\scan.tif",
            "",
            "https://example.com/drive/folders/ABC123",
            "ftp://files.example.org/d/QRS",
            "http://[::1",
        ],
    )
    def test_non_drive_values_are_local_and_unchanged(self, value):
        result = classify_locator(value)
        assert result.kind is InputKind.LOCAL
        assert result.raw_value == value
        assert result.folder_id is None

    def test_drive_url_without_id_falls_back_to_local(self):
        url = "https://drive.google.com/drive/my-drive"
        result = classify_locator(url)
        assert result.kind is InputKind.LOCAL
        assert result.raw_value == url


class TestClassifyRemote:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://drive.google.com/drive/folders/ABC123", "ABC123"),
            ("https://drive.google.com/drive/u/0/folders/1a-B_c?usp=sharing", "1a-B_c"),
            ("https://drive.google.com/open?id=XYZ", "XYZ"),
            ("https://drive.google.com/d/QRS", "QRS"),
        ],
    )
    def test_extracts_folder_id(self, url, expected):
        result = classify_locator(url)
        assert result.kind is InputKind.REMOTE_FOLDER
        assert result.folder_id == expected
        assert result.raw_value == url

    def test_custom_domain(self):
        result = classify_locator(
            "https://drive.example.com/drive/folders/ABC123",
            domain="drive.example.com",
        )
        assert result.kind is InputKind.REMOTE_FOLDER
        assert result.folder_id == "ABC123"

    def test_first_pattern_wins(self):
        result = classify_locator("https://drive.google.com/folders/FIRST?id=SECOND")
        assert result.folder_id == "FIRST"


class TestExtractFolderId:
    def test_returns_none_without_match(self):
        assert extract_folder_id("/drive/my-drive") is None

    def test_id_query(self):
        assert extract_folder_id("/open?id=abc-123_Z") == "abc-123_Z"


class TestClassifiedInput:
    def test_remote_requires_folder_id(self):
        with pytest.raises(ValueError):
            ClassifiedInput(kind=InputKind.REMOTE_FOLDER, raw_value="x")

    def test_local_rejects_folder_id(self):
        with pytest.raises(ValueError):
            ClassifiedInput(kind=InputKind.LOCAL, raw_value="x", folder_id="abc")
