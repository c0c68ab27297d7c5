"""Tests for image loading and format checks."""

from pathlib import Path

import pytest
from PIL import Image

from pixweave.core.errors import (
    DecodeFailureError,
    DifferentImageFormatsError,
    UnreadablePathError,
    UnrecognizedFormatError,
)
from pixweave.core.loader import (
    LoadedImage,
    check_formats,
    format_from_extension,
    load_image,
)


def write_image(path: Path, size: tuple[int, int] = (4, 3)) -> Path:
    """Helper to write a small solid image."""
    Image.new("RGBA", size, "green").save(path)
    return path


class TestFormatFromExtension:
    """Tests for format_from_extension."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.png", "PNG"), ("a.PNG", "PNG"), ("a.jpg", "JPEG"), ("a.jpeg", "JPEG"), ("a.bmp", "BMP")],
    )
    def test_known_extensions(self, name: str, expected: str) -> None:
        """Test common extensions map to Pillow formats."""
        assert format_from_extension(name) == expected

    def test_unknown_extension(self) -> None:
        """Test unknown extensions give None."""
        assert format_from_extension("notes.txt-nope") is None

    def test_no_extension(self) -> None:
        """Test paths without an extension give None."""
        assert format_from_extension("image") is None


class TestLoadImage:
    """Tests for load_image."""

    def test_loads_png(self, tmp_path: Path) -> None:
        """Test a PNG is decoded with its format and size."""
        path = write_image(tmp_path / "a.png", size=(5, 2))

        loaded = load_image(path)

        assert loaded.format == "PNG"
        assert loaded.dimensions == (5, 2)
        assert loaded.width == 5
        assert loaded.height == 2
        assert loaded.path == path

    def test_pixels_available_after_close(self, tmp_path: Path) -> None:
        """Test pixel data is loaded before the file is closed."""
        loaded = load_image(write_image(tmp_path / "a.png"))
        assert loaded.image.getpixel((0, 0))[1] == 128

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing path is an unreadable path error."""
        with pytest.raises(UnreadablePathError) as exc_info:
            load_image(tmp_path / "missing.png")

        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.exit_code == 2

    def test_directory(self, tmp_path: Path) -> None:
        """Test a directory cannot be read as an image."""
        folder = tmp_path / "folder.png"
        folder.mkdir()

        with pytest.raises(UnreadablePathError):
            load_image(folder)

    def test_unrecognized_extension(self, tmp_path: Path) -> None:
        """Test files with unknown extensions are rejected."""
        path = tmp_path / "image.unknownext"
        path.write_bytes(b"data")

        with pytest.raises(UnrecognizedFormatError):
            load_image(path)

    def test_garbage_contents(self, tmp_path: Path) -> None:
        """Test undecodable contents raise DecodeFailureError."""
        path = tmp_path / "broken.png"
        path.write_bytes(b"not really a png")

        with pytest.raises(DecodeFailureError) as exc_info:
            load_image(path)

        assert exc_info.value.cause is not None

    def test_contents_disagree_with_extension(self, tmp_path: Path) -> None:
        """Test PNG data named .jpg fails to decode as JPEG."""
        path = tmp_path / "actually_png.jpg"
        Image.new("RGBA", (2, 2)).save(path, format="PNG")

        with pytest.raises(DecodeFailureError):
            load_image(path)


class TestCheckFormats:
    """Tests for check_formats."""

    def test_same_format(self) -> None:
        """Test matching formats return the common tag."""
        a = LoadedImage(Path("a.png"), Image.new("RGBA", (1, 1)), "PNG")
        b = LoadedImage(Path("b.png"), Image.new("RGBA", (2, 2)), "PNG")

        assert check_formats(a, b) == "PNG"

    def test_different_formats(self) -> None:
        """Test mismatched formats raise DifferentImageFormatsError."""
        a = LoadedImage(Path("a.png"), Image.new("RGBA", (1, 1)), "PNG")
        b = LoadedImage(Path("b.jpg"), Image.new("RGB", (1, 1)), "JPEG")

        with pytest.raises(DifferentImageFormatsError) as exc_info:
            check_formats(a, b)

        assert exc_info.value.formats == ("PNG", "JPEG")
