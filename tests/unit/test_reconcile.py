"""Tests for size reconciliation."""

from unittest.mock import patch

from PIL import Image

from pixweave.core.reconcile import smallest_dimensions, standardize_size


class TestSmallestDimensions:
    """Tests for smallest_dimensions."""

    def test_first_smaller(self) -> None:
        """Test the first pair wins when it has fewer pixels."""
        assert smallest_dimensions((2, 3), (4, 4)) == (2, 3)

    def test_second_smaller(self) -> None:
        """Test the second pair wins when it has fewer pixels."""
        assert smallest_dimensions((10, 10), (3, 3)) == (3, 3)

    def test_tie_prefers_second(self) -> None:
        """Test equal pixel counts resolve to the second pair."""
        assert smallest_dimensions((2, 8), (4, 4)) == (4, 4)
        assert smallest_dimensions((4, 4), (2, 8)) == (2, 8)

    def test_pixel_count_not_side_length(self) -> None:
        """Test the comparison uses area, not individual sides."""
        assert smallest_dimensions((1, 100), (20, 20)) == (1, 100)


class TestStandardizeSize:
    """Tests for standardize_size."""

    def test_same_size_untouched(self) -> None:
        """Test matching images are returned as-is without resizing."""
        a = Image.new("RGBA", (4, 4))
        b = Image.new("RGBA", (4, 4))

        with patch.object(Image.Image, "resize") as resize:
            out_a, out_b, resized = standardize_size(a, b)

        resize.assert_not_called()
        assert out_a is a
        assert out_b is b
        assert resized is None

    def test_larger_first_is_resized(self) -> None:
        """Test the larger first image shrinks to the second's size."""
        a = Image.new("RGBA", (8, 8))
        b = Image.new("RGBA", (4, 2))

        out_a, out_b, resized = standardize_size(a, b)

        assert out_a.size == (4, 2)
        assert out_b is b
        assert resized == "image1"

    def test_larger_second_is_resized(self) -> None:
        """Test the larger second image shrinks to the first's size."""
        a = Image.new("RGBA", (3, 3))
        b = Image.new("RGBA", (6, 9))

        out_a, out_b, resized = standardize_size(a, b)

        assert out_a is a
        assert out_b.size == (3, 3)
        assert resized == "image2"

    def test_tie_resizes_first_to_second(self) -> None:
        """Test equal pixel counts resize the first image to the second."""
        a = Image.new("RGBA", (2, 8))
        b = Image.new("RGBA", (4, 4))

        out_a, out_b, resized = standardize_size(a, b)

        assert out_a.size == (4, 4)
        assert out_b is b
        assert resized == "image1"

    def test_resized_image_is_rgba(self) -> None:
        """Test resized palette images come back as RGBA."""
        a = Image.new("P", (8, 8))
        b = Image.new("RGBA", (2, 2))

        out_a, _, _ = standardize_size(a, b)

        assert out_a.mode == "RGBA"

    def test_solid_colour_preserved(self) -> None:
        """Test bilinear resizing keeps a uniform colour."""
        a = Image.new("RGBA", (10, 10), (12, 34, 56, 255))
        b = Image.new("RGBA", (5, 5))

        out_a, _, _ = standardize_size(a, b)

        assert out_a.getpixel((2, 2)) == (12, 34, 56, 255)
