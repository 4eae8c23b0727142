"""Tests for the image scaler (fitted size computation and raster resize).

The size rule keeps one box dimension and shrinks the other by the image's
aspect ratio. These tests pin that rule, including the worked 3000x2000 into
300x400 example and the degenerate-box guard.
"""

import pytest
from PIL import Image

from experiences.core.exceptions import DecodeFailureError, InvalidTargetError
from experiences.core.models import BoundingBox
from experiences.services.image.scaler import fit, fitted_size, resolve_resample


class TestFittedSize:
    """Verify the exact (float) target size."""

    def test_landscape_into_portrait_box(self):
        """3000x2000 into 300x400 keeps the width and divides the height by 1.5."""
        width, height = fitted_size((3000, 2000), BoundingBox(width=300, height=400))
        assert width == 300
        assert height == pytest.approx(266.6667, abs=1e-3)

    def test_portrait_image_takes_width_branch(self):
        """Aspect < 1 shrinks the width and keeps the box height."""
        width, height = fitted_size((200, 400), BoundingBox(width=300, height=300))
        assert (width, height) == (150, 300)

    def test_square_image_keeps_box(self):
        assert fitted_size((500, 500), BoundingBox(width=320, height=240)) == (320, 240)

    @pytest.mark.parametrize(
        ("image_size", "box"),
        [
            ((3000, 2000), (300, 400)),
            ((1920, 1080), (750, 600)),
            ((1080, 1920), (750, 600)),
            ((640, 480), (1000, 1000)),
            ((100, 700), (50, 90)),
        ],
    )
    def test_one_dimension_matches_box(self, image_size, box):
        """At least one output dimension equals the box exactly."""
        bbox = BoundingBox(width=box[0], height=box[1])
        width, height = fitted_size(image_size, bbox)
        assert width == bbox.width or height == bbox.height

    @pytest.mark.parametrize(
        ("image_size", "box"),
        [
            ((3000, 2000), (300, 400)),
            ((1080, 1920), (750, 600)),
            ((100, 700), (50, 90)),
        ],
    )
    def test_output_ratio_is_aspect_times_box_ratio(self, image_size, box):
        """Both branches give width/height == aspect * box.width/box.height."""
        bbox = BoundingBox(width=box[0], height=box[1])
        width, height = fitted_size(image_size, bbox)
        aspect = image_size[0] / image_size[1]
        assert width / height == pytest.approx(aspect * bbox.width / bbox.height)

    @pytest.mark.parametrize("image_size", [(3000, 2000), (1080, 1920), (7, 3)])
    def test_square_box_preserves_aspect(self, image_size):
        width, height = fitted_size(image_size, BoundingBox(width=600, height=600))
        assert width / height == pytest.approx(image_size[0] / image_size[1])
        assert width <= 600 and height <= 600

    @pytest.mark.parametrize(
        ("width", "height"),
        [(0, 400), (300, 0), (0, 0), (-1, 400), (300, -5), (-10, -10)],
    )
    def test_invalid_box_raises(self, width, height):
        """Non-positive box dimensions fail fast with InvalidTargetError."""
        with pytest.raises(InvalidTargetError) as exc_info:
            fitted_size((3000, 2000), BoundingBox(width=width, height=height))
        assert exc_info.value.code == "INVALID_TARGET"

    def test_empty_image_raises_decode_failure(self):
        with pytest.raises(DecodeFailureError):
            fitted_size((0, 100), BoundingBox(width=300, height=400))


class TestFit:
    """Verify the rendered image."""

    def test_output_size_rounds_fitted_size_down(self, landscape_image):
        """300x200 into 300x400 renders at 300x266 (266.67 rounded down)."""
        scaled = fit(landscape_image, BoundingBox(width=300, height=400))
        assert scaled.size == (300, 266)

    @pytest.mark.parametrize(
        ("image_size", "box"),
        [
            ((400, 400), BoundingBox.from_viewport(187.5, 100.25)),
            ((300, 200), BoundingBox(width=300, height=400)),
            ((200, 400), BoundingBox(width=300, height=400)),
            ((1920, 1080), BoundingBox(width=750, height=600)),
            ((1080, 1920), BoundingBox(width=750, height=600)),
            ((300, 200), BoundingBox(width=123.7, height=45.3)),
            ((7, 3), BoundingBox.from_viewport(187.5, 150.5, scale=3.0)),
        ],
    )
    def test_never_exceeds_box(self, image_size, box):
        """Neither rendered dimension is larger than the box, fractional or not."""
        scaled = fit(Image.new("RGB", image_size), box)
        assert scaled.width <= box.width and scaled.height <= box.height

    def test_downscale_into_device_bounds(self, portrait_image):
        box = BoundingBox.from_viewport(100, 100, scale=2.0)
        scaled = fit(portrait_image, box)
        assert scaled.size == (100, 200)

    def test_input_is_not_mutated(self, landscape_image):
        before = landscape_image.tobytes()
        scaled = fit(landscape_image, BoundingBox(width=60, height=60))
        assert scaled is not landscape_image
        assert landscape_image.size == (300, 200)
        assert landscape_image.tobytes() == before

    def test_invalid_box_produces_no_output(self, landscape_image):
        with pytest.raises(InvalidTargetError):
            fit(landscape_image, BoundingBox(width=0, height=400))

    def test_tiny_target_is_at_least_one_pixel(self):
        image = Image.new("RGB", (1000, 10))
        scaled = fit(image, BoundingBox(width=0.2, height=0.2))
        assert scaled.width >= 1 and scaled.height >= 1

    def test_custom_resample_filter(self, landscape_image):
        scaled = fit(
            landscape_image,
            BoundingBox(width=30, height=30),
            resample=resolve_resample("nearest"),
        )
        # Nearest keeps pure colors at the two-tone boundary
        assert {color for _, color in scaled.getcolors()} <= {(255, 0, 0), (0, 0, 255)}


class TestResolveResample:
    def test_known_names_are_case_insensitive(self):
        assert resolve_resample("Bilinear") == Image.Resampling.BILINEAR
        assert resolve_resample("LANCZOS") == Image.Resampling.LANCZOS

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown resample filter"):
            resolve_resample("sinc")


class TestBoundingBox:
    def test_from_viewport_applies_scale(self):
        box = BoundingBox.from_viewport(375, 300, scale=2.0)
        assert (box.width, box.height) == (750, 600)

    def test_is_valid(self):
        assert BoundingBox(width=1, height=1).is_valid
        assert not BoundingBox(width=0, height=1).is_valid
