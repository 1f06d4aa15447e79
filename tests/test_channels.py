import math

import pytest
from PIL import Image

from sdfmaker.channels import BlendMode, ChannelWeights, MultiChannelInput
from sdfmaker.errors import DimensionMismatchError, ImageLoadError, ValidationError


def create_test_circle(size):
    center = float(size // 2)
    radius = size / 4.0
    img = Image.new("L", (size, size))
    img.putdata([
        255 if math.hypot(x - center, y - center) <= radius else 0
        for y in range(size)
        for x in range(size)
    ])
    return MultiChannelInput.from_alpha(img)


def test_multi_channel_input():
    channels = create_test_circle(32)
    channels.validate()
    assert channels.dimensions() == (32, 32)
    assert channels.has_alpha()
    assert not channels.has_normal()
    assert not channels.has_ao()


def test_defaults():
    channels = MultiChannelInput()
    assert channels.blend_mode is BlendMode.MULTIPLY
    assert channels.weights == ChannelWeights()
    assert channels.weights.alpha == 1.0
    assert channels.weights.normal == 0.7
    assert channels.weights.ao == 0.5
    assert channels.weights.curvature == 0.3
    assert channels.weights.height == 0.4


def test_empty_input_fails_validation():
    with pytest.raises(ValidationError) as info:
        MultiChannelInput().validate()
    assert info.value.details == "At least one input channel is required"


def test_empty_input_has_no_dimensions():
    with pytest.raises(ValidationError) as info:
        MultiChannelInput().dimensions()
    assert info.value.details == "No input channels available"
    with pytest.raises(ValidationError):
        MultiChannelInput().primary_channel()


def test_dimension_mismatch_detected():
    channels = MultiChannelInput(alpha=Image.new("L", (8, 8)), ao=Image.new("L", (4, 6)))
    with pytest.raises(DimensionMismatchError) as info:
        channels.validate()
    err = info.value
    assert (err.expected_w, err.expected_h, err.actual_w, err.actual_h) == (8, 8, 4, 6)


def test_custom_channel_mismatch_detected():
    channels = MultiChannelInput(
        normal=Image.new("RGB", (5, 5)), custom_channels={"extra": Image.new("L", (5, 4))}
    )
    with pytest.raises(DimensionMismatchError):
        channels.validate()


def test_primary_channel_priority():
    normal = Image.new("RGB", (3, 3))
    height = Image.new("L", (3, 3))
    channels = MultiChannelInput(height=height, normal=normal)
    assert channels.primary_channel() is normal
    alpha = Image.new("L", (3, 3))
    assert channels.with_alpha(alpha).primary_channel() is alpha


def test_custom_channel_used_when_alone():
    extra = Image.new("L", (7, 2))
    channels = MultiChannelInput(custom_channels={"extra": extra})
    assert channels.primary_channel() is extra
    assert channels.dimensions() == (7, 2)


def test_iter_channels_order():
    img = Image.new("L", (2, 2))
    channels = MultiChannelInput(
        curvature=img, alpha=img, height=img, custom_channels={"mask2": img}
    )
    assert [name for name, _ in channels.iter_channels()] == [
        "alpha", "curvature", "height", "mask2",
    ]
    assert channels.has_curvature()
    assert channels.has_height()


def test_with_alpha_leaves_original_unchanged():
    original = MultiChannelInput()
    updated = original.with_alpha(Image.new("L", (2, 2)))
    assert updated.has_alpha()
    assert not original.has_alpha()


def test_load_channels_from_files(tmp_path):
    path = tmp_path / "shape.png"
    Image.new("L", (6, 4), 200).save(path)
    channels = MultiChannelInput()
    channels.load_alpha(path)
    channels.load_normal(path)
    channels.load_ao(path)
    channels.load_curvature(path)
    channels.validate()
    assert channels.dimensions() == (6, 4)
    assert channels.alpha.getpixel((0, 0)) == 200
    assert [name for name, _ in channels.iter_channels()] == ["alpha", "normal", "ao", "curvature"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ImageLoadError):
        MultiChannelInput().load_alpha(tmp_path / "nope.png")


def test_load_non_image_raises(tmp_path):
    path = tmp_path / "text.png"
    path.write_text("not an image")
    with pytest.raises(ImageLoadError):
        MultiChannelInput().load_normal(path)


def test_auto_detect_channels(tmp_path):
    Image.new("L", (4, 4)).save(tmp_path / "rock_diffuse.png")
    Image.new("L", (6, 6)).save(tmp_path / "rock_mask.bmp")
    Image.new("RGB", (6, 6)).save(tmp_path / "rock_n.png")
    Image.new("L", (6, 6)).save(tmp_path / "rock_curve.jpg")
    Image.new("L", (6, 6)).save(tmp_path / "other_ao.png")

    found = MultiChannelInput.auto_detect_channels(tmp_path, "rock")
    assert found.has_alpha()
    assert found.alpha.size == (6, 6)  # the later pattern wins
    assert found.has_normal()
    assert found.has_curvature()
    assert not found.has_ao()
    found.validate()


def test_auto_detect_nothing_found(tmp_path):
    found = MultiChannelInput.auto_detect_channels(tmp_path, "missing")
    assert list(found.iter_channels()) == []
    with pytest.raises(ValidationError):
        found.validate()