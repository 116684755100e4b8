import pytest
from PIL import Image

from splashgen import image_gen
from splashgen.errors import ImageError


@pytest.mark.parametrize("value", ["#A1B2C3", "A1B2C3", "a1b2c3"])
def test_parse_hex_rgb(value):
    assert image_gen.parse_hex_rgb(value) == (161, 178, 195)


@pytest.mark.parametrize("value", ["#A1B2C", "A1B2C", "#A1B2C3D4", "GGGGGG", ""])
def test_parse_hex_rgb_rejects_malformed(value):
    with pytest.raises(ValueError):
        image_gen.parse_hex_rgb(value)


def test_solid_color_image():
    img = image_gen.solid_color_image("#112233")
    assert img.size == (1, 1)
    assert img.getpixel((0, 0)) == (17, 34, 51)


def test_load_image_missing(tmp_path):
    with pytest.raises(ImageError, match="not found"):
        image_gen.load_image(str(tmp_path / "missing.png"))


def test_load_image_undecodable(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(ImageError, match="decode"):
        image_gen.load_image(str(path))


def test_resize_exact(make_png):
    img = image_gen.load_image(make_png(size=(64, 32)))
    assert image_gen.resize_image(img, 128, 128).size == (128, 128)


def test_write_variants(make_png, tmp_path):
    img = image_gen.load_image(make_png())
    out_dir = tmp_path / "LaunchImage.imageset"
    written = image_gen.write_variants(img, str(out_dir), "LaunchImage")

    assert written == {"1x": "LaunchImage.png", "2x": "LaunchImage@2x.png", "3x": "LaunchImage@3x.png"}
    for filename, width in zip(written.values(), (128, 256, 384)):
        with Image.open(out_dir / filename) as im:
            assert im.size == (width, width)


def test_save_png_reports_unwritable_target(tmp_path):
    blocker = tmp_path / "drawable"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(ImageError, match="Failed to write"):
        image_gen.save_png(image_gen.solid_color_image("#000000"), str(blocker / "splash_image.png"))


def test_copy_asset_reports_unwritable_target(tmp_path):
    src = tmp_path / "anim.xml"
    src.write_text("<animated-vector/>", encoding="utf-8")
    (tmp_path / "drawable").write_text("", encoding="utf-8")
    with pytest.raises(ImageError, match="Failed to copy"):
        image_gen.copy_asset(str(src), str(tmp_path / "drawable" / "splash_animation.xml"))
