# splashgen/image_gen.py
import os
import shutil

from PIL import Image, UnidentifiedImageError

from .errors import ImageError

# iOS density buckets: scale tag -> (file suffix, edge in px)
VARIANT_SIZES = {
    '1x': ('', 128),
    '2x': ('@2x', 256),
    '3x': ('@3x', 384),
}


def parse_hex_rgb(hex_color):
    """'#A1B2C3' or 'A1B2C3' -> (161, 178, 195). Raises ValueError otherwise."""
    h = hex_color.replace('#', '')
    if len(h) != 6:
        raise ValueError(f'Hex color must be 6 characters (RRGGBB): {hex_color!r}')
    try:
        return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f'Invalid hex color: {hex_color!r}') from None


def load_image(path):
    if not path or not os.path.isfile(path):
        raise ImageError(f'Image not found: {path}')
    try:
        with Image.open(path) as img:
            return img.convert('RGBA')
    except (UnidentifiedImageError, OSError) as e:
        raise ImageError(f'Failed to decode image {path}: {e}') from e


def resize_image(img, width, height):
    return img.resize((width, height), Image.Resampling.LANCZOS)


def solid_color_image(hex_color, width=1, height=1):
    return Image.new('RGB', (width, height), parse_hex_rgb(hex_color))


def save_png(img, path):
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        img.save(path, format='PNG')
    except OSError as e:
        raise ImageError(f'Failed to write {path}: {e}') from e


def copy_asset(src, dst):
    """Copy a non-raster asset (animation file) into the project."""
    try:
        os.makedirs(os.path.dirname(dst), exist_ok=True)
        shutil.copyfile(src, dst)
    except OSError as e:
        raise ImageError(f'Failed to copy {src} to {dst}: {e}') from e


def write_variants(img, out_dir, stem):
    """Write stem.png / stem@2x.png / stem@3x.png, return {scale: filename}."""
    written = {}
    for scale, (suffix, size) in VARIANT_SIZES.items():
        filename = f'{stem}{suffix}.png'
        save_png(resize_image(img, size, size), os.path.join(out_dir, filename))
        written[scale] = filename
    return written
