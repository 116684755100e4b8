# splashgen/descriptors.py
import os
import json
from collections import namedtuple

from .errors import OutputError

AssetDescriptor = namedtuple('AssetDescriptor', ['filename', 'idiom', 'scale'])

INFO = {"author": "xcode", "version": 1}
SCALES = ('1x', '2x', '3x')


def variant_descriptors(filenames: dict, idiom: str = "universal") -> list:
    """{scale: filename} -> descriptors ordered 1x, 2x, 3x."""
    return [AssetDescriptor(filenames[s], idiom, s) for s in SCALES if s in filenames]


def background_descriptors(filename: str, idiom: str = "universal") -> list:
    # a single 1x raster; the 2x/3x slots stay empty
    return [AssetDescriptor(filename if s == '1x' else None, idiom, s) for s in SCALES]


def image_set(descriptors) -> dict:
    images = []
    for d in descriptors:
        entry = {}
        if d.filename:
            entry["filename"] = d.filename
        entry["idiom"] = d.idiom
        entry["scale"] = d.scale
        images.append(entry)
    return {"images": images, "info": dict(INFO)}


def write_contents_json(set_dir: str, descriptors) -> str:
    path = os.path.join(set_dir, "Contents.json")
    try:
        os.makedirs(set_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            json.dump(image_set(descriptors), f, ensure_ascii=False, indent=2)
            f.write("\n")
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}") from e
    return path
