# splashgen/android.py
import os

from . import xml_patch
from .errors import ConfigError, ProjectLayoutError
from .image_gen import copy_asset, load_image, save_png

TAG = "[ANDROID]"

NIGHT_SPLASH_COLOR = '#121212'
LAUNCH_THEME = 'LaunchTheme'
LAUNCH_THEME_PARENT = '@android:style/Theme.Light.NoTitleBar'
MAIN_ACTIVITY = 'MainActivity'
SPLASH_META_PREFIX = 'android.windowSplashScreen'


def main_dir(project_dir):
    return os.path.join(project_dir, 'android', 'app', 'src', 'main')


def generate(config, project_dir):
    """
    Write the Android splash resources for ``config`` into ``project_dir``.

    Raises a SplashError subclass on the first hard failure; a missing
    branding image or animation is skipped with a warning.
    """
    android_main = main_dir(project_dir)
    if not os.path.isdir(android_main):
        raise ProjectLayoutError(f'Could not find {android_main}')
    if not config.image:
        raise ConfigError('No splash image configured (image)')

    res_dir = os.path.join(android_main, 'res')
    drawable_dir = os.path.join(res_dir, 'drawable')

    # 1) Splash image, re-encoded as PNG
    save_png(load_image(config.image), os.path.join(drawable_dir, 'splash_image.png'))
    print(f"{TAG} Wrote drawable/splash_image.png", flush=True)

    # 2) Branding image (optional)
    has_branding = False
    if config.branding_image:
        if os.path.isfile(config.branding_image):
            save_png(load_image(config.branding_image), os.path.join(drawable_dir, 'branding_image.png'))
            has_branding = True
            print(f"{TAG} Wrote drawable/branding_image.png", flush=True)
        else:
            print(f"[WARN] Branding image not found, skipped: {config.branding_image}", flush=True)

    # 3) Animated vector drawable (optional)
    has_animation = False
    if config.android_animation:
        if os.path.isfile(config.android_animation):
            copy_asset(config.android_animation, os.path.join(drawable_dir, 'splash_animation.xml'))
            has_animation = True
            print(f"{TAG} Copied drawable/splash_animation.xml", flush=True)
        else:
            print(f"[WARN] Android animation not found, skipped: {config.android_animation}", flush=True)

    # 4) colors before styles before manifest: each one references the previous
    patch_colors(res_dir, config)
    patch_styles(res_dir, has_animation, has_branding)
    patch_manifest(android_main, has_animation, has_branding)


def patch_colors(res_dir, config):
    tables = (
        ('values', config.color),
        ('values-night', NIGHT_SPLASH_COLOR),
    )
    for folder, splash_color in tables:
        path = os.path.join(res_dir, folder, 'colors.xml')

        def transform(s, splash_color=splash_color):
            s = xml_patch.upsert_color(s, 'splash_color', splash_color)
            return xml_patch.upsert_color(s, 'splash_icon_background', config.splash_icon_background)

        if xml_patch.apply_patch(path, transform, xml_patch.RESOURCES_SKELETON):
            print(f"{TAG} Patched {folder}/colors.xml", flush=True)


def launch_theme_items(has_animation, has_branding):
    icon = '@drawable/splash_animation' if has_animation else '@drawable/splash_image'
    items = [
        ('android:windowSplashScreenBackground', '@color/splash_color'),
        ('android:windowSplashScreenAnimatedIcon', icon),
        ('android:windowSplashScreenIconBackgroundColor', '@color/splash_icon_background'),
    ]
    if has_branding:
        items.append(('android:windowSplashScreenBrandingImage', '@drawable/branding_image'))
    return items


def patch_styles(res_dir, has_animation, has_branding):
    items = launch_theme_items(has_animation, has_branding)

    def transform(s):
        return xml_patch.upsert_style(s, LAUNCH_THEME, LAUNCH_THEME_PARENT, items)

    for folder in ('values', 'values-night'):
        path = os.path.join(res_dir, folder, 'styles.xml')
        if xml_patch.apply_patch(path, transform, xml_patch.RESOURCES_SKELETON):
            print(f"{TAG} Patched {LAUNCH_THEME} in {folder}/styles.xml", flush=True)


def manifest_entries(has_animation, has_branding):
    icon = 'splash_animation' if has_animation else 'splash_image'
    meta = [
        ('android.windowSplashScreenAnimatedIcon', f'@drawable/{icon}'),
        ('android.windowSplashScreenBackground', '@color/splash_color'),
        ('android.windowSplashScreenIconBackground', '@color/splash_icon_background'),
    ]
    if has_branding:
        meta.append(('android.windowSplashScreenBrandingImage', '@drawable/branding_image'))
    return [xml_patch.meta_data_markup(name, res) for name, res in meta]


def patch_manifest(android_main, has_animation, has_branding):
    path = os.path.join(android_main, 'AndroidManifest.xml')
    entries = manifest_entries(has_animation, has_branding)

    def transform(s):
        return xml_patch.insert_into_element(s, 'activity', MAIN_ACTIVITY, entries, SPLASH_META_PREFIX)

    # never created from a skeleton: without the app's activity there is nothing to patch
    if xml_patch.apply_patch(path, transform):
        print(f"{TAG} Patched AndroidManifest.xml", flush=True)
