# splashgen/ios.py
import os

from . import descriptors
from .errors import ConfigError, OutputError, ProjectLayoutError
from .image_gen import copy_asset, load_image, parse_hex_rgb, save_png, solid_color_image, write_variants

TAG = "[IOS]"

BACKGROUND_SET = 'LaunchBackground'
LAUNCH_SET = 'LaunchImage'
BRANDING_SET = 'BrandingImage'

STORYBOARD_TEMPLATE = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.Storyboard.XIB" version="3.0" toolsVersion="12121" systemVersion="16G29" targetRuntime="iOS.CocoaTouch" propertyAccessControl="none" useAutolayout="YES" launchScreen="YES" colorMatched="YES" initialViewController="01J-lp-oVM">
    <dependencies>
        <deployment identifier="iOS"/>
        <plugIn identifier="com.apple.InterfaceBuilder.IBCocoaTouchPlugin" version="12089"/>
    </dependencies>
    <scenes>
        <!--View Controller-->
        <scene sceneID="EHf-IW-A2E">
            <objects>
                <viewController id="01J-lp-oVM" sceneMemberID="viewController">
                    <layoutGuides>
                        <viewControllerLayoutGuide type="top" id="Ydg-fD-yQy"/>
                        <viewControllerLayoutGuide type="bottom" id="xbc-2k-c8Z"/>
                    </layoutGuides>
                    <view key="view" contentMode="scaleToFill" id="Ze5-6b-2t3">
                        <autoresizingMask key="autoresizingMask" widthSizable="YES" heightSizable="YES"/>
                        <subviews>
                            <imageView contentMode="scaleToFill" image="{background}" translatesAutoresizingMaskIntoConstraints="NO" id="bgImg"/>
                            <imageView contentMode="center" image="{launch}" translatesAutoresizingMaskIntoConstraints="NO" id="mainImg"/>
{branding_view}                        </subviews>
                        <color key="backgroundColor" red="{red}" green="{green}" blue="{blue}" alpha="1" colorSpace="custom" customColorSpace="sRGB"/>
                        <constraints>
                            <constraint firstItem="bgImg" firstAttribute="top" secondItem="Ze5-6b-2t3" secondAttribute="top" id="xPn-NY-SIU"/>
                            <constraint firstItem="bgImg" firstAttribute="bottom" secondItem="Ze5-6b-2t3" secondAttribute="bottom" id="duK-uY-Gun"/>
                            <constraint firstItem="bgImg" firstAttribute="leading" secondItem="Ze5-6b-2t3" secondAttribute="leading" id="kV7-tw-vXt"/>
                            <constraint firstItem="bgImg" firstAttribute="trailing" secondItem="Ze5-6b-2t3" secondAttribute="trailing" id="TQA-XW-tRk"/>
                            <constraint firstItem="mainImg" firstAttribute="centerX" secondItem="Ze5-6b-2t3" secondAttribute="centerX" id="3kg-TC-cPP"/>
                            <constraint firstItem="mainImg" firstAttribute="centerY" secondItem="Ze5-6b-2t3" secondAttribute="centerY" id="main-centerY"/>
{branding_constraints}                        </constraints>
                    </view>
                </viewController>
                <placeholder placeholderIdentifier="IBFirstResponder" id="iYj-Kq-Ea1" userLabel="First Responder" sceneMemberID="firstResponder"/>
            </objects>
            <point key="canvasLocation" x="53" y="375"/>
        </scene>
    </scenes>
    <resources>
        <image name="{launch}" width="128" height="128"/>
        <image name="{background}" width="1" height="1"/>
{branding_resource}    </resources>
</document>
'''

BRANDING_VIEW = (
    '                            <imageView contentMode="scaleToFill" image="{branding}" '
    'translatesAutoresizingMaskIntoConstraints="NO" id="brandingImg"/>\n'
)
BRANDING_CONSTRAINTS = (
    '                            <constraint firstItem="brandingImg" firstAttribute="centerX" '
    'secondItem="Ze5-6b-2t3" secondAttribute="centerX" id="branding-centerX"/>\n'
    '                            <constraint firstItem="brandingImg" firstAttribute="bottom" '
    'secondItem="Ze5-6b-2t3" secondAttribute="bottom" constant="20" id="branding-bottom"/>\n'
)
BRANDING_RESOURCE = '        <image name="{branding}" width="128" height="128"/>\n'


def assets_dir(project_dir):
    return os.path.join(project_dir, 'ios', 'Runner', 'Assets.xcassets')


def storyboard_xml(hex_color, show_branding):
    r, g, b = parse_hex_rgb(hex_color)
    extra = {
        'branding_view': BRANDING_VIEW,
        'branding_constraints': BRANDING_CONSTRAINTS,
        'branding_resource': BRANDING_RESOURCE,
    }
    if not show_branding:
        extra = dict.fromkeys(extra, '')
    else:
        extra = {k: v.format(branding=BRANDING_SET) for k, v in extra.items()}
    return STORYBOARD_TEMPLATE.format(
        background=BACKGROUND_SET,
        launch=LAUNCH_SET,
        red=f'{r / 255:.3f}',
        green=f'{g / 255:.3f}',
        blue=f'{b / 255:.3f}',
        **extra,
    )


def generate(config, project_dir):
    """
    Write the image sets and LaunchScreen.storyboard for ``config``.

    Raises a SplashError subclass on the first hard failure; a missing
    branding image or animation is skipped with a warning.
    """
    xcassets = assets_dir(project_dir)
    if not os.path.isdir(xcassets):
        raise ProjectLayoutError(f'Could not find {xcassets}')
    if not config.image:
        raise ConfigError('No splash image configured (image)')
    launch_img = load_image(config.image)

    # 1) LaunchBackground.imageset: one pixel of the background color
    bg_dir = os.path.join(xcassets, f'{BACKGROUND_SET}.imageset')
    save_png(solid_color_image(config.color), os.path.join(bg_dir, 'background.png'))
    descriptors.write_contents_json(bg_dir, descriptors.background_descriptors('background.png'))
    print(f"{TAG} Created {BACKGROUND_SET}.imageset", flush=True)

    # 2) LaunchImage.imageset
    launch_dir = os.path.join(xcassets, f'{LAUNCH_SET}.imageset')
    written = write_variants(launch_img, launch_dir, LAUNCH_SET)
    descriptors.write_contents_json(launch_dir, descriptors.variant_descriptors(written))
    print(f"{TAG} Created {LAUNCH_SET}.imageset", flush=True)

    # 3) BrandingImage.imageset (optional)
    show_branding = False
    if config.branding_image:
        if os.path.isfile(config.branding_image):
            branding_dir = os.path.join(xcassets, f'{BRANDING_SET}.imageset')
            written = write_variants(load_image(config.branding_image), branding_dir, BRANDING_SET)
            descriptors.write_contents_json(branding_dir, descriptors.variant_descriptors(written))
            show_branding = True
            print(f"{TAG} Created {BRANDING_SET}.imageset", flush=True)
        else:
            print(f"[WARN] Branding image not found, skipped: {config.branding_image}", flush=True)

    # 4) Animation file is shipped next to the app sources (optional)
    if config.ios_animation:
        if os.path.isfile(config.ios_animation):
            ext = os.path.splitext(config.ios_animation)[1]
            dst = os.path.join(project_dir, 'ios', 'Runner', f'splash_animation{ext}')
            copy_asset(config.ios_animation, dst)
            print(f"{TAG} Copied Runner/splash_animation{ext}", flush=True)
        else:
            print(f"[WARN] iOS animation not found, skipped: {config.ios_animation}", flush=True)

    # 5) LaunchScreen.storyboard, after the image sets it names
    storyboard_dir = os.path.join(project_dir, 'ios', 'Runner', 'Base.lproj')
    storyboard_path = os.path.join(storyboard_dir, 'LaunchScreen.storyboard')
    try:
        os.makedirs(storyboard_dir, exist_ok=True)
        with open(storyboard_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(storyboard_xml(config.color, show_branding))
    except OSError as e:
        raise OutputError(f'Failed to write {storyboard_path}: {e}') from e
    print(f"{TAG} Created LaunchScreen.storyboard", flush=True)
