import os

import pytest
from PIL import Image

MANIFEST = """<manifest xmlns:android="http://schemas.android.com/apk/res/android">
    <application android:label="demo">
        <activity
            android:name=".MainActivity"
            android:exported="true"
            android:theme="@style/LaunchTheme">
            <intent-filter>
                <action android:name="android.intent.action.MAIN"/>
            </intent-filter>
        </activity>
    </application>
</manifest>
"""


@pytest.fixture
def make_png(tmp_path):
    def _make(name="a.png", size=(64, 64), color=(200, 10, 10, 255)):
        path = tmp_path / name
        Image.new("RGBA", size, color).save(path, format="PNG")
        return str(path)
    return _make


@pytest.fixture
def flutter_project(tmp_path):
    """An empty Flutter project with the android/ios folders the generators expect."""
    main = tmp_path / "android" / "app" / "src" / "main"
    main.mkdir(parents=True)
    (main / "AndroidManifest.xml").write_text(MANIFEST, encoding="utf-8")
    (tmp_path / "ios" / "Runner" / "Assets.xcassets").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def snapshot():
    """Returns a function mapping every file under a root to its bytes."""
    def _snapshot(root):
        files = {}
        for dirpath, _dirs, names in os.walk(root):
            for name in names:
                path = os.path.join(dirpath, name)
                with open(path, "rb") as f:
                    files[os.path.relpath(path, root)] = f.read()
        return files
    return _snapshot
