# splashgen/build_utils.py
import os

from . import android, ios
from .errors import SplashError

# =========================
# Platform steps, run in this order
# =========================
PLATFORMS = {
    "android": android.generate,
    "ios": ios.generate,
}


def run_platform(name: str, config, project_dir: str) -> bool:
    print(f"[{name.upper()}] Generating splash resources", flush=True)
    try:
        PLATFORMS[name](config, project_dir)
    except SplashError as e:
        print(f"[ERROR] {name}: {type(e).__name__}: {e}", flush=True)
        return False
    print(f"[{name.upper()}] Done", flush=True)
    return True


# =========================
# Main entry
# =========================
def run_generation(config, project_dir: str | None = None, platforms=None) -> dict:
    """
    Generate every requested platform; one failing platform does not stop the next.

    Returns {platform: "ok" | "failed"}.
    """
    project_dir = os.path.abspath(project_dir or os.getcwd())
    config = config.resolve(project_dir)
    wanted = [p for p in PLATFORMS if platforms is None or p in platforms]

    results = {}
    for name in wanted:
        results[name] = "ok" if run_platform(name, config, project_dir) else "failed"

    failed = [name for name, status in results.items() if status != "ok"]
    if failed:
        print(f"[DONE] Splash generation finished with failures: {', '.join(failed)}", flush=True)
    else:
        print("[DONE] Splash screen generation complete!", flush=True)
    return results
