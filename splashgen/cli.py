# splashgen/cli.py
import os
import argparse

from .build_utils import PLATFORMS, run_generation
from .config import load_config
from .errors import ConfigError


def build_parser():
    parser = argparse.ArgumentParser(
        prog="splashgen",
        description="Generate Android and iOS splash screen resources from a YAML config.",
    )
    parser.add_argument(
        "-c", "--config",
        default=os.environ.get("SPLASH_CONFIG"),
        help="Path to the splash config YAML file (env: SPLASH_CONFIG)",
    )
    parser.add_argument(
        "-p", "--project-dir",
        default=os.environ.get("SPLASH_PROJECT_DIR", os.getcwd()),
        help="Root of the mobile project (env: SPLASH_PROJECT_DIR, default: cwd)",
    )
    parser.add_argument(
        "--platform",
        action="append",
        choices=list(PLATFORMS),
        help="Only generate this platform; may be repeated (default: all)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.config:
        print("Please provide a config file using --config or -c.", flush=True)
        parser.print_usage()
        return

    config_path = args.config
    if not os.path.isabs(config_path) and not os.path.exists(config_path):
        config_path = os.path.join(args.project_dir, config_path)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f"[ERROR] {e}", flush=True)
        return

    print("[START] Generating splash screen...", flush=True)
    run_generation(config, args.project_dir, args.platform)


if __name__ == "__main__":
    main()
