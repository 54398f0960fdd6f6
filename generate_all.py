#!/usr/bin/env python3
"""
Generate dark and light themes for every preset.
Consolidates VS Code themes into out/themes/ folder.
"""

import argparse
import shutil
import subprocess
from pathlib import Path

from code_theme_generator.options import PRESETS


def main():
    parser = argparse.ArgumentParser(description="Generate themes for every preset")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed passed to every run, for reproducible output",
    )
    parser.add_argument(
        "--no-jitter",
        action="store_true",
        help="Disable random variation for all themes",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    out_dir = root / "out"
    themes_dir = out_dir / "themes"

    themes_dir.mkdir(parents=True, exist_ok=True)

    print(f"Found {len(PRESETS)} presets to process\n")

    for preset in sorted(PRESETS):
        for variant in ("dark", "light"):
            theme_name = f"{preset.title()} {variant.title()}"
            theme_out_dir = out_dir / f"{preset}-{variant}"

            print(f"{'=' * 60}")
            print(f"Generating preset: {theme_name}")
            print(f"{'=' * 60}")

            cmd = [
                "uv",
                "run",
                "code-theme-generator",
                "--preset",
                preset,
                f"--{variant}",
                "--name",
                theme_name,
                "-o",
                str(theme_out_dir),
            ]
            if args.seed is not None:
                cmd.extend(["--seed", str(args.seed)])
            if args.no_jitter:
                cmd.append("--no-jitter")

            result = subprocess.run(cmd, cwd=root)

            if result.returncode != 0:
                print(f"Error generating {theme_name}")
                continue

            _copy_themes(theme_out_dir, themes_dir)
            print()

    print(f"{'=' * 60}")
    print("Done! All themes consolidated in:")
    print(f"  {themes_dir}")
    print(f"{'=' * 60}")


def _copy_themes(theme_out_dir, themes_dir):
    """Copy generated theme files to the consolidated themes directory."""
    for theme in theme_out_dir.glob("*-color-theme.json"):
        shutil.copy(theme, themes_dir / theme.name)
        print(f"Copied {theme.name} to {themes_dir}")


if __name__ == "__main__":
    main()
