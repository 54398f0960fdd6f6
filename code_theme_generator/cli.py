import argparse
import logging
import os

from .export import (
    create_png_preview,
    export_json,
    generate_readability_report,
    generate_vscode_theme,
    print_palette,
)
from .options import PRESETS, default_options, merge_options, preset_options
from .schemes import ColorScheme
from .seed import options_from_image
from .session import ThemeSession


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate editor color themes from a base hue and a color scheme"
    )
    parser.add_argument(
        "--base-hue",
        type=float,
        default=None,
        help="Base hue in degrees (default: $CODE_THEME_BASE_HUE or random)",
    )
    parser.add_argument(
        "--scheme",
        default=None,
        help="Color scheme, e.g. analogous, triadic, golden-ratio (see --list-schemes)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--dark",
        dest="is_dark",
        action="store_true",
        default=None,
        help="Dark theme (default)",
    )
    mode.add_argument(
        "--light",
        dest="is_dark",
        action="store_false",
        default=None,
        help="Light theme",
    )
    parser.add_argument(
        "--ui-saturation",
        type=float,
        default=None,
        help="UI saturation 0-100 (default: 30)",
    )
    parser.add_argument(
        "--syntax-saturation",
        type=float,
        default=None,
        help="Syntax saturation 0-100 (default: 70)",
    )
    parser.add_argument(
        "--few", action="store_true", help="Use only the base scheme hues"
    )
    parser.add_argument(
        "--no-jitter",
        dest="force_regenerate",
        action="store_true",
        help="Disable random variation; output depends only on the options",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: $CODE_THEME_SEED)",
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), help="Start from a named preset"
    )
    parser.add_argument(
        "--from-image",
        metavar="IMAGE",
        help="Take base hue and mode from an image",
    )
    parser.add_argument("--name", help="Theme name (default: derived from the options)")
    parser.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: print only, write nothing)",
    )
    parser.add_argument(
        "--list-schemes", action="store_true", help="List color schemes and exit"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log generation details"
    )
    return parser


def options_from_args(args, parser):
    """GenerationOptions from parsed arguments; exits through ``parser.error``."""
    options = preset_options(args.preset) if args.preset else default_options()

    partial = {}
    if args.from_image:
        if not os.path.exists(args.from_image):
            parser.error(f"image not found: {args.from_image}")
        partial.update(options_from_image(args.from_image))
    partial.update(
        base_hue=args.base_hue,
        scheme=args.scheme,
        is_dark=args.is_dark,
        ui_saturation=args.ui_saturation,
        syntax_saturation=args.syntax_saturation,
        few=args.few or None,
        force_regenerate=args.force_regenerate or None,
    )
    try:
        return merge_options(options, **partial)
    except ValueError as e:
        parser.error(str(e))


def default_theme_name(options):
    variant = "Dark" if options.is_dark else "Light"
    scheme_name = options.scheme.value.replace("-", " ").title()
    return f"{scheme_name} {round(options.base_hue)} {variant}"


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_schemes:
        for scheme in ColorScheme:
            print(scheme.value)
        return

    options = options_from_args(args, parser)
    session = ThemeSession(options=options, seed=args.seed)
    snapshot = session.snapshot()
    theme_name = args.name or default_theme_name(session.options)

    print_palette(snapshot)
    report, _ = generate_readability_report(snapshot)
    print("\n" + report)

    if args.output is None:
        return

    _export(snapshot, theme_name, args.output, source_file=args.from_image)


def _export(snapshot, theme_name, output_dir, source_file=None):
    """Write palette JSON, VS Code theme, report and PNG preview."""
    os.makedirs(output_dir, exist_ok=True)
    variant = "dark" if snapshot["options"]["is_dark"] else "light"
    slug = theme_name.lower().replace(" ", "-")

    palette_json_path = os.path.join(output_dir, f"palette-{variant}.json")
    theme_path = os.path.join(output_dir, f"{slug}-color-theme.json")
    report_path = os.path.join(output_dir, f"readability_report-{variant}.txt")
    preview_path = os.path.join(output_dir, f"palette_preview-{variant}.png")

    export_json(
        snapshot,
        palette_json_path,
        theme_name=theme_name,
        source_file=os.path.basename(source_file) if source_file else None,
    )
    with open(theme_path, "w") as f:
        f.write(generate_vscode_theme(snapshot, theme_name))
    report, _ = generate_readability_report(snapshot)
    with open(report_path, "w") as f:
        f.write(report)
    create_png_preview(snapshot, preview_path)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {palette_json_path}")
    print(f"  - {theme_path} (contains '{theme_name}')")
    print(f"  - {report_path}")
    print(f"  - {preview_path}")
    print("=" * 60)
    return theme_path


if __name__ == "__main__":
    main()
