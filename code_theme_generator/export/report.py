from ..color import contrast_ratio, parse_color
from ..readability import DEFAULT_MIN_CONTRAST, comment_band
from ..roles import ANSI_EXEMPT_ROLES, COMMENT_ROLE, SYNTAX_SPECS, UI_SPECS
from .json_export import palette_data


def _rows(palette, specs_or_floor, exempt=()):
    for role, value in palette.items():
        if isinstance(specs_or_floor, dict):
            minimum = specs_or_floor[role].min_contrast
        else:
            minimum = None if role in exempt else specs_or_floor
        yield role, value, minimum


def generate_readability_report(snapshot):
    """Generate a detailed readability report for inspection.

    Every role is measured against BG1. Exempt roles are listed without a
    verdict; the comment role is checked against its band.

    Returns:
        tuple: (report text, list of (role, hex, achieved, required) failures)
    """
    snapshot = palette_data(snapshot)
    bg = parse_color(snapshot["ui"]["BG1"])
    band_low, band_high = comment_band(bg)

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {'DARK' if snapshot['options']['is_dark'] else 'LIGHT'}")
    report.append(f"Background: {bg.hex} (L: {bg.hsl[2]:.1f}%, S: {bg.hsl[1]:.1f}%)")
    report.append(f"Scheme: {snapshot['options']['scheme']}")

    categories = [
        ("UI", _rows(snapshot["ui"], UI_SPECS)),
        ("SYNTAX", _rows(snapshot["syntax"], SYNTAX_SPECS)),
        ("TERMINAL", _rows(snapshot["ansi"], DEFAULT_MIN_CONTRAST, ANSI_EXEMPT_ROLES)),
    ]

    issues = []
    for cat_name, rows in categories:
        report.append(f"\n{cat_name}")
        report.append("-" * 50)
        for role, value, minimum in rows:
            cr = contrast_ratio(value, bg)
            if role == COMMENT_ROLE and cat_name == "SYNTAX":
                ok = band_low - 0.05 <= cr <= band_high + 0.05
                status = "✓" if ok else "✗ OUT OF BAND"
                if not ok:
                    issues.append((role, value, cr, band_low))
                need = f"band {band_low}-{band_high}"
            elif minimum is None:
                status = "exempt"
                need = ""
            else:
                status = "✓" if cr >= minimum else "✗ FAIL"
                if cr < minimum:
                    issues.append((role, value, cr, minimum))
                need = f"min {minimum}"
            report.append(f"  {role:20} {value:10} {cr:5.2f}:1  {need:14} {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for role, hex_val, achieved, required in issues:
            report.append(
                f"  - {role}: {hex_val} has {achieved:.2f}:1, needs {required}:1"
            )
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(snapshot):
    """Print palette info"""
    snapshot = palette_data(snapshot)
    options = snapshot["options"]

    print("\n" + "=" * 60)
    print(f"CODE THEME ({'DARK' if options['is_dark'] else 'LIGHT'})")
    print(f"Scheme: {options['scheme']}  base hue: {options['base_hue']:.1f}")
    print("Hues: " + ", ".join(f"{h:.0f}" for h in snapshot["scheme_hues"]))
    print("=" * 60)

    for title, key in (("UI", "ui"), ("SYNTAX", "syntax"), ("TERMINAL", "ansi")):
        print(f"\n{title}:")
        for role, value in snapshot[key].items():
            print(f"  {role:20} {value}")
