"""CLI entrypoints for the hintkit demo, sheet validation and value parsing."""

from __future__ import annotations

import argparse
import json
import platform
from dataclasses import asdict
from importlib import metadata
from pathlib import Path

from hintkit_core import load_config
from hintkit_core.logging_setup import configure_logging
from hintkit_hints import (
    HintApplier,
    HintError,
    StaticToolkit,
    parse_constant_bits,
    parse_font,
    parse_rgb,
    validate_sheet,
)
from hintkit_hints.parsers import font_style_names, system_color_key

from .defaults import resolve_sheet


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version(dist: str = "hintkit") -> str:
    try:
        return metadata.version(dist)
    except Exception:
        return "0.1.0"


def _toolkit(backend: str, qpa_platform: str | None = None):
    if backend == "static":
        return StaticToolkit()
    from hintkit_qt import QtToolkit

    return QtToolkit(qpa_platform or "offscreen")


def _applier(args: argparse.Namespace, strict: bool = False) -> HintApplier:
    cfg = load_config()
    backend = getattr(args, "backend", None) or cfg.toolkit.backend
    toolkit = _toolkit(backend, cfg.toolkit.qpa_platform)
    if backend == "static":
        return HintApplier(toolkit, strict=strict)
    from hintkit_qt import qt_applier

    return qt_applier(toolkit, strict=strict)


def cmd_run(args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui(args.sheet)


def cmd_validate(args: argparse.Namespace) -> int:
    try:
        sheet = resolve_sheet(args.sheet)
    except (OSError, HintError) as exc:
        _print_json({"success": False, "errors": [str(exc)]})
        return 2

    report = validate_sheet(sheet, _applier(args), strict=not args.no_strict)
    payload = asdict(report)
    payload["success"] = not report.errors
    _print_json(payload)
    return 0 if not report.errors else 2


def cmd_font(args: argparse.Namespace) -> int:
    applier = _applier(args)
    descriptor = parse_font(applier.toolkit, args.spec)
    payload = asdict(descriptor)
    payload["style_names"] = font_style_names(descriptor.style)
    _print_json(payload)
    return 0


def cmd_color(args: argparse.Namespace) -> int:
    rgb = parse_rgb(args.spec)
    if rgb is None:
        applier = _applier(args)
        color = applier.toolkit.system_color(system_color_key(args.spec))
        rgb_values = getattr(color, "getRgb", None)
        if rgb_values is not None:
            red, green, blue, _alpha = rgb_values()
            payload = {"red": red, "green": green, "blue": blue}
        else:
            payload = asdict(color)
        payload["system"] = system_color_key(args.spec)
    else:
        payload = asdict(rgb)
    _print_json(payload)
    return 0


def cmd_bits(args: argparse.Namespace) -> int:
    applier = _applier(args)
    toolkit = applier.toolkit
    space = toolkit.font_styles if args.space == "font" else toolkit.constants
    bits = parse_constant_bits(args.spec, space)
    _print_json({"spec": args.spec, "space": space.label, "bits": bits, "hex": f"{bits:#x}"})
    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    from .app import render_snapshot

    cfg = load_config()
    out = render_snapshot(resolve_sheet(args.sheet), Path(args.out).expanduser().resolve(), cfg)
    _print_json({"success": True, "snapshot": str(out)})
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    cfg = load_config()
    _print_json(
        {
            "platform": platform.platform(),
            "python": platform.python_version(),
            "hintkit": _installed_version(),
            "pyside6": _installed_version("PySide6"),
            "config": asdict(cfg),
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hintkit", description="UI hint tools and speedbar demo")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run the speedbar demo window")
    run_cmd.add_argument("--sheet", default=None, help="Path to a JSON hint sheet")
    run_cmd.set_defaults(func=cmd_run)

    validate_cmd = sub.add_parser("validate", help="Check every hint value in a sheet")
    validate_cmd.add_argument("--sheet", required=True, help="Path to a JSON hint sheet")
    validate_cmd.add_argument("--no-strict", action="store_true", help="Allow hint names without a known transform")
    validate_cmd.add_argument("--backend", choices=["qt", "static"], default=None)
    validate_cmd.set_defaults(func=cmd_validate)

    font_cmd = sub.add_parser("font", help="Parse a font spec such as 'Arial, 18, BOLD'")
    font_cmd.add_argument("spec")
    font_cmd.add_argument("--backend", choices=["qt", "static"], default=None)
    font_cmd.set_defaults(func=cmd_font)

    color_cmd = sub.add_parser("color", help="Parse a color spec such as '#FF8800' or 'red'")
    color_cmd.add_argument("spec")
    color_cmd.add_argument("--backend", choices=["qt", "static"], default=None)
    color_cmd.set_defaults(func=cmd_color)

    bits_cmd = sub.add_parser("bits", help="OR together constant names such as 'BORDER|CENTER'")
    bits_cmd.add_argument("spec")
    bits_cmd.add_argument("--space", choices=["constants", "font"], default="constants")
    bits_cmd.add_argument("--backend", choices=["qt", "static"], default=None)
    bits_cmd.set_defaults(func=cmd_bits)

    snap_cmd = sub.add_parser("snapshot", help="Render the speedbar offscreen to an image")
    snap_cmd.add_argument("--sheet", default=None, help="Path to a JSON hint sheet")
    snap_cmd.add_argument("--out", required=True, help="Output image path (PNG)")
    snap_cmd.set_defaults(func=cmd_snapshot)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and config details")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.logging.keep_files, console=False, level=cfg.logging.level)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except HintError as exc:
        _print_json({"success": False, "error": str(exc)})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
