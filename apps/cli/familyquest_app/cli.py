"""CLI entrypoints for rendering, exporting and inspecting FamilyQuest cards."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from familyquest_core import build_doctor_payload, configure_logging, load_config
from familyquest_export import copy_to_clipboard, default_download_dir, download
from familyquest_renderer import (
    CARD_COLOR_SCHEMES,
    CARD_TEMPLATES,
    CardEngineError,
    CardGenerationData,
    CardRenderer,
    CardTemplate,
    InvalidCardDataError,
    TemplateId,
    get_color_scheme,
    get_template,
)
from familyquest_renderer.catalog import TEMPLATE_COLOR_SCHEMES


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _read_card_json(source: str) -> dict[str, Any]:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).expanduser().read_text(encoding="utf-8")
        raw = json.loads(text)
    except OSError as exc:
        raise InvalidCardDataError(f"Cannot read card data from {source}: {exc}") from exc
    except ValueError as exc:
        raise InvalidCardDataError(f"Card data in {source} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidCardDataError("Card data must be a JSON object")
    return raw


def _load_card_data(args: argparse.Namespace, default_scheme: str) -> CardGenerationData:
    raw = _read_card_json(args.data)
    if args.scheme or not (raw.get("colorScheme") or raw.get("color_scheme")):
        raw.pop("color_scheme", None)
        raw["colorScheme"] = get_color_scheme(args.scheme or default_scheme)
    return CardGenerationData.from_dict(raw)


def _resolve_template(template_id: str) -> CardTemplate:
    if template_id in CARD_TEMPLATES:
        return get_template(template_id)
    # Ids outside the catalog keep their name; the renderer picks the layout.
    return CardTemplate(id=template_id, name=template_id)


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    renderer = CardRenderer(
        default_width=cfg.render.default_width,
        default_height=cfg.render.default_height,
        font_family=cfg.render.font_family,
        image_format=cfg.render.image_format,
    )
    template = _resolve_template(args.template)

    try:
        data = _load_card_data(args, cfg.render.color_scheme)
        data_uri = renderer.render(data, template)
        options = renderer.build_options(data, template)

        payload: dict[str, Any] = {
            "success": True,
            "template": template.id,
            "layout": TemplateId.resolve(template.id).value,
            "width": options.width,
            "height": options.height,
        }

        if not args.no_save:
            directory = args.out_dir or cfg.export.download_dir or default_download_dir()
            filename = args.filename or cfg.export.default_filename
            download(data_uri, filename, directory)
            payload["saved_to"] = str(Path(directory).expanduser() / Path(filename).name)

        if args.copy:
            asyncio.run(copy_to_clipboard(data_uri, timeout_s=cfg.export.clipboard_timeout_s))
            payload["copied"] = True

        if args.print_uri:
            payload["data_uri"] = data_uri
    except CardEngineError as exc:
        _print_json({"success": False, "error": str(exc), "error_type": type(exc).__name__})
        return 2

    _print_json(payload)
    return 0


def cmd_templates(_args: argparse.Namespace) -> int:
    _print_json(
        [
            {
                "id": t.id,
                "name": t.name,
                "description": t.description,
                "premium": t.is_premium,
                "layout": t.layout.type,
                "width": t.dimensions.width if t.dimensions else None,
                "height": t.dimensions.height if t.dimensions else None,
                "color_schemes": list(TEMPLATE_COLOR_SCHEMES.get(t.id, ())),
            }
            for t in CARD_TEMPLATES.values()
        ]
    )
    return 0


def cmd_schemes(_args: argparse.Namespace) -> int:
    _print_json({name: scheme.to_dict() for name, scheme in sorted(CARD_COLOR_SCHEMES.items())})
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="familyquest-cards", description="FamilyQuest shareable card renderer")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a milestone card from JSON card data")
    render_cmd.add_argument("--data", required=True, help="Path to card data JSON, or - for stdin")
    render_cmd.add_argument("--template", default="celebration", help="Template id (unknown ids use celebration)")
    render_cmd.add_argument("--scheme", default=None, choices=sorted(CARD_COLOR_SCHEMES), help="Override the color scheme")
    render_cmd.add_argument("--out-dir", default=None, help="Directory to save the PNG into")
    render_cmd.add_argument("--filename", default=None, help="File name for the saved PNG")
    render_cmd.add_argument("--no-save", action="store_true", help="Do not write the image to disk")
    render_cmd.add_argument("--copy", action="store_true", help="Copy the image to the system clipboard")
    render_cmd.add_argument("--print-uri", action="store_true", help="Include the data URI in the output")
    render_cmd.set_defaults(func=cmd_render)

    templates_cmd = sub.add_parser("templates", help="List built-in card templates")
    templates_cmd.set_defaults(func=cmd_templates)

    schemes_cmd = sub.add_parser("schemes", help="List built-in color schemes")
    schemes_cmd.set_defaults(func=cmd_schemes)

    doctor_cmd = sub.add_parser("doctor", help="Print rendering environment diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
