from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_settings
from .context import AppContext, build_context
from .errors import FieldWidthsError
from .sanitize import absint
from .uninstall import uninstall


def _form_id(raw: str) -> int:
    form_id = absint(raw)
    if not form_id:
        raise argparse.ArgumentTypeError(f"invalid form id: {raw!r}")
    return form_id


def _cmd_export(ctx: AppContext, args: argparse.Namespace) -> int:
    text = json.dumps(ctx.manager.export_form_widths(args.form_id), indent=2, ensure_ascii=False) + "\n"
    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        print(f"[ffw] exported form {args.form_id} -> {out}")
    else:
        sys.stdout.write(text)
    return 0


def _cmd_import(ctx: AppContext, args: argparse.Namespace) -> int:
    try:
        data = json.loads(Path(args.path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"[ffw] could not read {args.path}: {e}", file=sys.stderr)
        return 1
    saved = ctx.manager.import_form_widths(args.form_id, data)
    print(f"[ffw] imported {len(saved['fields'])} field(s) into form {args.form_id}")
    return 0


def _cmd_clear(ctx: AppContext, args: argparse.Namespace) -> int:
    ctx.manager.delete_form_widths(args.form_id)
    print(f"[ffw] cleared widths for form {args.form_id}")
    return 0


def _cmd_css(ctx: AppContext, args: argparse.Namespace) -> int:
    sys.stdout.write(ctx.frontend.render_style_tag() if args.style_tag else ctx.frontend.collect_css())
    return 0


def _cmd_uninstall(ctx: AppContext, args: argparse.Namespace) -> int:
    if not args.yes:
        print("[ffw] refusing to delete data without --yes", file=sys.stderr)
        return 2
    removed = uninstall(ctx.store)
    print(f"[ffw] removed {removed} key(s)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ffw", description="Manage Forminator field width settings.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("export", help="Export a form's width settings as JSON.")
    p.add_argument("form_id", type=_form_id)
    p.add_argument("--out", default=None, help="Write to this file instead of stdout.")
    p.set_defaults(func=_cmd_export)

    p = sub.add_parser("import", help="Import width settings from an export file.")
    p.add_argument("form_id", type=_form_id)
    p.add_argument("path")
    p.set_defaults(func=_cmd_import)

    p = sub.add_parser("clear", help="Delete a form's width settings.")
    p.add_argument("form_id", type=_form_id)
    p.set_defaults(func=_cmd_clear)

    p = sub.add_parser("css", help="Print the combined CSS for every configured form.")
    p.add_argument("--style-tag", action="store_true", help="Wrap the CSS in a <style> element.")
    p.set_defaults(func=_cmd_css)

    p = sub.add_parser("uninstall", help="Delete all stored options, widths and cached CSS.")
    p.add_argument("--yes", action="store_true", help="Confirm deletion.")
    p.set_defaults(func=_cmd_uninstall)
    return parser


def main(argv: Optional[List[str]] = None, ctx: Optional[AppContext] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(os.getenv("FFW_LOG_LEVEL") or "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx is None:
        ctx = build_context(load_settings(Path.cwd()))
    try:
        return args.func(ctx, args)
    except FieldWidthsError as e:
        print(f"[ffw] {e.code}: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
