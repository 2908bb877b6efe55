"""
NoteApp command line

Commands:
  create   Create a note and print it
  list     Print all notes, most recently modified first
  get      Print one note
  update   Replace a note's title and content
  delete   Delete a note
  save     Autosave: update when --id is given, create otherwise
  where    Print the database path in use

Records are printed as JSON (id, title, content, createdAt, updatedAt).
Exit codes: 0 ok, 1 note operation failed, 2 storage could not be opened.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .app import NoteApp
from .config import Settings, load_settings
from .errors import OperationError, StartupError
from .logs import setup_logging

logger = logging.getLogger(__name__)


def _print_json(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def _read_content(args) -> str:
    if args.content == "-":
        return sys.stdin.read()
    return args.content or ""


def cmd_create(app: NoteApp, args) -> None:
    _print_json(app.create_note(args.title, _read_content(args)).to_dict())


def cmd_list(app: NoteApp, args) -> None:
    _print_json([n.to_dict() for n in app.get_notes()])


def cmd_get(app: NoteApp, args) -> None:
    _print_json(app.get_note(args.id).to_dict())


def cmd_update(app: NoteApp, args) -> None:
    _print_json(app.update_note(args.id, args.title, _read_content(args)).to_dict())


def cmd_delete(app: NoteApp, args) -> None:
    app.delete_note(args.id)
    _print_json({"message": "ok", "id": args.id})


def cmd_save(app: NoteApp, args) -> None:
    _print_json(app.save_note(args.id, args.title, _read_content(args)).to_dict())


def cmd_where(app: NoteApp, args) -> None:
    print(app.db_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="noteapp", description="Local notes (SQLite)")
    parser.add_argument("--config", default=None, help="YAML config file (default: $NOTEAPP_CONFIG or ./config.yaml)")
    parser.add_argument("--data-dir", default=None, help="override the data directory")
    sub = parser.add_subparsers()

    p_create = sub.add_parser("create", help="create a note")
    p_create.add_argument("--title", required=True)
    p_create.add_argument("--content", default="", help="note body, '-' reads stdin")
    p_create.set_defaults(func=cmd_create)

    p_list = sub.add_parser("list", help="list notes, newest-modified first")
    p_list.set_defaults(func=cmd_list)

    p_get = sub.add_parser("get", help="show one note")
    p_get.add_argument("id")
    p_get.set_defaults(func=cmd_get)

    p_update = sub.add_parser("update", help="replace title and content")
    p_update.add_argument("id")
    p_update.add_argument("--title", required=True)
    p_update.add_argument("--content", default="", help="note body, '-' reads stdin")
    p_update.set_defaults(func=cmd_update)

    p_delete = sub.add_parser("delete", help="delete a note")
    p_delete.add_argument("id")
    p_delete.set_defaults(func=cmd_delete)

    p_save = sub.add_parser("save", help="create or update (editor autosave)")
    p_save.add_argument("--id", default=None)
    p_save.add_argument("--title", required=True)
    p_save.add_argument("--content", default="", help="note body, '-' reads stdin")
    p_save.set_defaults(func=cmd_save)

    p_where = sub.add_parser("where", help="print the database path")
    p_where.set_defaults(func=cmd_where)
    return parser


def make_app(settings: Settings, data_dir: Optional[str] = None) -> NoteApp:
    return NoteApp(app_name=settings.app_name, data_dir=data_dir or settings.data_dir)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    settings = load_settings(args.config)
    app = make_app(settings, args.data_dir)
    setup_logging(settings.log_level)
    if args.func is cmd_where:
        cmd_where(app, args)
        return 0

    try:
        with app:
            log_dir = app.db_path.parent / "logs" if settings.log_to_file else None
            setup_logging(settings.log_level, log_dir)
            args.func(app, args)
    except StartupError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (OperationError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
