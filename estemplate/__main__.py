"""
Render Elasticsearch index templates (or any of their parts) to JSON
"""

import argparse
import logging
import sys
from pathlib import Path

from estemplate.config import ENV_PREFIX, get_settings
from estemplate.entity import Entity
from estemplate.errors import InvalidEntityError, TemplateError
from estemplate.util import import_target


def load_entity(target: str) -> Entity:
    """Import the entity named by module:attribute, calling it first if it is a factory function"""
    obj = import_target(target)
    if callable(obj) and not isinstance(obj, Entity):
        obj = obj()
    if not isinstance(obj, Entity):
        raise ValueError(f"{target} is a {type(obj).__name__}, not a template entity")
    return obj


def render(args):
    try:
        entity = load_entity(args.target)
    except (ImportError, AttributeError, TypeError, ValueError) as e:
        logging.error(f"Cannot load {args.target}: {e}")
        sys.exit(1)
    if args.check:
        try:
            entity.check(include_name=args.include_name)
        except InvalidEntityError as e:
            logging.error(f"Invalid {type(entity).__name__}, please fix: {', '.join(e.fields)}")
            sys.exit(1)
    options = {} if args.indent is None else dict(indent=args.indent)
    try:
        output = entity.to_json(include_name=args.include_name, **options)
    except TemplateError as e:
        logging.error(f"Cannot render {args.target}: {e}")
        sys.exit(1)
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logging.info(f"Written {type(entity).__name__} from {args.target} to {args.output}")
    else:
        print(output)


def config_estemplate(args):
    settings = get_settings()
    lines = []
    for fieldname, fieldinfo in type(settings).model_fields.items():
        value = getattr(settings, fieldname)
        if args.write and fieldname == "env_file":
            # Not a useful entry in an actual env_file
            continue
        if args.write and (doc := fieldinfo.description):
            lines.append(f"# {doc}")
        if value is None:
            lines.append(f"#{ENV_PREFIX.upper()}{fieldname.upper()}=")
        else:
            lines.append(f"{ENV_PREFIX.upper()}{fieldname.upper()}={value}")
    if not args.write:
        print("\n".join(lines))
        return
    if settings.env_file.exists():
        logging.error(f"File {settings.env_file} already exists, quitting")
        sys.exit(1)
    settings.env_file.write_text("\n".join(lines) + "\n")
    logging.info(f"Written settings to {settings.env_file}")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m estemplate")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("render", help="Render a template entity to JSON")
    p.add_argument("target", help="The entity to render as module:attribute, e.g. myproject.templates:LOGS")
    p.add_argument("--include-name", action="store_true", help="Wrap the output in the entity's name or key")
    p.add_argument("--indent", type=int, help="Indent the JSON output (overrides ESTEMPLATE_INDENT)")
    p.add_argument("-o", "--output", help="Write the JSON to this file instead of stdout")
    p.add_argument("--check", action="store_true", help="Check for missing or invalid fields before rendering")
    p.set_defaults(func=render)

    p = subparsers.add_parser("config", help="Show the current settings")
    p.add_argument("--write", action="store_true", help="Write the settings to a new .env file")
    p.set_defaults(func=config_estemplate)

    args = parser.parse_args(argv)

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.INFO)

    args.func(args)


if __name__ == "__main__":
    main()
