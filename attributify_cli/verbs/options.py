"""attributify options [--compact]"""

from attributify_cli.output import die, ok_response, print_result


def register(subparsers):
    p = subparsers.add_parser("options", help="Show the resolved extraction options")
    p.add_argument("--compact", action="store_true", help="Single-line JSON output")
    p.set_defaults(handler=handle)


def handle(args, project_path: str):
    from attributify.config_loader import load_options
    from attributify.errors import ConfigurationError

    try:
        resolved = load_options(project_path)
    except ConfigurationError as e:
        die(e.message)

    print_result(ok_response(resolved.to_dict()), compact=args.compact)
