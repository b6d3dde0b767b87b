"""attributify extract <paths...> [--macro] [--detect-macro] [--compact]"""

import sys
from pathlib import Path

from attributify_cli.output import die, ok_response, print_result


def register(subparsers):
    p = subparsers.add_parser("extract", help="Extract selectors from source files")
    p.add_argument("paths", nargs="+", help="Files to scan ('-' reads stdin)")
    p.add_argument("--macro", action="store_true", default=None,
                   help="Force macro parsing")
    p.add_argument("--detect-macro", action="store_true", default=None,
                   help="Switch to macro parsing when the source has `use` imports")
    p.add_argument("--compact", action="store_true", help="Single-line JSON output")
    p.set_defaults(handler=handle)


def handle(args, project_path: str):
    from attributify.config_loader import load_config
    from attributify.errors import ConfigurationError
    from attributify.extractor import extract
    from attributify.logger import configure_from_config
    from attributify.options import ExtractionOptions

    try:
        config = load_config(project_path)
        options = ExtractionOptions.from_dict(config).updated({
            "macro_parsing": args.macro,
            "detect_embedded_macro": args.detect_macro,
        })
    except ConfigurationError as e:
        die(e.message)

    diagnostics = configure_from_config(config)

    results = {}
    failed = False
    for path in args.paths:
        try:
            code = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: cannot read {path}: {e}", file=sys.stderr)
            failed = True
            continue
        results[path] = sorted(extract(code, options, diagnostics=diagnostics))

    total = len(set().union(*results.values())) if results else 0
    print_result(ok_response(results, {"total": total}), compact=args.compact)
    return 1 if failed else 0
