"""Print the authorization headers the client would attach to one request."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from iyzi_client import ApiVersion, AuthHeaderBuilder, SigningError, load_options, options_from_env


def _read_body(args: argparse.Namespace) -> str:
    if args.body_file:
        return Path(args.body_file).read_text(encoding="utf-8").strip()
    return args.body


def main() -> None:
    parser = argparse.ArgumentParser(description="Print signed iyzipay request headers.")
    parser.add_argument("--config", default=None, help="YAML options file; environment variables when omitted.")
    parser.add_argument("--version", choices=[v.value for v in ApiVersion], default=ApiVersion.V1.value)
    parser.add_argument("--uri", default="", help="Full request URI (V2 only).")
    parser.add_argument("--body", default="", help="Canonical string (V1) or JSON body (V2).")
    parser.add_argument("--body-file", default=None, help="Read the body from a file instead.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    options = load_options(args.config) if args.config else options_from_env()
    builder = AuthHeaderBuilder(credentials=options.credentials)
    body = _read_body(args)
    try:
        headers = builder.headers_for(
            ApiVersion(args.version),
            uri=args.uri,
            canonical_body=body,
            body=body,
        )
    except SigningError as exc:
        print(f"Signing failed: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    print(json.dumps(headers, indent=2))


if __name__ == "__main__":
    main()
