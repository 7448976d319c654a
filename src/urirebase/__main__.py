"""Entry point: python -m urirebase"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from urirebase.exceptions import InvalidUriError, SessionConfigError
from urirebase.infrastructure.logger import install_exception_hooks, logger, setup_logging
from urirebase.session import SessionConfig, build_rebaser, load_session


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="urirebase", description="Translate artifact URIs to local URIs")
    parser.add_argument("uris", nargs="+", help="URIs to translate")
    parser.add_argument("--session", type=Path, help="YAML session file")
    parser.add_argument("--reverse", action="store_true", help="Translate local URIs to artifact URIs")
    parser.add_argument("--no-prompt", action="store_true", help="Never ask to locate missing files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every resolution step")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    config = load_session(args.session) if args.session else SessionConfig(workspace_roots=[Path.cwd()])
    rebaser = build_rebaser(config, interactive=not args.no_prompt)

    unresolved = 0
    for uri in args.uris:
        if args.reverse:
            result = await rebaser.translate_local_to_artifact(uri)
            resolved = result != uri
        else:
            result = await rebaser.translate_artifact_to_local(uri)
            resolved = bool(result)
        if not resolved:
            unresolved += 1
        print(f"{uri}\t{result}")

    logger.debug("Translation finished", total=len(args.uris), unresolved=unresolved, bases=len(rebaser.bases))
    return 1 if unresolved else 0


def main(argv: list[str] | None = None) -> int:
    install_exception_hooks()
    args = parse_args(argv)
    if args.verbose or args.log_json:
        setup_logging("DEBUG" if args.verbose else None, json_output=args.log_json or None)
    try:
        return asyncio.run(run(args))
    except (InvalidUriError, SessionConfigError) as err:
        print(f"urirebase: {err}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
