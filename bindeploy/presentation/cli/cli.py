"""
CLI Module

Architectural Intent:
- Command-line interface for bindeploy
- Entry point for all user interactions
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import asyncio
import dataclasses
import logging
import sys
import traceback
from bindeploy.infrastructure.config import load_config
from bindeploy.infrastructure.logging import configure_logging, resolve_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bindeploy",
        description="bindeploy: versioned binary deployment over SSH",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to JSON config (default: bindeploy.json)"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit structured JSON logs"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    deploy_parser = subparsers.add_parser(
        "deploy", help="Upload a build, repoint the symlink and restart the service"
    )
    deploy_parser.add_argument("server_ssh", help="e.g. user@server-address")
    deploy_parser.add_argument("server_path", help="e.g. /path/to/remote/directory/")
    deploy_parser.add_argument("binary_name", help="e.g. example")
    deploy_parser.add_argument(
        "--restart-command", "-r", default=None,
        help="Remote restart command (default: systemctl restart BINARY_NAME)",
    )
    deploy_parser.add_argument(
        "--build-dir", "-b", default=None, help="Local build output directory"
    )
    deploy_parser.add_argument(
        "--strategy", choices=["replace", "rename"], default=None,
        help="How the activation symlink is swapped",
    )
    deploy_parser.add_argument(
        "--repo", default=None, help="Repository to read the commit from (default: cwd)"
    )

    hash_parser = subparsers.add_parser("hash", help="Print the content digest of a file")
    hash_parser.add_argument("file", help="File to hash")

    name_parser = subparsers.add_parser(
        "name", help="Print the remote version name for the given components"
    )
    name_parser.add_argument("binary_name")
    name_parser.add_argument("commit")
    name_parser.add_argument("digest")
    name_parser.add_argument(
        "--timestamp", "-t", type=int, default=None,
        help="Unix timestamp to use instead of the current time",
    )

    return parser


async def _deploy(args, config, verbose: bool) -> None:
    from bindeploy.application.dtos.deployment_dtos import DeploymentRequest
    from bindeploy.composition_root import create_container

    if args.strategy:
        config = dataclasses.replace(
            config,
            activation=dataclasses.replace(config.activation, strategy=args.strategy),
        )

    try:
        request = DeploymentRequest(
            server_ssh=args.server_ssh,
            server_path=args.server_path,
            binary_name=args.binary_name,
            restart_command=args.restart_command
            or config.restart_command_for(args.binary_name),
            build_dir=args.build_dir or config.build.output_dir,
        )
        container = create_container(config, repo_path=args.repo)
    except ValueError as e:
        print(f"[-] Invalid arguments: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        print(f"[*] Deploying {request.output_file_path} to {request.server_ssh}:{request.server_path}...")
        response = await container.deploy_binary.execute(request)
        print(f"[+] Deployed {response.version_name}")
        print(f"[*] {response.link_path} -> {response.artifact_path}")
    except Exception as e:
        print(f"[-] Deployment Failed: {e}", file=sys.stderr)
        if verbose:
            traceback.print_exc()
        sys.exit(1)
    finally:
        container.telemetry.shutdown()


async def async_main():
    parser = build_parser()
    args = parser.parse_args()
    config = load_config(args.config)

    # Configure logging based on flags
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = resolve_level(config.log_level)
    configure_logging(level=level, json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command == "deploy":
        await _deploy(args, config, verbose)
        return

    if args.command == "hash":
        from bindeploy.domain.services.content_hasher import ContentHasher

        hasher = ContentHasher(config.hashing.algorithm, config.hashing.chunk_size)
        try:
            digest = await asyncio.get_running_loop().run_in_executor(
                None, hasher.hash_file, args.file
            )
        except OSError as e:
            print(f"[-] Cannot read {args.file}: {e}", file=sys.stderr)
            sys.exit(1)
        print(digest)
        return

    if args.command == "name":
        from bindeploy.domain.services.version_namer import VersionNamer

        namer = VersionNamer() if args.timestamp is None else VersionNamer(lambda: args.timestamp)
        try:
            print(namer.name(args.binary_name, args.commit, args.digest))
        except ValueError as e:
            print(f"[-] {e}", file=sys.stderr)
            sys.exit(1)
        return

    parser.print_help()


def main():
    try:
        asyncio.run(async_main())
    except KeyboardInterrupt:
        # asyncio.run cancels the main task and re-raises here
        print("\n[-] Interrupted by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
