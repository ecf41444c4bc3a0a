"""Command-line interface for bolt-pm.

Manages the bolt.toml manifest of the project in the working directory and
calls the external compiler to build it.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import fire

from .config import (
    DEFAULT_DEPENDENCY_VERSION,
    get_compiler_name,
    get_config,
    get_log_level,
    get_manifest_filename,
)
from .errors import (
    BoltError,
    BuildFailedError,
    ConfigError,
    ManifestNotFoundError,
    UsageError,
)
from .storage import ManifestStore
from .utils.compiler import (
    CommandRunner,
    build_compiler_command,
    format_command,
    run_command,
)
from .utils.manifest import ManifestManager, entrypoint_stub

logger = logging.getLogger(__name__)

PROG = "bolt-pm"

# Number of positional arguments each command takes
COMMANDS = {"new": 0, "install": 1, "build": 0}
HELP_COMMANDS = ("help", "-h", "--help")

USAGE = f"""Bolt Package Manager ({PROG})

Usage: {PROG} <command>

Commands:
  new            Initializes a new project by creating bolt.toml
  install <pkg>  Adds a package to dependencies
  build          Compiles the project
  help           Show this help message
"""


def setup_logging(log_level: str) -> None:
    """Configure logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def print_help() -> None:
    print(USAGE)


class BoltCLI:
    def __init__(
        self,
        config: Dict[str, Any] | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config if config is not None else get_config()
        self.manifest_file = get_manifest_filename(self.config)
        self.compiler = get_compiler_name(self.config)
        self.manifest = ManifestManager(ManifestStore(self.manifest_file))
        self.runner = runner or run_command

    def new(self) -> None:
        """
        Initialize a new project in the working directory.

        Does nothing if the manifest already exists. Creates the entrypoint
        source file with placeholder content unless it is already there.
        """
        if self.manifest.exists:
            print(f"ℹ️ {self.manifest_file} already exists.")
            return

        data = self.manifest.initialize()
        print(f"✨ Initialized new Bolt project in {self.manifest_file}")

        entrypoint = Path(data["package"]["entrypoint"])
        if not entrypoint.exists():
            entrypoint.write_text(entrypoint_stub(str(entrypoint)), encoding="utf-8")
            print(f"✏️ Created entrypoint file: {entrypoint}")

    def install(self, package_name: str) -> None:
        """
        Add a package to the manifest's dependencies.

        Args:
            package_name: Name of the package. It is recorded with the default
                version, replacing any version already listed.
        """
        if not self.manifest.exists:
            raise ManifestNotFoundError(
                f"No {self.manifest_file} found. Run '{PROG} new' first."
            )

        package_name = str(package_name)
        self.manifest.add_dependency(package_name, DEFAULT_DEPENDENCY_VERSION)
        print(
            f"✅ Added '{package_name} = \"{DEFAULT_DEPENDENCY_VERSION}\"' to {self.manifest_file}."
        )
        print(f"Run '{PROG} build' to compile.")

    def build(self) -> None:
        """
        Compile the project with the external compiler.

        The entrypoint and output name come from the [package] table, and
        every dependency is passed as a `-l<name>` flag.
        """
        if not self.manifest.exists:
            raise ManifestNotFoundError(f"No {self.manifest_file} found. Cannot build.")

        data = self.manifest.load()
        package = self.manifest.get_package_info(data)
        dependencies = self.manifest.get_dependency_names(data)

        print(f"Building project '{package.name}' from {package.entrypoint}...")
        cmd = build_compiler_command(
            self.compiler, package.entrypoint, package.name, dependencies
        )
        print(f"Compiler command: {format_command(cmd)}", flush=True)

        returncode = self.runner(cmd)
        logger.info(f"Compiler finished with status {returncode}")
        if returncode != 0:
            raise BuildFailedError(
                f"Build Failed. Make sure '{self.compiler}' is in your PATH.",
                returncode,
            )
        print(f"✅ Build successful! (Output: {package.name})")


def _check_arguments(command: str, args: List[str]) -> None:
    if command not in COMMANDS:
        raise UsageError(f"Unknown command: {command}", show_usage=True)
    expected = COMMANDS[command]
    if command == "install" and not args:
        raise UsageError("Error: 'install' requires a package name.")
    if len(args) > expected:
        raise UsageError(
            f"Error: unexpected argument(s) for '{command}': {' '.join(args[expected:])}"
        )


def _load_config() -> Dict[str, Any]:
    try:
        return get_config()
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e


def main(argv: List[str] | None = None, runner: CommandRunner | None = None) -> int:
    """Entry point for the bolt-pm CLI.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            sys.argv[1:].
        runner: Runs the compiler command and returns its exit status.

    Returns:
        Process exit status (0 on success).
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print_help()
        return 1

    command, args = argv[0], argv[1:]
    if command in HELP_COMMANDS:
        print_help()
        return 0

    try:
        _check_arguments(command, args)
        config = _load_config()
        setup_logging(get_log_level(config))
        logger.debug(f"{PROG} invoked with {argv}")

        cli = BoltCLI(config=config, runner=runner)
        # Quote positional values so Fire keeps package names as strings
        fire.Fire(cli, command=[command, *(repr(a) for a in args)], name=PROG)
    except UsageError as e:
        print(f"❌ {e}", file=sys.stderr)
        if e.show_usage:
            print_help()
        return 1
    except BoltError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
