import logging
import shlex
import subprocess
from typing import Callable, Iterable, List

logger = logging.getLogger(__name__)

# Status reported when the compiler cannot be started, as a shell would.
COMMAND_NOT_FOUND = 127

CommandRunner = Callable[[List[str]], int]


def dependency_flags(dependency_names: Iterable[str]) -> List[str]:
    """Convert dependency names into `-l<name>` linker flags."""
    return [f"-l{name}" for name in dependency_names]


def build_compiler_command(
    compiler: str,
    entrypoint: str,
    output_name: str,
    dependency_names: Iterable[str],
) -> List[str]:
    """Assemble the compiler invocation for a project.

    Args:
        compiler: Name or path of the compiler binary
        entrypoint: Source file to compile
        output_name: Name of the produced artifact
        dependency_names: Dependencies to link against

    Returns:
        Command as an argument list
    """
    return [compiler, entrypoint, "-o", output_name, *dependency_flags(dependency_names)]


def format_command(cmd: List[str]) -> str:
    return shlex.join(cmd)


def run_command(cmd: List[str]) -> int:
    """Run a command to completion and return its exit status.

    Output is not captured so compiler diagnostics reach the terminal.
    """
    logger.info(f"Running {format_command(cmd)}")
    try:
        result = subprocess.run(cmd, check=False)
    except (FileNotFoundError, PermissionError) as e:
        logger.info(f"Could not start {cmd[0]!r}: {e}")
        return COMMAND_NOT_FOUND
    logger.debug(f"{cmd[0]} exited with status {result.returncode}")
    return result.returncode
