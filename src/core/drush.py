"""Drush command detection and execution utilities."""

import json
import logging
import os
import platform
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Module-level cache for drush command; a failed detection is cached too
_drush_command_cache: Optional[List[str]] = None
_drush_detected = False


def _setup_drush_environment() -> dict:
    """
    Setup environment with extended PATH for drush execution.

    MCP servers may have limited PATH, missing ddev/docker/lando/fin.

    Returns:
        Environment dict with extended PATH
    """
    env = os.environ.copy()

    path_sep = ";" if platform.system() == "Windows" else ":"

    # Ordered by likelihood of containing dev tools
    standard_paths = [
        "/usr/local/bin",  # Standard Unix (Intel Mac, Linux, Composer global)
        "/opt/homebrew/bin",  # Homebrew on Apple Silicon Mac
        "/usr/bin",
        "/bin",
        "/snap/bin",
        str(Path.home() / ".local" / "bin"),
        str(Path.home() / ".composer" / "vendor" / "bin"),
        str(Path.home() / ".config" / "composer" / "vendor" / "bin"),
    ]

    current_path = env.get("PATH", "")
    paths_to_add = [p for p in standard_paths if p not in current_path and Path(p).exists()]

    if paths_to_add:
        env["PATH"] = path_sep.join(paths_to_add) + path_sep + current_path

    return env


def get_drush_command() -> Optional[List[str]]:
    """
    Get drush command with caching and smart detection.

    Returns:
        List of command parts (e.g., ["ddev", "drush"]) or None if not found
    """
    global _drush_command_cache, _drush_detected

    if _drush_detected:
        return _drush_command_cache

    _drush_command_cache = _detect_drush_command()
    _drush_detected = True
    return _drush_command_cache


def reset_drush_command():
    """Drop the cached drush command so detection runs again."""
    global _drush_command_cache, _drush_detected
    _drush_command_cache = None
    _drush_detected = False


def _detect_drush_command() -> Optional[List[str]]:
    """
    Detect how to run drush in this environment.

    Priority:
    1. User config (drush_command in config.json)
    2. Development environment (DDEV, Lando, Docksal)
    3. Composer vendor/bin/drush
    4. Global drush

    Returns:
        List of command parts or None if drush not found
    """
    # Import here to avoid circular dependency
    from src.core.config import get_config

    config = get_config()
    drupal_root = Path(config.get("drupal_root", ""))

    if config.get("drush_command"):
        cmd = config["drush_command"].split()
        logger.info(f"Using configured drush command: {' '.join(cmd)}")
        return cmd

    environments = [
        (drupal_root / ".ddev" / "config.yaml", "ddev"),
        (drupal_root / ".lando.yml", "lando"),
        (drupal_root / ".docksal", "fin"),
    ]
    for marker, tool in environments:
        if not marker.exists():
            continue
        if shutil.which(tool):
            logger.info(f"Detected {tool} environment")
            return [tool, "drush"]
        logger.warning(f"Found {marker.name} but '{tool}' command not in PATH")

    vendor_drush = drupal_root / "vendor" / "bin" / "drush"
    if vendor_drush.is_file():
        logger.info(f"Using Composer drush: {vendor_drush}")
        return [str(vendor_drush)]

    if shutil.which("drush"):
        logger.info("Using global drush")
        return ["drush"]

    logger.error("Drush not found. Add drush_command to config.json, e.g. \"ddev drush\"")
    return None


def run_drush_command(
    args: List[str],
    timeout: int = 30,
    return_raw_error: bool = False,
    parse_json: bool = True,
):
    """
    Run a drush command and return JSON output.

    Args:
        args: Drush command arguments (e.g., ["theme:list", "--format=json"])
        timeout: Command timeout in seconds
        return_raw_error: If True, return dict with error info instead of None
        parse_json: If False, return stripped stdout text instead of parsed JSON

    Returns:
        Parsed JSON output (dict or list) or None if the command printed nothing
        or failed. If return_raw_error=True and an error occurs, returns:
        {"_error": True, "_error_type": "...", "_error_message": "..."}
    """

    def _failure(error_type: str, message: str):
        if return_raw_error:
            return {"_error": True, "_error_type": error_type, "_error_message": message}
        return None

    drush_cmd = get_drush_command()

    if not drush_cmd:
        logger.error("Cannot run drush command: drush not found")
        return _failure("drush_not_found", "Drush not found")

    from src.core.config import get_config

    drupal_root = Path(get_config().get("drupal_root", ""))
    full_cmd = [*drush_cmd, *args]

    try:
        logger.debug(f"Running: {' '.join(full_cmd)}")

        result = subprocess.run(
            full_cmd,
            cwd=str(drupal_root),
            capture_output=True,
            text=True,
            timeout=timeout,
            env=_setup_drush_environment(),
        )

        if result.returncode != 0:
            logger.error(f"Drush command failed: {result.stderr}")
            return _failure("drush_failed", result.stderr.strip())

        if not parse_json:
            return result.stdout.strip()

        if result.stdout.strip():
            return json.loads(result.stdout)

        return None

    except subprocess.TimeoutExpired:
        logger.error(f"Drush command timed out after {timeout}s")
        return _failure("timeout", f"Command timed out after {timeout}s")
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse drush JSON output: {e}")
        return _failure("json_parse", str(e))
    except OSError as e:
        logger.error(f"Error running drush command: {e}")
        return _failure("unknown", str(e))
