"""
ports/profile_loader.py | Database Profile Loader
Purpose: Load book database connection settings from db_profiles.json based on profile name
Author: ChAI-Engine (chaiji)
Last-Updated: 2025-06-12
Non-Std Deps: python-dotenv
Behavior: Without a profile file the built-in default profile is used (sqlite adapter, bookratings database).
With a file, the profile comes from --profile, then DEFAULT_DB_PROFILE in .env, then the first profile in the file.
"""

import os
import json
import argparse
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "user_inputs" / "db_profiles.json"
DEFAULT_PROFILE_NAME = "default"
DEFAULT_PROFILE: Dict[str, Any] = {
    "adapter": "sqlite",
    "database": "bookratings.sqlite",
}


def _read_profiles(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError:
        raise ValueError(f"Invalid JSON in {config_path}. Please check the file format.")
    if not isinstance(config, dict):
        raise ValueError(f"{config_path} must contain a JSON object of named profiles.")
    return config


def get_profile_name(args: Optional[argparse.Namespace] = None, config_path: Optional[Path] = None) -> str:
    """
    Purpose: Determine which profile to use based on CLI args and environment variables.
    Inputs: args (argparse.Namespace) - Command line arguments, may contain 'profile' attribute.
            config_path (Path) - Profile file to fall back on; defaults to user_inputs/db_profiles.json.
    Outputs: profile_name (str) - Name of the profile to use.
    Role: Centralizes profile selection logic with CLI args taking precedence over env vars.
    """
    if args and getattr(args, "profile", None):
        return args.profile

    env_profile = os.environ.get("DEFAULT_DB_PROFILE")
    if env_profile:
        return env_profile

    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if config_path.exists():
        config = _read_profiles(config_path)
        if config:
            return list(config.keys())[0]

    return DEFAULT_PROFILE_NAME


def _resolve_paths(profile: Dict[str, Any]) -> Dict[str, Any]:
    resolved = dict(DEFAULT_PROFILE)
    resolved.update(profile)
    # Relative paths are relative to the project root, not the working directory
    for key in ("database", "log_path"):
        if not resolved.get(key):
            continue
        path = Path(resolved[key]).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        resolved[key] = str(path)
    return resolved


def load_profile_config(
    profile_name: Optional[str] = None,
    args: Optional[argparse.Namespace] = None,
    config_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Purpose: Load the specified database profile.
    Inputs: profile_name (str) - Name of the profile to load, or None to auto-detect.
            args (argparse.Namespace) - Command line arguments, used if profile_name is None.
            config_path (Path) - Profile file; defaults to user_inputs/db_profiles.json.
    Outputs: profile_config (dict) - 'adapter', absolute 'database' path, plus any extra keys (e.g. 'log_path').
    Role: Provides connection settings to main.py and adapters/book_store.py.
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if profile_name is None:
        profile_name = get_profile_name(args, config_path)

    if not config_path.exists():
        if profile_name != DEFAULT_PROFILE_NAME:
            raise FileNotFoundError(
                f"Profile '{profile_name}' requested but no profile file exists at {config_path}."
            )
        return _resolve_paths(DEFAULT_PROFILE)

    config = _read_profiles(config_path)
    if profile_name in config:
        return _resolve_paths(config[profile_name])
    if profile_name == DEFAULT_PROFILE_NAME and not config:
        return _resolve_paths(DEFAULT_PROFILE)

    available_profiles = list(config.keys())
    error_msg = f"Profile '{profile_name}' not found in {config_path.name}."
    if available_profiles:
        error_msg += f" Available profiles: {', '.join(available_profiles)}"
        error_msg += f"\nTry using --profile {available_profiles[0]} or set DEFAULT_DB_PROFILE={available_profiles[0]} in .env"
    raise ValueError(error_msg)


def add_profile_arg(parser: argparse.ArgumentParser) -> None:
    """
    Purpose: Add profile selection argument to an ArgumentParser.
    Inputs: parser (argparse.ArgumentParser) - Parser to add the argument to.
    Outputs: None (modifies parser in-place).
    """
    parser.add_argument("--profile", type=str, help="Database profile to use (from user_inputs/db_profiles.json)")
