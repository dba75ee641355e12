from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from dirsim.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirsim CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirsim",
        description=i18n.t("app.description"),
    )

    # --- Command Sources ---
    p.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=[],
        help=i18n.t("cli.args.command"),
    )
    p.add_argument(
        "-f", "--script",
        dest="script",
        default=None,
        help=i18n.t("cli.args.script"),
    )

    # --- Namespace Settings ---
    p.add_argument(
        "--root-name",
        dest="root_name",
        default=None,
        help=i18n.t("cli.args.root_name"),
    )
    p.add_argument(
        "--id-seed",
        dest="id_seed",
        type=int,
        default=None,
        help=i18n.t("cli.args.id_seed"),
    )
    p.add_argument(
        "--locale",
        dest="locale",
        default=None,
        help=i18n.t("cli.args.locale"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Arguments left at their defaults map to None and are skipped by the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_name"] = args.root_name
    overrides["id_seed"] = args.id_seed
    overrides["locale"] = args.locale

    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
