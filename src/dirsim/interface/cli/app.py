from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, stored
settings, CLI overrides), logging bootstrap, locale selection, command
collection (script file, -c flags, stdin) and batch execution against a
fresh namespace.
"""

import json
import sys
from typing import Any, Dict, List, Optional, TextIO

from dirsim.core.services.namespace import Namespace
from dirsim.core.services.validator import validate_config
from dirsim.core.tree.ids import IdGenerator
from dirsim.domain.config import get_default_config, load_config, save_config
from dirsim.infra.fs import read_text_lines
from dirsim.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from dirsim.interface.cli import args as cli_args
from dirsim.interface.cli.commands import CommandShell
from dirsim.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Stream read for commands when neither -c nor --script is
               given. Defaults to sys.stdin.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 missing script,
             130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.from_settings(clean_conf, get_default_log_path()))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if clean_conf["locale"] != i18n.locale:
        i18n.load_locale(clean_conf["locale"])

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Command collection
    lines: List[str] = []
    if args.script:
        try:
            lines.extend(read_text_lines(args.script))
        except FileNotFoundError:
            msg = i18n.t("cli.errors.script_not_found", path=args.script)
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2
    lines.extend(args.commands)
    if not args.script and not args.commands:
        stream = stdin if stdin is not None else sys.stdin
        lines.extend(line.rstrip("\n") for line in stream)

    # 5. Batch execution
    namespace = Namespace(
        root_name=clean_conf["root_name"],
        id_generator=IdGenerator(clean_conf["id_seed"]),
    )
    shell = CommandShell(namespace, i18n)
    logger.debug(f"Executing {len(lines)} command line(s)")

    try:
        for line in lines:
            for out in shell.execute(line):
                print(out)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of non-None override values into the base configuration.

    Only known keys are merged, preventing schema pollution.
    """
    out = dict(base)
    for k in ("root_name", "id_seed", "locale", "log_level"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
