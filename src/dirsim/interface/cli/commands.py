from __future__ import annotations

"""
Command Interpreter.

Maps one-line text commands onto namespace operations and returns the
lines to show. Used by the CLI for -c commands, script files and stdin.
A failed command produces a message and never stops the batch.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from dirsim.core.analysis.renderer import render_listing, render_subtree
from dirsim.core.services.namespace import Namespace
from dirsim.domain.constants import CONTENT_NOT_FOUND, DIRECTORY_TAG, FILE_TAG
from dirsim.domain.namespace_models import NavigationStatus
from dirsim.domain.node_models import Node
from dirsim.utils.i18n import I18n, i18n

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class CommandSpec:
    """
    Static description of a driver command.

    Attributes:
        name: Keyword typed by the user.
        usage: Usage string shown in help and on missing arguments.
        min_args: Number of required whitespace-separated arguments.
    """
    name: str
    usage: str
    min_args: int = 0


COMMANDS: List[CommandSpec] = [
    CommandSpec("mkdir", "mkdir NAME", 1),
    CommandSpec("touch", "touch NAME", 1),
    CommandSpec("cd", "cd NAME | .. | /", 1),
    CommandSpec("ls", "ls"),
    CommandSpec("latest", "latest"),
    CommandSpec("oldest", "oldest"),
    CommandSpec("rm", "rm NAME", 1),
    CommandSpec("find", "find NAME", 1),
    CommandSpec("findall", "findall NAME", 1),
    CommandSpec("write", "write NAME [TEXT...]", 1),
    CommandSpec("cat", "cat NAME", 1),
    CommandSpec("pwd", "pwd"),
    CommandSpec("tree", "tree"),
    CommandSpec("sortid", "sortid"),
    CommandSpec("getid", "getid ID", 1),
    CommandSpec("setid", "setid NAME ID", 2),
    CommandSpec("help", "help"),
]

_SPECS: Dict[str, CommandSpec] = {spec.name: spec for spec in COMMANDS}


class CommandShell:
    """Executes driver commands against one namespace."""

    def __init__(self, namespace: Namespace, translator: I18n = i18n):
        self.namespace = namespace
        self._t = translator
        self._handlers: Dict[str, Callable[[str], List[str]]] = {
            "mkdir": self._mkdir,
            "touch": self._touch,
            "cd": self._cd,
            "ls": lambda _: render_listing(self.namespace.list_all(), self._t),
            "latest": lambda _: render_listing(self.namespace.list_latest(), self._t),
            "oldest": lambda _: render_listing(self.namespace.list_oldest(), self._t),
            "rm": self._rm,
            "find": lambda rest: self._find(rest, scoped=True),
            "findall": lambda rest: self._find(rest, scoped=False),
            "write": self._write,
            "cat": self._cat,
            "pwd": lambda _: [self.namespace.current_path()],
            "tree": lambda _: render_subtree(self.namespace),
            "sortid": self._sortid,
            "getid": self._getid,
            "setid": self._setid,
            "help": self._help,
        }

    def execute(self, line: str) -> List[str]:
        """
        Run one command line.

        Args:
            line: Raw input line. Blank lines and comments produce no output.

        Returns:
            List[str]: Lines to show the user.
        """
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            return []

        parts = text.split(None, 1)
        command = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        spec = _SPECS.get(command)
        if spec is None:
            return [self._t.t("cli.messages.unknown_command", command=command)]
        if len(rest.split()) < spec.min_args:
            return [self._t.t("cli.messages.missing_argument", usage=spec.usage)]

        logger.debug(f"Executing '{text}'")
        return self._handlers[command](rest)

    def run(self, lines: List[str]) -> List[str]:
        output: List[str] = []
        for line in lines:
            output.extend(self.execute(line))
        return output

    # -------------------------------------------------------------------------
    # HANDLERS
    # -------------------------------------------------------------------------

    def _mkdir(self, rest: str) -> List[str]:
        self.namespace.create_directory(rest.split()[0])
        return []

    def _touch(self, rest: str) -> List[str]:
        self.namespace.create_file(rest.split()[0])
        return []

    def _cd(self, rest: str) -> List[str]:
        target = rest.split()[0]
        status = self.namespace.change_directory(target)
        if status is NavigationStatus.NO_PARENT:
            return [self._t.t("cli.messages.no_parent")]
        if status is NavigationStatus.NOT_FOUND:
            return [self._t.t("cli.messages.dir_not_found", name=target)]
        if status is NavigationStatus.NOT_A_DIRECTORY:
            return [self._t.t("cli.messages.not_a_directory", name=target)]
        return []

    def _rm(self, rest: str) -> List[str]:
        name = rest.split()[0]
        if self.namespace.delete_node(name):
            return [self._t.t("cli.messages.deleted", name=name)]
        return [self._t.t("cli.messages.delete_failed", name=name)]

    def _find(self, rest: str, *, scoped: bool) -> List[str]:
        name = rest.split()[0]
        if scoped:
            node = self.namespace.find_node(name)
        else:
            node = self.namespace.find_node_in_all(name)
        if node is None:
            return [self._t.t("cli.messages.node_not_found", name=name)]
        return [self._describe(node)]

    def _write(self, rest: str) -> List[str]:
        parts = rest.split(None, 1)
        name = parts[0]
        text = parts[1] if len(parts) > 1 else ""
        if self.namespace.set_content(name, text):
            return [self._t.t("cli.messages.content_written", name=name)]
        return [self._t.t("cli.messages.content_not_found", name=name)]

    def _cat(self, rest: str) -> List[str]:
        name = rest.split()[0]
        content = self.namespace.get_content(name)
        if content == CONTENT_NOT_FOUND:
            return [self._t.t("cli.messages.content_not_found", name=name)]
        return [content]

    def _sortid(self, _: str) -> List[str]:
        return [f"{node.id} {_tag(node)} {node.name}" for node in self.namespace.sort_children_by_id()]

    def _getid(self, rest: str) -> List[str]:
        raw = rest.split()[0]
        try:
            node_id = int(raw)
        except ValueError:
            return [self._t.t("cli.messages.invalid_id", value=raw)]
        node = self.namespace.find_child_by_id(node_id)
        if node is None:
            return [self._t.t("cli.messages.node_not_found", name=raw)]
        return [self._describe(node)]

    def _setid(self, rest: str) -> List[str]:
        name, raw = rest.split()[:2]
        try:
            node_id = int(raw)
        except ValueError:
            return [self._t.t("cli.messages.invalid_id", value=raw)]
        if self.namespace.override_node_id(name, node_id):
            return [self._t.t("cli.messages.id_updated", name=name, id=node_id)]
        return [self._t.t("cli.messages.node_not_found", name=name)]

    def _help(self, _: str) -> List[str]:
        return [self._t.t("cli.messages.help_header")] + [f"  {spec.usage}" for spec in COMMANDS]

    def _describe(self, node: Node) -> str:
        return self._t.t(
            "cli.messages.node_found",
            kind=node.kind.value,
            name=node.name,
            id=node.id,
            path=self.namespace.path_of(node),
        )


def _tag(node: Node) -> str:
    return DIRECTORY_TAG if node.is_directory else FILE_TAG
