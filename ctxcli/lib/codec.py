"""Kubeconfig codec for the small YAML subset ctx reads and writes.

Decoding is permissive: lines that are not understood are skipped, so it
never fails. The scan is a cursor-driven state machine. Top-level keys
(no indentation) select the current section, and `- name:` lines inside a
section start a list item that runs until the next item or top-level key.

Encoding is deliberately lossy for clusters and users: clusters keep only
`name` and `server`, users keep only `name`. Contexts round-trip fully.
"""

from __future__ import annotations

import logging
from enum import Enum

from .model import Cluster, Config, Context, User

log = logging.getLogger(__name__)

ITEM_PREFIX = "- name:"
INDENT = "  "

CONTEXT_KEYS = ("cluster", "user", "namespace")
CLUSTER_KEYS = ("server", "certificate-authority", "certificate-authority-data")
USER_KEYS = (
    "username",
    "password",
    "token",
    "client-certificate",
    "client-certificate-data",
    "client-key",
    "client-key-data",
)


class Section(str, Enum):
    OUTSIDE = "outside"
    CONTEXTS = "contexts"
    CLUSTERS = "clusters"
    USERS = "users"
    PREFERENCES = "preferences"


_SECTIONS = {s.value: s for s in Section if s is not Section.OUTSIDE}


def _is_top_level(line: str) -> bool:
    return bool(line) and not line[0].isspace() and not line.startswith(("-", "#"))


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _split_key(stripped: str) -> tuple[str, str]:
    key, _, value = stripped.partition(":")
    return key.strip(), value.strip()


def _read_item(
    lines: list[str], start: int, keys: tuple[str, ...], track_indent: bool
) -> tuple[str, dict[str, str], int]:
    """Read the `- name:` list item beginning at `start`.

    Returns the item name, the first value seen for each of `keys` and the
    cursor of the first line after the item. When `track_indent` is set, a
    `- name:` line only ends the item if it is not indented deeper than the
    item itself (users may carry nested lists such as exec env entries).
    """
    head = lines[start]
    item_indent = _indent_of(head)
    name = head.strip()[len(ITEM_PREFIX) :].strip()
    fields: dict[str, str] = {}

    cursor = start + 1
    while cursor < len(lines):
        line = lines[cursor]
        if _is_top_level(line):
            break
        stripped = line.strip()
        if stripped.startswith(ITEM_PREFIX):
            if not track_indent or _indent_of(line) <= item_indent:
                break
        for key in keys:
            prefix = f"{key}:"
            if stripped.startswith(prefix):
                # first occurrence wins
                fields.setdefault(key, stripped[len(prefix) :].strip())
                break
        cursor += 1

    return name, fields, cursor


def decode(data: bytes | str) -> Config:
    """Decode kubeconfig text into a `Config`.

    `apiVersion` and `kind` are never read from the input; they always carry
    the model defaults.
    """
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    lines = text.splitlines()
    config = Config()

    section = Section.OUTSIDE
    cursor = 0
    while cursor < len(lines):
        line = lines[cursor]
        stripped = line.strip()

        if _is_top_level(line):
            key, value = _split_key(stripped)
            section = _SECTIONS.get(key, Section.OUTSIDE)
            if key == "current-context":
                config.current_context = value
            cursor += 1
        elif not stripped.startswith(ITEM_PREFIX) or section is Section.OUTSIDE:
            if section is Section.PREFERENCES and stripped and stripped[0] != "#":
                key, value = _split_key(stripped)
                if key:
                    config.preferences[key] = value
            cursor += 1
        elif section is Section.CONTEXTS:
            name, fields, cursor = _read_item(lines, cursor, CONTEXT_KEYS, False)
            config.contexts.append(Context(name=name, **fields))
        elif section is Section.CLUSTERS:
            name, fields, cursor = _read_item(lines, cursor, CLUSTER_KEYS, True)
            config.clusters.append(Cluster(name=name, **fields))
        elif section is Section.USERS:
            name, fields, cursor = _read_item(lines, cursor, USER_KEYS, True)
            config.users.append(User(name=name, auth=fields))
        else:
            cursor += 1

    log.debug(
        "Decoded %d contexts, %d clusters, %d users (current-context=%r)",
        len(config.contexts),
        len(config.clusters),
        len(config.users),
        config.current_context,
    )
    return config


def _line(depth: int, key: str, value: str = "") -> str:
    return f"{INDENT * depth}{key}: {value}".rstrip()


def encode(config: Config) -> bytes:
    """Encode a `Config` into kubeconfig text (UTF-8)."""
    lines = [
        _line(0, "apiVersion", config.api_version),
        _line(0, "kind", config.kind),
        _line(0, "current-context", config.current_context),
    ]

    if config.preferences:
        lines.append("preferences: {}")

    lines.append("contexts:")
    for context in config.contexts:
        lines.append(_line(1, "- name", context.name))
        lines.append(_line(2, "context"))
        lines.append(_line(3, "cluster", context.cluster))
        lines.append(_line(3, "user", context.user))
        if context.namespace:
            lines.append(_line(3, "namespace", context.namespace))

    if config.clusters:
        lines.append("clusters:")
        for cluster in config.clusters:
            lines.append(_line(1, "- name", cluster.name))
            lines.append(_line(2, "cluster"))
            lines.append(_line(3, "server", cluster.server))

    if config.users:
        lines.append("users:")
        for user in config.users:
            lines.append(_line(1, "- name", user.name))
            lines.append(_line(2, "user", "{}"))

    return ("\n".join(lines) + "\n").encode("utf-8")
