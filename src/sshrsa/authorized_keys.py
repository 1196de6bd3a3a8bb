"""The OpenSSH authorized_keys line grammar: `<type> <base64> [comment]`.

Splitting and joining are key-type agnostic; each key type plugs its payload codec in by implementing
`AuthorizedKeysFormat`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import abc
import typing

from sshrsa.errors import Malformed
from sshrsa.errors import UnsupportedKeyType

_Key = typing.TypeVar("_Key", bound="AuthorizedKeysFormat")


class AuthorizedKeysFormat(abc.ABC):
    """Capability of a public key type to be written to and read from an authorized_keys line."""

    @abc.abstractmethod
    def to_openssh(self, comment: str = "") -> str:
        """Formats the key as a single authorized_keys line carrying `comment`."""

    @classmethod
    @abc.abstractmethod
    def from_openssh(cls: type[_Key], line: str) -> tuple[_Key, str]:
        """Parses an authorized_keys line into the key and its comment."""


def split_line(line: str, key_type: str) -> tuple[str, str]:
    """Splits an authorized_keys line into its payload and comment.

    Only the space character separates fields. The comment is everything after the second space, verbatim. A line
    without a second space has an empty comment, exactly like a line ending in a single space.

    Args:
        line: The line, already stripped of any line terminator by the caller.
        key_type: The type token the line must start with.

    Returns:
        The base64 payload and the comment.

    Raises:
        Malformed: If the line contains no space at all.
        UnsupportedKeyType: If the type token is not `key_type`.
    """
    found_type, sep, rest = line.partition(" ")
    if not sep:
        raise Malformed()
    if found_type != key_type:
        raise UnsupportedKeyType(found_type)
    payload, _, comment = rest.partition(" ")
    return payload, comment


def join_line(key_type: str, payload: str, comment: str) -> str:
    """Joins the three fields of an authorized_keys line.

    The separator before the comment is always written, even for an empty comment.
    """
    return f"{key_type} {payload} {comment}"
