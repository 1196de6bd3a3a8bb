"""Error types raised while reading or writing authorized_keys RSA entries.

All errors derive from `RsaPubKeyError`, itself a `ValueError`, and compare equal when they are of the same class and
carry the same arguments, so callers can assert on the exact failure.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RsaPubKeyError(ValueError):
    """Base class for every failure of the authorized_keys codec."""
    message = "Invalid RSA public key."

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidBase64(RsaPubKeyError):
    """The base64 payload is not valid padded standard-alphabet base64.

    Attributes:
        detail: The message of the underlying decoder error.
    """
    message = "Invalid base64."

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class UnsupportedKeyType(RsaPubKeyError):
    """The outer or inner key type is not `ssh-rsa`.

    Attributes:
        name: The offending key type, or the repr of its bytes if they were not valid text.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unsupported key type {self.name} (only RSA keys are supported)."


class InvalidLength(RsaPubKeyError):
    message = "Length is invalid (not enough bytes)."


class Malformed(RsaPubKeyError):
    message = "Malformed (expected `ssh-rsa <base64-encoded data> <comment>`)"


class RsaError(RsaPubKeyError):
    """The modulus and exponent pair was rejected when constructing the key.

    Attributes:
        reason: The message of the rejecting validation.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"RSA error: {self.reason}"
