"""Converts OpenSSH authorized_keys RSA entries to and from in-memory RSA public keys.

Provides the SSH length-encoded field codec, the `ssh-rsa` public key blob, its base64 envelope and the
`ssh-rsa <base64> <comment>` line format, with an exact round-trip for well-formed lines. Furthermore, converts keys to
PKCS1 PEM and computes OpenSSH-style fingerprints.

Typical usage example:

    key, comment = RSAPubKey.from_openssh(line)
    assert key.to_openssh(comment) == line
    pem = key.to_pkcs1_pem()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from sshrsa.authorized_keys import AuthorizedKeysFormat
from sshrsa.errors import InvalidBase64
from sshrsa.errors import InvalidLength
from sshrsa.errors import Malformed
from sshrsa.errors import RsaError
from sshrsa.errors import RsaPubKeyError
from sshrsa.errors import UnsupportedKeyType
from sshrsa.length_encoded import LengthEncodedReader
from sshrsa.length_encoded import LengthEncodedWriter
from sshrsa.rsa import decode_blob
from sshrsa.rsa import encode_blob
from sshrsa.rsa import from_base64
from sshrsa.rsa import RSAPubKey
from sshrsa.rsa import SSH_RSA
from sshrsa.rsa import to_base64

__version__ = "0.1.0"
__all__ = [
    "AuthorizedKeysFormat",
    "RSAPubKey",
    "SSH_RSA",
    "LengthEncodedReader",
    "LengthEncodedWriter",
    "encode_blob",
    "decode_blob",
    "to_base64",
    "from_base64",
    "RsaPubKeyError",
    "InvalidBase64",
    "UnsupportedKeyType",
    "InvalidLength",
    "Malformed",
    "RsaError",
]
