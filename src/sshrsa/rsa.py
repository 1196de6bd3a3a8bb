"""Provides the RSA public key and its OpenSSH wire encoding.

Handles the `ssh-rsa` public key blob (type, exponent and sign-padded modulus as length-encoded fields), its base64
envelope and the authorized_keys line built on top of it. Furthermore, converts keys to and from PKCS1 PEM text so
they can be handed to tools that do not speak the OpenSSH format.

Typical usage example:

    key, comment = RSAPubKey.from_openssh("ssh-rsa AAAAB3NzaC1yc2E... alice@host")
    line = key.to_openssh(comment)
    pem = key.to_pkcs1_pem()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii
import hashlib

from cryptography.hazmat.primitives.asymmetric import rsa as crypto_rsa
from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1_modules import rfc8017

from sshrsa.authorized_keys import AuthorizedKeysFormat
from sshrsa.authorized_keys import join_line
from sshrsa.authorized_keys import split_line
from sshrsa.errors import InvalidBase64
from sshrsa.errors import RsaError
from sshrsa.errors import UnsupportedKeyType
from sshrsa.length_encoded import LengthEncodedReader
from sshrsa.length_encoded import LengthEncodedWriter

SSH_RSA = "ssh-rsa"

PEM_TYPES = {
    "PKCS1_PUB": ("-----BEGIN RSA PUBLIC KEY-----", "-----END RSA PUBLIC KEY-----"),
}


class RSAPubKey(AuthorizedKeysFormat):
    """An RSA public key, consisting solely of a modulus and exponent.

    Keys are immutable values: two keys with the same modulus and exponent are equal and hash alike. Construction
    validates the pair structurally (odd modulus, odd exponent of at least 3 and below the modulus), but makes no
    claim about cryptographic strength.

    Attributes:
        mod: The modulus of the key.
        expo: The public exponent of the key.
        bsize: The size of the modulus in bytes.
    """

    def __init__(self, mod: int, expo: int) -> None:
        """Initialize the RSA Public Key.

        Args:
            mod: The modulus of the key.
            expo: The public exponent of the key.

        Raises:
            RsaError: If the pair does not form a valid RSA public key.
            TypeError: If either component is not an integer.
        """
        try:
            crypto_rsa.RSAPublicNumbers(expo, mod).public_key()
        except ValueError as err:
            raise RsaError(str(err)) from err
        if mod & 1 == 0:
            raise RsaError("n must be odd.")
        self._mod = mod
        self._expo = expo

    @property
    def mod(self) -> int:
        return self._mod

    @property
    def expo(self) -> int:
        return self._expo

    @property
    def bits(self) -> int:
        return self._mod.bit_length()

    @property
    def bsize(self) -> int:
        return (self.bits + 7) // 8

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAPubKey):
            return NotImplemented
        return self._mod == other._mod and self._expo == other._expo

    def __hash__(self) -> int:
        return hash((self._mod, self._expo))

    def __repr__(self) -> str:
        return f"RSAPubKey(bits={self.bits}, expo={self._expo}, fp={self.fingerprint})"

    @property
    def fingerprint(self) -> str:
        """The SHA256 fingerprint of the key blob, as printed by `ssh-keygen -l`."""
        digest = hashlib.sha256(encode_blob(self)).digest()
        return "SHA256:" + base64.b64encode(digest).decode("ascii").rstrip("=")

    def to_openssh(self, comment: str = "") -> str:
        """Formats the key as an authorized_keys line.

        The output always has three space-separated fields; an empty comment still leaves a trailing space.

        Args:
            comment: Free text to place after the key. Written verbatim.

        Returns:
            The line `ssh-rsa <base64> <comment>`, without a line terminator.
        """
        return join_line(SSH_RSA, to_base64(self), comment)

    @classmethod
    def from_openssh(cls, line: str) -> tuple["RSAPubKey", str]:
        """Parses an authorized_keys line.

        The line is taken as-is: surrounding whitespace and line terminators are the caller's to strip.

        Args:
            line: The line to parse, `ssh-rsa <base64> [comment]`.

        Returns:
            The key and its comment, which is empty if the line carries none.

        Raises:
            Malformed: If the line has no space separator.
            UnsupportedKeyType: If the line or the blob is not for an `ssh-rsa` key.
            InvalidBase64: If the payload is not valid base64.
            InvalidLength: If the blob is truncated.
            RsaError: If the modulus and exponent do not form a valid key.
        """
        payload, comment = split_line(line, SSH_RSA)
        return from_base64(payload, cls), comment

    def to_pkcs1_pem(self) -> str:
        """Exports the key as PKCS1 PEM text, as `ssh-keygen -e -m PEM` would."""
        keydata = rfc8017.RSAPublicKey()
        keydata["modulus"] = self.mod
        keydata["publicExponent"] = self.expo
        return write_pem("PKCS1_PUB", encoder.encode(keydata))

    @classmethod
    def from_pkcs1_pem(cls, text: str) -> "RSAPubKey":
        """Imports the key from PKCS1 PEM text.

        Args:
            text: The PEM document.

        Returns:
            An RSAPubKey with the imported modulus and exponent.

        Raises:
            ValueError: If the PEM framing is wrong.
            PyAsn1Error: If the DER payload is not an RSAPublicKey.
        """
        payload = read_pem(text, "PKCS1_PUB")
        keydata, _ = decoder.decode(payload, asn1Spec=rfc8017.RSAPublicKey())
        pykeyd = localize.encode(keydata)
        return cls(pykeyd["modulus"], pykeyd["publicExponent"])


def encode_blob(key: RSAPubKey) -> bytes:
    """Serializes the key into the `ssh-rsa` wire blob.

    Writes the type, the exponent's minimal magnitude and the modulus with a single zero byte prepended, so the
    modulus always reads as non-negative under the signed mpint convention.

    Args:
        key: The key to serialize.

    Returns:
        The blob as three length-encoded fields.
    """
    writer = LengthEncodedWriter()
    writer.write_length_encoded(SSH_RSA.encode("ascii"))
    writer.write_length_encoded(integer_to_bytes(key.expo))
    writer.write_length_encoded(b"\x00" + integer_to_bytes(key.mod))
    return writer.take()


def decode_blob(blob: bytes, key_cls: type[RSAPubKey] = RSAPubKey) -> RSAPubKey:
    """Parses an `ssh-rsa` wire blob.

    Leading zero bytes of either integer are absorbed by big-endian parsing, so both padded and unpadded moduli are
    accepted. Bytes after the modulus field are ignored.

    Args:
        blob: The raw blob.
        key_cls: The key class to construct. Defaults to RSAPubKey.

    Returns:
        The decoded key.

    Raises:
        InvalidLength: If any of the three fields is truncated.
        UnsupportedKeyType: If the type field is not the text `ssh-rsa`.
        RsaError: If the modulus and exponent do not form a valid key.
    """
    reader = LengthEncodedReader(blob)
    key_type = reader.read_length_encoded()
    try:
        name = key_type.decode("utf-8")
    except UnicodeDecodeError as err:
        raise UnsupportedKeyType(str(list(key_type))) from err
    if name != SSH_RSA:
        raise UnsupportedKeyType(name)
    expo = bytes_to_integer(reader.read_length_encoded())
    mod = bytes_to_integer(reader.read_length_encoded())
    return key_cls(mod, expo)


def to_base64(key: RSAPubKey) -> str:
    return b64_enc(encode_blob(key))


def from_base64(text: str, key_cls: type[RSAPubKey] = RSAPubKey) -> RSAPubKey:
    return decode_blob(b64_dec(text), key_cls)


def read_pem(text: str, subtype: str) -> bytes:
    """Reads a PEM encoded document.

    Args:
        text: The PEM text.
        subtype: The subtype of PEM encoding to accept.

    Returns:
        The decoded PEM body.

    Raises:
        ValueError: If the header or footer does not match `subtype`.
        binascii.Error: If the body is not base64.
    """
    curr_type = PEM_TYPES[subtype]
    lines = iter(text.splitlines())
    headline = next(lines, "").strip()
    if headline != curr_type[0]:
        raise ValueError(f"PEM Headline {headline} does not match {curr_type[0]}")
    parcel = []
    for line in lines:
        line = line.strip()
        if line == curr_type[1]:
            break
        parcel.append(line)
    else:
        raise ValueError(f"PEM text does not contain footer: {curr_type[1]}")
    return base64.b64decode("".join(parcel), validate=True)


def write_pem(subtype: str, data: bytes) -> str:
    """Writes a PEM encoded document, with 64 column body lines."""
    curr_type = PEM_TYPES[subtype]
    payload = base64.b64encode(data).decode("ascii")
    res = "\n".join(payload[i:i + 64] for i in range(0, len(payload), 64))
    res += "\n" if res else ""
    return curr_type[0] + "\n" + res + curr_type[1] + "\n"


def bytes_to_integer(msg: bytes) -> int:
    """Converts a big-endian byte string to a non-negative integer.

    Args:
        msg: The bytes (AKA Octet String) to convert.

    Returns:
        The representative integer.
    """
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int) -> bytes:
    """Converts a non-negative integer to its minimal big-endian bytes.

    Args:
        msg: The integer to unmarshal.

    Returns:
        The representative bytes. (AKA Octet String)
    """
    return msg.to_bytes((msg.bit_length() + 7) // 8, byteorder="big", signed=False)


def b64_enc(msg: bytes) -> str:
    """Encodes bytes with the standard padded base64 alphabet."""
    return base64.b64encode(msg).decode("ascii")


def b64_dec(msg: str) -> bytes:
    """Decodes strict, canonical, padded standard base64.

    Args:
        msg: The base64 text.

    Returns:
        The decoded bytes.

    Raises:
        InvalidBase64: On characters outside the alphabet, bad padding or non-zero trailing bits.
    """
    try:
        data = base64.b64decode(msg.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as err:
        raise InvalidBase64(str(err)) from err
    if b64_enc(data) != msg:
        raise InvalidBase64("Non-canonical base64 encoding")
    return data
