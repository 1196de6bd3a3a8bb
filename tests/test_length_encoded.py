# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import struct

import pytest

from sshrsa.errors import InvalidLength
from sshrsa.length_encoded import LengthEncodedReader
from sshrsa.length_encoded import LengthEncodedWriter


@pytest.mark.parametrize("payload", [b"", b"ssh-rsa", b"\x00" * 3, bytes(range(256)) * 5])
def test_read_write(payload):
    writer = LengthEncodedWriter()
    writer.write_length_encoded(payload)
    reader = LengthEncodedReader(writer.take())
    assert reader.read_length_encoded() == payload
    assert reader.remaining() == 0


def test_write_layout():
    writer = LengthEncodedWriter()
    writer.write_length_encoded(b"ssh-rsa")
    writer.write_length_encoded(b"\x01\x00\x01")
    assert writer.take() == b"\x00\x00\x00\x07ssh-rsa\x00\x00\x00\x03\x01\x00\x01"


def test_sequential_reads():
    data = b"\x00\x00\x00\x01A\x00\x00\x00\x00\x00\x00\x00\x02BCtrailing"
    reader = LengthEncodedReader(data)
    assert reader.read_length_encoded() == b"A"
    assert reader.read_length_encoded() == b""
    assert reader.read_length_encoded() == b"BC"
    assert reader.remaining() == len(b"trailing")


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\x00\x00", b"\x00\x00\x00\x05abcd", struct.pack(">I", 2**32 - 1)])
def test_read_truncated(data):
    reader = LengthEncodedReader(data)
    with pytest.raises(InvalidLength):
        reader.read_length_encoded()


def test_read_truncated_after_valid_field():
    reader = LengthEncodedReader(b"\x00\x00\x00\x01A\x00\x00")
    assert reader.read_length_encoded() == b"A"
    with pytest.raises(InvalidLength):
        reader.read_length_encoded()


def test_write_oversized_is_programming_error(mocker):
    writer = LengthEncodedWriter()
    fake = mocker.MagicMock()
    fake.__len__.return_value = 2**32
    with pytest.raises(struct.error):
        writer.write_length_encoded(fake)
