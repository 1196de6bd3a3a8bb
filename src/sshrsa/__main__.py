"""The Command Line Interface for the utility.

Inspects authorized_keys RSA lines and converts them to and from PKCS1 PEM. A line may be passed as an argument or,
when omitted, is read from standard input.

Typical usage example:

    sshrsa info "ssh-rsa AAAAB3NzaC1yc2E... alice@host"
    OR
    python -m sshrsa to-pem < id_rsa.pub
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

from pyasn1 import error

import sshrsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "info":
        HelpData("Describe the key of an authorized_keys line."),
    "to-pem":
        HelpData("Convert an authorized_keys line to a PKCS1 PEM public key."),
    "from-pem":
        HelpData("Convert a PKCS1 PEM public key read from standard input to an authorized_keys line."),
    "check":
        HelpData("Verify that an authorized_keys line parses and re-serializes identically."),
    "line":
        HelpData("The authorized_keys line. Read from standard input if omitted."),
    "comment":
        HelpData("Comment to attach to the generated line.", default=""),
}

lineparse = argparse.ArgumentParser(add_help=False)
lineparse.add_argument("line", nargs="?", type=help_dict["line"].format, help=help_dict["line"].description)
corep = argparse.ArgumentParser(prog="sshrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {sshrsa.__version__}")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

commands.add_parser("info", parents=[lineparse], help=help_dict["info"].description)
commands.add_parser("to-pem", parents=[lineparse], help=help_dict["to-pem"].description)
from_pem = commands.add_parser("from-pem", help=help_dict["from-pem"].description)
from_pem.add_argument("--comment",
                      "-c",
                      type=help_dict["comment"].format,
                      default=help_dict["comment"].default,
                      help=help_dict["comment"].description)
commands.add_parser("check", parents=[lineparse], help=help_dict["check"].description)


def read_line(line: str | None) -> str:
    """Take the line argument, falling back to the first line of standard input."""
    if line is None:
        line = sys.stdin.readline()
    return line.rstrip("\r\n")


def main():
    """Core Command Line Interface"""
    args = corep.parse_args()
    try:
        match args.subcommand:
            case "info":
                key, comment = sshrsa.RSAPubKey.from_openssh(read_line(args.line))
                print(f"Type: {sshrsa.SSH_RSA}")
                print(f"Bits: {key.bits}")
                print(f"Exponent: {key.expo}")
                print(f"Fingerprint: {key.fingerprint}")
                print(f"Comment: {comment}")
            case "to-pem":
                key, _ = sshrsa.RSAPubKey.from_openssh(read_line(args.line))
                print(key.to_pkcs1_pem(), end="")
            case "from-pem":
                key = sshrsa.RSAPubKey.from_pkcs1_pem(sys.stdin.read())
                print(key.to_openssh(args.comment))
            case "check":
                line = read_line(args.line)
                key, comment = sshrsa.RSAPubKey.from_openssh(line)
                if key.to_openssh(comment) != line:
                    print("Line does not round-trip exactly!", file=sys.stderr)
                    sys.exit(1)
                print("OK")
    except (ValueError, error.PyAsn1Error) as err:
        print(f"error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
