"""Command line interface: split a secret into hex shares and combine them back."""

from __future__ import annotations

import binascii
import logging
from typing import IO, Any, Iterable, List, Optional, Tuple

import click

from .errors import TSSError
from .recovery import recover_secret
from .sharing import split_secret


def _decode_hex(text: str, what: str) -> bytes:
    try:
        return binascii.unhexlify("".join(text.split()))
    except (binascii.Error, ValueError) as exc:
        raise click.ClickException(f"{what} is not valid hex: {exc}") from exc


def _non_blank(lines: Iterable[str]) -> List[str]:
    return [line.strip() for line in lines if line.strip()]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(package_name="gf256-tss")
def main(verbose: bool) -> None:
    """Threshold secret sharing over GF(256)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("-n", "--shares", "shares_count", type=int, required=True, help="Number of shares.")
@click.option("-t", "--threshold", type=int, required=True, help="Shares needed to recover.")
@click.option("--secret", "secret_hex", help="Secret as hex. Read from stdin when omitted.")
@click.option(
    "--input",
    "input_file",
    type=click.File("rb"),
    help="Read the raw secret bytes from a file.",
)
def split(
    shares_count: int,
    threshold: int,
    secret_hex: Optional[str],
    input_file: Optional[IO[Any]],
) -> None:
    """Split a secret and print one hex share per line."""
    if secret_hex is not None and input_file is not None:
        raise click.UsageError("--secret and --input are mutually exclusive")
    if input_file is not None:
        secret = input_file.read()
    elif secret_hex is not None:
        secret = _decode_hex(secret_hex, "secret")
    else:
        secret = _decode_hex(click.get_text_stream("stdin").read(), "secret")

    try:
        shares = split_secret(secret, shares_count, threshold)
    except TSSError as exc:
        raise click.ClickException(str(exc)) from exc
    for share in shares:
        click.echo(share.hex())


@main.command()
@click.argument("share_hex", nargs=-1)
@click.option(
    "--input",
    "input_file",
    type=click.File("r"),
    help="Read hex shares from a file, one per line.",
)
def combine(share_hex: Tuple[str, ...], input_file: Optional[IO[Any]]) -> None:
    """Recover a secret from hex shares and print it as hex."""
    if share_hex and input_file is not None:
        raise click.UsageError("SHARE_HEX arguments and --input are mutually exclusive")
    if share_hex:
        lines = list(share_hex)
    elif input_file is not None:
        lines = _non_blank(input_file)
    else:
        lines = _non_blank(click.get_text_stream("stdin"))

    shares = [_decode_hex(line, f"share {n + 1}") for n, line in enumerate(lines)]
    try:
        secret = recover_secret(shares)
    except TSSError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(secret.hex())


if __name__ == "__main__":
    main()
