"""Command line interface for websafe64."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import typer

from websafe64.codec import CodecConfig, WebSafeBase64, decode_capacity, encode_capacity, encode_strlen
from websafe64.exceptions import InvalidEncodingError

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback()
def common_options_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Web-safe base64 encoder and decoder.

    Uses A-Z a-z 0-9 - _ with . as padding."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _read_stdin() -> bytes:
    return typer.get_binary_stream("stdin").read()


@app.command()
def encode(
    data: Optional[str] = typer.Argument(None, help="Text to encode. Reads stdin when omitted."),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", exists=True, dir_okay=False, help="Encode the contents of a file."
    ),
    no_padding: bool = typer.Option(False, "--no-padding", help="Omit trailing '.' padding."),
):
    """Encode bytes as web-safe base64."""
    if input_path is not None:
        raw = input_path.read_bytes()
        logger.debug("read %d bytes from %s", len(raw), input_path)
    elif data is not None:
        raw = data.encode("utf-8")
    else:
        raw = _read_stdin()
        logger.debug("read %d bytes from stdin", len(raw))

    codec = WebSafeBase64(CodecConfig(padding=not no_padding))
    typer.echo(codec.encode(raw))


@app.command()
def decode(
    text: Optional[str] = typer.Argument(None, help="Text to decode. Reads stdin when omitted."),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", dir_okay=False, help="Write the decoded bytes to a file."
    ),
):
    """Decode web-safe base64 text."""
    if text is not None:
        source: Union[str, bytes] = text
    else:
        source = _read_stdin()
        if source.endswith(b"\r\n"):
            source = source[:-2]
        elif source.endswith(b"\n"):
            source = source[:-1]

    try:
        raw = WebSafeBase64().decode(source)
    except InvalidEncodingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if output_path is not None:
        output_path.write_bytes(raw)
        logger.debug("wrote %d bytes to %s", len(raw), output_path)
    else:
        stdout = typer.get_binary_stream("stdout")
        stdout.write(raw)
        stdout.flush()


@app.command()
def sizes(
    length: int = typer.Argument(..., min=0, help="Input length in bytes or characters."),
    no_padding: bool = typer.Option(False, "--no-padding", help="Report the unpadded encoded length."),
):
    """Show buffer sizes for an input of the given length."""
    typer.echo(f"encode capacity: {encode_capacity(length)}")
    typer.echo(f"encoded length:  {encode_strlen(length, padding=not no_padding)}")
    typer.echo(f"decode capacity: {decode_capacity(length)}")


def main() -> None:
    """Entry point for the websafe64 command."""
    app()


if __name__ == "__main__":
    main()
