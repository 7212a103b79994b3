"""Render arbitrary byte spans as human-inspectable text."""

from untty.core.constants import CR, NL


def is_printable(byte: int) -> bool:
    """ASCII printable range, space through tilde."""
    return 0x20 <= byte <= 0x7E


def hex_escape(byte: int) -> bytes:
    return b"\\x%02x" % byte


def render_literal(span: bytes) -> bytes:
    """
    Render a span for output.

    Printable bytes and newlines pass through, carriage returns are dropped,
    and everything else becomes a four-character ``\\xHH`` escape.
    """
    out = bytearray()
    for byte in span:
        if byte == CR:
            continue
        if is_printable(byte) or byte == NL:
            out.append(byte)
        else:
            out += hex_escape(byte)
    return bytes(out)


def render_trace(span: bytes) -> str:
    """Verbose rendering for debug traces: every non-printable byte is escaped."""
    return "".join(
        chr(byte) if is_printable(byte) else f"\\x{byte:02x}"
        for byte in span
    )
