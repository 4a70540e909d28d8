#!/usr/bin/env python3
"""
Quick start guide for hexcodec.

Run this to see the codec and the message handler marker in action.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hexcodec import (
    InvalidDigitError,
    InvalidLengthError,
    configure_logging,
    decode,
    decode_to_buffer,
    encode,
    get_handler_config,
    message_handler,
)


class UploadEndpoint:
    """Toy endpoint with a tagged handler."""

    @message_handler(max_message_size=16)
    def on_binary(self, data: bytes) -> str:
        return encode(data)


def main():
    """Run a simple example of hexcodec."""
    configure_logging("DEBUG")

    print("=" * 70)
    print("HEXCODEC QUICK START EXAMPLE")
    print("=" * 70)
    print()

    print("Step 1: Encode bytes")
    print("-" * 70)
    data = bytes([0x00, 0xFF, 0x1A])
    print(f"✓ encode({data!r}) = {encode(data)!r}")
    print()

    print("Step 2: Decode hex (any case)")
    print("-" * 70)
    print(f"✓ decode('00ff1a') = {decode('00ff1a')!r}")
    view = decode_to_buffer("CAFEBABE")
    print(f"✓ decode_to_buffer('CAFEBABE') -> read-only={view.readonly}, {view.tobytes()!r}")
    print()

    print("Step 3: Rejected input")
    print("-" * 70)
    for bad in ("ABC", "GZ"):
        try:
            decode(bad)
        except (InvalidLengthError, InvalidDigitError) as e:
            print(f"✓ decode({bad!r}) rejected: {e}")
    print()

    print("Step 4: Message handler marker")
    print("-" * 70)
    endpoint = UploadEndpoint()
    config = get_handler_config(endpoint.on_binary)
    payload = b"hello"
    if config.is_unbounded or len(payload) <= config.max_message_size:
        print(f"✓ on_binary({payload!r}) = {endpoint.on_binary(payload)!r}")
    print(f"  max_message_size: {config.max_message_size}")


if __name__ == "__main__":
    main()
