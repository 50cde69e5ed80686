# examples/stream.py
# prints chunks as the relayer sends them

import asyncio
import sys

from ainoz import AinozClient, GenerationRequest, StreamEventType


async def main() -> int:
    client = AinozClient.from_env()
    stream = client.stream_generate(
        GenerationRequest(model="default", prompt="List 5 key features of the Solana blockchain")
    )
    async for event in stream:
        if event.type is StreamEventType.DATA:
            print(event.data, end="", flush=True)
        elif event.type is StreamEventType.END:
            print()
        else:
            print(f"\nerror [{event.error.code}]: {event.error.message}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
