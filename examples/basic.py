# examples/basic.py
# single-shot generation against a running relayer (ainoz-relayer)
# AINOZ_RELAYER_URL / AINOZ_API_KEY are read from the environment or .env

import asyncio
import sys

from ainoz import AinozClient, AinozError


async def main() -> int:
    client = AinozClient.from_env()
    try:
        response = await client.generate_text(
            {
                "model": "default",
                "prompt": "Explain what Solana is in one sentence",
                "wallet": "ExampleWalletAddress123",
            }
        )
    except AinozError as e:
        print(f"error [{e.code}]: {e.message}", file=sys.stderr)
        return 1

    print(response.text)
    print(f"request id: {response.request_id}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
