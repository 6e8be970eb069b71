"""Mint BTC Pegged Coins Example.

This example mints $100 of the BTC-pegged coin on Aptos testnet. The
contract checks the mint price against a Pyth BTC/USD update that the
flow fetches from Hermes and attaches to the transaction.

Prerequisites:
1. pip install pyth-aptos-mint
2. Set APTOS_PRIVATE_KEY (see .env.example)
3. Fund the account with testnet APT for gas

Usage:
    python mint_btc_pegged_coin.py
"""

import asyncio
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def render_state(state) -> None:
    from pyth_aptos_mint import MintState

    if state is MintState.FETCHING:
        print("    Minting... (fetching price update)")
    elif state is MintState.SUBMITTING:
        print("    Minting... (submitting transaction)")
    elif state is MintState.AWAITING_FINALITY:
        print("    Minting... (waiting for confirmation)")


async def main():
    from pyth_aptos_mint import ConfigurationError, MintConfig, MintFlow

    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())

    try:
        config = MintConfig.from_env()
        flow = MintFlow.from_config(config, on_state_change=render_state)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        print("See .env.example for required variables.")
        return

    print("=" * 60)
    print(f"  MINT BTC PEGGED COINS (${config.mint_amount})")
    print("=" * 60)
    print(f"    Network: {config.network}")
    print(f"    Account: {flow.identity.address}")
    print(f"    Entry point: {config.mint_function}")

    try:
        outcome = await flow.mint()
    finally:
        await flow.close()

    if outcome.ok:
        print(f"\nTransaction successful! Hash: {outcome.tx_hash}")
        print(
            f"    https://explorer.aptoslabs.com/txn/{outcome.tx_hash}"
            f"?network={config.network}"
        )
    else:
        print(f"\nError: {outcome.error}")


if __name__ == "__main__":
    asyncio.run(main())
