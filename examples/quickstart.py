#!/usr/bin/env python3
"""
Quick Start Example

This is a minimal example showing how to use the Slicify SDK.

Usage:
    1. Copy .env.example to .env and fill in your credentials
    2. Run: python examples/quickstart.py
"""

import os
import sys

# Add parent directory to path to import SDK
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv

from slicify import Config, SlicifyClient

load_dotenv()


async def main():
    # 1. Create configuration from SLICIFY_USERNAME / SLICIFY_PASSWORD
    config = Config.from_env()

    # 2. Create client; the context manager closes the HTTP connection pool
    async with SlicifyClient(config) as client:
        # 3. List active bookings
        booking_ids = await client.booking.get_active_booking_ids()
        print(f'Active bookings: {booking_ids or "none"}')

        for booking_id in booking_ids:
            status = await client.booking.get_booking_status(booking_id)
            print(f'  {booking_id}: {status}')

    print('Done!')


if __name__ == '__main__':
    import asyncio
    asyncio.run(main())
