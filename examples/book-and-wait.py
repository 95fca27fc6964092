#!/usr/bin/env python3
"""
Book a node, wait until it is ready, print its login details and cancel it.

Usage:
    1. Copy .env.example to .env and fill in your credentials
    2. Run: python examples/book-and-wait.py

Or set environment variables:
    SLICIFY_USERNAME=me SLICIFY_PASSWORD=secret MIN_CORES=2 python examples/book-and-wait.py
"""

import logging
import os
import sys

# Add parent directory to path to import SDK
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv

from slicify import Config, SlicifyClient, SlicifyException

load_dotenv()
logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'))

min_cores = int(os.getenv('MIN_CORES', '1'))
min_ram = int(os.getenv('MIN_RAM', '1024'))
max_price = float(os.getenv('MAX_PRICE', '0.1'))
bits = int(os.getenv('BITS', '64'))
min_ecu = int(os.getenv('MIN_ECU', '1'))
wait_timeout = float(os.getenv('WAIT_TIMEOUT', '900'))


async def book_and_wait():
    config = Config.from_env()

    async with SlicifyClient(config) as client:
        booking = client.booking
        try:
            print('=== Booking a node ===')
            print(f'Cores >= {min_cores}, RAM >= {min_ram}MB, price <= ${max_price}/h, '
                  f'{bits}-bit, ECU >= {min_ecu}')

            booking_id = await booking.book_node(min_cores, min_ram, max_price, bits, min_ecu)
            print(f'✓ Booking created: {booking_id}')

            print('Waiting for the machine to become ready...')
            await booking.wait_ready(booking_id, timeout=wait_timeout)

            details = await booking.get_booking_details(booking_id)
            print(f'✓ Machine ready: {details.machine_spec}')
            print(f'  Cores: {details.core_count}, ECU: {details.ecu}')
            print(f'  SSH password: {details.ssh_password}')
            print(f'  Sudo password: {details.sudo_password}')

            await booking.cancel_booking(booking_id)
            print('✓ Booking cancelled')

        except SlicifyException as error:
            print(f'❌ Error: {error}')
            if hasattr(error, 'status_code'):
                print(f'   Status Code: {error.status_code}')
            sys.exit(1)


if __name__ == '__main__':
    import asyncio
    asyncio.run(book_and_wait())
