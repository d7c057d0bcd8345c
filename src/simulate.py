"""Tracking simulation runner.

Replays one event feed to completion and logs the final state of every
shipment it touched.

Usage:
    python src/simulate.py                          # Replay TRACKING_FEED or the sample feed
    python src/simulate.py --feed events.txt        # Replay a specific file
    python src/simulate.py --delay 0                # No pause between records
"""

import argparse
import asyncio

from tracking.domain import tracking
from tracking.feed import get_feed
from tracking.feed.file_adapter import FileFeed
from tracking.simulation import TrackingSimulator
from tracking.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


async def run(simulator):
    await simulator.start()

    for shipment_id in sorted(simulator.shipments):
        shipment = simulator.shipments[shipment_id]
        logger.info("Final shipment state", **shipment.to_dict())


def main():
    parser = argparse.ArgumentParser(description="Shipment tracking simulator")
    parser.add_argument("--feed", help="Feed file to replay (default: TRACKING_FEED or the packaged sample)")
    parser.add_argument("--delay", type=float, help="Seconds between records (default: TRACKING_EVENT_DELAY or 1.0)")
    args = parser.parse_args()

    configure_logging()
    tracking.init()

    feed = FileFeed(args.feed) if args.feed else get_feed()
    asyncio.run(run(TrackingSimulator(feed=feed, delay=args.delay)))


if __name__ == "__main__":
    main()
