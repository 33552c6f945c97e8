#!/usr/bin/env python3
"""Example script classifying a fish photo from the command line.

Requires BAIDU_AI_API_KEY and BAIDU_AI_SECRET_KEY, either exported or in a
``.env`` file in the working directory.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fish_recognition.client.exceptions import FishRecognitionError
from fish_recognition.client.fish_client import FishRecognitionClient


def main() -> int:
    """Classify the image given on the command line."""
    parser = argparse.ArgumentParser(description=__doc__)
    _ = parser.add_argument("image", type=Path, help="JPEG or PNG to classify")
    _ = parser.add_argument(
        "--env-file", type=Path, default=None, help="dotenv file to load"
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    image_path: Path = args.image
    if not image_path.exists():
        logger.error("Image not found: %s", image_path)
        return 1

    try:
        with FishRecognitionClient.from_env(args.env_file) as client:
            result = client.recognize(
                image_path.read_bytes(), filename=image_path.name
            )
    except FishRecognitionError:
        logger.exception("Recognition failed")
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
