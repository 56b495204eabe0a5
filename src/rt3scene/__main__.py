"""Command-line interface."""
import argparse
import logging
import sys
from typing import List, Optional

from rt3scene.api import SceneRecorder
from rt3scene.errors import SceneLoadError
from rt3scene.logging_config import setup_logging
from rt3scene.parser.scene_parser import SceneParser

logger = logging.getLogger("rt3scene")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="rt3scene",
        description="Parse an RT3 scene file and list the setup API calls it produces.",
    )
    ap.add_argument("scene", help="Path to the RT3 scene file (.xml)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Trace the tag walk (DEBUG logging)")
    ap.add_argument("--log-file", default=None, help="Also write the log to this file")
    args = ap.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    recorder = SceneRecorder()
    try:
        SceneParser(recorder).parse(args.scene)
    except SceneLoadError as e:
        logger.critical(f"Aborting: {e}")
        return 1

    for call in recorder.calls:
        print(call)
    return 0


if __name__ == "__main__":
    sys.exit(main())
