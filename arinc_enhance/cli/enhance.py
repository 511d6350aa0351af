# -*- coding: utf-8 -*-
import argparse, logging, sys
from contextlib import ExitStack
from typing import List, Optional

from arinc_enhance.core.enhance import process
from arinc_enhance.core.errors import EnhanceError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="arinc-enhance",
        description="Augment FAA CIFP (ARINC 424) localizers with a computed true bearing for flight simulators")
    ap.add_argument("cifp_file", help="CIFP file to read ('-' for standard input)")
    ap.add_argument("-o", "--output", default=None,
                    help="path of the file to output augmented procedures (default: standard output)")
    ap.add_argument("--remove-duplicate-localizers", default=True, action=argparse.BooleanOptionalAction,
                    help="drop LDA localizers whose identifier is used by more than one record (e.g. KVNY IBUR)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT, stream=sys.stderr)

    logger.info(f"CIFP file: {args.cifp_file!r}")
    logger.info(f"CIFP output file: {args.output or '<stdout>'!r}")

    with ExitStack() as stack:
        try:
            if args.cifp_file == "-":
                in_stream = sys.stdin.buffer
            else:
                in_stream = stack.enter_context(open(args.cifp_file, "rb"))
            if args.output:
                out_stream = stack.enter_context(open(args.output, "wb"))
            else:
                out_stream = sys.stdout.buffer
        except OSError as exc:
            logger.error(f"Could not open file: {exc}")
            raise SystemExit(1)

        try:
            stats = process(in_stream, out_stream,
                            remove_duplicate_localizers=args.remove_duplicate_localizers)
            out_stream.flush()
        except (EnhanceError, OSError) as exc:
            logger.error(f"Could not process data: {exc}")
            raise SystemExit(1)

    logger.info(f"Processed data: records={stats.records_read} lines={stats.lines_written} "
                f"enhanced={stats.localizers_enhanced} skipped={stats.localizers_skipped} "
                f"duplicates_removed={stats.duplicates_removed}")


if __name__ == "__main__":
    main()
