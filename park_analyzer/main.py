# park_analyzer/main.py
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from .errors import ParkFileError
from .parser import ParkFileParser, prepare_for_json
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def collect_park_files(inputs: Iterable[Path], pattern: str = '*.park') -> List[Path]:
    """Expand directories into the park files they contain."""
    files = []
    for path in inputs:
        if path.is_dir():
            files.extend(sorted(path.glob(pattern)))
        else:
            files.append(path)
    return files


def process_park_files(files: List[Path], output_dir: Path, strict: bool = False) -> int:
    """Decode each file and write `<stem>_analysis.json` to output_dir.

    Returns:
        Number of files that could not be decoded
    """
    parser = ParkFileParser(strict=strict)
    output_dir.mkdir(parents=True, exist_ok=True)
    failures = 0

    for park_file in tqdm(files, desc="Decoding", unit="file", disable=len(files) < 2):
        try:
            logger.info(f"Processing {park_file}")
            result = parser.parse_file(park_file)
        except (ParkFileError, OSError) as e:
            logger.error(f"Failed to process {park_file}: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed error:")
            failures += 1
            continue

        if not result.header.is_park_file:
            logger.warning(f"{park_file}: unexpected magic 0x{result.header.magic:08x}")
        for error in result.errors:
            logger.warning(f"{park_file}: chunk {error.name}: {error.message}")

        output_path = output_dir / f"{park_file.stem}_analysis.json"
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(
                {'file_path': str(park_file), **prepare_for_json(result.to_dict())},
                f,
                indent=2,
            )
        logger.info(f"Results written to {output_path}")

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Decode OpenRCT2 park files into JSON analysis files'
    )
    parser.add_argument('inputs',
                        nargs='+',
                        help='Park files or directories containing them')
    parser.add_argument('--output',
                        default='output',
                        help='Output directory for analysis files')
    parser.add_argument('--pattern',
                        default='*.park',
                        help='Glob used when an input is a directory')
    parser.add_argument('--log-dir',
                        help='Also write a timestamped log file to this directory')
    parser.add_argument('--strict',
                        action='store_true',
                        help='Fail a file on its first undecodable chunk')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    files = collect_park_files([Path(p) for p in args.inputs], args.pattern)
    if not files:
        logger.error("No park files found")
        return 1

    failures = process_park_files(files, Path(args.output), strict=args.strict)
    if failures:
        logger.error(f"{failures} of {len(files)} files failed")
        return 1

    logger.info("Processing complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
