#!/usr/bin/env python3
"""Script to check a band dataset for entries that can never match.

Loads the dataset the same way the service does and reports descriptors
that cannot be parsed, inverted ranges and segments lying outside their
band. Exits with status 1 when any problem is found.

Usage:
    python scripts/check_bands.py [path/to/bands.json]
"""

import sys
from typing import List, Optional

from bandscope.adapters.bandplan import BandPlanAdapter, compute_stats, find_defects

PROBLEMS = {
    "unparseable": "frequency descriptor not recognised",
    "inverted": "band range is inverted",
    "segment_inverted": "segment range is inverted",
    "segment_outside": "segment lies outside the band range",
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main script execution."""
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else None

    adapter = BandPlanAdapter(data_file=path)
    if not adapter.bands:
        print(f"✗ No bands loaded from {path or 'packaged dataset'}")
        return 1

    stats = compute_stats(adapter.bands)
    print(f"Loaded {stats.total} bands ({stats.amateur} amateur, {stats.free} free)")

    defects = find_defects(adapter.bands)
    for defect in defects:
        where = f"#{defect['index']} {defect['band']}"
        if "segment" in defect:
            where += f" segment {defect['segment']}"
        print(f"  {where}: {PROBLEMS[defect['problem']]}")

    if defects:
        print(f"✗ {len(defects)} problem(s) found")
        return 1

    print("✓ Dataset is clean")
    return 0


if __name__ == "__main__":
    sys.exit(main())
