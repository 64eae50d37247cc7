#!/usr/bin/env python3
"""Print panel statistics and a sample three-panel team.

Loads the expert catalog (PANEL_CATALOG_PATH or the bundled file),
prints per-panel counts, then assembles a review team for a topic.

Usage:
    python scripts/panel_report.py "market entry" --team-size 4
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from packages.algorithms.src import (
    compose_three_panel_team,
    get_panel_stats,
    get_panel_type_info,
)
from packages.catalog.src import get_default_catalog
from packages.core.src.errors import CatalogError, ConfigurationError


def main() -> int:
    """Print the report."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("topic", nargs="?", default="", help="Topic to assemble a team for")
    parser.add_argument("--team-size", type=int, default=None, help="Blue Team size")
    args = parser.parse_args()

    try:
        catalog = get_default_catalog()
    except (CatalogError, ConfigurationError) as e:
        print(f"Error loading catalog: {e.message}")
        return 1

    print(f"Catalog: {len(catalog)} experts")
    for panel_type, stats in get_panel_stats(catalog).items():
        info = get_panel_type_info(panel_type)
        print(f"  {info.name:<18} {stats.count:>4} experts, avg score {stats.avg_score}")

    team = compose_three_panel_team(catalog, args.topic, args.team_size)
    print(f"\nThree-panel team for '{args.topic}':")
    for panel_type, members in team.panels().items():
        print(f"  {get_panel_type_info(panel_type).name}:")
        for expert in members:
            print(f"    - {expert.id:<10} {expert.name} ({expert.category.value})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
