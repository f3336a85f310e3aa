"""Regions loader - read the 64-team field.

Supports:
1. JSON file input
2. CSV file input (one row per team)
3. Programmatic construction via models.regions
"""

import json
import logging
import os

import pandas as pd

import config
from models.errors import InvalidInput
from models.regions import Region, Regions

logger = logging.getLogger(__name__)


def load_regions_from_json(filepath: str) -> Regions:
    """Load the field from a JSON file.

    Expected format:
    {
        "regions": [
            {
                "name": "South",
                "teams": [{"seed": 1, "name": "Auburn"}, {"seed": 16, "name": "Alabama St."}, ...]
            },
            ...
        ]
    }

    `teams` may also be a seed map: {"1": "Auburn", "2": "Michigan St.", ...}
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    regions = Regions.from_dict(data)
    regions.check()
    logger.info("Loaded %d teams in %d regions from %s", len(regions.teams), len(regions), filepath)
    return regions


def load_regions_from_csv(filepath: str) -> Regions:
    """Load the field from a CSV file.

    Expected columns: region, seed, team
    Regions keep the order of their first appearance in the file.
    """
    df = pd.read_csv(filepath)
    missing = {"region", "seed", "team"} - set(df.columns)
    if missing:
        raise InvalidInput(f"{filepath} is missing columns: {sorted(missing)}")

    regions = []
    for region_name in df["region"].drop_duplicates():
        rows = df[df["region"] == region_name]
        teams_by_seed = {int(row.seed): str(row.team).strip() for row in rows.itertuples()}
        if len(teams_by_seed) != len(rows):
            raise InvalidInput(f"Region {region_name} lists a seed more than once")
        regions.append(Region.from_seed_map(str(region_name), teams_by_seed))

    result = Regions(regions=tuple(regions))
    result.check()
    logger.info("Loaded %d teams in %d regions from %s", len(result.teams), len(result), filepath)
    return result


def load_default_regions() -> Regions:
    return load_regions_from_json(config.DEFAULT_REGIONS_FILE)


def save_regions_to_json(regions: Regions, filepath: str):
    """Save the field in the list form read by load_regions_from_json."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(regions.to_dict(), f, indent=2)
    logger.info("Saved regions to %s", filepath)
