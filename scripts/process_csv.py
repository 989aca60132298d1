"""
Process the countries CSV into the JSON files served by the API.

Outputs (in the api-data folder):
    countries.json   - countries enriched with macroarea name, continent and center
    macroareas.json  - macroarea aggregates sorted by name
    stats.json       - processing statistics

Usage:
    python scripts/process_csv.py
    python scripts/process_csv.py --csv public/data/countries.csv --out public/api-data
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
from journeymap import paths
from journeymap.data_loading import load_countries_from_csv
from journeymap.geography import aggregate_macroareas, get_region_info
from journeymap.logging_analytics import logger


def enrich_country(country) -> dict:
    """Country record plus the static metadata of its macroarea."""
    info = get_region_info(country.macroarea_id)
    return {
        **country.to_dict(),
        "macroarea_name": info.name,
        "continent_name": info.continent,
    }


def build_stats(enriched_countries, macroareas) -> dict:
    return {
        "totalCountries": len(enriched_countries),
        "totalMacroareas": len(macroareas),
        "continents": sorted({m.continent for m in macroareas}),
        "processedAt": datetime.now().isoformat(),
        "sampleCountries": [
            {
                "code": c["country_code"],
                "name": c["country_description"],
                "macroarea": c["macroarea_name"],
            }
            for c in enriched_countries[:5]
        ],
    }


def write_json(path: Path, data):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def process_csv_data(csv_path: Path, output_dir: Path) -> dict:
    """
    Convert the countries CSV into countries.json, macroareas.json and stats.json.

    Returns:
        The stats dict written to stats.json
    """
    logger.info(f"Processing {csv_path}")
    countries = load_countries_from_csv(csv_path)
    logger.info(f"Parsed {len(countries)} countries")

    enriched = [enrich_country(c) for c in countries]
    macroareas = aggregate_macroareas(countries)

    paths.ensure_dir(output_dir)
    write_json(output_dir / "countries.json", enriched)
    logger.info(f"Saved {len(enriched)} countries to countries.json")

    write_json(output_dir / "macroareas.json", [m.to_dict() for m in macroareas])
    logger.info(f"Saved {len(macroareas)} macroareas to macroareas.json")

    stats = build_stats(enriched, macroareas)
    write_json(output_dir / "stats.json", stats)
    logger.info("Saved processing statistics")

    return stats


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Process the countries CSV into API JSON files")
    parser.add_argument("--csv", type=Path, default=paths.COUNTRIES_CSV_PATH,
                        help="Input countries CSV")
    parser.add_argument("--out", type=Path, default=paths.API_DATA_DIR,
                        help="Output folder for the JSON files")
    args = parser.parse_args(argv)

    try:
        stats = process_csv_data(args.csv, args.out)
    except (OSError, ValueError) as e:
        logger.error(f"Error processing CSV: {e}")
        return 1

    print("CSV Processing Complete!")
    print(f"  Countries:  {stats['totalCountries']}")
    print(f"  Macroareas: {stats['totalMacroareas']}")
    print(f"  Continents: {len(stats['continents'])}")
    print(f"  Location:   {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
