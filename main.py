import argparse
import sys
from collections import Counter
from smczones.utils.logger import setup_logger
from smczones.utils.config_loader import load_config, load_environment
from smczones.utils.export import export_zones
from smczones.data import load_bars_csv, generate_bars
from smczones.engine import DetectionConfig, analyze


def main():
    # Handle Command-line Arguments
    parser = argparse.ArgumentParser(description="SMC Zone Scanner")
    parser.add_argument("--config", type=str, default="config.yaml", help="Path to config file")
    parser.add_argument("--env", type=str, default=".env", help="Path to .env file")
    parser.add_argument("--csv", type=str, default=None, help="OHLCV CSV to scan (default: synthetic bars)")
    parser.add_argument("--bars", type=int, default=200, help="Number of synthetic bars")
    parser.add_argument("--seed", type=int, default=None, help="Seed for synthetic bars")
    parser.add_argument("--export", type=str, default=None, help="Write zones to a .csv or .json file")
    args = parser.parse_args()

    # Setup Logging
    config = load_config(args.config)
    env = load_environment(args.env)
    log_level = env['log_level'] or config['system']['log_level']
    log_file = env['log_file'] or config['system'].get('log_file')
    logger = setup_logger(log_level=log_level, log_file=log_file)
    logger.info(f"Starting SMC Zone Scanner with config: {args.config} and env: {args.env}")

    try:
        if args.csv:
            bars = load_bars_csv(args.csv)
        else:
            bars = generate_bars(count=args.bars, seed=args.seed)
            logger.info(f"Using {len(bars)} synthetic bars")

        zones = analyze(bars, DetectionConfig.from_config(config))
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Scan failed: {e}")
        return 1

    counts = Counter((z.kind.value, z.direction.value) for z in zones)
    for (kind, direction), n in sorted(counts.items()):
        logger.info(f"{kind:<16} {direction:<8} {n}")

    active = [z for z in zones if not z.is_mitigated]
    logger.info(f"{config['system']['symbol']} {config['system']['timeframe']}: "
                f"{len(zones)} zones, {len(active)} unmitigated")
    for zone in sorted(active, key=lambda z: z.strength_score, reverse=True)[:10]:
        logger.info(f"  {zone.id:<16} {zone.bottom:.5f}-{zone.top:.5f} "
                    f"EQ {zone.equilibrium:.5f} strength {zone.strength_score:.1f}")

    if args.export:
        try:
            export_zones(zones, args.export)
        except (OSError, ValueError) as e:
            logger.error(f"Export failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
