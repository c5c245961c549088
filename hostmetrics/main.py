"""Main entry point for the hostmetrics monitor."""
import argparse

import structlog

from .config.config_manager import ConfigManager
from .config.sampler_config import DIRECT
from .core.logging_config import configure_logging
from .core.resource_monitor import ResourceMonitor
from .ui.display import DisplayManager

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Host resource monitor")
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--refresh-rate", type=float, default=None)
    parser.add_argument("--disk", action="append", dest="disks", metavar="PATH",
                        help="filesystem path to report (repeatable)")
    parser.add_argument("--all-mounts", action="store_true")
    parser.add_argument("--battery", default=None, metavar="NAME", help="e.g. BAT0")
    parser.add_argument("--once", action="store_true", help="print one snapshot and exit")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-json", action="store_true", help="emit log events as JSON")
    return parser


def main(argv=None):
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.refresh_rate is not None and args.refresh_rate <= 0:
        parser.error("--refresh-rate must be greater than zero")

    # Load configuration - let it crash if bad
    if args.config:
        config = ConfigManager.load_config(args.config)
    else:
        config = ConfigManager.default_config()

    if args.refresh_rate is not None:
        config.display.refresh_rate = args.refresh_rate
    if args.disks:
        config.display.disk_paths = args.disks
    if args.all_mounts:
        config.display.all_mounts = True
    if args.battery:
        config.display.battery_name = args.battery
    if args.no_color:
        config.display.show_colors = False
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.once:
        # A fresh sampler has no history yet, so take one direct sample
        config.cpu.mode = DIRECT

    configure_logging(config.log_level, json_output=args.log_json)
    logger.debug("hostmetrics.config_loaded", config_path=args.config, cpu_mode=config.cpu.mode)

    monitor = ResourceMonitor(config)
    display_manager = DisplayManager(config)

    if args.once:
        display_manager.print_once(monitor)
        return 0

    monitor.start_cpu_measuring()
    try:
        display_manager.run_display(monitor)
    except KeyboardInterrupt:
        pass
    finally:
        monitor.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
