"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Running the pattern demonstrations
"""
import argparse
import os
import sys
from typing import List, Optional

from structural_patterns import __version__
from structural_patterns.application.service import PatternDemoService
from structural_patterns.cli.formatters import format_output
from structural_patterns.config.manager import ConfigurationManager
from structural_patterns.domain.base.exceptions import DomainException
from structural_patterns.infrastructure.logging.logger import get_logger, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "structural-patterns",
        description="Structural patterns catalog - composite graphics and flyweight forests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s composite                 # Render the nested graphic groups
  %(prog)s flyweight --format json   # Render the forest as JSON
  %(prog)s all                       # Run every demonstration
        """
    )

    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=['text', 'json', 'yaml'],
                        help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('pattern', choices=['composite', 'flyweight', 'all'],
                        help='Pattern demonstration to run')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
        if args.log_level:
            config_manager.update_config({"logging": {"level": args.log_level}})
            app_config = config_manager.app_config
        setup_logging(app_config.logging)

        service = PatternDemoService()
        if args.pattern == "all":
            runs = service.run_all()
        else:
            runs = [service.run(args.pattern)]

        format_type = args.format or app_config.output.format.value
        print(format_output(runs, format_type))
        return 0
    except DomainException as e:
        logger.error("Command failed", **e.to_dict())
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
