"""
Command line entry point
"""

import argparse
import sys

import yaml

from vending_utils.config import load_config
from vending_utils.console import ConsoleIO
from vending_utils.logger import setup_logger

from .session import SessionController


def main(argv=None, stdin=None, stdout=None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(description='Text-mode vending machine')
    parser.add_argument(
        '--config',
        help='Path to YAML configuration file (default: built-in settings)'
    )
    parser.add_argument(
        '--log-level',
        help='Log level, overrides the configuration (default: WARNING)'
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: cannot load configuration: {e}", file=sys.stderr)
        return 1

    log_config = config['logging']
    try:
        for name in ('vending_core', 'vending_utils'):
            setup_logger(
                name,
                level=args.log_level or log_config['level'],
                log_file=log_config['file']
            )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    console = ConsoleIO(stdin, stdout, title=config['display']['title'])
    controller = SessionController(console=console)
    return controller.run()


if __name__ == '__main__':
    sys.exit(main())
