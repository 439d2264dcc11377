"""Entry point for the kelime console quiz."""

import argparse
import logging
import os
import sys

from core.session import SessionController
from core.wordbank import load_word_bank, sample_word_bank
from cli.console import ConsoleUI
from storage import create_store


def main():
    parser = argparse.ArgumentParser(description='Kelime - vocabulary drill')
    parser.add_argument(
        '--words',
        default=os.environ.get('KELIME_WORDS'),
        help='JSON word list (default: built-in English/Turkish sample)'
    )
    parser.add_argument(
        '--storage',
        choices=['file', 'postgres'],
        default=os.environ.get('KELIME_STORAGE', 'file'),
        help='Where progress is saved (default: file)'
    )
    parser.add_argument(
        '--state-dir',
        default=None,
        help='Directory for file storage (default: $KELIME_STATE_DIR or ~/.local/share/kelime)'
    )
    parser.add_argument(
        '--db-url',
        default=None,
        help='PostgreSQL URL for postgres storage (default: $DATABASE_URL)'
    )
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )

    try:
        words = load_word_bank(args.words) if args.words else sample_word_bank()
    except (OSError, ValueError) as e:
        print(f'Error loading word list: {e}')
        sys.exit(1)

    store = create_store(args.storage, state_dir=args.state_dir, db_url=args.db_url)
    controller = SessionController(words, store)
    controller.load()
    ui = ConsoleUI(controller)

    try:
        ui.run()
    except (KeyboardInterrupt, EOFError):
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
