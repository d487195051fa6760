from __future__ import annotations

import argparse
import logging
import os
import sys

from typing import Callable, Optional, Sequence

from .core.crypto_utils import ALGORITHMS, hash_all, hash_text
from .core.encoders import SUPPORTED_BASES, b64_decode, b64_encode, convert_all, convert_base
from .core.password_engine import MAX_COUNT, MAX_LENGTH, GenerationConfig, GenerationError, generate
from .core.password_generator import PasswordGenerator
from .core.qr_generator import render_qr
from .core.uuid_generator import MAX_UUIDS, generate_uuids

APP_NAME = 'Terminal Toolkit'
LOG_LEVEL_ENV = 'TERMTOOLS_LOG_LEVEL'

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once; the level comes from the environment."""
    name = (level or os.environ.get(LOG_LEVEL_ENV, 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(message)s',
    )


def _report(exc: Exception) -> None:
    logger.warning('%s: %s', type(exc).__name__, exc)
    print(f'[!] {exc}\n')


def _on_off(flag: bool) -> str:
    return 'on' if flag else 'off'


# ---------------- Password tab ----------------

def show_password_settings(generator: PasswordGenerator) -> None:
    """Print the current password settings and last output."""
    print(f'Length: {generator.length}   Quantity: {generator.quantity}')
    print(
        f'Uppercase: {_on_off(generator.use_uppercase)}  '
        f'Lowercase: {_on_off(generator.use_lowercase)}  '
        f'Numbers: {_on_off(generator.use_numbers)}  '
        f'Symbols: {_on_off(generator.use_symbols)}'
    )
    print(
        f'Avoid similar: {_on_off(generator.avoid_similar)}  '
        f'Allow duplicates: {_on_off(generator.allow_duplicates)}  '
        f'Avoid sequential: {_on_off(generator.avoid_sequential)}'
    )
    if generator.passwords:
        print(f'Generated (~{generator.entropy_bits:.0f} bits each):')
        for password in generator.passwords:
            print(f' {password}')
    print()


def password_menu(generator: PasswordGenerator) -> None:
    """Interactive loop for the password tool."""
    actions: dict[str, Callable[[], object]] = {
        'g': generator.generate_password,
        'm': generator.generate_multiple_passwords,
        '+': generator.increase_length,
        '-': generator.decrease_length,
        '>': generator.increase_quantity,
        '<': generator.decrease_quantity,
        'u': generator.toggle_uppercase,
        'l': generator.toggle_lowercase,
        'n': generator.toggle_numbers,
        's': generator.toggle_symbols,
        'i': generator.toggle_similar_characters,
        'd': generator.toggle_duplicate_characters,
        'q': generator.toggle_sequential_characters,
        'c': generator.clear_password,
    }

    while True:
        print('===== Password Generator =====')
        show_password_settings(generator)
        print('g) generate  m) generate multiple  +/-) length  >/<) quantity')
        print('u/l/n/s) toggle classes  i) similar  d) duplicates  q) sequential')
        print('c) clear  b) back')
        choice = input('Select an option: ').strip().lower()
        print()

        if choice == 'b':
            return

        action = actions.get(choice)
        if action is None:
            print('Invalid selection.\n')
            continue

        try:
            action()
        except GenerationError as exc:
            _report(exc)


# ---------------- Other tabs ----------------

def action_hash() -> None:
    """Hash a line of text with every supported algorithm."""
    text = input('Text to hash: ')
    for name, digest in hash_all(text).items():
        print(f'{name.upper():>7}: {digest}')
    print()


def action_base64() -> None:
    """Encode or decode Base64."""
    mode = input('Encode or decode? (E/d): ').strip().lower()
    text = input('Input: ')
    try:
        result = b64_decode(text) if mode == 'd' else b64_encode(text)
    except ValueError as exc:
        _report(exc)
        return
    print('Result:', result, '\n')


def action_number_base() -> None:
    """Show a number in every supported base."""
    base_input = input(f'Input base {SUPPORTED_BASES} (default 10): ').strip()
    value = input('Number: ')
    try:
        base_from = int(base_input) if base_input else 10
        results = convert_all(value, base_from)
    except ValueError as exc:
        _report(exc)
        return

    for base, rendered in results.items():
        print(f'base {base:>2}: {rendered}')
    print()


def action_uuid() -> None:
    """Generate v4 and v7 UUIDs."""
    count_input = input(f'How many, 1..{MAX_UUIDS} (default 1): ').strip()
    count = int(count_input) if count_input.isdigit() else 1
    try:
        batches = {version: generate_uuids(version, count) for version in (4, 7)}
    except ValueError as exc:
        _report(exc)
        return

    for version, values in batches.items():
        print(f'UUID v{version}:')
        for value in values:
            print(f' {value}')
    print()


def action_qr() -> None:
    """Draw a QR code for a line of text."""
    text = input('Text or URL: ').strip()
    try:
        print(render_qr(text))
    except ValueError as exc:
        _report(exc)


def show_menu() -> str:
    """Print the main menu and return the user's choice."""
    print(f'===== {APP_NAME} =====')
    print('1) Password generator')
    print('2) Hash generator')
    print('3) Base64 encoder')
    print('4) Number base converter')
    print('5) UUID generator')
    print('6) QR code generator')
    print('7) Quit')
    return input('Select an option: ').strip()


def menu_loop() -> None:
    """Run the interactive menu until the user quits."""
    generator = PasswordGenerator()

    while True:
        choice = show_menu()
        print()

        if choice == '1':
            password_menu(generator)
        elif choice == '2':
            action_hash()
        elif choice == '3':
            action_base64()
        elif choice == '4':
            action_number_base()
        elif choice == '5':
            action_uuid()
        elif choice == '6':
            action_qr()
        elif choice == '7':
            print('Goodbye.')
            return
        else:
            print('Invalid selection.\n')


# ---------------- One-shot commands ----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='termtools',
        description=f'{APP_NAME}: run with no arguments for the interactive menu.',
    )
    parser.add_argument('--log-level', help=f'Overrides ${LOG_LEVEL_ENV}')
    sub = parser.add_subparsers(dest='cmd')

    sp = sub.add_parser('password', help='Generate passwords')
    sp.add_argument('--length', '-l', type=int, default=12, help=f'1..{MAX_LENGTH}')
    sp.add_argument('--count', '-c', type=int, default=1, help=f'1..{MAX_COUNT}')
    sp.add_argument('--no-upper', action='store_true')
    sp.add_argument('--no-lower', action='store_true')
    sp.add_argument('--no-numbers', action='store_true')
    sp.add_argument('--no-symbols', action='store_true')
    sp.add_argument('--symbols', default='', help='Custom symbol set')
    sp.add_argument('--avoid-similar', action='store_true')
    sp.add_argument('--no-duplicates', action='store_true')
    sp.add_argument('--avoid-sequential', action='store_true')

    sh = sub.add_parser('hash', help='Hash text')
    sh.add_argument('text')
    sh.add_argument('--algorithm', '-a', choices=sorted(ALGORITHMS))

    sub.add_parser('b64enc', help='Base64 encode').add_argument('text')
    sub.add_parser('b64dec', help='Base64 decode').add_argument('text')

    sb = sub.add_parser('base', help='Convert a number between bases')
    sb.add_argument('value')
    sb.add_argument('--from', dest='base_from', type=int, default=10, choices=SUPPORTED_BASES)
    sb.add_argument('--to', dest='base_to', type=int, choices=SUPPORTED_BASES)

    su = sub.add_parser('uuid', help='Generate UUIDs')
    su.add_argument('--version', '-v', type=int, default=4, choices=(4, 7))
    su.add_argument('--count', '-c', type=int, default=1, help=f'1..{MAX_UUIDS}')

    sq = sub.add_parser('qr', help='Draw a QR code in the terminal')
    sq.add_argument('text')
    sq.add_argument('--invert', action='store_true', help='For light-on-dark terminals')

    return parser


def run_args(args: argparse.Namespace) -> int:
    """Execute one parsed command and return the process exit code."""
    try:
        if args.cmd == 'password':
            config = GenerationConfig(
                length=args.length,
                count=args.count,
                use_uppercase=not args.no_upper,
                use_lowercase=not args.no_lower,
                use_numbers=not args.no_numbers,
                use_symbols=not args.no_symbols,
                avoid_similar=args.avoid_similar,
                allow_duplicates=not args.no_duplicates,
                avoid_sequential=args.avoid_sequential,
                symbols=args.symbols,
            )
            print(generate(config).as_text())

        elif args.cmd == 'hash':
            if args.algorithm:
                print(hash_text(args.text, args.algorithm))
            else:
                for name, digest in hash_all(args.text).items():
                    print(f'{name}: {digest}')

        elif args.cmd == 'b64enc':
            print(b64_encode(args.text))

        elif args.cmd == 'b64dec':
            print(b64_decode(args.text))

        elif args.cmd == 'base':
            if args.base_to:
                print(convert_base(args.value, args.base_from, args.base_to))
            else:
                for base, rendered in convert_all(args.value, args.base_from).items():
                    print(f'{base}: {rendered}')

        elif args.cmd == 'uuid':
            print('\n'.join(generate_uuids(args.version, args.count)))

        elif args.cmd == 'qr':
            print(render_qr(args.text, invert=args.invert))

        else:
            menu_loop()

    except ValueError as exc:
        _report(exc)
        return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger.debug('command: %s', args.cmd or 'menu')
    return run_args(args)


if __name__ == '__main__':
    sys.exit(main())
