import argparse
import sys
import time

import requests
from colorama import Fore

import lookup_cache
import utils
from digit_mapping import (
    MAX_DICTIONARY_SIZE,
    MAX_PHONE_NUMBER_LENGTH,
    MAX_SEARCH_DEPTH,
    MAX_WORD_LENGTH,
    word_to_digits,
)
from digit_trie import DigitTrie
from encoder import InvalidNumberError, PhoneNumberEncoder
from utils import log_with_time, vlog


def _is_url(source):
    return source.startswith(("http://", "https://"))


def _read_dictionary_text(source):
    if _is_url(source):
        resp = requests.get(source, timeout=30)
        resp.raise_for_status()
        return resp.text
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def parse_words(text):
    """Yield dictionary words from ``text``, one per line, skipping blanks and overlong words."""
    for line in text.splitlines():
        w = line.strip()
        if not w:
            continue
        if len(word_to_digits(w)) > MAX_WORD_LENGTH:
            vlog(f"Skipping overlong dictionary word '{w[:20]}…'")
            continue
        yield w


def load_dictionary(source):
    """Load a word list from a file path or an http(s) URL into a DigitTrie."""
    t0 = time.time()
    vlog(f"⟳ Loading dictionary from {source}…")
    trie = DigitTrie.build(parse_words(_read_dictionary_text(source)))
    if len(trie) > MAX_DICTIONARY_SIZE:
        log_with_time(
            f"Dictionary has {len(trie)} words, more than the expected {MAX_DICTIONARY_SIZE}",
            color=Fore.YELLOW,
        )
    vlog(f"Dictionary loaded ({len(trie)} words)", t0)
    return trie


def load_numbers(path):
    """Read phone numbers, one per line; ``-`` reads standard input."""
    if path == "-":
        lines = sys.stdin.read().splitlines()
    else:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    return [line.strip() for line in lines if line.strip()]


def format_encodings(encodings):
    return [str(e) for e in encodings]


def print_encodings(encodings):
    for line in format_encodings(encodings):
        print(line)


def max_length_arg(value):
    length = int(value)
    if not 1 <= length <= MAX_SEARCH_DEPTH:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_SEARCH_DEPTH}, got {value}")
    return length


def build_parser():
    parser = argparse.ArgumentParser(description="Encode phone numbers as dictionary words")
    parser.add_argument("numbers", nargs="*", help="Phone numbers to encode (default: read from --numbers)")
    parser.add_argument("--dictionary", required=True, help="Path or http(s) URL of the word list, one word per line")
    parser.add_argument("--numbers", dest="numbers_file", default=None, help="File with one phone number per line ('-' for stdin)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--no-cache", action="store_true", help="Disable the dictionary lookup cache")
    parser.add_argument(
        "--max-length",
        type=max_length_arg,
        default=MAX_PHONE_NUMBER_LENGTH,
        help=f"Maximum number of digits per phone number, at most {MAX_SEARCH_DEPTH} (default: {MAX_PHONE_NUMBER_LENGTH})",
    )
    return parser


def run_encoder(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    lookup_cache.CACHE_DISABLED = args.no_cache

    try:
        trie = load_dictionary(args.dictionary)
    except (OSError, requests.RequestException) as e:
        log_with_time(f"Could not load dictionary {args.dictionary}: {e}", color=Fore.RED)
        return 1

    if args.numbers:
        numbers = args.numbers
    else:
        try:
            numbers = load_numbers(args.numbers_file or "-")
        except OSError as e:
            log_with_time(f"Could not read phone numbers: {e}", color=Fore.RED)
            return 1

    lookup = lookup_cache.CachedLookup(trie)
    encoder = PhoneNumberEncoder(lookup, max_length=args.max_length)
    total = 0
    for number in numbers:
        try:
            encodings = encoder.encode(number)
        except InvalidNumberError as e:
            log_with_time(f"Skipping {number}: {e}", color=Fore.RED)
            continue
        print_encodings(encodings)
        total += len(encodings)

    vlog(f"Encoded {len(numbers)} number(s), {total} encoding(s)", utils.start_time)
    if utils.VERBOSE and not lookup_cache.CACHE_DISABLED:
        lookup.print_cache_summary()
    return 0
