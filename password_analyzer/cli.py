#!/usr/bin/env python3
"""
Command-line interface for the Password Analyzer.
"""

import argparse
import getpass
import json
import sys
from typing import List, Optional

from password_analyzer.core.audit import WordlistAuditor
from password_analyzer.core.crack_time import estimate_crack_time
from password_analyzer.core.generator import GenerationPolicy, PasswordGenerator
from password_analyzer.core.strength import StrengthResult, calculate_password_strength
from password_analyzer.utils.config import Config, verbosity_to_level
from password_analyzer.utils.logger import Logger
from password_analyzer.utils.exceptions import InvalidPolicyError, PasswordAnalyzerError

GENERATOR_KEYS = (
    "length",
    "include_lowercase",
    "include_uppercase",
    "include_numbers",
    "include_symbols",
    "count",
)


def create_common_parser() -> argparse.ArgumentParser:
    """Options shared by every sub-command"""
    common = argparse.ArgumentParser(add_help=False)

    output_group = common.add_argument_group("Output Options")
    output_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level (default: from config, else warning)",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress log messages on the console"
    )

    config_group = common.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return common


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    common = create_common_parser()
    parser = argparse.ArgumentParser(
        prog="password-analyzer",
        description="Password strength analyzer and generator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    # check
    check_parser = subparsers.add_parser(
        "check",
        parents=[common],
        help="Score a password and estimate its crack time",
    )
    check_parser.add_argument(
        "password",
        nargs="?",
        help="Password to analyze (prompted for when omitted)",
    )
    check_parser.add_argument(
        "--json", action="store_true", help="Print the analysis as JSON"
    )

    # generate
    generate_parser = subparsers.add_parser(
        "generate",
        parents=[common],
        help="Generate random passwords",
    )
    generator_group = generate_parser.add_argument_group("Password Generator Options")
    generator_group.add_argument(
        "-l", "--length", type=int, help="Number of characters (default: 16)"
    )
    generator_group.add_argument(
        "--no-lowercase",
        dest="include_lowercase",
        action="store_false",
        default=None,
        help="Leave out lowercase letters",
    )
    generator_group.add_argument(
        "--no-uppercase",
        dest="include_uppercase",
        action="store_false",
        default=None,
        help="Leave out uppercase letters",
    )
    generator_group.add_argument(
        "--no-numbers",
        dest="include_numbers",
        action="store_false",
        default=None,
        help="Leave out digits",
    )
    generator_group.add_argument(
        "--no-symbols",
        dest="include_symbols",
        action="store_false",
        default=None,
        help="Leave out symbols",
    )
    generator_group.add_argument(
        "-n", "--count", type=int, help="How many passwords to generate (default: 1)"
    )
    generator_group.add_argument(
        "--check",
        action="store_true",
        help="Also print the analysis of each generated password",
    )

    # audit
    audit_parser = subparsers.add_parser(
        "audit",
        parents=[common],
        help="Summarize the strength of every entry in a wordlist",
    )
    audit_parser.add_argument("wordlist", help="Path to a newline-separated wordlist")
    audit_parser.add_argument(
        "--no-progress", action="store_true", help="Do not draw a progress bar"
    )

    return parser


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    # Command-line args override config
    verbosity = args.verbosity or config.get("verbosity", "warning")
    log_file = args.log_file or config.get("log_file")

    return Logger(
        name="password_analyzer",
        log_file=log_file,
        level=verbosity_to_level(verbosity),
        console=not args.quiet,
    )


def resolve_policy(args, config: Config) -> GenerationPolicy:
    """Build the generation policy from arguments, falling back to config

    Config values were type-checked when the file was loaded.
    """
    def pick(key):
        value = getattr(args, key, None)
        return config.get(key) if value is None else value

    return GenerationPolicy(
        length=pick("length"),
        include_lowercase=pick("include_lowercase"),
        include_uppercase=pick("include_uppercase"),
        include_numbers=pick("include_numbers"),
        include_symbols=pick("include_symbols"),
    )


def save_config_from_args(args, config: Config) -> None:
    """Save configuration from command-line arguments"""
    overrides = {}
    if args.verbosity:
        overrides["verbosity"] = args.verbosity
    if args.log_file:
        overrides["log_file"] = args.log_file
    for key in GENERATOR_KEYS:
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value

    config.update(overrides)
    config.save()


def format_analysis(result: StrengthResult, crack_time: str) -> str:
    """Render an analysis for the terminal"""
    lines = [
        f"Strength:   {result.label} ({result.percentage}%)",
        f"Score:      {result.score}",
        f"Entropy:    {result.entropy:.2f} bits",
        f"Crack time: {crack_time}",
    ]
    if result.feedback:
        lines.append("Feedback:")
        lines.extend(f"  - {message}" for message in result.feedback)
    return "\n".join(lines)


def run_check(args, logger) -> int:
    """Analyze a single password"""
    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")

    result = calculate_password_strength(password)
    crack_time = estimate_crack_time(result.entropy)
    logger.info(f"Analyzed password of length {len(password)}")

    if args.json:
        payload = result.to_dict()
        payload.update({
            "label": result.label,
            "percentage": result.percentage,
            "crack_time": crack_time,
        })
        print(json.dumps(payload, indent=2))
    else:
        print(format_analysis(result, crack_time))
    return 0


def run_generate(args, config: Config, logger) -> int:
    """Generate one or more passwords"""
    policy = resolve_policy(args, config)
    count = args.count if args.count is not None else config.get("count", 1)
    if count < 0:
        raise InvalidPolicyError(f"Count must not be negative: {count}")

    generator = PasswordGenerator(policy)
    logger.info(
        f"Generating {count} password(s) of length {policy.length} "
        f"from a {generator.charset_size}-character set"
    )

    for index in range(count):
        password = generator.generate()
        print(password)
        if args.check:
            result = calculate_password_strength(password)
            print(format_analysis(result, estimate_crack_time(result.entropy)))
            if index < count - 1:
                print()
    return 0


def run_audit(args, logger) -> int:
    """Audit a wordlist and print the summary"""
    auditor = WordlistAuditor(
        args.wordlist, logger=logger, show_progress=not args.no_progress
    )
    summary = auditor.run()

    print(f"Entries:            {summary.total:,}")
    print(f"Common passwords:   {summary.common:,}")
    print(f"Mean entropy:       {summary.mean_entropy:.2f} bits")
    print(f"Typical crack time: {summary.typical_crack_time or 'n/a'}")
    print("Strength distribution:")
    for label, count in summary.labels.items():
        print(f"  {label:<12} {count:,}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the password analyzer CLI

    With no arguments at all, prints usage examples and returns 1.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        display_examples()
        return 1

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except PasswordAnalyzerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = setup_logger(args, config).get_logger()

    try:
        if args.save_config:
            save_config_from_args(args, config)
            logger.info(f"Configuration saved to {config.config_path}")

        if args.command == "check":
            return run_check(args, logger)
        if args.command == "generate":
            return run_generate(args, config, logger)
        return run_audit(args, logger)

    except PasswordAnalyzerError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("\nInterrupted by user.")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return 1


def display_examples():
    """Display usage examples"""
    examples = [
        "Check a password (prompted, not echoed):",
        "  password-analyzer check",
        "",
        "Check a password given on the command line:",
        "  password-analyzer check 'Tr0ub4dor&3'",
        "",
        "Machine-readable output:",
        "  password-analyzer check 'Tr0ub4dor&3' --json",
        "",
        "Generate a 16-character password:",
        "  password-analyzer generate",
        "",
        "Generate five 24-character passwords without symbols:",
        "  password-analyzer generate -l 24 --no-symbols -n 5",
        "",
        "Generate and analyze:",
        "  password-analyzer generate --check",
        "",
        "Audit a wordlist:",
        "  password-analyzer audit wordlist.txt",
        "",
        "Save generator settings for future use:",
        "  password-analyzer generate -l 20 --no-symbols --save-config",
        "",
        "For more options:",
        "  password-analyzer -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    sys.exit(main())
