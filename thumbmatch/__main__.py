"""
Allow running the package with: python -m thumbmatch

Examples:
    python -m thumbmatch --fullsize ./originals --thumbnail ./thumbs --output ./out
    python -m thumbmatch config              # Show current configuration
    python -m thumbmatch config --init       # Create example config file
"""

import sys


def show_config() -> int:
    from .user_config import get_user_config

    config = get_user_config()

    if '--init' in sys.argv or '-i' in sys.argv:
        if config.create_example_config():
            print("✓ Created example configuration file at:")
            print(f"  {config.config_file_path}")
            print("\nEdit this file to customize thumbmatch settings.")
            return 0
        print("✗ Failed to create configuration file.")
        return 1

    print(f"Configuration file: {config.config_file_path}")
    if config.config_file_path.exists():
        print("Status: ✓ Found")
    else:
        print("Status: ✗ Not found (using defaults)")
        print("\nRun 'python -m thumbmatch config --init' to create one.")

    print("\nCurrent settings:")
    print(f"  default_workers: {config.default_workers}")
    print(f"  review_threshold: {config.review_threshold}")
    print(f"  cache_dir: {config.cache_dir}")
    return 0


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'config':
        sys.argv.pop(1)
        sys.exit(show_config())

    from .cli import main as cli_main
    sys.exit(cli_main())


if __name__ == '__main__':
    main()
