SPEED_SHORTCUTS = {
    # name: (hash size in KB, hash algorithm)
    "crazyfast": (4, "sha1"),
    "veryfast": (64, "sha1"),
    "faster": (512, "sha1"),
    "fast": (1024, "sha256"),
    "safe": (32768, "sha512"),
}

SPEED_SHORTCUT_HELP = {
    name: f"Shortcut to --size {size} --hash {algorithm}"
    for name, (size, algorithm) in SPEED_SHORTCUTS.items()
}

ENV_PREFIX = "DEDUPR_"

# argparse dest -> environment variable suffix
ENV_OPTIONS = {
    "extensions": "EXTENSIONS",
    "output": "OUTPUT",
    "parallel": "PARALLEL",
    "size": "SIZE",
    "hash": "HASH",
    "verbose": "VERBOSE",
    "quiet": "QUIET",
    "reverse": "REVERSE",
    "filename": "FILENAME",
    "delete": "DELETE",
    "trash": "TRASH",
}

TRUE_VALUES = ("1", "true", "yes", "on")

SIZE_HELP_TEXT = (
    "How much data (kilobytes) to hash from start and end of each file.\n"
    "Accepts units too: 512K, 4M. Default: 2048\n"
)

HASH_HELP_TEXT = (
    "Hash algorithm, default is sha256.\n"
    "Any hashlib algorithm (md5, sha1, sha512, blake2b...) or xxh32, xxh64, xxh3_64, xxh128\n"
)

EPILOG_TEXT = """
Examples:
  Find duplicates in the home folder, hashing 1MB from start and end of each file
  %(prog)s --fast ~/

  Only images, the first folder passed holds the originals
  %(prog)s --veryfast ~/photos ~/camera ~/downloads -e jpg gif png

  Match filenames too, delete duplicates and save a custom report
  %(prog)s -f -d -h sha512 -o duplicate-report.json /backup

  Same as above but move duplicates to the system trash instead
  %(prog)s -f -d --trash -o duplicate-report.json /backup

  Options can also be set via environment variables, e.g. DEDUPR_PARALLEL=10
"""
