#!/usr/bin/env python3
"""Pre-commit hook to prevent direct wall-clock reads in production code.

The record-date cutoff depends on "today". Reading the clock anywhere but
the time authority makes the decision untestable and zone-dependent in
hidden ways, so every service injects TimeAuthorityProtocol instead.

This script scans shareholder_voting/ for direct datetime.now(),
datetime.utcnow() and date.today() calls and fails if any are found
(excluding TimeAuthorityService itself).

Usage:
    python scripts/check_no_datetime_now.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""

import re
import sys
from pathlib import Path

# Matches: datetime.now(), datetime.utcnow(), date.today(), datetime.today()
DATETIME_NOW_PATTERN = re.compile(
    r"\b(?:datetime\s*\.\s*(?:now|utcnow|today)|date\s*\.\s*today)\s*\(",
    re.MULTILINE,
)

# The only files allowed to read the wall clock, relative to the package
ALLOWED_FILES = {
    "application/services/time_authority_service.py",
}


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Check a single file for wall-clock violations.

    Args:
        file_path: Path to the Python file to check.

    Returns:
        List of (line_number, line_content) tuples for violations.
    """
    violations: list[tuple[int, str]] = []

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return violations

    for line_num, line in enumerate(content.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        if DATETIME_NOW_PATTERN.search(line):
            violations.append((line_num, line.strip()))

    return violations


def find_violations(package_dir: Path) -> dict[str, list[tuple[int, str]]]:
    """Scan a package directory for wall-clock violations.

    Args:
        package_dir: Root directory of the package to scan.

    Returns:
        Mapping of package-relative file path to its violations.
    """
    all_violations: dict[str, list[tuple[int, str]]] = {}

    for py_file in sorted(package_dir.rglob("*.py")):
        relative_path = py_file.relative_to(package_dir).as_posix()
        if relative_path in ALLOWED_FILES:
            continue

        violations = check_file(py_file)
        if violations:
            all_violations[relative_path] = violations

    return all_violations


def main() -> int:
    """Main entry point for the pre-commit hook.

    Returns:
        Exit code: 0 for success, 1 for violations found.
    """
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / "shareholder_voting"

    if not package_dir.exists():
        print(f"Warning: {package_dir} not found, skipping check")
        return 0

    all_violations = find_violations(package_dir)

    if not all_violations:
        print(f"No wall-clock violations found in {package_dir}")
        return 0

    print("VIOLATION: Direct wall-clock calls detected!")
    print()
    for file_path, violations in sorted(all_violations.items()):
        print(f"  {file_path}:")
        for line_num, line_content in violations:
            print(f"    Line {line_num}: {line_content}")
        print()

    print("How to fix:")
    print("  1. Inject TimeAuthorityProtocol in your service constructor")
    print("  2. Use self._time.today() instead of date.today()")
    print()

    return 1


if __name__ == "__main__":
    sys.exit(main())
