"""Diagnostic tool for verifying the pagecut installation and its tools."""

import sys
from importlib import import_module
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table


def check_dependency(
    module_name: str, package_name: Optional[str] = None, optional: bool = False
) -> tuple[bool, str]:
    """
    Check if a Python module is importable.

    Args:
        module_name: Name of the module to import
        package_name: Display name of the package (defaults to module_name)
        optional: Whether this is an optional dependency

    Returns:
        Tuple of (success: bool, message: str)
    """
    display_name = package_name or module_name

    try:
        import_module(module_name)
        return True, f"[OK] {display_name}"
    except ImportError:
        if optional:
            return False, f"[WARN] {display_name} (optional - not installed)"
        return False, f"[MISSING] {display_name}"


def check_pandoc() -> tuple[bool, str]:
    """
    Check that the pandoc binary is reachable (needed for non-markdown formats).

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        import pypandoc

        version = pypandoc.get_pandoc_version()
        return True, f"[OK] pandoc {version}"
    except ImportError:
        return False, "[WARN] pandoc (optional - pypandoc not installed)"
    except OSError:
        return False, "[WARN] pandoc (optional - binary not found, only markdown/plain formats available)"


def check_output_dir(output_dir: Optional[Path] = None) -> tuple[bool, str]:
    """
    Check if the output directory is writable.

    Args:
        output_dir: Directory to check (defaults to the current directory)

    Returns:
        Tuple of (success: bool, message: str)
    """
    test_dir = output_dir or Path(".")

    try:
        test_dir.mkdir(parents=True, exist_ok=True)
        test_file = test_dir / ".pagecut_test"
        test_file.write_text("test")
        test_file.unlink()

        return True, f"[OK] Output directory writable ({test_dir})"
    except PermissionError:
        return False, f"[FAIL] Output directory - permission denied ({test_dir})"
    except OSError as e:
        return False, f"[FAIL] Output directory - {e} ({test_dir})"


def run_doctor(output_dir: Optional[Path] = None, console: Optional[Console] = None) -> int:
    """
    Run diagnostic checks and display results.

    Args:
        output_dir: Output directory to check for writability
        console: Rich console to print to

    Returns:
        Exit code (0 if all core dependencies OK, 1 if any core dependency missing)
    """
    console = console or Console()
    console.print("Running pagecut diagnostics...\n")

    core_checks = [
        ("requests", "requests"),
        ("bs4", "beautifulsoup4"),
        ("soupsieve", "soupsieve"),
        ("html2text", "html2text"),
        ("pydantic", "pydantic"),
        ("pypandoc", "pypandoc"),
        ("rich", "rich"),
    ]

    optional_checks = [
        ("yaml", "pyyaml", True),
    ]

    core_results = [check_dependency(mod, pkg) for mod, pkg in core_checks]
    optional_results = [check_dependency(mod, pkg, opt) for mod, pkg, opt in optional_checks]
    optional_results.append(check_pandoc())

    all_checks = {
        "Core Dependencies": core_results,
        "Optional Dependencies": optional_results,
        "System": [check_output_dir(output_dir)],
    }

    for category, results in all_checks.items():
        table = Table(title=category, show_header=False, box=None)
        table.add_column("Status", style="bold")

        for success, message in results:
            style = "green" if success else ("yellow" if "optional" in message else "red")
            table.add_row(message, style=style)

        console.print(table)
        console.print()

    core_failed = any(not success for success, _ in core_results)

    if core_failed:
        console.print("\nWARNING: Some core dependencies are missing!")
        console.print("\nRecommended fixes:")
        console.print("  1. For pip users: pip install --upgrade --force-reinstall pagecut")
        console.print("  2. For development: pip install -e .[dev]")
        return 1

    console.print("\nAll core dependencies installed correctly!")

    optional_missing = [msg for success, msg in optional_results if not success]
    if optional_missing:
        console.print("\nOptional features available:")
        console.print("  - YAML config support: pip install pagecut[yaml]")
        console.print("  - Other output formats: install pandoc (https://pandoc.org/installing.html)")

    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
