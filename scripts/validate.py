#!/usr/bin/env python3
"""Frontmatter validation tool for site content collections."""

import argparse
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from file_collector import collect_md_files
from frontmatter_parser import extract_frontmatter
from schema_registry import CollectionBinding, default_registry, load_registry


NO_FRONTMATTER = "No front matter found"


@dataclass
class Diagnostic:
    """
    Validation outcome for one file.

    Attributes:
        path: Path displayed in reports (relative to the working directory)
        reasons: Rendered issues, empty when the file passed
        has_frontmatter: False when no frontmatter block was found
    """
    path: str
    reasons: List[str] = field(default_factory=list)
    has_frontmatter: bool = True

    @property
    def ok(self) -> bool:
        return self.has_frontmatter and not self.reasons


@dataclass
class CollectionResult:
    """Diagnostics for one collection, in file discovery order."""
    name: str
    diagnostics: List[Diagnostic]

    @property
    def failed(self) -> bool:
        return any(not d.ok for d in self.diagnostics)


@dataclass
class RunResult:
    """Outcome of a full validation run across all collections."""
    collections: List[CollectionResult]
    failed: bool = False


def validate_file(file_path: Path, binding: CollectionBinding, cwd: Optional[Path] = None) -> Diagnostic:
    """
    Validate a single file's frontmatter against its collection schema.

    Read errors are not handled here and abort the run.

    Args:
        file_path: Markdown file to validate
        binding: Collection binding supplying the schema
        cwd: Directory report paths are relative to (default: working directory)

    Returns:
        Diagnostic for the file
    """
    rel_path = os.path.relpath(file_path, cwd if cwd is not None else os.getcwd())
    frontmatter = extract_frontmatter(file_path)

    if frontmatter is None:
        return Diagnostic(path=rel_path, reasons=[NO_FRONTMATTER], has_frontmatter=False)

    issues = binding.schema.validate(frontmatter)
    return Diagnostic(path=rel_path, reasons=[issue.format_issue() for issue in issues])


def validate_collection(binding: CollectionBinding, cwd: Optional[Path] = None,
                        sort_files: bool = False) -> CollectionResult:
    """
    Validate every markdown file under a collection root.

    Args:
        binding: Collection to validate
        cwd: Directory report paths are relative to
        sort_files: Sort discovered files instead of using filesystem order

    Returns:
        CollectionResult with one diagnostic per discovered file
    """
    files = collect_md_files(binding.root)
    if sort_files:
        files = sorted(files)

    return CollectionResult(
        name=binding.name,
        diagnostics=[validate_file(f, binding, cwd) for f in files],
    )


def validate_collections(bindings: List[CollectionBinding], cwd: Optional[Path] = None,
                         sort_files: bool = False) -> RunResult:
    """
    Validate all collections in registry order.

    Every file is checked; failures accumulate instead of stopping the run.

    Args:
        bindings: Collection bindings in processing order
        cwd: Directory report paths are relative to
        sort_files: Sort discovered files within each collection

    Returns:
        RunResult, failed if any diagnostic in any collection failed
    """
    result = RunResult(collections=[])

    for binding in bindings:
        collection = validate_collection(binding, cwd, sort_files)
        result.collections.append(collection)
        if collection.failed:
            result.failed = True

    return result


def exit_status(result: RunResult) -> int:
    """Map a run outcome to a process exit code."""
    return 1 if result.failed else 0


def print_report(result: RunResult) -> int:
    """
    Print per-file diagnostics and the final summary.

    OK lines and collection headers go to stdout; failures and the failure
    summary go to stderr.

    Args:
        result: Outcome of validate_collections()

    Returns:
        Exit code: 0 if every file passed, 1 otherwise
    """
    for collection in result.collections:
        print(f"\nValidating {collection.name}: {len(collection.diagnostics)} file(s)")

        for diagnostic in collection.diagnostics:
            if diagnostic.ok:
                print(f"  OK   {diagnostic.path}")
            elif not diagnostic.has_frontmatter:
                print(f"  FAIL {diagnostic.path}: {NO_FRONTMATTER}", file=sys.stderr)
            else:
                print(f"  FAIL {diagnostic.path}:", file=sys.stderr)
                for reason in diagnostic.reasons:
                    print(f"    - {reason}", file=sys.stderr)

    if result.failed:
        print("\nValidation failed.", file=sys.stderr)
    else:
        print("\nAll front matter valid.")

    return exit_status(result)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the frontmatter validation tool."""
    parser = argparse.ArgumentParser(
        description="Validate content frontmatter before publishing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --sort
  %(prog)s --registry collections.yaml --base-dir site
        """
    )
    parser.add_argument(
        '--registry',
        type=Path,
        default=None,
        help='Collection registry YAML file (default: scripts/collections.yaml)'
    )
    parser.add_argument(
        '--base-dir',
        type=Path,
        default=None,
        help='Directory collection roots are resolved against (default: site directory)'
    )
    parser.add_argument(
        '--sort',
        action='store_true',
        help='Report files in sorted order instead of filesystem order'
    )
    parser.add_argument(
        '--show-effective-rules',
        action='store_true',
        help='Show resolved collection bindings and exit (debug mode)'
    )

    args = parser.parse_args(argv)

    try:
        if args.registry is not None:
            bindings = load_registry(args.registry, args.base_dir)
        else:
            bindings = default_registry(args.base_dir)
    except ValueError as e:
        print(f"[ERROR] Failed to load collection registry: {e}", file=sys.stderr)
        return 1

    if args.show_effective_rules:
        print("=== Effective Collection Bindings ===")
        print(yaml.dump([b.describe() for b in bindings], default_flow_style=False, sort_keys=False))
        print("=" * 60)
        return 0

    result = validate_collections(bindings, sort_files=args.sort)
    return print_report(result)


if __name__ == "__main__":
    sys.exit(main())
