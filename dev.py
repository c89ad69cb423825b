"""Development script to run checks (linting, tests) and a sample search."""

import argparse
import subprocess
import sys

SAMPLE_PAYLOAD = "tests/fixtures/search-index.js"


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def run_checks() -> None:
    """Run lint and test checks without modifying files."""
    run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
    run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    run_command(
        ["uv", "run", "pytest", "--cov=docsearch", "--cov-report=term-missing"],
        "Tests",
    )


def main() -> None:
    """Run the development checks and optionally a sample query."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample search."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping the demo"
    )
    parser.add_argument(
        "--query", default="render", help="Query for the sample search (default: render)"
    )
    args = parser.parse_args()

    if args.ci:
        run_checks()
        print("\n✅ CI checks passed successfully. Skipping the sample search.")
        return

    # Run auto-formatting and fixing
    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_checks()

    run_command(
        ["uv", "run", "docsearch", SAMPLE_PAYLOAD, args.query, "--limit", "10"],
        "Sample Search",
    )

    print("\n✅ All development checks and the sample search passed successfully.")


if __name__ == "__main__":
    main()
