"""
Master Regression Suite Runner.
Executes tests in stages so a failing layer stops the run early.
Generates a consolidated coverage report.
"""

import sys
import subprocess
import os

PYTHON = sys.executable
BASE_CMD = [PYTHON, "-m", "pytest"]
COV_CMD = ["--cov=src", "--cov-report=term-missing", "--cov-append"]

STAGES = [
    ("Config, Logging & Schemas", "tests/config tests/utils tests/schemas"),
    ("Scoring & Recommendation (Unit)", "tests/services"),
    ("Presenter, API & CLI", "tests/ui tests/api tests/test_main.py"),
]


def run_suite(name, path, timeout=300):
    print(f"\n[Regression] Running {name} Suite...")
    cmd = BASE_CMD + COV_CMD + path.split()
    print(f"Command: {cmd}")
    try:
        subprocess.run(cmd, check=True, timeout=timeout)
        print(f"✅ {name} Suite Passed")
        return True
    except subprocess.TimeoutExpired:
        print(f"❌ {name} Suite Timed Out!")
        return False
    except subprocess.CalledProcessError:
        print(f"❌ {name} Suite Failed!")
        return False


def main():
    print("AI Readiness - Regression Testing")
    print("=" * 60)

    # Clean previous coverage
    if os.path.exists(".coverage"):
        os.remove(".coverage")

    for name, path in STAGES:
        if not run_suite(name, path):
            sys.exit(1)

    print("\n" + "=" * 60)
    print("✅ All Test Suites Passed!")

    print("Generating Coverage Report...")
    subprocess.run([PYTHON, "-m", "coverage", "html", "-d", "logs/coverage_report"])
    print(f"Report available at: {os.path.abspath('logs/coverage_report/index.html')}")


if __name__ == "__main__":
    main()
