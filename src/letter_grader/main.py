import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from letter_grader.logger import RunLogger
from letter_grader.pipeline import GradingPipeline

load_dotenv()

DEFAULT_INPUT_FILE = "input.txt"
DEFAULT_OUTPUT_FILE = "output.txt"

MSG_WELCOME = "Welcome to the Letter Grader application"
WARNING_ARGUMENT_COUNT = "WARNING! Command line argument format not supported."


def resolve_paths(files):
    """Return (input, output) paths, falling back to the defaults unless exactly two were given."""
    if len(files) == 2:
        print("\nApplication will use read and write files names provided in the command line arguments")
        return Path(files[0]), Path(files[1])

    print(f"\n{WARNING_ARGUMENT_COUNT}")
    print("Application will use default read and write file names!")
    return Path(DEFAULT_INPUT_FILE), Path(DEFAULT_OUTPUT_FILE)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Compute weighted letter grades for a class roster")
    parser.add_argument("files", nargs="*", help="Input file and output file")
    parser.add_argument(
        "--logs-dir",
        help="Directory for run logs and summaries (default: env LETTER_GRADER_LOGS_DIR, disabled if unset)",
    )

    args = parser.parse_args(argv)

    print(MSG_WELCOME)
    input_path, output_path = resolve_paths(args.files)
    print(f"\nInput will be read from '{input_path}'")
    print(f"Output will be written to '{output_path}'\n")

    logs_dir = args.logs_dir or os.getenv("LETTER_GRADER_LOGS_DIR")
    run_logger = RunLogger(Path(logs_dir) if logs_dir else None)

    try:
        result = GradingPipeline(input_path, output_path, run_logger=run_logger).run()
    except KeyboardInterrupt:
        run_logger.logger.info("Grading interrupted by user")
        print("\nGrading interrupted by user")
        return 1
    finally:
        run_logger.close()

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
