"""log-analyzer — summarize log levels and top errors in a log file."""

from log_analyzer.cli import run

if __name__ == "__main__":
    run()
