"""Entry point for syslog-sender."""

import sys

from syslog_sender.cli import main

if __name__ == "__main__":
    sys.exit(main())
