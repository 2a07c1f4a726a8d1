# SPDX-License-Identifier: MIT

from tally.cleanup import register_cleanup
from tally.initialize import initialize
from tally.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
