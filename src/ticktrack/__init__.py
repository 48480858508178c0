# SPDX-License-Identifier: MIT

from ticktrack.initialize import initialize
from ticktrack.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()
