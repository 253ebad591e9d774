import sys

import File_Info.cli.inventory as inventory_cli


def main():
    sys.exit(inventory_cli.main())


if __name__ == "__main__":
    main()
