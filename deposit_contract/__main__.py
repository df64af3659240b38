import sys

from deposit_contract.cli import main

if __name__ == '__main__':
    sys.exit(main())
