import sys

from ofx_import.cli import main

sys.exit(main())
